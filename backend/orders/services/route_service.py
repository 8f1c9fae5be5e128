from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone
import logging

from core_backend.exceptions import BadRequestError, NotFoundError
from orders.models import Order

logger = logging.getLogger(__name__)


class OrderRouteService:
    """Lets a traveler change their route or pickup ETA before the kitchen commits."""

    # Once an order is READY the kitchen has timed the food to the original route.
    ROUTE_UPDATEABLE_STATUSES = (
        Order.OrderStatus.PENDING,
        Order.OrderStatus.PREPARING,
    )

    @staticmethod
    @transaction.atomic
    def update_order_route(order_id, customer, data: dict) -> Order:
        """
        Merges the supplied route fields into the order; omitted fields are kept.

        Args:
            order_id: Order to update
            customer: Traveler making the request (must own the order)
            data: Any of route_origin, route_destination, pickup_eta_min

        Raises:
            NotFoundError: If the order does not exist or belongs to someone else
            BadRequestError: If the order is READY or terminal, no field was
                supplied, or a supplied value is invalid
        """
        try:
            order = (
                Order.objects.select_for_update()
                .filter(id=order_id, customer=customer)
                .first()
            )
        except (ValidationError, ValueError):
            order = None
        if order is None:
            raise NotFoundError("Order not found")

        if order.status not in OrderRouteService.ROUTE_UPDATEABLE_STATUSES:
            raise BadRequestError(
                f"Cannot update route for order with status {order.status}. "
                f"Only orders with status PENDING or PREPARING can be re-routed."
            )

        update_data = {}
        for field in ("route_origin", "route_destination"):
            value = data.get(field)
            if value is None:
                continue
            if not str(value).strip():
                raise BadRequestError(f"{field} must not be empty")
            update_data[field] = value

        pickup_eta_min = data.get("pickup_eta_min")
        if pickup_eta_min is not None:
            if int(pickup_eta_min) <= 0:
                raise BadRequestError("pickup_eta_min must be a positive number")
            update_data["pickup_eta_min"] = int(pickup_eta_min)

        if not update_data:
            raise BadRequestError("At least one route field must be provided")

        # Conditional on the status still being editable, in case a status
        # change slipped in on a backend without row locks.
        updated = Order.objects.filter(
            pk=order.pk, status__in=OrderRouteService.ROUTE_UPDATEABLE_STATUSES
        ).update(updated_at=timezone.now(), **update_data)
        if not updated:
            raise BadRequestError("Order can no longer be re-routed")

        logger.info(f"Order {order.id} route updated: {sorted(update_data)}")
        order.refresh_from_db()
        return order
