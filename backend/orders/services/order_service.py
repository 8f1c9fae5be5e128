from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone
import logging
import uuid

from core_backend.exceptions import BadRequestError, NotFoundError
from orders.calculators import calculate_totals
from orders.models import Order, OrderItem
from restaurants.models import MenuItem, Restaurant

logger = logging.getLogger(__name__)


def _as_uuid(value):
    """Normalises an identifier; None when it is not a UUID at all."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class OrderService:
    """Core service for order lifecycle management - creating orders and moving them through statuses."""

    # Valid status transitions for order state machine.
    # Every status has an entry; COMPLETED and CANCELED are absorbing.
    VALID_STATUS_TRANSITIONS = {
        Order.OrderStatus.PENDING: (
            Order.OrderStatus.PREPARING,
            Order.OrderStatus.CANCELED,
        ),
        Order.OrderStatus.PREPARING: (
            Order.OrderStatus.READY,
            Order.OrderStatus.CANCELED,
        ),
        Order.OrderStatus.READY: (
            Order.OrderStatus.COMPLETED,
            Order.OrderStatus.CANCELED,
        ),
        Order.OrderStatus.COMPLETED: (),
        Order.OrderStatus.CANCELED: (),
    }

    @staticmethod
    def get_allowed_transitions(current_status: str) -> tuple:
        """Statuses reachable from current_status. Unknown statuses reach nothing."""
        return OrderService.VALID_STATUS_TRANSITIONS.get(current_status, ())

    @staticmethod
    def can_transition(current_status: str, next_status: str) -> bool:
        return next_status in OrderService.get_allowed_transitions(current_status)

    @staticmethod
    @transaction.atomic
    def create_order(
        customer,
        restaurant_id,
        items: list,
        pickup_eta_min: int,
        route_origin: str,
        route_destination: str,
    ) -> Order:
        """
        Creates an order with its line items in a single transaction.

        Args:
            customer: The traveler placing the order
            restaurant_id: Restaurant to order from (must be active)
            items: List of {"menu_item_id", "quantity"} dicts; any client-supplied
                price is ignored
            pickup_eta_min: Minutes until pickup, positive
            route_origin / route_destination: Free-text addresses, non-empty

        Raises:
            NotFoundError: If the restaurant does not exist or is inactive
            BadRequestError: If any requested item is unknown, unavailable or
                belongs to another restaurant, or an input is malformed
        """
        if not items:
            raise BadRequestError("At least one item is required")
        if pickup_eta_min is None or int(pickup_eta_min) <= 0:
            raise BadRequestError("pickup_eta_min must be a positive number")
        if not route_origin or not route_destination:
            raise BadRequestError("route_origin and route_destination are required")

        restaurant_uuid = _as_uuid(restaurant_id)
        restaurant = None
        if restaurant_uuid is not None:
            restaurant = Restaurant.objects.filter(id=restaurant_uuid, is_active=True).first()
        if restaurant is None:
            raise NotFoundError("Restaurant not found")

        requested = []
        for item in items:
            quantity = item.get("quantity", 1)
            if quantity is None or int(quantity) < 1:
                raise BadRequestError("Item quantity must be at least 1")
            requested.append((_as_uuid(item.get("menu_item_id")), int(quantity)))

        # Each requested id is checked on its own, so a duplicate id cannot
        # stand in for a missing one.
        menu_items = {
            menu_item.id: menu_item
            for menu_item in MenuItem.objects.filter(
                id__in={menu_item_id for menu_item_id, _ in requested if menu_item_id},
                restaurant=restaurant,
                is_available=True,
            )
        }
        unavailable = [menu_item_id for menu_item_id, _ in requested if menu_item_id not in menu_items]
        if unavailable:
            logger.warning(
                f"Rejected order for restaurant {restaurant.id}: unavailable items {unavailable}"
            )
            raise BadRequestError("Some menu items are unavailable")

        lines = [
            {
                "menu_item": menu_items[menu_item_id],
                "quantity": quantity,
                "price_cents": menu_items[menu_item_id].price_cents,
            }
            for menu_item_id, quantity in requested
        ]
        totals = calculate_totals(lines)

        order = Order.objects.create(
            customer=customer,
            restaurant=restaurant,
            pickup_eta_min=int(pickup_eta_min),
            route_origin=route_origin,
            route_destination=route_destination,
            total_cents=totals["total_cents"],
        )
        OrderItem.objects.bulk_create(
            [
                OrderItem(
                    order=order,
                    menu_item=line["menu_item"],
                    quantity=line["quantity"],
                    price_cents=line["price_cents"],
                )
                for line in lines
            ]
        )

        logger.info(
            f"Created order {order.id} for restaurant {restaurant.id}: "
            f"{len(lines)} line(s), subtotal {totals['subtotal_cents']}, "
            f"tax {totals['tax_cents']}, total {totals['total_cents']}"
        )
        return order

    @staticmethod
    @transaction.atomic
    def update_order_status(restaurant_id, order_id, next_status: str) -> Order:
        """
        Moves an order to next_status if the state machine allows it.

        The order row is locked for the duration of the check, and the write is
        conditional on the status that was validated, so two concurrent
        transitions cannot both succeed.

        Raises:
            NotFoundError: If the order does not exist or belongs to another restaurant
            BadRequestError: If next_status is unknown or not reachable
        """
        order = OrderService._lock_order_for_restaurant(restaurant_id, order_id)

        if next_status not in Order.OrderStatus.values:
            raise BadRequestError(f"'{next_status}' is not a valid order status")

        if order.status == next_status:
            return order

        if not OrderService.can_transition(order.status, next_status):
            logger.warning(
                f"Rejected status transition for order {order.id}: {order.status} -> {next_status}"
            )
            raise BadRequestError("Invalid status transition")

        updated = Order.objects.filter(pk=order.pk, status=order.status).update(
            status=next_status, updated_at=timezone.now()
        )
        if not updated:
            raise BadRequestError("Order status changed by another request; reload and try again")

        logger.info(f"Order {order.id} status {order.status} -> {next_status}")
        order.refresh_from_db()
        return order

    @staticmethod
    def cancel_order(restaurant_id, order_id) -> Order:
        """Sets an order's status to CANCELED after checking transition validity."""
        return OrderService.update_order_status(restaurant_id, order_id, Order.OrderStatus.CANCELED)

    @staticmethod
    def _lock_order_for_restaurant(restaurant_id, order_id) -> Order:
        try:
            order = (
                Order.objects.select_for_update()
                .filter(id=order_id, restaurant_id=restaurant_id)
                .first()
            )
        except (ValidationError, ValueError):
            order = None

        # Ownership is folded into "not found" so other restaurants learn nothing.
        if order is None:
            raise NotFoundError("Order not found")
        return order
