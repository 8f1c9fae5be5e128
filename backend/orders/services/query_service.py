import logging

from django.core.exceptions import ValidationError
from django.db.models import Case, IntegerField, Prefetch, Value, When

from core_backend.exceptions import NotFoundError
from orders.models import Order, OrderItem

logger = logging.getLogger(__name__)


class OrderQueryService:
    """Read paths for customer and merchant order views."""

    # Lifecycle order used to sort the merchant queue
    STATUS_RANK = {
        Order.OrderStatus.PENDING: 0,
        Order.OrderStatus.PREPARING: 1,
        Order.OrderStatus.READY: 2,
        Order.OrderStatus.COMPLETED: 3,
        Order.OrderStatus.CANCELED: 4,
    }

    @staticmethod
    def _with_items(queryset):
        return queryset.prefetch_related(
            Prefetch("items", queryset=OrderItem.objects.select_related("menu_item"))
        )

    @staticmethod
    def customer_orders_queryset(customer):
        return OrderQueryService._with_items(
            Order.objects.filter(customer=customer).select_related("restaurant")
        )

    @staticmethod
    def restaurant_orders_queryset(restaurant_id):
        return OrderQueryService._with_items(
            Order.objects.filter(restaurant_id=restaurant_id).select_related("customer")
        )

    @staticmethod
    def list_orders_for_customer(customer):
        """Newest first."""
        return list(OrderQueryService.customer_orders_queryset(customer).order_by("-created_at"))

    @staticmethod
    def list_orders_for_restaurant(restaurant_id):
        """Grouped by lifecycle status (PENDING first), oldest first within a status."""
        status_rank = Case(
            *[When(status=status, then=Value(rank)) for status, rank in OrderQueryService.STATUS_RANK.items()],
            default=Value(len(OrderQueryService.STATUS_RANK)),
            output_field=IntegerField(),
        )
        return list(
            OrderQueryService.restaurant_orders_queryset(restaurant_id)
            .annotate(status_rank=status_rank)
            .order_by("status_rank", "created_at")
        )

    @staticmethod
    def get_order_for_customer(order_id, customer):
        try:
            order = OrderQueryService.customer_orders_queryset(customer).filter(id=order_id).first()
        except (ValidationError, ValueError):
            order = None
        if order is None:
            raise NotFoundError("Order not found")
        return order

    @staticmethod
    def get_order_for_restaurant(order_id, restaurant_id):
        try:
            order = OrderQueryService.restaurant_orders_queryset(restaurant_id).filter(id=order_id).first()
        except (ValidationError, ValueError):
            order = None
        if order is None:
            raise NotFoundError("Order not found")
        return order
