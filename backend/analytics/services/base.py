"""
Base service class for analytics with the shared querysets and settings.
"""
import logging
from typing import Any, Dict

from django.conf import settings

from orders.models import Order, OrderItem

logger = logging.getLogger(__name__)

HOURS_IN_DAY = 24


class BaseAnalyticsService:
    """Common helpers for every analytics service."""

    DEFAULTS = {
        "POPULAR_ITEMS_LIMIT": 10,
        "DAILY_WINDOW": 30,
        "WEEKLY_WINDOW": 12,
    }

    @staticmethod
    def get_setting(name: str) -> Any:
        analytics_settings = getattr(settings, "ANALYTICS", {}) or {}
        return analytics_settings.get(name, BaseAnalyticsService.DEFAULTS[name])

    @staticmethod
    def counted_orders(restaurant_id):
        """
        Orders that count toward analytics. CANCELED orders never contribute
        to revenue, popularity or peaks.
        """
        return (
            Order.objects.filter(restaurant_id=restaurant_id)
            .exclude(status=Order.OrderStatus.CANCELED)
            .order_by()
        )

    @staticmethod
    def counted_order_items(restaurant_id):
        return (
            OrderItem.objects.filter(order__restaurant_id=restaurant_id)
            .exclude(order__status=Order.OrderStatus.CANCELED)
            .order_by()
        )

    @staticmethod
    def empty_hour_buckets():
        return [
            {"hour": hour, "order_count": 0, "revenue_cents": 0}
            for hour in range(HOURS_IN_DAY)
        ]

    @staticmethod
    def empty_snapshot(limit: int = None) -> Dict[str, Any]:
        """The snapshot of a restaurant with no countable orders."""
        if limit is None:
            limit = BaseAnalyticsService.get_setting("POPULAR_ITEMS_LIMIT")
        peak_times = BaseAnalyticsService.empty_hour_buckets()
        return {
            "popular_items": [],
            "peak_times": peak_times,
            "peak_ordering_hours": peak_times[:limit],
            "orders_by_day": [],
            "orders_by_week": [],
            "total_orders": 0,
            "total_revenue_cents": 0,
            "average_order_cost_cents": 0,
        }
