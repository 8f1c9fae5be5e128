import logging
from typing import Any, Dict

from django.db.models import Count, IntegerField, Sum, Value
from django.db.models.functions import Coalesce

from orders.calculators import average_cents
from .base import BaseAnalyticsService
from .popular_items_service import PopularItemsService
from .time_series_service import TimeSeriesService

logger = logging.getLogger(__name__)


class SummaryService(BaseAnalyticsService):
    """Builds the complete analytics snapshot for one restaurant."""

    @staticmethod
    def get_totals(restaurant_id) -> Dict[str, int]:
        totals = BaseAnalyticsService.counted_orders(restaurant_id).aggregate(
            total_orders=Count("id"),
            total_revenue_cents=Coalesce(Sum("total_cents"), Value(0), output_field=IntegerField()),
        )
        return {
            "total_orders": totals["total_orders"],
            "total_revenue_cents": totals["total_revenue_cents"],
            "average_order_cost_cents": average_cents(
                totals["total_revenue_cents"], totals["total_orders"]
            ),
        }

    @staticmethod
    def get_restaurant_analytics(restaurant_id, limit: int = None) -> Dict[str, Any]:
        """
        Recomputed from the restaurant's full order history on every call.

        `limit` caps both popular_items and peak_ordering_hours; peak_times is
        always the full 24-hour list.
        """
        if limit is None:
            limit = BaseAnalyticsService.get_setting("POPULAR_ITEMS_LIMIT")

        popular_items = PopularItemsService.get_popular_items(restaurant_id, limit)
        peak_times = TimeSeriesService.get_peak_times(restaurant_id)
        rollups = TimeSeriesService.get_rollups(restaurant_id)
        totals = SummaryService.get_totals(restaurant_id)

        logger.debug(
            f"Analytics for restaurant {restaurant_id}: {totals['total_orders']} orders, "
            f"{len(popular_items)} popular item(s)"
        )
        return {
            "popular_items": popular_items,
            "peak_times": peak_times,
            "peak_ordering_hours": peak_times[:limit],
            "orders_by_day": rollups["orders_by_day"],
            "orders_by_week": rollups["orders_by_week"],
            **totals,
        }
