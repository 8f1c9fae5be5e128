import logging
from typing import Any, Dict, List

from django.db.models import Count, F, IntegerField, Sum

from .base import BaseAnalyticsService

logger = logging.getLogger(__name__)


class PopularItemsService(BaseAnalyticsService):
    """Menu items ranked by units sold."""

    @staticmethod
    def get_popular_items(restaurant_id, limit: int = None) -> List[Dict[str, Any]]:
        """
        Groups the restaurant's order lines by menu item.

        order_count counts distinct orders containing the item, not lines.
        Ranking is by total_quantity descending with menu_item_id as the
        tie-break, so equal quantities always come back in the same order.
        """
        if limit is None:
            limit = BaseAnalyticsService.get_setting("POPULAR_ITEMS_LIMIT")

        rows = (
            BaseAnalyticsService.counted_order_items(restaurant_id)
            .values("menu_item_id", "menu_item__name")
            .annotate(
                total_quantity=Sum("quantity"),
                order_count=Count("order", distinct=True),
                revenue_cents=Sum(F("price_cents") * F("quantity"), output_field=IntegerField()),
            )
            .order_by("-total_quantity", "menu_item_id")[:limit]
        )

        return [
            {
                "menu_item_id": row["menu_item_id"],
                "menu_item_name": row["menu_item__name"],
                "total_quantity": row["total_quantity"] or 0,
                "order_count": row["order_count"],
                "revenue_cents": row["revenue_cents"] or 0,
            }
            for row in rows
        ]
