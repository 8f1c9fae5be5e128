"""
Time-bucketed order statistics: hour-of-day peaks and daily/weekly rollups.

Buckets follow the business's local clock (see TimezoneUtils). Each rollup
bucket carries order_count, total_revenue_cents and
average_order_value_cents = round(revenue / count).
"""
import logging
from collections import OrderedDict
from datetime import date, timedelta
from typing import Any, Dict, List

from django.db.models import Count, Sum

from orders.calculators import average_cents
from ..timezone_utils import TimezoneUtils
from .base import BaseAnalyticsService

logger = logging.getLogger(__name__)


def week_start(day: date) -> date:
    """The Sunday on or before `day`."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _rollup_bucket(key_name: str, key: date, order_count: int, revenue_cents: int) -> Dict[str, Any]:
    return {
        key_name: key,
        "order_count": order_count,
        "total_revenue_cents": revenue_cents,
        "average_order_value_cents": average_cents(revenue_cents, order_count),
    }


class TimeSeriesService(BaseAnalyticsService):

    @staticmethod
    def get_peak_times(restaurant_id) -> List[Dict[str, Any]]:
        """
        All 24 hours, busiest first. Hours without orders are present with
        zero counts; equal counts are ordered by hour.
        """
        rows = (
            BaseAnalyticsService.counted_orders(restaurant_id)
            .annotate(hour=TimezoneUtils.extract_hour_local("created_at"))
            .values("hour")
            .annotate(order_count=Count("id"), revenue_cents=Sum("total_cents"))
            .order_by("hour")
        )

        buckets = BaseAnalyticsService.empty_hour_buckets()
        for row in rows:
            bucket = buckets[row["hour"]]
            bucket["order_count"] = row["order_count"]
            bucket["revenue_cents"] = row["revenue_cents"] or 0

        return sorted(buckets, key=lambda bucket: (-bucket["order_count"], bucket["hour"]))

    @staticmethod
    def get_daily_totals(restaurant_id) -> List[Dict[str, Any]]:
        """Every local calendar day that has orders, oldest first."""
        rows = (
            BaseAnalyticsService.counted_orders(restaurant_id)
            .annotate(day=TimezoneUtils.trunc_date_local("created_at"))
            .values("day")
            .annotate(order_count=Count("id"), revenue_cents=Sum("total_cents"))
            .order_by("day")
        )
        return [
            _rollup_bucket("date", row["day"], row["order_count"], row["revenue_cents"] or 0)
            for row in rows
        ]

    @staticmethod
    def rollup_weeks(daily: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Folds daily buckets into Sunday-aligned weeks, oldest first."""
        weeks = OrderedDict()
        for day in sorted(daily, key=lambda bucket: bucket["date"]):
            key = week_start(day["date"])
            totals = weeks.setdefault(key, [0, 0])
            totals[0] += day["order_count"]
            totals[1] += day["total_revenue_cents"]

        return [
            _rollup_bucket("week_start", key, order_count, revenue_cents)
            for key, (order_count, revenue_cents) in weeks.items()
        ]

    @staticmethod
    def get_rollups(restaurant_id) -> Dict[str, List[Dict[str, Any]]]:
        """
        Daily and weekly rollups, each keeping only its most recent buckets
        (DAILY_WINDOW days and WEEKLY_WINDOW weeks).
        """
        daily = TimeSeriesService.get_daily_totals(restaurant_id)
        weekly = TimeSeriesService.rollup_weeks(daily)

        daily_window = BaseAnalyticsService.get_setting("DAILY_WINDOW")
        weekly_window = BaseAnalyticsService.get_setting("WEEKLY_WINDOW")
        return {
            "orders_by_day": daily[-daily_window:] if daily_window > 0 else [],
            "orders_by_week": weekly[-weekly_window:] if weekly_window > 0 else [],
        }
