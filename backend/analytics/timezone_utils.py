"""
Timezone utilities for analytics.
"""
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.conf import settings
from django.db.models.functions import ExtractHour, TruncDate

logger = logging.getLogger(__name__)


class TimezoneUtils:
    """Buckets order timestamps by the business's local clock rather than UTC."""

    @staticmethod
    def get_local_timezone():
        """The configured analytics timezone, falling back to TIME_ZONE, then UTC."""
        analytics_settings = getattr(settings, "ANALYTICS", {}) or {}
        zone_name = analytics_settings.get("TIME_ZONE") or settings.TIME_ZONE
        try:
            return ZoneInfo(zone_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.warning(f"Unknown analytics timezone {zone_name!r}, using UTC: {e}")
            return ZoneInfo("UTC")

    @staticmethod
    def trunc_date_local(field_name):
        """Truncate a datetime field to the local calendar day."""
        return TruncDate(field_name, tzinfo=TimezoneUtils.get_local_timezone())

    @staticmethod
    def extract_hour_local(field_name):
        """Hour of day (0-23) of a datetime field on the local clock."""
        return ExtractHour(field_name, tzinfo=TimezoneUtils.get_local_timezone())
