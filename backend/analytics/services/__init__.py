"""
Analytics services package.

- PopularItemsService: menu items ranked by quantity sold
- TimeSeriesService: hourly peaks and daily/weekly rollups
- SummaryService: totals and the full analytics snapshot
"""

from .base import BaseAnalyticsService
from .popular_items_service import PopularItemsService
from .time_series_service import TimeSeriesService
from .summary_service import SummaryService

__all__ = [
    'BaseAnalyticsService',
    'PopularItemsService',
    'TimeSeriesService',
    'SummaryService',
]
