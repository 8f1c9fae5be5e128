import logging

from django.db import DatabaseError
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import BaseGenericViewSet, NestedRestaurantMixin
from restaurants.permissions import IsRestaurantOwner
from users.permissions import IsRestaurantUser
from .serializers import AnalyticsQuerySerializer, RestaurantAnalyticsSerializer
from .services import BaseAnalyticsService, SummaryService

logger = logging.getLogger(__name__)


class RestaurantAnalyticsViewSet(NestedRestaurantMixin, BaseGenericViewSet):
    """
    GET /restaurants/{restaurant_pk}/analytics/?limit=N

    The snapshot is recomputed on every request. A database failure returns
    the empty snapshot instead of an error.
    """

    serializer_class = RestaurantAnalyticsSerializer
    permission_classes = [IsAuthenticated, IsRestaurantUser, IsRestaurantOwner]

    def list(self, request: Request, *args, **kwargs) -> Response:
        query = AnalyticsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        limit = query.validated_data.get("limit") or BaseAnalyticsService.get_setting("POPULAR_ITEMS_LIMIT")

        restaurant = self.get_restaurant()
        try:
            snapshot = SummaryService.get_restaurant_analytics(restaurant.id, limit)
        except DatabaseError as e:
            logger.error(f"Database error computing analytics for restaurant {restaurant.id}: {e}", exc_info=True)
            snapshot = BaseAnalyticsService.empty_snapshot(limit)

        return Response(self.get_serializer(snapshot).data)
