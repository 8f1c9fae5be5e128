import logging

from django.db import DatabaseError
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import BaseGenericViewSet, NestedRestaurantMixin
from orders.serializers import OrderSerializer, UpdateOrderStatusSerializer
from orders.services import OrderQueryService, OrderService
from restaurants.permissions import IsRestaurantOwner
from users.permissions import IsRestaurantUser

logger = logging.getLogger(__name__)

class RestaurantOrderViewSet(NestedRestaurantMixin, BaseGenericViewSet):
    """
    Merchant order queue under /restaurants/{restaurant_pk}/orders/.

    Only the restaurant's owner may read the queue or move orders through
    their statuses.
    """

    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated, IsRestaurantUser, IsRestaurantOwner]

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["view_mode"] = "restaurant"
        return context

    def list(self, request: Request, *args, **kwargs) -> Response:
        restaurant = self.get_restaurant()
        try:
            orders = OrderQueryService.list_orders_for_restaurant(restaurant.id)
        except DatabaseError as e:
            logger.error(f"Database error listing orders for restaurant {restaurant.id}: {e}", exc_info=True)
            orders = []
        return Response(self.get_serializer(orders, many=True).data)

    def retrieve(self, request: Request, *args, **kwargs) -> Response:
        order = OrderQueryService.get_order_for_restaurant(kwargs["pk"], self.get_restaurant().id)
        return Response(self.get_serializer(order).data)

    def partial_update(self, request: Request, *args, **kwargs) -> Response:
        """PATCH {"status": ...}; the state machine decides whether it is allowed."""
        payload = UpdateOrderStatusSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        restaurant = self.get_restaurant()
        order = OrderService.update_order_status(
            restaurant.id, kwargs["pk"], payload.validated_data["status"]
        )
        order = OrderQueryService.get_order_for_restaurant(order.id, restaurant.id)
        return Response(self.get_serializer(order).data)
