import logging

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import BaseGenericViewSet
from orders.serializers import OrderCreateSerializer, OrderSerializer
from orders.services import OrderQueryService, OrderService
from users.permissions import IsCustomer

from .route_actions import RouteActionsMixin

logger = logging.getLogger(__name__)

class OrderViewSet(RouteActionsMixin, BaseGenericViewSet):
    """
    Traveler-facing orders.

    GET   /orders/             the caller's orders, newest first
    POST  /orders/             place an order
    GET   /orders/{id}/        one of the caller's orders
    PATCH /orders/{id}/route/  change route or pickup ETA (RouteActionsMixin)
    """

    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated, IsCustomer]

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["view_mode"] = "customer"
        return context

    def list(self, request: Request, *args, **kwargs) -> Response:
        orders = OrderQueryService.list_orders_for_customer(request.user)
        return Response(self.get_serializer(orders, many=True).data)

    def retrieve(self, request: Request, *args, **kwargs) -> Response:
        order = OrderQueryService.get_order_for_customer(kwargs["pk"], request.user)
        return Response(self.get_serializer(order).data)

    def create(self, request: Request, *args, **kwargs) -> Response:
        payload = OrderCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data

        order = OrderService.create_order(
            customer=request.user,
            restaurant_id=data["restaurant_id"],
            items=data["items"],
            pickup_eta_min=data["pickup_eta_min"],
            route_origin=data["route_origin"],
            route_destination=data["route_destination"],
        )
        # Re-read with items and restaurant loaded for the response
        order = OrderQueryService.get_order_for_customer(order.id, request.user)
        return Response(self.get_serializer(order).data, status=status.HTTP_201_CREATED)
