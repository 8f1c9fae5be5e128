from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from orders.serializers import UpdateOrderRouteSerializer
from orders.services import OrderQueryService, OrderRouteService


class RouteActionsMixin:
    """
    Mixin for traveler route edits.

    This mixin provides action methods for OrderViewSet.
    """

    @action(detail=True, methods=["patch"], url_path="route")
    def route(self, request: Request, pk=None) -> Response:
        """
        Updates route_origin, route_destination and/or pickup_eta_min while the
        order is still PENDING or PREPARING.
        """
        payload = UpdateOrderRouteSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        order = OrderRouteService.update_order_route(pk, request.user, payload.validated_data)
        order = OrderQueryService.get_order_for_customer(order.id, request.user)
        return Response(self.get_serializer(order).data)
