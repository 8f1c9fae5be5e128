from rest_framework import serializers


class OrderItemInputSerializer(serializers.Serializer):
    menu_item_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class OrderCreateSerializer(serializers.Serializer):
    """
    Validates the shape of POST /orders/.

    Prices are deliberately absent: the service always uses the menu's
    current prices.
    """

    restaurant_id = serializers.UUIDField()
    items = OrderItemInputSerializer(many=True, allow_empty=False)
    pickup_eta_min = serializers.IntegerField(min_value=1)
    route_origin = serializers.CharField(max_length=255, allow_blank=False)
    route_destination = serializers.CharField(max_length=255, allow_blank=False)


class UpdateOrderRouteSerializer(serializers.Serializer):
    """
    Shape check for PATCH /orders/{id}/route/.

    Every field is optional here; "at least one field" and the ETA range are
    business rules enforced by OrderRouteService.
    """

    route_origin = serializers.CharField(max_length=255, required=False, allow_blank=True)
    route_destination = serializers.CharField(max_length=255, required=False, allow_blank=True)
    pickup_eta_min = serializers.IntegerField(required=False)
