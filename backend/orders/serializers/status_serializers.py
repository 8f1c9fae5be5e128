from rest_framework import serializers
from orders.models import Order


class UpdateOrderStatusSerializer(serializers.Serializer):
    """
    Serializer specifically for validating an order status change request.

    Only checks that the value is a known status; whether the transition is
    allowed is decided by OrderService against the current row.
    """

    status = serializers.ChoiceField(choices=Order.OrderStatus.choices)
