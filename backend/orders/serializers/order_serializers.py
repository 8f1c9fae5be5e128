from rest_framework import serializers

from core_backend.base import FieldsetMixin
from orders.calculators import derive_financials
from orders.models import Order, OrderItem
from restaurants.serializers import RestaurantSummarySerializer
from users.serializers import UserSummarySerializer


class OrderItemSerializer(serializers.ModelSerializer):
    menu_item_id = serializers.UUIDField(read_only=True)
    menu_item_name = serializers.CharField(source="menu_item.name", read_only=True)

    class Meta:
        model = OrderItem
        fields = ["id", "menu_item_id", "menu_item_name", "quantity", "price_cents"]
        read_only_fields = fields


class OrderSerializer(FieldsetMixin, serializers.ModelSerializer):
    """
    Read serializer for orders.

    subtotal_cents and tax_cents are not stored; they are derived from the
    item snapshots and total_cents each time an order is serialized.

    View modes:
    - customer: embeds the restaurant summary
    - restaurant: embeds the customer summary
    """

    customer_id = serializers.UUIDField(read_only=True)
    restaurant_id = serializers.UUIDField(read_only=True)
    restaurant = RestaurantSummarySerializer(read_only=True)
    customer = UserSummarySerializer(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    subtotal_cents = serializers.SerializerMethodField()
    tax_cents = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "customer_id",
            "restaurant_id",
            "status",
            "pickup_eta_min",
            "route_origin",
            "route_destination",
            "subtotal_cents",
            "tax_cents",
            "total_cents",
            "created_at",
            "updated_at",
            "items",
            "restaurant",
            "customer",
        ]
        read_only_fields = fields
        fieldsets = {
            "customer": [
                "id", "customer_id", "restaurant_id", "status", "pickup_eta_min",
                "route_origin", "route_destination", "subtotal_cents", "tax_cents",
                "total_cents", "created_at", "updated_at", "items", "restaurant",
            ],
            "restaurant": [
                "id", "customer_id", "restaurant_id", "status", "pickup_eta_min",
                "route_origin", "route_destination", "subtotal_cents", "tax_cents",
                "total_cents", "created_at", "updated_at", "items", "customer",
            ],
        }
        required_fields = {"id", "status", "total_cents"}

    def _financials(self, obj):
        # Both method fields need the same derivation; compute it once per order.
        cache = self.context.setdefault("_financials", {})
        if obj.pk not in cache:
            cache[obj.pk] = derive_financials(obj.total_cents, obj.items.all())
        return cache[obj.pk]

    def get_subtotal_cents(self, obj) -> int:
        return self._financials(obj)["subtotal_cents"]

    def get_tax_cents(self, obj) -> int:
        return self._financials(obj)["tax_cents"]
