from rest_framework import serializers

from .models import MenuItem, MenuSection, Restaurant


class RestaurantSummarySerializer(serializers.ModelSerializer):
    """Location card used in restaurant lists and embedded in customer orders."""

    class Meta:
        model = Restaurant
        fields = ["id", "name", "address", "latitude", "longitude"]
        read_only_fields = fields


class RestaurantSerializer(serializers.ModelSerializer):
    class Meta:
        model = Restaurant
        fields = [
            "id",
            "name",
            "address",
            "latitude",
            "longitude",
            "is_fast_service",
            "is_local_favorite",
            "price_level",
        ]
        read_only_fields = fields


class MenuItemSerializer(serializers.ModelSerializer):
    section_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = MenuItem
        fields = [
            "id",
            "section_id",
            "name",
            "description",
            "price_cents",
            "is_available",
            "tags",
        ]
        read_only_fields = fields


class MenuSectionSerializer(serializers.ModelSerializer):
    items = MenuItemSerializer(many=True, read_only=True)

    class Meta:
        model = MenuSection
        fields = ["id", "title", "position", "items"]
        read_only_fields = fields


class RestaurantMenuSerializer(serializers.Serializer):
    """Shape of GET /restaurants/{id}/menu/."""

    restaurant = RestaurantSerializer(read_only=True)
    sections = MenuSectionSerializer(many=True, read_only=True)
    items = MenuItemSerializer(many=True, read_only=True)


# --- Write serializers (validated input handed to MenuManagementService) ---

class MenuSectionWriteSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=120, allow_blank=False)
    position = serializers.IntegerField(min_value=0, required=False)


class MenuItemWriteSerializer(serializers.Serializer):
    section_id = serializers.UUIDField(required=False, allow_null=True)
    name = serializers.CharField(max_length=200, allow_blank=False)
    description = serializers.CharField(required=False, allow_blank=True)
    price_cents = serializers.IntegerField(min_value=0)
    is_available = serializers.BooleanField(required=False)
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50), required=False
    )
