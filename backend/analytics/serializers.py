from rest_framework import serializers


class AnalyticsQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=100, required=False)


class PopularItemSerializer(serializers.Serializer):
    menu_item_id = serializers.UUIDField()
    menu_item_name = serializers.CharField()
    total_quantity = serializers.IntegerField()
    order_count = serializers.IntegerField()
    revenue_cents = serializers.IntegerField()


class PeakTimeSerializer(serializers.Serializer):
    hour = serializers.IntegerField()
    order_count = serializers.IntegerField()
    revenue_cents = serializers.IntegerField()


class DailyRollupSerializer(serializers.Serializer):
    date = serializers.DateField()
    order_count = serializers.IntegerField()
    total_revenue_cents = serializers.IntegerField()
    average_order_value_cents = serializers.IntegerField()


class WeeklyRollupSerializer(serializers.Serializer):
    week_start = serializers.DateField()
    order_count = serializers.IntegerField()
    total_revenue_cents = serializers.IntegerField()
    average_order_value_cents = serializers.IntegerField()


class RestaurantAnalyticsSerializer(serializers.Serializer):
    """Wire shape of the merchant analytics snapshot. Read-only."""

    popular_items = PopularItemSerializer(many=True)
    peak_times = PeakTimeSerializer(many=True)
    peak_ordering_hours = PeakTimeSerializer(many=True)
    orders_by_day = DailyRollupSerializer(many=True)
    orders_by_week = WeeklyRollupSerializer(many=True)
    total_orders = serializers.IntegerField()
    total_revenue_cents = serializers.IntegerField()
    average_order_cost_cents = serializers.IntegerField()
