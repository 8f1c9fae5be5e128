from django_filters import rest_framework as filters
from .models import Restaurant, MenuItem


class RestaurantFilter(filters.FilterSet):
    """Traveler-facing filters for the restaurant list."""

    DIETARY_CHOICES = (
        ("vegetarian", "Vegetarian"),
        ("vegan", "Vegan"),
    )

    fast_service = filters.BooleanFilter(field_name="is_fast_service")
    local_favorites = filters.BooleanFilter(field_name="is_local_favorite")
    price_level = filters.ChoiceFilter(choices=Restaurant.PriceLevel.choices)
    dietary_needs = filters.ChoiceFilter(choices=DIETARY_CHOICES, method="filter_by_dietary_needs")

    class Meta:
        model = Restaurant
        fields = ["fast_service", "local_favorites", "price_level", "dietary_needs"]

    def filter_by_dietary_needs(self, queryset, name, value):
        # A restaurant qualifies when at least one available item carries the tag.
        # Tags are a JSON list, so membership is checked in Python to stay
        # portable across database backends.
        tagged_items = MenuItem.objects.filter(
            restaurant__is_active=True, is_available=True
        ).values_list("restaurant_id", "tags")

        matching_ids = {
            restaurant_id
            for restaurant_id, tags in tagged_items
            if value in (tags or [])
        }
        return queryset.filter(id__in=matching_ids)
