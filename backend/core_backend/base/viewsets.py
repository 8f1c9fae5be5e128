from rest_framework import viewsets
from rest_framework.generics import get_object_or_404

# Canonical 8-4-4-4-12 hex form; anything else never reaches a view.
UUID_LOOKUP_REGEX = (
    "[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


class BaseGenericViewSet(viewsets.GenericViewSet):
    """
    Base ViewSet for the API.

    Actions are written out explicitly and delegate to the service layer, so
    no default queryset or filter backend is involved. Every detail route and
    every route nested under it only matches UUID identifiers.
    """

    lookup_value_regex = UUID_LOOKUP_REGEX
    filter_backends = []


class NestedRestaurantMixin:
    """
    Resolves the parent restaurant for routes nested under
    /restaurants/{restaurant_pk}/.
    """

    restaurant_lookup_kwarg = "restaurant_pk"

    def get_restaurant(self):
        from restaurants.models import Restaurant

        if not hasattr(self, "_restaurant"):
            # DRF's get_object_or_404 also maps malformed ids to 404
            self._restaurant = get_object_or_404(
                Restaurant.objects.all(), pk=self.kwargs[self.restaurant_lookup_kwarg]
            )
        return self._restaurant
