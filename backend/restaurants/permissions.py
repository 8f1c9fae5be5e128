from rest_framework import permissions


class IsRestaurantOwner(permissions.BasePermission):
    """
    Allows access only to the merchant who owns the restaurant in the URL.

    The view must expose `get_restaurant()` (see NestedRestaurantMixin), which
    raises 404 for unknown restaurants; a known restaurant owned by someone
    else is a 403.
    """

    message = "You do not manage this restaurant."

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False

        restaurant = view.get_restaurant()
        return restaurant.owner_id == request.user.id
