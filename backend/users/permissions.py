from rest_framework import permissions
from .models import User
import logging

logger = logging.getLogger(__name__)


class IsCustomer(permissions.BasePermission):
    """Allows access only to authenticated travelers placing orders."""

    message = "Customer account required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role == User.Role.CUSTOMER)


class IsRestaurantUser(permissions.BasePermission):
    """Allows access only to authenticated merchant accounts."""

    message = "Restaurant account required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role == User.Role.RESTAURANT)
