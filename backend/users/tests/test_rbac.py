"""
Role-based permission tests.
"""
from types import SimpleNamespace

import pytest
from django.contrib.auth.models import AnonymousUser

from users.models import User
from users.permissions import IsCustomer, IsRestaurantUser


def _request(user):
    return SimpleNamespace(user=user)


@pytest.mark.django_db
class TestRolePermissions:

    def test_customer_role(self, customer_user, restaurant_user):
        assert IsCustomer().has_permission(_request(customer_user), None)
        assert not IsCustomer().has_permission(_request(restaurant_user), None)

    def test_restaurant_role(self, customer_user, restaurant_user):
        assert IsRestaurantUser().has_permission(_request(restaurant_user), None)
        assert not IsRestaurantUser().has_permission(_request(customer_user), None)

    def test_anonymous_has_no_role(self):
        assert not IsCustomer().has_permission(_request(AnonymousUser()), None)
        assert not IsRestaurantUser().has_permission(_request(AnonymousUser()), None)

    def test_new_users_default_to_customer(self):
        user = User.objects.create_user(email='New@Example.com', password='pw12345!')
        assert user.role == User.Role.CUSTOMER
        assert user.is_customer
        assert user.email == 'New@example.com'

    def test_superuser_is_a_merchant(self):
        admin = User.objects.create_superuser(email='admin@example.com', password='pw12345!')
        assert admin.is_staff and admin.is_superuser
        assert admin.is_restaurant_user
