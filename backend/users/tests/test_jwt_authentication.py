"""
JWT Authentication Tests

Tokens are issued by the identity provider; these tests only cover how the
API validates them and which accounts they resolve to.
"""
import pytest
from django.conf import settings
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken


def set_jwt_cookie(client, access_token, cookie_name=None):
    """Set the access token the way browser-based merchant tooling sends it."""
    if cookie_name is None:
        cookie_name = settings.SIMPLE_JWT.get("AUTH_COOKIE", "access_token")

    client.cookies[cookie_name] = access_token


@pytest.mark.django_db
class TestCookieJWTAuthentication:

    def test_cookie_token_authenticates(self, customer_user):
        client = APIClient()
        set_jwt_cookie(client, str(RefreshToken.for_user(customer_user).access_token))

        response = client.get('/api/orders/')

        assert response.status_code == 200

    def test_bearer_header_authenticates(self, customer_user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {RefreshToken.for_user(customer_user).access_token}')

        response = client.get('/api/orders/')

        assert response.status_code == 200

    def test_cookie_wins_over_header(self, customer_user, restaurant_user):
        """
        A customer cookie plus a merchant header is treated as the customer,
        so the customer-only endpoint answers.
        """
        client = APIClient()
        set_jwt_cookie(client, str(RefreshToken.for_user(customer_user).access_token))
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {RefreshToken.for_user(restaurant_user).access_token}')

        response = client.get('/api/orders/')

        assert response.status_code == 200

    def test_garbage_token_rejected(self):
        client = APIClient()
        set_jwt_cookie(client, 'not-a-jwt')

        response = client.get('/api/orders/')

        assert response.status_code == 401

    def test_inactive_user_rejected(self, customer_user):
        token = str(RefreshToken.for_user(customer_user).access_token)
        customer_user.is_active = False
        customer_user.save()

        client = APIClient()
        set_jwt_cookie(client, token)
        response = client.get('/api/orders/')

        assert response.status_code == 401

    def test_deleted_user_rejected(self, customer_user):
        token = str(RefreshToken.for_user(customer_user).access_token)
        customer_user.delete()

        client = APIClient()
        set_jwt_cookie(client, token)
        response = client.get('/api/orders/')

        assert response.status_code == 401
