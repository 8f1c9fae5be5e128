"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest
from datetime import datetime, timezone as dt_timezone

from django.conf import settings


# ============================================================================
# USER FIXTURES
# ============================================================================

@pytest.fixture
def customer_user(db):
    """Traveler account that places orders."""
    from users.models import User
    return User.objects.create_user(
        email='traveler@example.com',
        password='testpass123',
        name='Taylor Traveler',
        role=User.Role.CUSTOMER,
    )


@pytest.fixture
def other_customer_user(db):
    from users.models import User
    return User.objects.create_user(
        email='other.traveler@example.com',
        password='testpass123',
        name='Other Traveler',
        role=User.Role.CUSTOMER,
    )


@pytest.fixture
def restaurant_user(db):
    """Merchant account that owns `restaurant`."""
    from users.models import User
    return User.objects.create_user(
        email='owner@example.com',
        password='testpass123',
        name='Olive Owner',
        role=User.Role.RESTAURANT,
    )


@pytest.fixture
def other_restaurant_user(db):
    from users.models import User
    return User.objects.create_user(
        email='other.owner@example.com',
        password='testpass123',
        name='Oscar Owner',
        role=User.Role.RESTAURANT,
    )


# ============================================================================
# RESTAURANT / MENU FIXTURES
# ============================================================================

@pytest.fixture
def restaurant(restaurant_user):
    from restaurants.models import Restaurant
    return Restaurant.objects.create(
        owner=restaurant_user,
        name='Highway Diner',
        address='100 Route 66, Amarillo, TX',
        latitude=35.2220,
        longitude=-101.8313,
        is_fast_service=True,
    )


@pytest.fixture
def other_restaurant(other_restaurant_user):
    from restaurants.models import Restaurant
    return Restaurant.objects.create(
        owner=other_restaurant_user,
        name='Canyon Cafe',
        address='7 Canyon Rd, Santa Fe, NM',
        latitude=35.6870,
        longitude=-105.9378,
        is_local_favorite=True,
        price_level=Restaurant.PriceLevel.UPSCALE,
    )


@pytest.fixture
def menu_section(restaurant):
    from restaurants.models import MenuSection
    return MenuSection.objects.create(restaurant=restaurant, title='Mains', position=0)


@pytest.fixture
def burger(restaurant, menu_section):
    from restaurants.models import MenuItem
    return MenuItem.objects.create(
        restaurant=restaurant,
        section=menu_section,
        name='Classic Burger',
        price_cents=1000,
    )


@pytest.fixture
def fries(restaurant, menu_section):
    from restaurants.models import MenuItem
    return MenuItem.objects.create(
        restaurant=restaurant,
        section=menu_section,
        name='Fries',
        price_cents=500,
        tags=['vegetarian', 'vegan'],
    )


@pytest.fixture
def unavailable_item(restaurant):
    from restaurants.models import MenuItem
    return MenuItem.objects.create(
        restaurant=restaurant,
        name='Seasonal Pie',
        price_cents=700,
        is_available=False,
    )


@pytest.fixture
def foreign_item(other_restaurant):
    """Menu item that belongs to a different restaurant."""
    from restaurants.models import MenuItem
    return MenuItem.objects.create(
        restaurant=other_restaurant,
        name='Green Chile Stew',
        price_cents=1200,
    )


# ============================================================================
# ORDER FIXTURES
# ============================================================================

@pytest.fixture
def order_factory(db, customer_user, restaurant):
    """
    Factory fixture for inserting orders directly, bypassing OrderService.

    Usage:
        def test_something(order_factory, burger):
            order = order_factory(
                lines=[(burger, 2)],
                status='COMPLETED',
                created_at=datetime(2024, 3, 3, 12, 30, tzinfo=dt_timezone.utc),
            )

    `lines` is a list of (menu_item, quantity) or (menu_item, quantity, price_cents).
    When total_cents is omitted it is the subtotal plus tax.
    """
    from orders.calculators import calculate_totals
    from orders.models import Order, OrderItem

    def _create_order(lines=(), status=Order.OrderStatus.PENDING, created_at=None,
                      total_cents=None, customer=None, restaurant_obj=None,
                      pickup_eta_min=20):
        normalized = []
        for line in lines:
            menu_item, quantity = line[0], line[1]
            price_cents = line[2] if len(line) > 2 else menu_item.price_cents
            normalized.append({'menu_item': menu_item, 'quantity': quantity, 'price_cents': price_cents})

        if total_cents is None:
            total_cents = calculate_totals(normalized)['total_cents']

        order = Order.objects.create(
            customer=customer or customer_user,
            restaurant=restaurant_obj or restaurant,
            status=status,
            pickup_eta_min=pickup_eta_min,
            route_origin='Amarillo, TX',
            route_destination='Santa Fe, NM',
            total_cents=total_cents,
            created_at=created_at or datetime(2024, 3, 4, 12, 0, tzinfo=dt_timezone.utc),
        )
        OrderItem.objects.bulk_create([
            OrderItem(order=order, menu_item=line['menu_item'], quantity=line['quantity'],
                      price_cents=line['price_cents'])
            for line in normalized
        ])
        return order

    return _create_order


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/restaurants/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def api_client_factory():
    """
    Factory fixture for creating authenticated API clients.

    Usage:
        def test_create_order(api_client_factory, customer_user):
            client = api_client_factory(customer_user)
            response = client.post('/api/orders/', {...}, format='json')

    By default the access token is sent in the `access_token` cookie; pass
    use_header=True to send `Authorization: Bearer` instead.
    """
    from rest_framework.test import APIClient
    from rest_framework_simplejwt.tokens import RefreshToken

    def _create_client(user=None, use_header=False):
        client = APIClient()
        if user is None:
            return client

        access_token = str(RefreshToken.for_user(user).access_token)
        if use_header:
            client.credentials(HTTP_AUTHORIZATION=f'Bearer {access_token}')
        else:
            client.cookies[settings.SIMPLE_JWT.get('AUTH_COOKIE', 'access_token')] = access_token
        return client

    return _create_client


@pytest.fixture
def customer_client(api_client_factory, customer_user):
    return api_client_factory(customer_user)


@pytest.fixture
def owner_client(api_client_factory, restaurant_user):
    return api_client_factory(restaurant_user)


@pytest.fixture
def other_owner_client(api_client_factory, other_restaurant_user):
    return api_client_factory(other_restaurant_user)
