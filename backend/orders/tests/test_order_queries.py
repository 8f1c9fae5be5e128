"""
Order listing tests for travelers and merchants.
"""
from datetime import datetime, timedelta, timezone as dt_timezone

import pytest

from core_backend.exceptions import NotFoundError
from orders.models import Order
from orders.services import OrderQueryService

S = Order.OrderStatus
BASE_TIME = datetime(2024, 3, 4, 12, 0, tzinfo=dt_timezone.utc)


@pytest.mark.django_db
class TestCustomerOrders:

    def test_newest_first(self, customer_user, order_factory, burger):
        older = order_factory(lines=[(burger, 1)], created_at=BASE_TIME)
        newer = order_factory(lines=[(burger, 1)], created_at=BASE_TIME + timedelta(hours=1))

        orders = OrderQueryService.list_orders_for_customer(customer_user)

        assert [o.id for o in orders] == [newer.id, older.id]

    def test_only_own_orders(self, customer_user, other_customer_user, order_factory, burger):
        order_factory(lines=[(burger, 1)], customer=other_customer_user)
        assert OrderQueryService.list_orders_for_customer(customer_user) == []

    def test_get_other_customers_order_is_not_found(self, other_customer_user, order_factory, burger):
        order = order_factory(lines=[(burger, 1)])
        with pytest.raises(NotFoundError):
            OrderQueryService.get_order_for_customer(order.id, other_customer_user)

    def test_get_with_malformed_id_is_not_found(self, customer_user):
        with pytest.raises(NotFoundError):
            OrderQueryService.get_order_for_customer("not-a-uuid", customer_user)


@pytest.mark.django_db
class TestRestaurantOrders:

    def test_grouped_by_lifecycle_then_oldest_first(self, restaurant, order_factory, burger):
        completed = order_factory(lines=[(burger, 1)], status=S.COMPLETED, created_at=BASE_TIME)
        pending_late = order_factory(lines=[(burger, 1)], status=S.PENDING,
                                     created_at=BASE_TIME + timedelta(minutes=30))
        ready = order_factory(lines=[(burger, 1)], status=S.READY, created_at=BASE_TIME)
        pending_early = order_factory(lines=[(burger, 1)], status=S.PENDING,
                                      created_at=BASE_TIME + timedelta(minutes=10))
        canceled = order_factory(lines=[(burger, 1)], status=S.CANCELED, created_at=BASE_TIME)
        preparing = order_factory(lines=[(burger, 1)], status=S.PREPARING, created_at=BASE_TIME)

        orders = OrderQueryService.list_orders_for_restaurant(restaurant.id)

        assert [o.id for o in orders] == [
            pending_early.id, pending_late.id, preparing.id, ready.id, completed.id, canceled.id,
        ]

    def test_other_restaurants_orders_excluded(self, other_restaurant, order_factory, burger):
        order_factory(lines=[(burger, 1)])
        assert OrderQueryService.list_orders_for_restaurant(other_restaurant.id) == []

    def test_get_with_malformed_id_is_not_found(self, restaurant):
        with pytest.raises(NotFoundError):
            OrderQueryService.get_order_for_restaurant("-" * 36, restaurant.id)
