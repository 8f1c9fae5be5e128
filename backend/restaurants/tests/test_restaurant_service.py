"""
Restaurant catalogue and menu management service tests.
"""
from unittest import mock

import pytest
from django.db import DatabaseError

from core_backend.exceptions import BadRequestError, NotFoundError
from restaurants.models import MenuItem, MenuSection, Restaurant
from restaurants.services import MenuManagementService, RestaurantService


@pytest.mark.django_db
class TestActiveRestaurants:

    def test_active_only_ordered_by_name(self, restaurant, other_restaurant, restaurant_user):
        Restaurant.objects.create(
            owner=restaurant_user, name='Closed Grill', address='x', latitude=0, longitude=0, is_active=False,
        )

        names = [r.name for r in RestaurantService.get_active_restaurants()]

        assert names == ['Canyon Cafe', 'Highway Diner']

    def test_fast_service_filter(self, restaurant, other_restaurant):
        result = RestaurantService.get_active_restaurants({'fast_service': 'true'})
        assert [r.id for r in result] == [restaurant.id]

    def test_local_favorites_filter(self, restaurant, other_restaurant):
        result = RestaurantService.get_active_restaurants({'local_favorites': 'true'})
        assert [r.id for r in result] == [other_restaurant.id]

    def test_price_level_filter(self, restaurant, other_restaurant):
        result = RestaurantService.get_active_restaurants({'price_level': 'UPSCALE'})
        assert [r.id for r in result] == [other_restaurant.id]

    def test_dietary_filter_requires_available_tagged_item(self, restaurant, other_restaurant, fries, foreign_item):
        foreign_item.tags = ['vegan']
        foreign_item.is_available = False
        foreign_item.save()

        result = RestaurantService.get_active_restaurants({'dietary_needs': 'vegan'})

        assert [r.id for r in result] == [restaurant.id]

    def test_invalid_filter_is_ignored(self, restaurant, other_restaurant):
        result = RestaurantService.get_active_restaurants({'price_level': 'FREE', 'fast_service': 'true'})
        assert [r.id for r in result] == [restaurant.id]

    def test_database_error_returns_empty_list(self, restaurant):
        with mock.patch.object(Restaurant.objects, 'filter', side_effect=DatabaseError('down')):
            assert RestaurantService.get_active_restaurants() == []


@pytest.mark.django_db
class TestRestaurantMenu:

    def test_menu_groups_items_by_section(self, restaurant, burger, fries, unavailable_item):
        menu = RestaurantService.get_restaurant_menu(restaurant.id)

        assert menu['restaurant'] == restaurant
        assert [s.title for s in menu['sections']] == ['Mains']
        assert {i.name for i in menu['sections'][0].items.all()} == {'Classic Burger', 'Fries'}
        assert [i.name for i in menu['items']] == ['Seasonal Pie']

    def test_inactive_restaurant_menu_not_found(self, restaurant):
        restaurant.is_active = False
        restaurant.save()
        with pytest.raises(NotFoundError):
            RestaurantService.get_restaurant_menu(restaurant.id)

    def test_malformed_id_menu_not_found(self):
        with pytest.raises(NotFoundError):
            RestaurantService.get_restaurant_menu("-" * 36)


@pytest.mark.django_db
class TestMenuManagement:

    def test_new_section_is_appended(self, restaurant, menu_section):
        section = MenuManagementService.create_section(restaurant.id, {'title': 'Drinks'})
        assert section.position == 1

    def test_update_section(self, restaurant, menu_section):
        section = MenuManagementService.update_section(restaurant.id, menu_section.id, {'title': 'Burgers'})
        assert section.title == 'Burgers'

    def test_deleting_section_keeps_items(self, restaurant, menu_section, burger):
        MenuManagementService.delete_section(restaurant.id, menu_section.id)

        burger.refresh_from_db()
        assert burger.section is None
        assert not MenuSection.objects.filter(id=menu_section.id).exists()

    def test_create_item_in_section(self, restaurant, menu_section):
        item = MenuManagementService.create_item(restaurant.id, {
            'section_id': menu_section.id,
            'name': 'Veggie Wrap',
            'price_cents': 850,
            'tags': ['vegetarian'],
        })
        assert item.section == menu_section
        assert item.is_available is True

    def test_section_must_belong_to_restaurant(self, restaurant, other_restaurant):
        foreign_section = MenuSection.objects.create(restaurant=other_restaurant, title='Stews')

        with pytest.raises(BadRequestError):
            MenuManagementService.create_item(restaurant.id, {
                'section_id': foreign_section.id, 'name': 'Stew', 'price_cents': 900,
            })

    def test_update_item_price(self, restaurant, burger):
        item = MenuManagementService.update_item(restaurant.id, burger.id, {'price_cents': 1100})
        assert item.price_cents == 1100

    def test_item_of_other_restaurant_not_found(self, other_restaurant, burger):
        with pytest.raises(NotFoundError):
            MenuManagementService.update_item(other_restaurant.id, burger.id, {'price_cents': 1})

    def test_delete_item(self, restaurant, fries):
        MenuManagementService.delete_item(restaurant.id, fries.id)
        assert not MenuItem.objects.filter(id=fries.id).exists()

    def test_ordered_item_cannot_be_deleted(self, restaurant, burger, order_factory):
        order_factory(lines=[(burger, 1)])

        with pytest.raises(BadRequestError):
            MenuManagementService.delete_item(restaurant.id, burger.id)

        assert MenuItem.objects.filter(id=burger.id).exists()
