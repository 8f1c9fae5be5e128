"""
Restaurant catalogue and menu management API tests.
"""
import pytest


@pytest.mark.django_db
class TestRestaurantCatalogueAPI:

    def test_list_is_public(self, api_client, restaurant, other_restaurant):
        response = api_client.get('/api/restaurants/')

        assert response.status_code == 200
        assert isinstance(response.json(), list)
        assert [r['name'] for r in response.json()] == ['Canyon Cafe', 'Highway Diner']

    def test_list_with_filters(self, api_client, restaurant, other_restaurant):
        response = api_client.get('/api/restaurants/', {'local_favorites': 'true'})
        assert [r['id'] for r in response.json()] == [str(other_restaurant.id)]

    def test_list_ignores_garbage_filters(self, api_client, restaurant):
        response = api_client.get('/api/restaurants/', {'price_level': 'nope'})
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_menu(self, api_client, restaurant, burger, fries):
        response = api_client.get(f'/api/restaurants/{restaurant.id}/menu/')

        assert response.status_code == 200
        body = response.json()
        assert body['restaurant']['id'] == str(restaurant.id)
        assert body['sections'][0]['title'] == 'Mains'
        assert len(body['sections'][0]['items']) == 2
        assert body['items'] == []

    def test_menu_unknown_restaurant(self, api_client):
        response = api_client.get('/api/restaurants/00000000-0000-0000-0000-000000000000/menu/')
        assert response.status_code == 404

    def test_menu_malformed_id_is_not_found(self, api_client):
        response = api_client.get(f"/api/restaurants/{'-' * 36}/menu/")
        assert response.status_code == 404


@pytest.mark.django_db
class TestMenuManagementAPI:

    def test_owner_creates_section_and_item(self, owner_client, restaurant):
        section = owner_client.post(
            f'/api/restaurants/{restaurant.id}/menu/sections/', {'title': 'Breakfast'}, format='json'
        )
        assert section.status_code == 201
        section_id = section.json()['id']

        item = owner_client.post(f'/api/restaurants/{restaurant.id}/menu/items/', {
            'section_id': section_id,
            'name': 'Pancakes',
            'price_cents': 750,
            'tags': ['vegetarian'],
        }, format='json')

        assert item.status_code == 201
        assert item.json()['section_id'] == section_id
        assert item.json()['price_cents'] == 750

    def test_owner_updates_item(self, owner_client, restaurant, burger):
        response = owner_client.patch(
            f'/api/restaurants/{restaurant.id}/menu/items/{burger.id}/', {'is_available': False}, format='json'
        )
        assert response.status_code == 200
        assert response.json()['is_available'] is False

    def test_owner_deletes_section(self, owner_client, restaurant, menu_section):
        response = owner_client.delete(f'/api/restaurants/{restaurant.id}/menu/sections/{menu_section.id}/')
        assert response.status_code == 204

    def test_negative_price_rejected(self, owner_client, restaurant):
        response = owner_client.post(
            f'/api/restaurants/{restaurant.id}/menu/items/', {'name': 'Bad', 'price_cents': -1}, format='json'
        )
        assert response.status_code == 400

    def test_non_owner_is_forbidden(self, other_owner_client, restaurant):
        response = other_owner_client.post(
            f'/api/restaurants/{restaurant.id}/menu/sections/', {'title': 'Hijack'}, format='json'
        )
        assert response.status_code == 403

    def test_customer_is_forbidden(self, customer_client, restaurant):
        response = customer_client.post(
            f'/api/restaurants/{restaurant.id}/menu/sections/', {'title': 'Nope'}, format='json'
        )
        assert response.status_code == 403

    def test_unknown_restaurant_is_not_found(self, owner_client):
        response = owner_client.post(
            '/api/restaurants/00000000-0000-0000-0000-000000000000/menu/sections/', {'title': 'X'}, format='json'
        )
        assert response.status_code == 404
