# backend/restaurants/urls.py

from django.urls import path, include
from rest_framework import routers
from rest_framework_nested import routers as nested_routers

from analytics.views import RestaurantAnalyticsViewSet
from orders.views import RestaurantOrderViewSet
from .views import MenuItemViewSet, MenuSectionViewSet, RestaurantViewSet

app_name = "restaurants"

router = routers.DefaultRouter()
router.register(r"restaurants", RestaurantViewSet, basename="restaurant")

restaurants_router = nested_routers.NestedSimpleRouter(router, r"restaurants", lookup="restaurant")
restaurants_router.register(r"menu/sections", MenuSectionViewSet, basename="menu-section")
restaurants_router.register(r"menu/items", MenuItemViewSet, basename="menu-item")
restaurants_router.register(r"orders", RestaurantOrderViewSet, basename="restaurant-order")
restaurants_router.register(r"analytics", RestaurantAnalyticsViewSet, basename="restaurant-analytics")

urlpatterns = [
    # Nested routes first for precedence.
    path("", include(restaurants_router.urls)),
    path("", include(router.urls)),
]
