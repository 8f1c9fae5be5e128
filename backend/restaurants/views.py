import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import BaseGenericViewSet, NestedRestaurantMixin
from users.permissions import IsRestaurantUser
from .permissions import IsRestaurantOwner
from .serializers import (
    MenuItemSerializer,
    MenuItemWriteSerializer,
    MenuSectionSerializer,
    MenuSectionWriteSerializer,
    RestaurantMenuSerializer,
    RestaurantSerializer,
)
from .services import MenuManagementService, RestaurantService

logger = logging.getLogger(__name__)

class RestaurantViewSet(BaseGenericViewSet):
    """
    Public restaurant catalogue.

    GET /restaurants/            active restaurants, optional traveler filters
    GET /restaurants/{id}/menu/  sections and items for one restaurant
    """

    serializer_class = RestaurantSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def list(self, request: Request, *args, **kwargs) -> Response:
        restaurants = RestaurantService.get_active_restaurants(request.query_params)
        serializer = self.get_serializer(restaurants, many=True)
        return Response(serializer.data)

    @action(detail=True, methods=["get"], url_path="menu")
    def menu(self, request: Request, pk=None) -> Response:
        menu = RestaurantService.get_restaurant_menu(pk)
        return Response(RestaurantMenuSerializer(menu).data)


class MenuSectionViewSet(NestedRestaurantMixin, BaseGenericViewSet):
    """Owner-only CRUD for menu sections under /restaurants/{id}/menu/sections/."""

    serializer_class = MenuSectionSerializer
    permission_classes = [IsAuthenticated, IsRestaurantUser, IsRestaurantOwner]

    def create(self, request: Request, *args, **kwargs) -> Response:
        payload = MenuSectionWriteSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        section = MenuManagementService.create_section(self.get_restaurant().id, payload.validated_data)
        return Response(self.get_serializer(section).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, *args, **kwargs) -> Response:
        payload = MenuSectionWriteSerializer(data=request.data, partial=True)
        payload.is_valid(raise_exception=True)
        section = MenuManagementService.update_section(
            self.get_restaurant().id, kwargs["pk"], payload.validated_data
        )
        return Response(self.get_serializer(section).data)

    def destroy(self, request: Request, *args, **kwargs) -> Response:
        MenuManagementService.delete_section(self.get_restaurant().id, kwargs["pk"])
        return Response(status=status.HTTP_204_NO_CONTENT)


class MenuItemViewSet(NestedRestaurantMixin, BaseGenericViewSet):
    """Owner-only CRUD for menu items under /restaurants/{id}/menu/items/."""

    serializer_class = MenuItemSerializer
    permission_classes = [IsAuthenticated, IsRestaurantUser, IsRestaurantOwner]

    def create(self, request: Request, *args, **kwargs) -> Response:
        payload = MenuItemWriteSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        item = MenuManagementService.create_item(self.get_restaurant().id, payload.validated_data)
        return Response(self.get_serializer(item).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request: Request, *args, **kwargs) -> Response:
        payload = MenuItemWriteSerializer(data=request.data, partial=True)
        payload.is_valid(raise_exception=True)
        item = MenuManagementService.update_item(
            self.get_restaurant().id, kwargs["pk"], payload.validated_data
        )
        return Response(self.get_serializer(item).data)

    def destroy(self, request: Request, *args, **kwargs) -> Response:
        MenuManagementService.delete_item(self.get_restaurant().id, kwargs["pk"])
        return Response(status=status.HTTP_204_NO_CONTENT)
