"""
Restaurant catalogue and menu management.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.db.models import ProtectedError

from core_backend.exceptions import BadRequestError, NotFoundError
from .filters import RestaurantFilter
from .models import MenuItem, MenuSection, Restaurant

logger = logging.getLogger(__name__)


class RestaurantService:
    """Read side of the restaurant catalogue used by travelers."""

    @staticmethod
    def get_active_restaurants(filters=None):
        """
        Active restaurants ordered by name, narrowed by traveler filters.

        Filter values that fail validation are dropped rather than rejected, and
        a database failure yields an empty list: the list screen should always
        render something.
        """
        try:
            queryset = Restaurant.objects.filter(is_active=True).order_by("name")

            filterset = RestaurantFilter(data=filters or {}, queryset=queryset)
            if not filterset.is_valid():
                logger.warning(f"Ignoring invalid restaurant filters: {dict(filterset.errors)}")

            # filter_queryset only applies fields that survived validation
            return list(filterset.filter_queryset(queryset))
        except DatabaseError as e:
            logger.error(f"Database error fetching restaurants: {e}", exc_info=True)
            return []

    @staticmethod
    def get_restaurant_menu(restaurant_id):
        """Returns the restaurant with its sections and unsectioned items."""
        try:
            restaurant = Restaurant.objects.filter(id=restaurant_id, is_active=True).first()
        except (ValidationError, ValueError):
            restaurant = None
        if restaurant is None:
            raise NotFoundError("Restaurant not found")

        sections = list(
            MenuSection.objects.filter(restaurant=restaurant)
            .prefetch_related("items")
            .order_by("position", "created_at")
        )
        unsectioned_items = list(
            MenuItem.objects.filter(restaurant=restaurant, section__isnull=True).order_by("name")
        )

        return {
            "restaurant": restaurant,
            "sections": sections,
            "items": unsectioned_items,
        }


class MenuManagementService:
    """Owner-side menu editing. Ownership is checked by the view layer."""

    @staticmethod
    def _get_section(restaurant_id, section_id):
        section = MenuSection.objects.filter(id=section_id, restaurant_id=restaurant_id).first()
        if section is None:
            raise NotFoundError("Menu section not found")
        return section

    @staticmethod
    def _get_item(restaurant_id, item_id):
        item = MenuItem.objects.filter(id=item_id, restaurant_id=restaurant_id).first()
        if item is None:
            raise NotFoundError("Menu item not found")
        return item

    @staticmethod
    def _resolve_section(restaurant_id, section_id):
        if section_id is None:
            return None
        section = MenuSection.objects.filter(id=section_id, restaurant_id=restaurant_id).first()
        if section is None:
            raise BadRequestError("Section does not belong to this restaurant")
        return section

    @staticmethod
    @transaction.atomic
    def create_section(restaurant_id, data):
        position = data.get("position")
        if position is None:
            # Append to the end of the menu
            position = MenuSection.objects.filter(restaurant_id=restaurant_id).count()

        section = MenuSection.objects.create(
            restaurant_id=restaurant_id,
            title=data["title"],
            position=position,
        )
        logger.info(f"Created menu section {section.id} for restaurant {restaurant_id}")
        return section

    @staticmethod
    @transaction.atomic
    def update_section(restaurant_id, section_id, data):
        section = MenuManagementService._get_section(restaurant_id, section_id)

        update_fields = []
        for field in ("title", "position"):
            if field in data:
                setattr(section, field, data[field])
                update_fields.append(field)

        if update_fields:
            section.save(update_fields=update_fields + ["updated_at"])
        return section

    @staticmethod
    @transaction.atomic
    def delete_section(restaurant_id, section_id):
        section = MenuManagementService._get_section(restaurant_id, section_id)
        # Items fall back to "unsectioned" through SET_NULL
        section.delete()
        logger.info(f"Deleted menu section {section_id} for restaurant {restaurant_id}")

    @staticmethod
    @transaction.atomic
    def create_item(restaurant_id, data):
        section = MenuManagementService._resolve_section(restaurant_id, data.get("section_id"))

        item = MenuItem.objects.create(
            restaurant_id=restaurant_id,
            section=section,
            name=data["name"],
            description=data.get("description", ""),
            price_cents=data["price_cents"],
            is_available=data.get("is_available", True),
            tags=data.get("tags", []),
        )
        logger.info(f"Created menu item {item.id} for restaurant {restaurant_id}")
        return item

    @staticmethod
    @transaction.atomic
    def update_item(restaurant_id, item_id, data):
        item = MenuManagementService._get_item(restaurant_id, item_id)

        update_fields = []
        if "section_id" in data:
            item.section = MenuManagementService._resolve_section(restaurant_id, data["section_id"])
            update_fields.append("section")

        for field in ("name", "description", "price_cents", "is_available", "tags"):
            if field in data:
                setattr(item, field, data[field])
                update_fields.append(field)

        if update_fields:
            item.save(update_fields=update_fields + ["updated_at"])
        return item

    @staticmethod
    @transaction.atomic
    def delete_item(restaurant_id, item_id):
        item = MenuManagementService._get_item(restaurant_id, item_id)
        try:
            item.delete()
        except ProtectedError:
            raise BadRequestError(
                "Menu item appears in past orders; mark it unavailable instead of deleting it"
            )
        logger.info(f"Deleted menu item {item_id} for restaurant {restaurant_id}")
