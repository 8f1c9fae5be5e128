import uuid

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Restaurant(models.Model):
    class PriceLevel(models.TextChoices):
        BUDGET = "BUDGET", _("Budget")
        MID = "MID", _("Mid-range")
        UPSCALE = "UPSCALE", _("Upscale")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="restaurants",
        help_text=_("Merchant account that manages this restaurant."),
    )
    name = models.CharField(max_length=200)
    address = models.CharField(max_length=255)
    latitude = models.FloatField()
    longitude = models.FloatField()

    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text=_("Inactive restaurants are hidden from travelers and cannot take orders."),
    )
    is_fast_service = models.BooleanField(default=False)
    is_local_favorite = models.BooleanField(default=False)
    price_level = models.CharField(
        max_length=10,
        choices=PriceLevel.choices,
        default=PriceLevel.MID,
        null=True,
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active", "name"], name="rest_active_name_idx"),
            models.Index(fields=["owner"], name="rest_owner_idx"),
        ]

    def __str__(self):
        return self.name


class MenuSection(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    restaurant = models.ForeignKey(
        Restaurant, on_delete=models.CASCADE, related_name="sections"
    )
    title = models.CharField(max_length=120)
    position = models.PositiveIntegerField(
        default=0, help_text=_("Display order within the menu. Lower numbers appear first.")
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["position", "created_at"]

    def __str__(self):
        return f"{self.restaurant.name} - {self.title}"


class MenuItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    restaurant = models.ForeignKey(
        Restaurant, on_delete=models.CASCADE, related_name="menu_items"
    )
    section = models.ForeignKey(
        MenuSection,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="items",
        help_text=_("Leave blank for items shown outside any section."),
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    price_cents = models.PositiveIntegerField(help_text=_("Current selling price in cents."))
    is_available = models.BooleanField(default=True, db_index=True)
    tags = models.JSONField(
        default=list,
        blank=True,
        help_text=_("Free-form labels such as 'vegetarian' or 'vegan'."),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["restaurant", "is_available"], name="menuitem_rest_avail_idx"),
        ]

    def __str__(self):
        return self.name
