import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from restaurants.models import MenuItem, Restaurant


class Order(models.Model):
    # --- Status Fields ---
    class OrderStatus(models.TextChoices):
        PENDING = "PENDING", _("Pending")
        PREPARING = "PREPARING", _("Preparing")
        READY = "READY", _("Ready for pickup")
        COMPLETED = "COMPLETED", _("Completed")
        CANCELED = "CANCELED", _("Canceled")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="orders",
        help_text=_("Traveler who placed the order."),
    )
    restaurant = models.ForeignKey(
        Restaurant,
        on_delete=models.PROTECT,
        related_name="orders",
    )
    status = models.CharField(
        max_length=10, choices=OrderStatus.choices, default=OrderStatus.PENDING
    )

    # --- Pickup / Route Fields ---
    pickup_eta_min = models.PositiveIntegerField(
        help_text=_("Minutes until the traveler expects to reach the restaurant.")
    )
    route_origin = models.CharField(max_length=255)
    route_destination = models.CharField(max_length=255)

    # --- Financial Fields ---
    # Only the grand total is stored; subtotal and tax are derived from the
    # item snapshots on every read (see orders.calculators.derive_financials).
    total_cents = models.PositiveIntegerField(
        help_text=_("Amount charged in cents, tax included.")
    )

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["customer", "created_at"], name="order_cust_created_idx"),
            models.Index(fields=["restaurant", "status"], name="order_rest_status_idx"),
            models.Index(fields=["restaurant", "created_at"], name="order_rest_created_idx"),
        ]

    def __str__(self):
        return f"Order {self.pk} ({self.restaurant_id}) - {self.status}"


class OrderItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, related_name="items", on_delete=models.CASCADE)
    menu_item = models.ForeignKey(
        MenuItem,
        on_delete=models.PROTECT,
        related_name="order_items",
    )
    quantity = models.PositiveIntegerField()
    price_cents = models.PositiveIntegerField(
        help_text=_("Menu item price in cents at the time of the order.")
    )

    class Meta:
        indexes = [
            models.Index(fields=["order"], name="item_order_idx"),
            models.Index(fields=["menu_item"], name="item_menu_item_idx"),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.menu_item_id} @ {self.price_cents}"

    @property
    def line_total_cents(self):
        return self.price_cents * self.quantity
