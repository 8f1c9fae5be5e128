import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("address", models.CharField(max_length=255)),
                ("latitude", models.FloatField()),
                ("longitude", models.FloatField()),
                (
                    "is_active",
                    models.BooleanField(
                        db_index=True,
                        default=True,
                        help_text="Inactive restaurants are hidden from travelers and cannot take orders.",
                    ),
                ),
                ("is_fast_service", models.BooleanField(default=False)),
                ("is_local_favorite", models.BooleanField(default=False)),
                (
                    "price_level",
                    models.CharField(
                        blank=True,
                        choices=[("BUDGET", "Budget"), ("MID", "Mid-range"), ("UPSCALE", "Upscale")],
                        default="MID",
                        max_length=10,
                        null=True,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        help_text="Merchant account that manages this restaurant.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="restaurants",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["is_active", "name"], name="rest_active_name_idx"),
                    models.Index(fields=["owner"], name="rest_owner_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="MenuSection",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=120)),
                (
                    "position",
                    models.PositiveIntegerField(
                        default=0, help_text="Display order within the menu. Lower numbers appear first."
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "restaurant",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sections",
                        to="restaurants.restaurant",
                    ),
                ),
            ],
            options={
                "ordering": ["position", "created_at"],
            },
        ),
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("price_cents", models.PositiveIntegerField(help_text="Current selling price in cents.")),
                ("is_available", models.BooleanField(db_index=True, default=True)),
                (
                    "tags",
                    models.JSONField(
                        blank=True, default=list, help_text="Free-form labels such as 'vegetarian' or 'vegan'."
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "restaurant",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="menu_items",
                        to="restaurants.restaurant",
                    ),
                ),
                (
                    "section",
                    models.ForeignKey(
                        blank=True,
                        help_text="Leave blank for items shown outside any section.",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="items",
                        to="restaurants.menusection",
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["restaurant", "is_available"], name="menuitem_rest_avail_idx"),
                ],
            },
        ),
    ]
