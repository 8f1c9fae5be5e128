from django.contrib import admin

from .models import MenuItem, MenuSection, Restaurant


class MenuSectionInline(admin.TabularInline):
    model = MenuSection
    extra = 0


@admin.register(Restaurant)
class RestaurantAdmin(admin.ModelAdmin):
    list_display = ("name", "owner", "is_active", "is_fast_service", "is_local_favorite", "price_level")
    list_filter = ("is_active", "is_fast_service", "is_local_favorite", "price_level")
    search_fields = ("name", "address", "owner__email")
    inlines = [MenuSectionInline]


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ("name", "restaurant", "section", "price_cents", "is_available")
    list_filter = ("is_available", "restaurant")
    search_fields = ("name", "restaurant__name")
