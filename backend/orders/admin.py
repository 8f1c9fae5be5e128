from django.contrib import admin

from .calculators import derive_financials
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("menu_item", "quantity", "price_cents", "get_line_item_total")
    fields = ("menu_item", "quantity", "price_cents", "get_line_item_total")
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False

    def get_line_item_total(self, obj):
        return f"${obj.line_total_cents / 100:,.2f}"

    get_line_item_total.short_description = "Line Item Total"


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "restaurant", "customer", "status", "get_total", "created_at")
    list_filter = ("status", "restaurant")
    search_fields = ("id", "customer__email", "restaurant__name")
    readonly_fields = ("total_cents", "get_subtotal", "get_tax", "created_at", "updated_at")
    inlines = [OrderItemInline]

    def get_total(self, obj):
        return f"${obj.total_cents / 100:,.2f}"

    get_total.short_description = "Total"

    def get_subtotal(self, obj):
        return f"${derive_financials(obj.total_cents, obj.items.all())['subtotal_cents'] / 100:,.2f}"

    get_subtotal.short_description = "Subtotal"

    def get_tax(self, obj):
        return f"${derive_financials(obj.total_cents, obj.items.all())['tax_cents'] / 100:,.2f}"

    get_tax.short_description = "Tax"
