# orders/admin.py

"""
ORDERS ADMIN

Orders are read-only audit artifacts here: totals and item price snapshots
are written once by checkout and never edited.
"""

from __future__ import annotations

from django.contrib import admin

from orders.models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    can_delete = False
    fields = ("product", "quantity", "unit_price", "line_total", "created_at")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False

    @admin.display(description="Line total")
    def line_total(self, obj):
        return obj.line_total


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "total", "status", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("id", "user__email")
    ordering = ("-created_at",)
    readonly_fields = ("user", "total", "address", "created_at")
    inlines = [OrderItemInline]
