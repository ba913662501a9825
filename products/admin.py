# products/admin.py
"""
PATH: products/admin.py

Catalog admin. Price edits here never touch existing orders: order items
carry their own snapshotted unit_price.
"""

from __future__ import annotations

from django.contrib import admin

from products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "unit_price",
        "quantity",
        "created_at",
    )
    list_filter = ("created_at",)
    search_fields = ("name", "description")
    ordering = ("id",)
    readonly_fields = ("created_at", "updated_at")
