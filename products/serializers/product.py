# products/serializers/product.py

"""
PRODUCT SERIALIZER

Canonical Product representation for the catalog (read + create).
"""

from decimal import Decimal

from rest_framework import serializers

from products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=3, max_length=255)
    unit_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0.01")
    )
    quantity = serializers.IntegerField(min_value=0)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "image",
            "unit_price",
            "quantity",
            "created_at",
        ]
        read_only_fields = ["id", "created_at"]
