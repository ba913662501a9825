# orders/serializers.py

"""
CHECKOUT SERIALIZERS

Transport layer only: request/response shapes, not business rules.
"""

from __future__ import annotations

from rest_framework import serializers

from orders.services.assembler import MAX_LINE_QUANTITY

# Product primary keys are BigAutoField.
MAX_PRODUCT_ID = 2**63 - 1


class CartItemSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1, max_value=MAX_PRODUCT_ID)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LINE_QUANTITY)


class CheckoutInputSerializer(serializers.Serializer):
    # An empty list is a valid (zero-total) checkout; a missing list is not.
    items = CartItemSerializer(many=True, allow_empty=True)
    address = serializers.CharField(required=False, allow_blank=True, default="")


class CheckoutResponseSerializer(serializers.Serializer):
    order_id = serializers.IntegerField()
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2)
