# orders/models/order_item.py

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class OrderItem(models.Model):
    """
    Line item for an Order.

    unit_price is the product price at checkout time (snapshot); later
    product price changes never flow into existing items.
    """

    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )

    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
    )

    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    @property
    def line_total(self) -> Decimal:
        return (Decimal(self.quantity) * Decimal(self.unit_price)).quantize(
            Decimal("0.01")
        )

    def __str__(self):
        return f"{self.product_id} x{self.quantity} @ {self.unit_price}"
