# products/models/product.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models


class Product(models.Model):
    """
    Represents a sellable product.

    PRICING MODEL (IMPORTANT):
    - unit_price is the current selling price.
    - Checkout snapshots it onto OrderItem.unit_price; orders never read the
      live price again.
    - quantity is the advertised availability. Checkout does not decrement it.
    """

    name = models.CharField(
        max_length=255, db_index=True, validators=[MinLengthValidator(3)]
    )
    description = models.TextField()
    image = models.CharField(max_length=500, blank=True, default="")

    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    quantity = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.name} ({self.unit_price})"

    def clean(self):
        if self.unit_price is None or Decimal(self.unit_price) <= 0:
            raise ValidationError("Unit price must be greater than zero")

        if self.quantity is None or int(self.quantity) < 0:
            raise ValidationError("quantity cannot be negative")
