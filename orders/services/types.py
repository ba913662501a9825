# orders/services/types.py

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CartItem:
    """One requested cart line (input only, never persisted)."""

    product_id: int
    quantity: int

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        return cls(product_id=data["product_id"], quantity=data["quantity"])


@dataclass(frozen=True)
class PricedLine:
    product_id: int
    quantity: int
    unit_price: Decimal


@dataclass(frozen=True)
class CheckoutResult:
    order_id: int
    total_price: Decimal
