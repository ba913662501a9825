# orders/services/assembler.py

"""
ORDER ASSEMBLER

Turns resolved products + requested cart lines into one persisted Order with
one OrderItem per cart line.

Hard rules:
- Quantities are whole units >= 1.
- Money is computed server-side as Decimal, 2dp.
- Each OrderItem.unit_price is the product's unit_price right now (snapshot).
- total == sum(unit_price * quantity) over the items written.
- Order row first (items reference its id), everything inside one
  store.atomic() block: either the order and all its items commit, or nothing.
- Every cart line is re-checked against the resolved products here, even
  though the resolver already guaranteed them; cart ordering and duplicates
  are caller controlled.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from django.db import DatabaseError

from orders.models import Order
from orders.services.exceptions import CheckoutValidationError, OrderPersistenceError
from orders.services.types import CartItem, PricedLine

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")

# Column limits: OrderItem.quantity (PositiveIntegerField), Order.total (12 digits, 2dp).
MAX_LINE_QUANTITY = 2_147_483_647
MAX_ORDER_TOTAL = Decimal("9999999999.99")


def _money(v) -> Decimal:
    if v is None or v == "":
        return Decimal("0.00")
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _to_int_qty(value) -> int:
    if isinstance(value, bool):
        raise ValueError("quantity must be a whole integer unit")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        s = value.strip()
        if s.isdigit():
            return int(s)

    raise ValueError("quantity must be a whole integer unit")


def price_cart(*, products: Iterable, items: Iterable[CartItem]) -> tuple[Decimal, list[PricedLine]]:
    by_id = {p.id: p for p in products}

    lines: list[PricedLine] = []
    total = Decimal("0.00")

    for item in items:
        product = by_id.get(item.product_id)
        if product is None:
            raise CheckoutValidationError(
                f"product {item.product_id} is not available for checkout"
            )

        try:
            qty = _to_int_qty(item.quantity)
        except ValueError as exc:
            raise CheckoutValidationError(
                f"invalid quantity for product {item.product_id}"
            ) from exc

        if qty <= 0:
            raise CheckoutValidationError(
                f"invalid quantity for product {item.product_id}: must be at least 1"
            )

        if qty > MAX_LINE_QUANTITY:
            raise CheckoutValidationError(
                f"invalid quantity for product {item.product_id}: must be at most {MAX_LINE_QUANTITY}"
            )

        unit_price = _money(product.unit_price)
        total += unit_price * Decimal(qty)
        lines.append(PricedLine(product_id=product.id, quantity=qty, unit_price=unit_price))

    total = _money(total)
    if total > MAX_ORDER_TOTAL:
        raise CheckoutValidationError(f"order total exceeds {MAX_ORDER_TOTAL}")

    return total, lines


def assemble_order(
    *,
    products: Iterable,
    items: Iterable[CartItem],
    user_id: int,
    store,
    address: str = "",
) -> tuple[int, Decimal]:
    total, lines = price_cart(products=products, items=items)

    try:
        with store.atomic():
            order_id = store.create_order(
                user_id=user_id,
                total=total,
                status=Order.STATUS_PENDING,
                address=address,
            )
            for line in lines:
                store.create_order_item(
                    order_id=order_id,
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
    except DatabaseError as exc:
        logger.exception(
            "Order persistence failed; transaction rolled back",
            extra={"user_id": user_id, "line_count": len(lines)},
        )
        raise OrderPersistenceError("could not persist order") from exc

    return order_id, total
