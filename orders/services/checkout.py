# orders/services/checkout.py

"""
CHECKOUT ORCHESTRATOR (APPLICATION SERVICE)

Single pass, no retries:
    authenticated user + validated cart
        -> resolve products (exhaustive)
        -> assemble order (atomic)
        -> CheckoutResult(order_id, total_price)

The caller passes the authenticated user in explicitly; nothing here reads
request state or settings.

Empty cart policy: accepted. It produces a zero-total PENDING order with no items.
"""

from __future__ import annotations

import logging
from typing import Iterable

from orders.services.assembler import assemble_order
from orders.services.types import CartItem, CheckoutResult
from orders.stores import DjangoOrderStore
from products.services.resolver import resolve_products
from products.stores import DjangoProductStore

logger = logging.getLogger(__name__)


def checkout(
    *,
    user,
    items: Iterable,
    address: str = "",
    product_store=None,
    order_store=None,
) -> CheckoutResult:
    product_store = product_store or DjangoProductStore()
    order_store = order_store or DjangoOrderStore()

    cart = [i if isinstance(i, CartItem) else CartItem.from_dict(i) for i in items]

    products = resolve_products(
        product_ids=[i.product_id for i in cart],
        store=product_store,
    )

    order_id, total = assemble_order(
        products=products,
        items=cart,
        user_id=user.pk,
        store=order_store,
        address=address,
    )

    logger.info(
        "Checkout completed",
        extra={
            "order_id": order_id,
            "user_id": user.pk,
            "total": str(total),
            "line_count": len(cart),
        },
    )

    return CheckoutResult(order_id=order_id, total_price=total)
