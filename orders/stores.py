# orders/stores.py

"""
ORDER STORE

Capability contract for order persistence plus the Django ORM implementation.

The assembler opens store.atomic() around create_order + create_order_item
calls; whatever the implementation, that block must commit or roll back as
a unit.
"""

from __future__ import annotations

from decimal import Decimal
from typing import ContextManager, Protocol

from django.db import transaction

from orders.models import Order, OrderItem


class OrderStore(Protocol):
    def atomic(self) -> ContextManager: ...

    def create_order(
        self, *, user_id: int, total: Decimal, status: str, address: str
    ) -> int: ...

    def create_order_item(
        self, *, order_id: int, product_id: int, quantity: int, unit_price: Decimal
    ) -> None: ...


class DjangoOrderStore:
    def atomic(self):
        return transaction.atomic()

    def create_order(self, *, user_id: int, total: Decimal, status: str, address: str) -> int:
        order = Order.objects.create(
            user_id=user_id,
            total=total,
            status=status,
            address=address,
        )
        return order.pk

    def create_order_item(
        self, *, order_id: int, product_id: int, quantity: int, unit_price: Decimal
    ) -> None:
        OrderItem.objects.create(
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
        )
