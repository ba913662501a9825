# products/stores.py

"""
PRODUCT STORE

Capability contract for product storage plus the Django ORM implementation.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from products.models import Product


class ProductStore(Protocol):
    def get_products(self) -> list[Product]: ...

    def get_products_by_ids(self, ids: Iterable[int]) -> list[Product]: ...

    def create_product(self, **fields) -> Product: ...


class DjangoProductStore:
    def get_products(self) -> list[Product]:
        return list(Product.objects.all())

    def get_products_by_ids(self, ids: Iterable[int]) -> list[Product]:
        return list(Product.objects.filter(id__in=list(ids)).order_by("id"))

    def create_product(self, **fields) -> Product:
        product = Product(**fields)
        product.full_clean()
        product.save()
        return product
