# products/services/resolver.py

"""
PRODUCT RESOLVER

Maps the product ids a cart asks for to authoritative Product rows.

Hard rules:
- Duplicate ids collapse: each unique id is fetched once.
- Resolution is exhaustive. Fewer rows than unique ids is a failure,
  checked explicitly (an IN query silently drops unknown ids).
"""

from __future__ import annotations

import logging
from typing import Iterable

from products.services.exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)


def resolve_products(*, product_ids: Iterable[int], store) -> list:
    wanted = {int(pid) for pid in product_ids}
    if not wanted:
        return []

    products = store.get_products_by_ids(sorted(wanted))

    found = {p.id for p in products}
    missing = wanted - found
    if missing:
        logger.info("Unresolvable products requested", extra={"missing_ids": sorted(missing)})
        raise ProductNotFoundError(missing)

    return sorted((p for p in products if p.id in wanted), key=lambda p: p.id)
