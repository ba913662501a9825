from .exceptions import ProductNotFoundError, ProductServiceError
from .resolver import resolve_products

__all__ = [
    "ProductNotFoundError",
    "ProductServiceError",
    "resolve_products",
]
