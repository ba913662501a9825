# products/views/__init__.py

"""
Products views package exports.
"""

from .product import ProductListCreateView

__all__ = [
    "ProductListCreateView",
]
