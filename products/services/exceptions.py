# products/services/exceptions.py

"""
PRODUCT SERVICE ERRORS
"""


class ProductServiceError(Exception):
    """Base exception for product service failures."""


class ProductNotFoundError(ProductServiceError):
    """One or more requested product ids do not exist."""

    def __init__(self, missing_ids):
        self.missing_ids = sorted(missing_ids)
        super().__init__(
            "product(s) not found: " + ", ".join(str(i) for i in self.missing_ids)
        )
