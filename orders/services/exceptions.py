# orders/services/exceptions.py

"""
CHECKOUT SERVICE ERRORS

Centralized domain errors for the checkout pipeline.
"""


class CheckoutError(Exception):
    """Base checkout exception."""


class CheckoutValidationError(CheckoutError):
    """A cart line cannot be priced (unknown product, bad quantity)."""


class OrderPersistenceError(CheckoutError):
    """Storage failed while writing the order; nothing was committed."""
