from .assembler import assemble_order, price_cart
from .checkout import checkout
from .exceptions import CheckoutError, CheckoutValidationError, OrderPersistenceError
from .types import CartItem, CheckoutResult

__all__ = [
    "assemble_order",
    "price_cart",
    "checkout",
    "CheckoutError",
    "CheckoutValidationError",
    "OrderPersistenceError",
    "CartItem",
    "CheckoutResult",
]
