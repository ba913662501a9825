# orders/urls.py

"""
CART URLS

Mounted under /api/v1/cart/
"""

from django.urls import re_path

from orders.views import CartCheckoutView

app_name = "orders"

urlpatterns = [
    # Served with and without the trailing slash.
    re_path(r"^checkout/?$", CartCheckoutView.as_view(), name="cart-checkout"),
]
