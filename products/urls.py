# products/urls.py

"""
PRODUCTS URLS

Mounted under /api/v1/products/
"""

from django.urls import path

from products.views import ProductListCreateView

app_name = "products"

urlpatterns = [
    path("", ProductListCreateView.as_view(), name="product-list"),
]
