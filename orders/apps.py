# orders/apps.py

"""
ORDERS APP CONFIG

Cart checkout:
- Order + OrderItem persistence (price snapshots)
- Checkout orchestration behind the signed-token access gate
"""

from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "orders"
    verbose_name = "Orders & Checkout"
