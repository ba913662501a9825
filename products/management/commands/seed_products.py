# products/management/commands/seed_products.py

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from products.models import Product

DEMO_PRODUCTS = [
    ("Mechanical Keyboard", "Tenkeyless, brown switches", "keyboard.png", "89.90", 40),
    ("Wireless Mouse", "2.4GHz, 1600 DPI", "mouse.png", "24.50", 120),
    ("USB-C Hub", "7-in-1 with HDMI and PD", "hub.png", "39.00", 75),
    ("27in Monitor", "QHD IPS panel, 75Hz", "monitor.png", "279.00", 15),
    ("Laptop Stand", "Aluminium, adjustable height", "stand.png", "32.00", 60),
]


class Command(BaseCommand):
    help = "Seed demo catalog products (idempotent by name)"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding products..."))

        created_count = 0
        for name, description, image, price, quantity in DEMO_PRODUCTS:
            _, created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "description": description,
                    "image": image,
                    "unit_price": Decimal(price),
                    "quantity": quantity,
                },
            )
            created_count += int(created)

        self.stdout.write(
            self.style.SUCCESS(f"Products seeded ({created_count} new).")
        )
