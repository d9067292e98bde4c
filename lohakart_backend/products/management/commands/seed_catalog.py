# products/management/commands/seed_catalog.py

"""
Seed a demo catalog: categories, products and a week of pricing index entries.
Idempotent (get_or_create by slug / sku / (product_name, date)).
"""

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from pricing.models import PricingIndexEntry
from pricing.services.index import derive_change_percent
from products.models import Category, Product

CATEGORIES = [
    ("Steel", "Hot rolled, cold rolled and structural steel."),
    ("Aluminium", "Ingots, sheets and extrusions."),
    ("Copper", "Cathodes, rods and wire."),
    ("Scrap", "Graded ferrous and non-ferrous scrap."),
]

PRODUCTS = [
    ("HRC-2MM", "HR Coil 2mm IS2062", "Steel", "Steel", "E250", "54500.00", "MT", 120),
    ("CRC-1MM", "CR Sheet 1mm", "Steel", "Steel", "CR4", "61200.00", "MT", 80),
    ("TMT-12", "TMT Bar 12mm Fe500D", "Steel", "Steel", "Fe500D", "52800.00", "MT", 300),
    ("AL-INGOT", "Aluminium Ingot 99.7%", "Aluminium", "Aluminium", "P1020", "228000.00", "MT", 40),
    ("CU-CATH", "Copper Cathode Grade A", "Copper", "Copper", "LME Grade A", "812000.00", "MT", 15),
    ("HMS-8020", "HMS 1&2 (80:20)", "Scrap", "Steel", "HMS 80:20", "31500.00", "MT", 500),
]


class Command(BaseCommand):
    help = "Seed categories, products and pricing index entries"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding catalog..."))

        categories = {}
        for name, description in CATEGORIES:
            obj, _ = Category.objects.get_or_create(name=name, defaults={"description": description})
            categories[name] = obj

        for sku, name, cat, metal, grade, price, unit, stock in PRODUCTS:
            Product.objects.get_or_create(
                sku=sku,
                defaults={
                    "name": name,
                    "category": categories[cat],
                    "metal_type": metal,
                    "grade": grade,
                    "price": Decimal(price),
                    "unit": unit,
                    "stock_qty": stock,
                    "featured": sku in {"HRC-2MM", "CU-CATH"},
                },
            )

        today = timezone.localdate()
        for offset in range(6, -1, -1):
            day = today - timedelta(days=offset)
            for _, name, _, _, _, price, _, _ in PRODUCTS:
                # small deterministic drift so the ticker has movement
                drift = Decimal(100 + (offset * 7) % 5 - 2) / Decimal(100)
                day_price = (Decimal(price) * drift).quantize(Decimal("0.01"))
                PricingIndexEntry.objects.get_or_create(
                    product_name=name,
                    date=day,
                    defaults={
                        "price": day_price,
                        "change_percent": derive_change_percent(product_name=name, price=day_price, date=day),
                    },
                )

        self.stdout.write(self.style.SUCCESS("Catalog seeded."))
