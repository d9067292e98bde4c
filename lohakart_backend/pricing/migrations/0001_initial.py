"""
PATH: pricing/migrations/0001_initial.py

MIGRATION: CREATE PricingIndexEntry
"""

from __future__ import annotations

import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PricingIndexEntry",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("product_name", models.CharField(db_index=True, max_length=255)),
                ("price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("change_percent", models.DecimalField(blank=True, decimal_places=2, max_digits=7, null=True)),
                ("date", models.DateField(default=django.utils.timezone.localdate)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-date", "product_name"],
                "verbose_name_plural": "pricing index entries",
                "indexes": [
                    models.Index(fields=["product_name", "date"], name="pricing_pri_product_5c9a0e_idx"),
                ],
            },
        ),
    ]
