# pricing/models.py

import uuid

from django.db import models
from django.utils import timezone


class PricingIndexEntry(models.Model):
    """
    One daily market price for a named product (feeds the ticker + pricing page).

    change_percent is derived from the latest earlier entry for the same
    product_name when it is not supplied (see pricing.services.index).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    product_name = models.CharField(max_length=255, db_index=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    change_percent = models.DecimalField(max_digits=7, decimal_places=2, null=True, blank=True)
    date = models.DateField(default=timezone.localdate)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date", "product_name"]
        verbose_name_plural = "pricing index entries"
        indexes = [
            models.Index(fields=["product_name", "date"], name="pricing_pri_product_5c9a0e_idx"),
        ]

    def __str__(self):
        return f"{self.product_name} @ {self.price} ({self.date})"
