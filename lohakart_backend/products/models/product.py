# products/models/product.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from backend.slugs import unique_slug

from .category import Category


class Product(models.Model):
    """
    A tradable metal product (coil, plate, bar, scrap grade ...).

    Pricing:
    - price is per `unit` (e.g. "MT", "kg", "piece").
    - Checkout always re-reads price from this row.

    Availability:
    - in_stock is derived: active AND stock_qty > 0.
    - Inactive products are hidden from the storefront but kept for order history.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )

    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=280, unique=True, blank=True)
    sku = models.CharField(max_length=128, unique=True, null=True, blank=True)

    description = models.TextField(blank=True, default="")

    metal_type = models.CharField(max_length=100, blank=True, default="")
    grade = models.CharField(max_length=100, blank=True, default="")

    price = models.DecimalField(max_digits=12, decimal_places=2)
    unit = models.CharField(max_length=30, default="MT")

    stock_qty = models.PositiveIntegerField(default=0)
    min_order = models.PositiveIntegerField(default=1)
    supplier_ref = models.CharField(max_length=120, blank=True, default="")

    # Media + technical data
    images = models.JSONField(default=list, blank=True)
    datasheets = models.JSONField(default=list, blank=True)
    specs = models.JSONField(default=dict, blank=True)

    featured = models.BooleanField(default=False)
    active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["active", "featured"], name="products_pr_active_3f1c2e_idx"),
            models.Index(fields=["metal_type"], name="products_pr_metal_t_8a4d1b_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.sku or 'no sku'})"

    @property
    def in_stock(self) -> bool:
        return bool(self.active and (self.stock_qty or 0) > 0)

    @property
    def primary_image(self) -> str:
        return self.images[0] if self.images else ""

    def clean(self):
        if self.price is None or Decimal(self.price) < Decimal("0.00"):
            raise ValidationError({"price": "Price must be non-negative"})

        if not isinstance(self.images or [], list) or not isinstance(self.datasheets or [], list):
            raise ValidationError("images and datasheets must be lists of URLs")

        if not isinstance(self.specs or {}, dict):
            raise ValidationError({"specs": "specs must be an object"})

        if self.sku is not None:
            self.sku = self.sku.strip().upper() or None

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(Product, self.name, exclude_pk=self.pk)
        super().save(*args, **kwargs)
