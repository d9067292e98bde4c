# orders/models/order_item.py

import uuid
from decimal import ROUND_HALF_UP, Decimal

from django.core.exceptions import ValidationError
from django.db import models

from products.models import Product

from .order import Order


class OrderItem(models.Model):
    """
    One order line. Name, unit and price are snapshots taken at checkout;
    product is nulled if the catalog row is later deleted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="order_items",
    )

    product_name = models.CharField(max_length=255)
    unit = models.CharField(max_length=30, blank=True, default="")
    price = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.PositiveIntegerField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gte=1), name="order_item_quantity_gte_1"),
        ]

    @property
    def line_total(self) -> Decimal:
        return (Decimal(self.price) * self.quantity).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    def clean(self):
        if self.quantity is None or self.quantity < 1:
            raise ValidationError({"quantity": "Quantity must be at least 1"})
        if self.price is None or Decimal(self.price) < 0:
            raise ValidationError({"price": "Price must be non-negative"})

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"
