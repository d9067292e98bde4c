# orders/services/checkout.py

"""
CHECKOUT SERVICE

Flow:
1) Normalize lines (merge duplicate product ids, quantity >= 1)
2) Re-read every product (active only); the client price is never trusted
3) subtotal = sum(price * qty); tax = subtotal * CHECKOUT_TAX_RATE; total = subtotal + tax
4) Write the order row, then its item rows

Steps 3-4 run in ONE transaction: a failure writing items rolls back the order.
"""

from __future__ import annotations

import logging
import uuid
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from django.conf import settings
from django.db import transaction

from orders.models import Order, OrderItem
from orders.services.exceptions import (
    EmptyCartError,
    InvalidCartLineError,
    MissingShippingAddressError,
)
from products.models import Product

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")


def _money(v) -> Decimal:
    if v is None or v == "":
        return Decimal("0.00")
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def compute_totals(subtotal, tax_rate=None) -> dict[str, Decimal]:
    rate = Decimal(str(settings.CHECKOUT_TAX_RATE if tax_rate is None else tax_rate))
    subtotal = _money(subtotal)
    tax = _money(subtotal * rate)
    return {"subtotal": subtotal, "tax": tax, "total": _money(subtotal + tax)}


def _normalize_lines(lines: Iterable[dict]) -> dict[str, int]:
    merged: dict[str, int] = {}
    for line in lines:
        product_id = str(line.get("product_id") or line.get("id") or "").strip()
        try:
            product_id = str(uuid.UUID(product_id))
        except ValueError:
            raise InvalidCartLineError("Each line needs a valid product_id.")

        try:
            quantity = int(line.get("quantity"))
        except (TypeError, ValueError):
            raise InvalidCartLineError(f"Invalid quantity for product {product_id}.")
        if quantity < 1:
            raise InvalidCartLineError(f"Quantity for product {product_id} must be at least 1.")

        merged[product_id] = merged.get(product_id, 0) + quantity

    if not merged:
        raise EmptyCartError("Your cart is empty.")
    return merged


def place_order(*, user, shipping_address: str, lines: Iterable[dict]) -> Order:
    """
    lines: [{"product_id": <uuid>, "quantity": <int>}, ...]
    (cart lines using "id" instead of "product_id" are accepted too)
    """
    shipping_address = (shipping_address or "").strip()
    if not shipping_address:
        raise MissingShippingAddressError("Shipping address is required.")

    wanted = _normalize_lines(lines)

    products = {
        str(p.id): p
        for p in Product.objects.filter(id__in=list(wanted.keys()), active=True)
    }
    missing = [pid for pid in wanted if pid not in products]
    if missing:
        raise InvalidCartLineError(f"Products unavailable: {', '.join(sorted(missing))}")

    subtotal = sum(
        (_money(products[pid].price) * qty for pid, qty in wanted.items()),
        Decimal("0.00"),
    )
    totals = compute_totals(subtotal)

    with transaction.atomic():
        order = Order.objects.create(
            user=user,
            shipping_address=shipping_address,
            status=Order.STATUS_PENDING,
            subtotal_amount=totals["subtotal"],
            tax_amount=totals["tax"],
            total_amount=totals["total"],
        )

        OrderItem.objects.bulk_create(
            [
                OrderItem(
                    order=order,
                    product=products[pid],
                    product_name=products[pid].name,
                    unit=products[pid].unit,
                    price=_money(products[pid].price),
                    quantity=qty,
                )
                for pid, qty in wanted.items()
            ]
        )

    logger.info(
        "Order placed",
        extra={
            "order_id": str(order.id),
            "order_no": order.order_no,
            "user_id": str(getattr(user, "id", "")),
            "total": str(order.total_amount),
        },
    )
    return order
