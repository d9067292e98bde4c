# pricing/services/index.py

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pricing.models import PricingIndexEntry

TWOPLACES = Decimal("0.01")

# change_percent column is max_digits=7, decimal_places=2
CHANGE_PERCENT_LIMIT = Decimal("100000")


def previous_entry(*, product_name: str, date, exclude_pk=None) -> PricingIndexEntry | None:
    qs = PricingIndexEntry.objects.filter(product_name__iexact=product_name, date__lt=date)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    return qs.order_by("-date", "-created_at").first()


def derive_change_percent(*, product_name: str, price, date, exclude_pk=None) -> Decimal | None:
    """
    ((price - prev) / prev) * 100, or None without a usable previous price
    or when the jump is too large for the column.
    """
    prev = previous_entry(product_name=product_name, date=date, exclude_pk=exclude_pk)
    if prev is None or not prev.price:
        return None

    change = ((Decimal(price) - prev.price) / prev.price * Decimal("100")).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    if abs(change) >= CHANGE_PERCENT_LIMIT:
        return None
    return change


def latest_prices():
    """
    Newest entry per product name, ordered by product name (ticker feed).
    """
    latest: dict[str, PricingIndexEntry] = {}
    for entry in PricingIndexEntry.objects.order_by("product_name", "-date", "-created_at"):
        latest.setdefault(entry.product_name, entry)
    return list(latest.values())
