# cart/services/cart_store.py

"""
CART STORE

The cart is a flat list of lines:
    {"id", "name", "price", "quantity", "unit"}

Rules:
- One line per product id; quantity > 0 (set_quantity <= 0 removes the line).
- The whole list is written back to the backing mapping after every mutation.
- Malformed persisted state loads as an empty cart.
- total = sum(price * quantity); count = number of distinct lines.

The backing mapping is normally request.session under CART_SESSION_KEY.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, MutableMapping

from django.conf import settings

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")


def _money(v) -> Decimal:
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _clean_line(raw: Any) -> dict | None:
    if not isinstance(raw, dict):
        return None
    try:
        line = {
            "id": str(raw["id"]),
            "name": str(raw.get("name") or ""),
            "price": str(_money(raw["price"])),
            "quantity": int(raw["quantity"]),
            "unit": str(raw.get("unit") or ""),
        }
    except (KeyError, TypeError, ValueError, InvalidOperation):
        return None
    if line["quantity"] <= 0:
        return None
    return line


class CartStore:
    def __init__(self, backing: MutableMapping, key: str | None = None):
        self.backing = backing
        self.key = key or settings.CART_SESSION_KEY
        self.items: list[dict] = self._load()

    # -----------------------------
    # Persistence
    # -----------------------------
    def _load(self) -> list[dict]:
        raw = self.backing.get(self.key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Discarding malformed cart state", extra={"cart_key": self.key})
            return []

        lines = []
        seen = set()
        for entry in raw:
            line = _clean_line(entry)
            if line is None or line["id"] in seen:
                logger.warning("Discarding malformed cart state", extra={"cart_key": self.key})
                return []
            seen.add(line["id"])
            lines.append(line)
        return lines

    def _persist(self) -> None:
        self.backing[self.key] = [dict(line) for line in self.items]
        # SessionBase tracks writes through .modified
        if hasattr(self.backing, "modified"):
            self.backing.modified = True

    def _find(self, product_id) -> dict | None:
        product_id = str(product_id)
        for line in self.items:
            if line["id"] == product_id:
                return line
        return None

    # -----------------------------
    # Mutations
    # -----------------------------
    def add(self, *, product_id, name: str, price, unit: str, quantity: int = 1) -> dict:
        if quantity < 1:
            raise ValueError("quantity must be at least 1")

        line = self._find(product_id)
        if line is not None:
            line["quantity"] += int(quantity)
            # latest catalog data wins
            line["name"] = name
            line["price"] = str(_money(price))
            line["unit"] = unit
        else:
            line = {
                "id": str(product_id),
                "name": name,
                "price": str(_money(price)),
                "quantity": int(quantity),
                "unit": unit,
            }
            self.items.append(line)

        self._persist()
        return line

    def remove(self, product_id) -> bool:
        before = len(self.items)
        self.items = [line for line in self.items if line["id"] != str(product_id)]
        self._persist()
        return len(self.items) != before

    def set_quantity(self, product_id, quantity: int) -> dict | None:
        if quantity <= 0:
            self.remove(product_id)
            return None

        line = self._find(product_id)
        if line is None:
            raise KeyError(str(product_id))

        line["quantity"] = int(quantity)
        self._persist()
        return line

    def clear(self) -> None:
        self.items = []
        self._persist()

    # -----------------------------
    # Derived
    # -----------------------------
    @property
    def total(self) -> Decimal:
        return _money(sum((Decimal(line["price"]) * line["quantity"] for line in self.items), Decimal("0")))

    @property
    def count(self) -> int:
        return len(self.items)

    def snapshot(self) -> dict:
        return {"items": [dict(line) for line in self.items], "total": str(self.total), "count": self.count}
