# carbon/services/calculator.py

"""
CARBON ACCOUNTING CALCULATOR

Emission factors (tCO2e):
- production, per tonne of metal: virgin 1.9 (BF-BOF), recycled 0.4 (EAF)
- transport, per tonne-km: truck 0.0001, rail 0.00003, ship 0.00001

Formula:
    quantity_t  = quantity / 1000 if unit == "kg" else quantity
    factor      = virgin | recycled | blend(p) for route "mixed"
    production  = factor * quantity_t
    transport   = quantity_t * distance_km * mode_factor
    total       = production + transport
    baseline    = virgin * quantity_t + transport   (same shipment, 100% virgin)
    savings     = baseline - total

Pure: no DB, no request state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

VIRGIN_FACTOR = Decimal("1.9")
RECYCLED_FACTOR = Decimal("0.4")

TRANSPORT_FACTORS = {
    "truck": Decimal("0.0001"),
    "rail": Decimal("0.00003"),
    "ship": Decimal("0.00001"),
}

ROUTE_VIRGIN = "virgin"
ROUTE_RECYCLED = "recycled"
ROUTE_MIXED = "mixed"

ROUTE_CHOICES = [
    (ROUTE_VIRGIN, "Virgin (Ore-based, BF-BOF)"),
    (ROUTE_RECYCLED, "Non-virgin (Recycled, EAF)"),
    (ROUTE_MIXED, "Mixed Content (Custom %)"),
]

UNIT_TONNE = "tonne"
UNIT_KG = "kg"

UNIT_CHOICES = [
    (UNIT_TONNE, "Tonnes"),
    (UNIT_KG, "Kilograms"),
]

METAL_CATEGORIES = [
    "TMT Bars",
    "Structural Steel",
    "Hot Rolled Coil (HRC)",
    "Cold Rolled Coil (CRC)",
    "Galvanized Steel",
    "Stainless Steel",
    "Other steel products",
]

EMISSION_PLACES = Decimal("0.000001")
PERCENT_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")


class CarbonInputError(ValueError):
    pass


@dataclass(frozen=True)
class CarbonResult:
    metal_category: str
    production_route: str
    quantity_tonnes: Decimal
    factor: Decimal
    production: Decimal
    transport: Decimal
    total: Decimal
    per_tonne: Decimal
    virgin_baseline: Decimal
    savings: Decimal
    efficiency_percent: Decimal

    def as_dict(self) -> dict:
        return {
            "metal_category": self.metal_category,
            "production_route": self.production_route,
            "quantity_tonnes": self.quantity_tonnes,
            "factor": self.factor,
            "production": self.production,
            "transport": self.transport,
            "total": self.total,
            "per_tonne": self.per_tonne,
            "virgin_baseline": self.virgin_baseline,
            "savings": self.savings,
            "efficiency_percent": self.efficiency_percent,
        }


def _emission(v: Decimal) -> Decimal:
    return v.quantize(EMISSION_PLACES, rounding=ROUND_HALF_UP)


def factors_table() -> dict:
    return {
        "production": {ROUTE_VIRGIN: VIRGIN_FACTOR, ROUTE_RECYCLED: RECYCLED_FACTOR},
        "transport": dict(TRANSPORT_FACTORS),
        "routes": [{"value": v, "label": label} for v, label in ROUTE_CHOICES],
        "units": [{"value": v, "label": label} for v, label in UNIT_CHOICES],
        "transport_modes": list(TRANSPORT_FACTORS),
        "metal_categories": list(METAL_CATEGORIES),
    }


def production_factor(route: str, recycled_percentage=None) -> Decimal:
    if route == ROUTE_VIRGIN:
        return VIRGIN_FACTOR
    if route == ROUTE_RECYCLED:
        return RECYCLED_FACTOR
    if route == ROUTE_MIXED:
        p = Decimal(str(recycled_percentage if recycled_percentage is not None else 0))
        if p < 0 or p > HUNDRED:
            raise CarbonInputError("recycled_percentage must be between 0 and 100.")
        return (HUNDRED - p) / HUNDRED * VIRGIN_FACTOR + p / HUNDRED * RECYCLED_FACTOR
    raise CarbonInputError(f"Unknown production route '{route}'.")


def calculate_emissions(
    *,
    quantity,
    unit: str = UNIT_TONNE,
    production_route: str = ROUTE_VIRGIN,
    recycled_percentage=None,
    distance_km=0,
    transport_mode: str = "truck",
    metal_category: str = METAL_CATEGORIES[0],
) -> CarbonResult:
    quantity = Decimal(str(quantity))
    distance = Decimal(str(distance_km or 0))
    if quantity < 0:
        raise CarbonInputError("quantity cannot be negative.")
    if distance < 0:
        raise CarbonInputError("distance_km cannot be negative.")

    mode_factor = TRANSPORT_FACTORS.get(transport_mode)
    if mode_factor is None:
        raise CarbonInputError(f"Unknown transport mode '{transport_mode}'.")

    quantity_t = quantity / 1000 if unit == UNIT_KG else quantity
    factor = production_factor(production_route, recycled_percentage)

    production = factor * quantity_t
    transport = quantity_t * distance * mode_factor
    total = production + transport

    # zero quantity divides by 1
    per_tonne = total / (quantity_t or 1)

    baseline = VIRGIN_FACTOR * quantity_t + transport
    savings = baseline - total
    efficiency = (total / baseline * HUNDRED) if baseline else Decimal("0")

    return CarbonResult(
        metal_category=metal_category,
        production_route=production_route,
        quantity_tonnes=_emission(quantity_t),
        factor=_emission(factor),
        production=_emission(production),
        transport=_emission(transport),
        total=_emission(total),
        per_tonne=_emission(per_tonne),
        virgin_baseline=_emission(baseline),
        savings=_emission(savings),
        efficiency_percent=efficiency.quantize(PERCENT_PLACES, rounding=ROUND_HALF_UP),
    )
