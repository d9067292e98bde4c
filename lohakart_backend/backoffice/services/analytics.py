# backoffice/services/analytics.py

"""
BACK OFFICE KPI SERVICE

Read-only aggregation for the admin dashboard and analytics pages.

Contract:
- Money is returned as JSON-safe "0.00" strings.
- Revenue counts every order total regardless of status.
- Status counts always carry all six order statuses (zero-filled).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from django.contrib.auth import get_user_model
from django.db.models import Count, Sum
from django.db.models.functions import TruncMonth

from orders.models import Order
from products.models import Product
from service_requests.models import FabricationRequest, RecyclingRequest

TWOPLACES = Decimal("0.01")

REVENUE_MONTHS = 6


def _money(x) -> str:
    if x is None:
        return "0.00"
    return str(Decimal(str(x)).quantize(TWOPLACES, rounding=ROUND_HALF_UP))


def _total_revenue() -> str:
    return _money(Order.objects.aggregate(total=Sum("total_amount"))["total"])


def dashboard_kpis() -> dict:
    return {
        "total_users": get_user_model().objects.count(),
        "total_products": Product.objects.count(),
        "total_orders": Order.objects.count(),
        "total_revenue": _total_revenue(),
        "total_fabrication_requests": FabricationRequest.objects.count(),
        "total_recycling_requests": RecyclingRequest.objects.count(),
    }


def orders_by_status() -> dict[str, int]:
    counts = {status: 0 for status, _label in Order.STATUS_CHOICES}
    rows = Order.objects.order_by().values("status").annotate(n=Count("id"))
    for row in rows:
        if row["status"] in counts:
            counts[row["status"]] = row["n"]
    return counts


def revenue_by_month(limit: int = REVENUE_MONTHS) -> list[dict]:
    """
    Last `limit` calendar months that have orders, oldest first:
    [{"month": "YYYY-MM", "revenue": "0.00"}, ...]
    """
    rows = (
        Order.objects.order_by()
        .annotate(month=TruncMonth("created_at"))
        .values("month")
        .annotate(revenue=Sum("total_amount"))
        .order_by("-month")[:limit]
    )
    data = [{"month": row["month"].strftime("%Y-%m"), "revenue": _money(row["revenue"])} for row in rows]
    data.reverse()
    return data


def order_analytics() -> dict:
    status_counts = orders_by_status()
    kpis = dashboard_kpis()

    return {
        "total_users": kpis["total_users"],
        "total_products": kpis["total_products"],
        "total_orders": kpis["total_orders"],
        "total_revenue": kpis["total_revenue"],
        "total_fabrication_requests": kpis["total_fabrication_requests"],
        "pending_orders": status_counts[Order.STATUS_PENDING],
        "confirmed_orders": status_counts[Order.STATUS_CONFIRMED],
        "delivered_orders": status_counts[Order.STATUS_DELIVERED],
        "orders_by_status": [
            {"status": status, "label": label, "count": status_counts[status]}
            for status, label in Order.STATUS_CHOICES
        ],
        "revenue_by_month": revenue_by_month(),
    }
