# pricing/tests/test_pricing.py

from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from pricing.models import PricingIndexEntry
from pricing.services.index import derive_change_percent, latest_prices

User = get_user_model()


class ChangePercentTests(TestCase):
    """
    GUARANTEES:
    - change_percent is derived from the latest EARLIER entry for the product
    - no previous entry -> None
    - a jump that does not fit the column -> None
    """

    def test_no_previous_entry(self):
        self.assertIsNone(
            derive_change_percent(product_name="HR Coil", price=Decimal("100"), date=date(2026, 1, 2))
        )

    def test_uses_latest_earlier_entry(self):
        PricingIndexEntry.objects.create(product_name="HR Coil", price=Decimal("80.00"), date=date(2026, 1, 1))
        PricingIndexEntry.objects.create(product_name="HR Coil", price=Decimal("100.00"), date=date(2026, 1, 5))
        PricingIndexEntry.objects.create(product_name="HR Coil", price=Decimal("999.00"), date=date(2026, 1, 9))

        change = derive_change_percent(product_name="HR Coil", price=Decimal("103.50"), date=date(2026, 1, 6))
        self.assertEqual(change, Decimal("3.50"))

    def test_jump_too_large_for_column_is_none(self):
        PricingIndexEntry.objects.create(product_name="Scrap", price=Decimal("0.50"), date=date(2026, 1, 1))

        change = derive_change_percent(product_name="Scrap", price=Decimal("6000.00"), date=date(2026, 1, 2))
        self.assertIsNone(change)

        change = derive_change_percent(product_name="Scrap", price=Decimal("499.00"), date=date(2026, 1, 2))
        self.assertEqual(change, Decimal("99700.00"))

    def test_latest_prices_one_per_product(self):
        PricingIndexEntry.objects.create(product_name="Copper", price=Decimal("1.00"), date=date(2026, 1, 1))
        PricingIndexEntry.objects.create(product_name="Copper", price=Decimal("2.00"), date=date(2026, 1, 2))
        PricingIndexEntry.objects.create(product_name="Aluminium", price=Decimal("3.00"), date=date(2026, 1, 1))

        rows = latest_prices()
        self.assertEqual([r.product_name for r in rows], ["Aluminium", "Copper"])
        self.assertEqual(rows[1].price, Decimal("2.00"))


class PricingApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@lohakart.in", password="x", role="admin")
        self.buyer = User.objects.create_user(email="buyer@steelworks.in", password="x")
        PricingIndexEntry.objects.create(product_name="TMT Bar", price=Decimal("50.00"), date=date(2026, 1, 1))
        PricingIndexEntry.objects.create(product_name="Aluminium", price=Decimal("200.00"), date=date(2026, 1, 3))

    def test_public_list_sorted_by_name(self):
        res = self.client.get("/api/pricing/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual([r["product_name"] for r in res.data["results"]], ["Aluminium", "TMT Bar"])

    def test_admin_list_sorted_by_date_desc(self):
        self.client.force_authenticate(self.admin)
        res = self.client.get("/api/pricing/admin/")
        self.assertEqual([r["product_name"] for r in res.data["results"]], ["Aluminium", "TMT Bar"])
        self.assertEqual(res.data["results"][0]["date"], "2026-01-03")

    def test_buyer_cannot_write(self):
        self.client.force_authenticate(self.buyer)
        res = self.client.post("/api/pricing/", {"product_name": "X", "price": "1.00"}, format="json")
        self.assertEqual(res.status_code, 403)

    def test_create_derives_change_percent(self):
        self.client.force_authenticate(self.admin)
        res = self.client.post(
            "/api/pricing/",
            {"product_name": "TMT Bar", "price": "55.00", "date": "2026-01-02"},
            format="json",
        )
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["change_percent"], "10.00")

    def test_explicit_change_percent_is_kept(self):
        self.client.force_authenticate(self.admin)
        res = self.client.post(
            "/api/pricing/",
            {"product_name": "TMT Bar", "price": "55.00", "date": "2026-01-02", "change_percent": "-1.25"},
            format="json",
        )
        self.assertEqual(res.data["change_percent"], "-1.25")

    def test_create_with_huge_jump_stores_null(self):
        PricingIndexEntry.objects.create(product_name="Scrap", price=Decimal("0.50"), date=date(2026, 1, 1))
        self.client.force_authenticate(self.admin)

        res = self.client.post(
            "/api/pricing/",
            {"product_name": "Scrap", "price": "6000.00", "date": "2026-01-02"},
            format="json",
        )
        self.assertEqual(res.status_code, 201)
        self.assertIsNone(res.data["change_percent"])
