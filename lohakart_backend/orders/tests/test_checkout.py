# orders/tests/test_checkout.py

from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from orders.models import Order, OrderItem
from orders.services.checkout import compute_totals, place_order
from orders.services.exceptions import (
    EmptyCartError,
    InvalidCartLineError,
    MissingShippingAddressError,
)
from products.models import Product

User = get_user_model()


class CheckoutServiceTests(TestCase):
    """
    Checkout service tests.

    GUARANTEES:
    - Totals are computed from product rows (subtotal + 18% tax)
    - Order + items are written atomically
    - Empty / invalid carts are rejected
    """

    def setUp(self):
        self.user = User.objects.create_user(email="buyer@steelworks.in", password="x")
        self.coil = Product.objects.create(name="HR Coil", price=Decimal("54500.00"), unit="MT")
        self.wire = Product.objects.create(name="Cu Wire", price=Decimal("812.35"), unit="kg")

    def test_compute_totals_rounds_half_up(self):
        totals = compute_totals(Decimal("10.25"), tax_rate="0.18")
        self.assertEqual(totals["tax"], Decimal("1.85"))
        self.assertEqual(totals["total"], Decimal("12.10"))

    def test_place_order_totals_and_snapshots(self):
        order = place_order(
            user=self.user,
            shipping_address="Plot 12, MIDC, Pune",
            lines=[
                {"product_id": str(self.coil.id), "quantity": 2},
                {"product_id": str(self.wire.id), "quantity": 3},
            ],
        )

        self.assertEqual(order.subtotal_amount, Decimal("111437.05"))
        self.assertEqual(order.tax_amount, Decimal("20058.67"))
        self.assertEqual(order.total_amount, Decimal("131495.72"))
        self.assertEqual(order.status, Order.STATUS_PENDING)
        self.assertTrue(order.order_no.startswith("ORD"))

        items = {i.product_name: i for i in order.items.all()}
        self.assertEqual(items["Cu Wire"].unit, "kg")
        self.assertEqual(items["Cu Wire"].price, Decimal("812.35"))

    def test_duplicate_lines_are_merged(self):
        order = place_order(
            user=self.user,
            shipping_address="Pune",
            lines=[
                {"product_id": str(self.coil.id), "quantity": 1},
                {"product_id": str(self.coil.id), "quantity": 2},
            ],
        )
        self.assertEqual(order.items.get().quantity, 3)

    def test_empty_cart_rejected(self):
        with self.assertRaises(EmptyCartError):
            place_order(user=self.user, shipping_address="Pune", lines=[])

    def test_blank_address_rejected(self):
        with self.assertRaises(MissingShippingAddressError):
            place_order(
                user=self.user,
                shipping_address="   ",
                lines=[{"product_id": str(self.coil.id), "quantity": 1}],
            )

    def test_inactive_product_rejected(self):
        self.coil.active = False
        self.coil.save()

        with self.assertRaises(InvalidCartLineError):
            place_order(
                user=self.user,
                shipping_address="Pune",
                lines=[{"product_id": str(self.coil.id), "quantity": 1}],
            )

    def test_zero_quantity_rejected(self):
        with self.assertRaises(InvalidCartLineError):
            place_order(
                user=self.user,
                shipping_address="Pune",
                lines=[{"product_id": str(self.coil.id), "quantity": 0}],
            )

    def test_item_write_failure_rolls_back_order(self):
        with mock.patch.object(OrderItem.objects, "bulk_create", side_effect=DatabaseError("boom")):
            with self.assertRaises(DatabaseError):
                place_order(
                    user=self.user,
                    shipping_address="Pune",
                    lines=[{"product_id": str(self.coil.id), "quantity": 1}],
                )

        self.assertEqual(Order.objects.count(), 0)

    @override_settings(CHECKOUT_TAX_RATE=Decimal("0.05"))
    def test_tax_rate_is_configurable(self):
        order = place_order(
            user=self.user,
            shipping_address="Pune",
            lines=[{"product_id": str(self.coil.id), "quantity": 1}],
        )
        self.assertEqual(order.tax_amount, Decimal("2725.00"))


class CheckoutApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="buyer@steelworks.in", password="x")
        self.coil = Product.objects.create(name="HR Coil", price=Decimal("100.00"), unit="MT")

    def test_anonymous_cannot_checkout(self):
        res = self.client.post("/api/orders/checkout/", {"shipping_address": "Pune"}, format="json")
        self.assertEqual(res.status_code, 401)

    def test_checkout_from_session_cart_clears_cart(self):
        self.client.force_authenticate(self.user)
        self.client.post("/api/cart/items/", {"product_id": str(self.coil.id), "quantity": 2}, format="json")

        res = self.client.post("/api/orders/checkout/", {"shipping_address": "Pune"}, format="json")

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["total_amount"], "236.00")
        self.assertEqual(len(res.data["items"]), 1)
        self.assertEqual(self.client.get("/api/cart/").data["count"], 0)

    def test_empty_session_cart_is_bad_request(self):
        self.client.force_authenticate(self.user)
        res = self.client.post("/api/orders/checkout/", {"shipping_address": "Pune"}, format="json")
        self.assertEqual(res.status_code, 400)

    def test_explicit_items_payload(self):
        self.client.force_authenticate(self.user)
        res = self.client.post(
            "/api/orders/checkout/",
            {"shipping_address": "Pune", "items": [{"product_id": str(self.coil.id), "quantity": 1}]},
            format="json",
        )
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["subtotal_amount"], "100.00")
        self.assertEqual(res.data["tax_amount"], "18.00")
