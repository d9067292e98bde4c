# cart/tests/test_cart_api.py

from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from products.models import Product


class CartApiTests(TestCase):
    """
    GUARANTEES:
    - The cart survives across requests in the same session
    - Prices come from the product row
    - Inactive products cannot be added
    """

    def setUp(self):
        self.client = APIClient()
        self.coil = Product.objects.create(name="HR Coil", price=Decimal("54500.00"), unit="MT")
        self.wire = Product.objects.create(name="Cu Wire", price=Decimal("812.50"), unit="kg")

    def test_empty_cart(self):
        res = self.client.get("/api/cart/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data, {"items": [], "total": "0.00", "count": 0})

    def test_add_update_remove_flow(self):
        self.client.post("/api/cart/items/", {"product_id": str(self.coil.id), "quantity": 2}, format="json")
        self.client.post("/api/cart/items/", {"product_id": str(self.wire.id), "quantity": 4}, format="json")
        res = self.client.post("/api/cart/items/", {"product_id": str(self.coil.id), "quantity": 1}, format="json")

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["count"], 2)
        self.assertEqual(res.data["total"], "166750.00")

        res = self.client.patch(f"/api/cart/items/{self.wire.id}/", {"quantity": 0}, format="json")
        self.assertEqual(res.data["count"], 1)

        res = self.client.delete(f"/api/cart/items/{self.coil.id}/")
        self.assertEqual(res.data["count"], 0)

    def test_quantity_must_be_positive(self):
        res = self.client.post("/api/cart/items/", {"product_id": str(self.coil.id), "quantity": 0}, format="json")
        self.assertEqual(res.status_code, 400)

    def test_inactive_product_rejected(self):
        self.coil.active = False
        self.coil.save()

        res = self.client.post("/api/cart/items/", {"product_id": str(self.coil.id)}, format="json")
        self.assertEqual(res.status_code, 404)

    def test_clear(self):
        self.client.post("/api/cart/items/", {"product_id": str(self.coil.id)}, format="json")
        res = self.client.delete("/api/cart/")
        self.assertEqual(res.data["count"], 0)
        self.assertEqual(self.client.get("/api/cart/").data["count"], 0)
