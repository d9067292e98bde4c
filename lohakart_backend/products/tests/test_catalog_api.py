# products/tests/test_catalog_api.py

import shutil
import tempfile
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from products.models import Category, Product, Review

User = get_user_model()


class CatalogBrowsingTests(TestCase):
    """
    GUARANTEES:
    - Storefront lists active products only
    - Filters: category (id or slug), q, featured, metal_type
    - Admins can opt into inactive rows
    """

    def setUp(self):
        self.client = APIClient()
        self.steel = Category.objects.create(name="Steel")
        self.copper = Category.objects.create(name="Copper")

        self.coil = Product.objects.create(
            name="HR Coil", sku="HRC-2", category=self.steel, metal_type="Steel",
            grade="E250", price=Decimal("54500.00"), featured=True, stock_qty=10,
        )
        self.cathode = Product.objects.create(
            name="Copper Cathode", sku="CU-A", category=self.copper, metal_type="Copper",
            price=Decimal("812000.00"),
        )
        self.hidden = Product.objects.create(
            name="Old Plate", sku="OLD-1", category=self.steel, price=Decimal("1.00"), active=False,
        )

    def _names(self, res):
        return {row["name"] for row in res.data["results"]}

    def test_public_list_hides_inactive(self):
        res = self.client.get("/api/catalog/products/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(self._names(res), {"HR Coil", "Copper Cathode"})

    def test_filter_by_category_slug_and_id(self):
        by_slug = self.client.get("/api/catalog/products/", {"category": "steel"})
        by_id = self.client.get("/api/catalog/products/", {"category": str(self.copper.id)})

        self.assertEqual(self._names(by_slug), {"HR Coil"})
        self.assertEqual(self._names(by_id), {"Copper Cathode"})

    def test_search_and_featured(self):
        self.assertEqual(self._names(self.client.get("/api/catalog/products/", {"q": "e250"})), {"HR Coil"})
        self.assertEqual(
            self._names(self.client.get("/api/catalog/products/", {"featured": "true"})), {"HR Coil"}
        )
        self.assertEqual(
            self._names(self.client.get("/api/catalog/products/", {"metal_type": "copper"})),
            {"Copper Cathode"},
        )

    def test_inactive_product_detail_is_404_for_public(self):
        res = self.client.get(f"/api/catalog/products/{self.hidden.id}/")
        self.assertEqual(res.status_code, 404)

    def test_admin_include_inactive(self):
        admin = User.objects.create_user(email="admin@lohakart.in", password="x", role="admin")
        self.client.force_authenticate(admin)

        res = self.client.get("/api/catalog/products/", {"include_inactive": "true"})
        self.assertIn("Old Plate", self._names(res))

    def test_categories_are_public_with_counts(self):
        res = self.client.get("/api/catalog/categories/")
        self.assertEqual(res.status_code, 200)
        counts = {row["name"]: row["product_count"] for row in res.data}
        self.assertEqual(counts["Steel"], 1)


class CatalogAdminTests(TestCase):
    """
    GUARANTEES:
    - Buyers cannot write products
    - Admin CRUD works, unread review counts are annotated
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@lohakart.in", password="x", role="admin")
        self.buyer = User.objects.create_user(email="buyer@steelworks.in", password="x")
        self.product = Product.objects.create(name="HR Coil", price=Decimal("100.00"))

    def test_buyer_cannot_create_product(self):
        self.client.force_authenticate(self.buyer)
        res = self.client.post("/api/catalog/products/", {"name": "X", "price": "1.00"}, format="json")
        self.assertEqual(res.status_code, 403)

    def test_anonymous_cannot_delete(self):
        res = self.client.delete(f"/api/catalog/products/{self.product.id}/")
        self.assertEqual(res.status_code, 401)

    def test_admin_creates_product(self):
        self.client.force_authenticate(self.admin)
        res = self.client.post(
            "/api/catalog/products/",
            {
                "name": "SS Plate 304",
                "sku": "ss-304",
                "price": "245000.00",
                "unit": "MT",
                "specs": {"thickness": "6mm"},
                "images": [],
            },
            format="json",
        )

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["sku"], "SS-304")
        self.assertEqual(res.data["slug"], "ss-plate-304")

    def test_admin_can_deactivate_and_still_edit(self):
        self.client.force_authenticate(self.admin)
        self.client.patch(f"/api/catalog/products/{self.product.id}/", {"active": False}, format="json")

        res = self.client.patch(f"/api/catalog/products/{self.product.id}/", {"price": "120.00"}, format="json")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["price"], "120.00")

    def test_unread_reviews_count_and_mark_read(self):
        Review.objects.create(product=self.product, user=self.buyer, rating=5)
        Review.objects.create(product=self.product, user=self.buyer, rating=3)

        self.client.force_authenticate(self.admin)
        res = self.client.get(f"/api/catalog/products/{self.product.id}/")
        self.assertEqual(res.data["unread_reviews_count"], 2)

        res = self.client.post(f"/api/catalog/products/{self.product.id}/reviews/mark-read/")
        self.assertEqual(res.data["updated"], 2)
        self.assertFalse(Review.objects.filter(is_read=False).exists())


class ReviewApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = User.objects.create_user(email="buyer@steelworks.in", password="x")
        self.product = Product.objects.create(name="HR Coil", price=Decimal("100.00"))

    def test_anonymous_cannot_review(self):
        res = self.client.post(
            f"/api/catalog/products/{self.product.id}/reviews/", {"rating": 4}, format="json"
        )
        self.assertEqual(res.status_code, 401)

    def test_rating_out_of_range_rejected(self):
        self.client.force_authenticate(self.buyer)
        res = self.client.post(
            f"/api/catalog/products/{self.product.id}/reviews/", {"rating": 6}, format="json"
        )
        self.assertEqual(res.status_code, 400)

    def test_public_sees_published_only(self):
        Review.objects.create(product=self.product, user=self.buyer, rating=5, comment="Good gauge")
        Review.objects.create(
            product=self.product, user=self.buyer, rating=1, status=Review.STATUS_HIDDEN
        )

        res = self.client.get(f"/api/catalog/products/{self.product.id}/reviews/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["comment"], "Good gauge")


class ProductImageUploadTests(TestCase):
    def setUp(self):
        self.media = tempfile.mkdtemp()
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@lohakart.in", password="x", role="admin")
        self.product = Product.objects.create(name="HR Coil", price=Decimal("100.00"))
        self.client.force_authenticate(self.admin)

    def tearDown(self):
        shutil.rmtree(self.media, ignore_errors=True)

    def test_upload_appends_image_url(self):
        with override_settings(MEDIA_ROOT=self.media):
            image = SimpleUploadedFile("coil.png", b"\x89PNG\r\n", content_type="image/png")
            res = self.client.post(
                f"/api/catalog/products/{self.product.id}/upload-image/",
                {"image": image},
                format="multipart",
            )

        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(res.data["images"]), 1)
        self.assertIn("product-images/", res.data["images"][0])

    def test_upload_rejects_unknown_extension(self):
        with override_settings(MEDIA_ROOT=self.media):
            bad = SimpleUploadedFile("coil.exe", b"MZ", content_type="application/octet-stream")
            res = self.client.post(
                f"/api/catalog/products/{self.product.id}/upload-image/",
                {"image": bad},
                format="multipart",
            )

        self.assertEqual(res.status_code, 400)
