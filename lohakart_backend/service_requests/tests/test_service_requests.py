# service_requests/tests/test_service_requests.py

import shutil
import tempfile

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from service_requests.models import FabricationRequest, RecyclingRequest

User = get_user_model()


def _fabrication(user, **overrides):
    data = {
        "user": user,
        "full_name": "Asha Rao",
        "email": "asha@steelworks.in",
        "phone": "9876543210",
        "material": "SS 304",
        "quantity": "40 brackets",
        "description": "Laser cut + bend per drawing.",
    }
    data.update(overrides)
    return FabricationRequest.objects.create(**data)


class FabricationFlowTests(TestCase):
    """
    GUARANTEES:
    - Customers submit and see only their own requests
    - Admin opening a request marks it admin-read
    - Admin response flags the request unread for the customer
    """

    def setUp(self):
        self.media = tempfile.mkdtemp()
        self.override = override_settings(MEDIA_ROOT=self.media)
        self.override.enable()

        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@lohakart.in", password="x", role="admin")
        self.buyer = User.objects.create_user(email="buyer@steelworks.in", password="x")
        self.other = User.objects.create_user(email="other@foundry.in", password="x")

    def tearDown(self):
        self.override.disable()
        shutil.rmtree(self.media, ignore_errors=True)

    def test_submit_with_drawing(self):
        self.client.force_authenticate(self.buyer)
        res = self.client.post(
            "/api/services/fabrication/",
            {
                "full_name": "Asha Rao",
                "email": "asha@steelworks.in",
                "phone": "9876543210",
                "material": "MS Plate 10mm",
                "quantity": "12 pcs",
                "description": "Flange blanks.",
                "drawing": SimpleUploadedFile("flange.dxf", b"0\nSECTION", content_type="application/dxf"),
            },
            format="multipart",
        )

        self.assertEqual(res.status_code, 201)
        self.assertIn("fabrication-drawings/", res.data["drawing_url"])
        obj = FabricationRequest.objects.get()
        self.assertFalse(obj.admin_is_read)
        self.assertTrue(obj.user_is_read)
        self.assertEqual(obj.user, self.buyer)

    def test_anonymous_cannot_submit(self):
        res = self.client.post("/api/services/fabrication/", {}, format="json")
        self.assertEqual(res.status_code, 401)

    def test_customer_sees_only_own(self):
        _fabrication(self.buyer)
        _fabrication(self.other)

        self.client.force_authenticate(self.buyer)
        self.assertEqual(self.client.get("/api/services/fabrication/").data["count"], 1)

    def test_admin_retrieve_and_respond(self):
        req = _fabrication(self.buyer)

        self.client.force_authenticate(self.admin)
        res = self.client.get(f"/api/services/admin/fabrication/{req.id}/")
        self.assertTrue(res.data["admin_is_read"])

        res = self.client.post(
            f"/api/services/admin/fabrication/{req.id}/respond/",
            {"status": "quoted", "admin_response": "Rs 1.2L incl. material", "quote_amount": "120000.00"},
            format="json",
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["quote_amount"], "120000.00")

        req.refresh_from_db()
        self.assertFalse(req.user_is_read)

        self.client.force_authenticate(self.buyer)
        self.assertEqual(self.client.get("/api/services/fabrication/unread-count/").data["unread"], 1)
        self.client.post("/api/services/fabrication/mark-read/")
        self.assertEqual(self.client.get("/api/services/fabrication/unread-count/").data["unread"], 0)

    def test_buyer_cannot_respond(self):
        req = _fabrication(self.buyer)
        self.client.force_authenticate(self.buyer)
        res = self.client.post(
            f"/api/services/admin/fabrication/{req.id}/respond/", {"status": "quoted"}, format="json"
        )
        self.assertEqual(res.status_code, 403)


class RecyclingFlowTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@lohakart.in", password="x", role="admin")
        self.buyer = User.objects.create_user(email="buyer@steelworks.in", password="x")

    def _submit(self):
        self.client.force_authenticate(self.buyer)
        return self.client.post(
            "/api/services/recycling/",
            {
                "company_name": "Rao Fabricators",
                "contact_person": "Asha Rao",
                "email": "asha@steelworks.in",
                "phone": "9876543210",
                "metal_type": "Copper",
                "estimated_quantity": "2 tonnes",
                "location": "Bhosari, Pune",
                "description": "Mixed copper offcuts.",
            },
            format="json",
        )

    def test_submit_defaults_to_pending(self):
        res = self._submit()
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["status"], "pending")

    def test_respond_accepts_capitalized_status(self):
        self._submit()
        req = RecyclingRequest.objects.get()

        self.client.force_authenticate(self.admin)
        res = self.client.post(
            f"/api/services/admin/recycling/{req.id}/respond/",
            {"status": "Approved", "admin_response": "Pickup Thursday"},
            format="json",
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["status"], "approved")

    def test_admin_mark_all_read_and_delete(self):
        self._submit()
        req = RecyclingRequest.objects.get()

        self.client.force_authenticate(self.admin)
        self.assertEqual(self.client.post("/api/services/admin/recycling/mark-read/").data["updated"], 1)
        self.assertEqual(self.client.delete(f"/api/services/admin/recycling/{req.id}/").status_code, 204)
        self.assertFalse(RecyclingRequest.objects.exists())
