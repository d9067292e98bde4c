# backoffice/tests/test_backoffice.py

from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from careers.models import Job, JobApplication
from content.models import ContactMessage
from orders.models import Order
from products.models import Product
from service_requests.models import FabricationRequest, RecyclingRequest

User = get_user_model()


def _order(user, total, status=Order.STATUS_PENDING, **extra):
    return Order.objects.create(
        user=user,
        shipping_address="Plot 7, MIDC, Pune",
        status=status,
        total_amount=Decimal(total),
        **extra,
    )


def _fabrication(user, **extra):
    return FabricationRequest.objects.create(
        user=user, full_name="Asha Rao", email="asha@steelworks.in", phone="9876543210",
        material="MS", quantity="10 plates", description="Cut to size.", **extra,
    )


def _recycling(user, **extra):
    return RecyclingRequest.objects.create(
        user=user, contact_person="Asha Rao", email="asha@steelworks.in", phone="9876543210",
        metal_type="Copper", estimated_quantity="2 MT", location="Pune", description="Scrap pickup.", **extra,
    )


class DashboardTests(TestCase):
    """
    GUARANTEES:
    - KPIs count users, products, orders, requests and sum revenue
    - Analytics zero-fills every order status
    - Only analytics viewers get in
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@lohakart.in", password="x", role="admin")
        self.buyer = User.objects.create_user(email="buyer@steelworks.in", password="x")

        Product.objects.create(name="HR Coil", price=Decimal("54000.00"))
        _order(self.buyer, "1180.00")
        _order(self.buyer, "2360.50", status=Order.STATUS_DELIVERED)
        _fabrication(self.buyer)
        _recycling(self.buyer)

    def test_dashboard(self):
        self.client.force_authenticate(self.admin)
        res = self.client.get("/api/backoffice/dashboard/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["total_users"], 2)
        self.assertEqual(res.data["total_products"], 1)
        self.assertEqual(res.data["total_orders"], 2)
        self.assertEqual(res.data["total_revenue"], "3540.50")
        self.assertEqual(res.data["total_fabrication_requests"], 1)
        self.assertEqual(res.data["total_recycling_requests"], 1)

    def test_analytics_status_counts(self):
        self.client.force_authenticate(self.admin)
        res = self.client.get("/api/backoffice/analytics/")
        self.assertEqual(res.status_code, 200)

        counts = {row["status"]: row["count"] for row in res.data["orders_by_status"]}
        self.assertEqual(len(counts), 6)
        self.assertEqual(counts["pending"], 1)
        self.assertEqual(counts["delivered"], 1)
        self.assertEqual(counts["cancelled"], 0)
        self.assertEqual(res.data["pending_orders"], 1)
        self.assertEqual(res.data["confirmed_orders"], 0)
        self.assertEqual(res.data["delivered_orders"], 1)

    def test_revenue_by_month_keeps_last_six(self):
        Order.objects.all().delete()
        for month in range(1, 9):
            o = _order(self.buyer, "100.00")
            Order.objects.filter(pk=o.pk).update(created_at=datetime(2025, month, 15, 12, tzinfo=dt_timezone.utc))
        extra = _order(self.buyer, "50.00")
        Order.objects.filter(pk=extra.pk).update(created_at=datetime(2025, 8, 16, 12, tzinfo=dt_timezone.utc))

        self.client.force_authenticate(self.admin)
        res = self.client.get("/api/backoffice/analytics/")

        months = [row["month"] for row in res.data["revenue_by_month"]]
        self.assertEqual(months, ["2025-03", "2025-04", "2025-05", "2025-06", "2025-07", "2025-08"])
        self.assertEqual(res.data["revenue_by_month"][-1]["revenue"], "150.00")

    def test_buyer_forbidden(self):
        self.client.force_authenticate(self.buyer)
        self.assertEqual(self.client.get("/api/backoffice/dashboard/").status_code, 403)
        self.assertEqual(self.client.get("/api/backoffice/analytics/").status_code, 403)

    def test_anonymous_unauthorized(self):
        self.assertEqual(self.client.get("/api/backoffice/dashboard/").status_code, 401)


class BadgeTests(TestCase):
    """
    GUARANTEES:
    - Admin badges count rows the back office has not opened
    - Customer badges count own unseen updates and their total
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@lohakart.in", password="x", role="admin")
        self.buyer = User.objects.create_user(email="buyer@steelworks.in", password="x")
        self.other = User.objects.create_user(email="other@foundry.in", password="x")

        _order(self.buyer, "10.00")
        _order(self.buyer, "10.00", is_read=True, user_is_read=False)
        _order(self.other, "10.00", is_read=True, user_is_read=False)
        _fabrication(self.buyer, user_is_read=False, admin_is_read=True)
        _fabrication(self.other)
        _recycling(self.buyer)

        job = Job.objects.create(title="Welder", department="Ops", location="Pune", description="Weld.")
        JobApplication.objects.create(
            job=job, full_name="Vikram", email="v@x.in", phone="99", resume="resumes/cv.pdf"
        )
        ContactMessage.objects.create(name="Asha", email="asha@x.in", message="Please call me back.")
        ContactMessage.objects.create(name="Ravi", email="ravi@x.in", message="Already handled this.", is_read=True)

    def test_admin_badges(self):
        self.client.force_authenticate(self.admin)
        res = self.client.get("/api/backoffice/badges/admin/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(
            res.data,
            {"orders": 1, "fabrication": 1, "recycling": 1, "applications": 1, "messages": 1},
        )

    def test_customer_badges(self):
        self.client.force_authenticate(self.buyer)
        res = self.client.get("/api/backoffice/badges/me/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data, {"orders": 1, "fabrication": 1, "recycling": 0, "total": 2})

    def test_buyer_cannot_read_admin_badges(self):
        self.client.force_authenticate(self.buyer)
        self.assertEqual(self.client.get("/api/backoffice/badges/admin/").status_code, 403)
