# service_requests/models.py

"""
SERVICE REQUESTS

Two customer-submitted request types sharing one workflow:
- customer submits (admin_is_read=False, user_is_read=True)
- admin opens it (admin_is_read=True)
- admin responds with a status + message (user_is_read=False)
- customer opens their dashboard (user_is_read=True)
"""

import uuid

from django.conf import settings
from django.db import models

from backend.uploads import drawing_upload_to


class ServiceRequestBase(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=30)
    company_name = models.CharField(max_length=200, blank=True, default="")
    description = models.TextField()

    admin_response = models.TextField(blank=True, default="")

    admin_is_read = models.BooleanField(default=False)
    user_is_read = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]


class FabricationRequest(ServiceRequestBase):
    STATUS_PENDING = "pending"
    STATUS_QUOTED = "quoted"
    STATUS_REPLIED = "replied"
    STATUS_REJECTED = "rejected"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_QUOTED, "Quoted"),
        (STATUS_REPLIED, "Replied"),
        (STATUS_REJECTED, "Rejected"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="fabrication_requests",
    )

    full_name = models.CharField(max_length=150)
    material = models.CharField(max_length=150)
    quantity = models.CharField(max_length=100)
    drawing = models.FileField(upload_to=drawing_upload_to, max_length=255, blank=True)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    quote_amount = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)

    class Meta(ServiceRequestBase.Meta):
        pass

    def __str__(self):
        return f"Fabrication: {self.material} x {self.quantity} ({self.status})"


class RecyclingRequest(ServiceRequestBase):
    STATUS_PENDING = "pending"
    STATUS_APPROVED = "approved"
    STATUS_COMPLETED = "completed"
    STATUS_CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_COMPLETED, "Completed"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="recycling_requests",
    )

    contact_person = models.CharField(max_length=150)
    metal_type = models.CharField(max_length=100)
    estimated_quantity = models.CharField(max_length=100)
    location = models.CharField(max_length=200)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)

    class Meta(ServiceRequestBase.Meta):
        pass

    def __str__(self):
        return f"Recycling: {self.metal_type} ~{self.estimated_quantity} ({self.status})"
