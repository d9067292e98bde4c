# careers/models.py

import uuid

from django.core.exceptions import ValidationError
from django.db import models

from backend.uploads import resume_upload_to


class Job(models.Model):
    TYPE_FULL_TIME = "Full-time"
    TYPE_PART_TIME = "Part-time"
    TYPE_CONTRACT = "Contract"
    TYPE_INTERNSHIP = "Internship"

    TYPE_CHOICES = [
        (TYPE_FULL_TIME, "Full-time"),
        (TYPE_PART_TIME, "Part-time"),
        (TYPE_CONTRACT, "Contract"),
        (TYPE_INTERNSHIP, "Internship"),
    ]

    STATUS_OPEN = "open"
    STATUS_CLOSED = "closed"

    STATUS_CHOICES = [
        (STATUS_OPEN, "Open"),
        (STATUS_CLOSED, "Closed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    title = models.CharField(max_length=200)
    department = models.CharField(max_length=100)
    location = models.CharField(max_length=150)
    employment_type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=TYPE_FULL_TIME)
    description = models.TextField()
    requirements = models.JSONField(default=list, blank=True)

    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_OPEN)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def clean(self):
        reqs = self.requirements or []
        if not isinstance(reqs, list) or not all(isinstance(r, str) for r in reqs):
            raise ValidationError({"requirements": "requirements must be a list of strings"})

    def __str__(self):
        return f"{self.title} ({self.status})"


class JobApplication(models.Model):
    STATUS_PENDING = "pending"
    STATUS_REVIEWED = "reviewed"
    STATUS_ACCEPTED = "accepted"
    STATUS_REJECTED = "rejected"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_REVIEWED, "Reviewed"),
        (STATUS_ACCEPTED, "Accepted"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    job = models.ForeignKey(Job, on_delete=models.CASCADE, related_name="applications")

    full_name = models.CharField(max_length=150)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=30)
    resume = models.FileField(upload_to=resume_upload_to, max_length=255)
    cover_letter = models.TextField(blank=True, default="")

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    is_read = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.full_name} -> {self.job_id}"
