"""
PATH: service_requests/migrations/0001_initial.py

MIGRATION: CREATE FabricationRequest + RecyclingRequest
"""

from __future__ import annotations

import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import backend.uploads


def _shared_fields():
    return [
        ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ("email", models.EmailField(max_length=255)),
        ("phone", models.CharField(max_length=30)),
        ("company_name", models.CharField(blank=True, default="", max_length=200)),
        ("description", models.TextField()),
        ("admin_response", models.TextField(blank=True, default="")),
        ("admin_is_read", models.BooleanField(default=False)),
        ("user_is_read", models.BooleanField(default=True)),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="FabricationRequest",
            fields=_shared_fields()
            + [
                ("full_name", models.CharField(max_length=150)),
                ("material", models.CharField(max_length=150)),
                ("quantity", models.CharField(max_length=100)),
                (
                    "drawing",
                    models.FileField(blank=True, max_length=255, upload_to=backend.uploads.drawing_upload_to),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("quoted", "Quoted"),
                            ("replied", "Replied"),
                            ("rejected", "Rejected"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("quote_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="fabrication_requests",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="RecyclingRequest",
            fields=_shared_fields()
            + [
                ("contact_person", models.CharField(max_length=150)),
                ("metal_type", models.CharField(max_length=100)),
                ("estimated_quantity", models.CharField(max_length=100)),
                ("location", models.CharField(max_length=200)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("approved", "Approved"),
                            ("completed", "Completed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="recycling_requests",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
    ]
