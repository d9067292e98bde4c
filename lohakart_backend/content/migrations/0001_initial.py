"""
PATH: content/migrations/0001_initial.py

MIGRATION: CREATE NewsArticle + ContactMessage
"""

from __future__ import annotations

import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="NewsArticle",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("slug", models.SlugField(blank=True, max_length=280, unique=True)),
                ("excerpt", models.TextField(blank=True, default="")),
                ("content", models.TextField()),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("News", "News"),
                            ("Blogs", "Blogs"),
                            ("Market Updates", "Market Updates"),
                            ("Sustainability", "Sustainability"),
                            ("Company Announcements", "Company Announcements"),
                        ],
                        default="News",
                        max_length=40,
                    ),
                ),
                ("image_url", models.CharField(blank=True, default="", max_length=500)),
                ("author", models.CharField(default="LohaKart Team", max_length=150)),
                (
                    "status",
                    models.CharField(
                        choices=[("Draft", "Draft"), ("Published", "Published")],
                        default="Draft",
                        max_length=20,
                    ),
                ),
                ("is_featured", models.BooleanField(default=False)),
                ("published_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-published_at", "-created_at"],
                "indexes": [
                    models.Index(fields=["status", "published_at"], name="content_new_status_7d2f4a_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ContactMessage",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("email", models.EmailField(max_length=255)),
                ("message", models.TextField(max_length=1000)),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
