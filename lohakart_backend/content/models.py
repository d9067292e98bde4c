# content/models.py

import uuid

from django.db import models
from django.utils import timezone

from backend.slugs import unique_slug


class NewsArticle(models.Model):
    """
    News / blog article.

    Rules:
    - slug is derived from the title when blank, de-duplicated with -2, -3 ...
    - published_at is stamped the first time the article is Published and
      cleared when it goes back to Draft.
    """

    CATEGORY_NEWS = "News"
    CATEGORY_BLOGS = "Blogs"
    CATEGORY_MARKET = "Market Updates"
    CATEGORY_SUSTAINABILITY = "Sustainability"
    CATEGORY_COMPANY = "Company Announcements"

    CATEGORY_CHOICES = [
        (CATEGORY_NEWS, "News"),
        (CATEGORY_BLOGS, "Blogs"),
        (CATEGORY_MARKET, "Market Updates"),
        (CATEGORY_SUSTAINABILITY, "Sustainability"),
        (CATEGORY_COMPANY, "Company Announcements"),
    ]

    STATUS_DRAFT = "Draft"
    STATUS_PUBLISHED = "Published"

    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_PUBLISHED, "Published"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=280, unique=True, blank=True)
    excerpt = models.TextField(blank=True, default="")
    content = models.TextField()
    category = models.CharField(max_length=40, choices=CATEGORY_CHOICES, default=CATEGORY_NEWS)
    image_url = models.CharField(max_length=500, blank=True, default="")
    author = models.CharField(max_length=150, default="LohaKart Team")

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    is_featured = models.BooleanField(default=False)
    published_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-published_at", "-created_at"]
        indexes = [
            models.Index(fields=["status", "published_at"], name="content_new_status_7d2f4a_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(NewsArticle, self.title, exclude_pk=self.pk)

        if self.status == self.STATUS_PUBLISHED and self.published_at is None:
            self.published_at = timezone.now()
        elif self.status == self.STATUS_DRAFT:
            self.published_at = None

        super().save(*args, **kwargs)

    @property
    def is_published(self) -> bool:
        return self.status == self.STATUS_PUBLISHED

    def __str__(self):
        return f"{self.title} [{self.status}]"


class ContactMessage(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=255)
    message = models.TextField(max_length=1000)

    is_read = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} <{self.email}>"
