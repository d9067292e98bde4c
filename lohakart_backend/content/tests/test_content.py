# content/tests/test_content.py

import shutil
import tempfile

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from content.models import ContactMessage, NewsArticle

User = get_user_model()


class NewsArticleModelTests(TestCase):
    """
    GUARANTEES:
    - Blank slugs are derived from the title and de-duplicated
    - published_at is stamped on first publish and cleared on Draft
    """

    def test_slug_from_title(self):
        a = NewsArticle.objects.create(title="Steel Prices Rise 5%!", content="body")
        self.assertEqual(a.slug, "steel-prices-rise-5")

    def test_duplicate_titles_get_suffix(self):
        NewsArticle.objects.create(title="Market Wrap", content="one")
        b = NewsArticle.objects.create(title="Market Wrap", content="two")
        c = NewsArticle.objects.create(title="Market Wrap", content="three")
        self.assertEqual(b.slug, "market-wrap-2")
        self.assertEqual(c.slug, "market-wrap-3")

    def test_published_at_lifecycle(self):
        a = NewsArticle.objects.create(title="Draft piece", content="body")
        self.assertIsNone(a.published_at)

        a.status = NewsArticle.STATUS_PUBLISHED
        a.save()
        first = a.published_at
        self.assertIsNotNone(first)

        a.title = "Draft piece (edited)"
        a.save()
        self.assertEqual(a.published_at, first)

        a.status = NewsArticle.STATUS_DRAFT
        a.save()
        self.assertIsNone(a.published_at)


class PublicNewsTests(TestCase):
    """
    GUARANTEES:
    - Only published articles are listed or retrievable
    - Detail is looked up by slug and carries up to 3 related articles
    """

    def setUp(self):
        self.client = APIClient()
        self.main = NewsArticle.objects.create(
            title="Scrap Recycling Hits Record",
            content="body",
            category=NewsArticle.CATEGORY_SUSTAINABILITY,
            status=NewsArticle.STATUS_PUBLISHED,
            is_featured=True,
        )
        for i in range(4):
            NewsArticle.objects.create(
                title=f"Green Steel {i}",
                content="body",
                category=NewsArticle.CATEGORY_SUSTAINABILITY,
                status=NewsArticle.STATUS_PUBLISHED,
            )
        NewsArticle.objects.create(
            title="Coil Demand", content="body",
            category=NewsArticle.CATEGORY_MARKET, status=NewsArticle.STATUS_PUBLISHED,
        )
        self.draft = NewsArticle.objects.create(title="Unreleased", content="body")

    def test_list_hides_drafts(self):
        res = self.client.get("/api/content/news/")
        self.assertEqual(res.status_code, 200)
        titles = [a["title"] for a in res.data["results"]]
        self.assertEqual(len(titles), 6)
        self.assertNotIn("Unreleased", titles)

    def test_filters(self):
        res = self.client.get("/api/content/news/", {"category": "Market Updates"})
        self.assertEqual([a["title"] for a in res.data["results"]], ["Coil Demand"])

        res = self.client.get("/api/content/news/", {"featured": "true"})
        self.assertEqual([a["slug"] for a in res.data["results"]], [self.main.slug])

    def test_detail_by_slug_with_related(self):
        res = self.client.get(f"/api/content/news/{self.main.slug}/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["title"], "Scrap Recycling Hits Record")
        self.assertEqual(len(res.data["related"]), 3)
        for item in res.data["related"]:
            self.assertEqual(item["category"], NewsArticle.CATEGORY_SUSTAINABILITY)
            self.assertNotEqual(item["slug"], self.main.slug)

    def test_draft_detail_is_404(self):
        self.assertEqual(self.client.get(f"/api/content/news/{self.draft.slug}/").status_code, 404)


class AdminNewsTests(TestCase):
    """
    GUARANTEES:
    - Content editors see drafts, create and toggle featured
    - Image upload lands in the news-images bucket
    - Buyers are refused
    """

    def setUp(self):
        self.media = tempfile.mkdtemp()
        self.override = override_settings(MEDIA_ROOT=self.media)
        self.override.enable()

        self.client = APIClient()
        self.admin = User.objects.create_user(email="editor@lohakart.in", password="x", role="admin")
        self.buyer = User.objects.create_user(email="buyer@lohakart.in", password="x")

    def tearDown(self):
        self.override.disable()
        shutil.rmtree(self.media, ignore_errors=True)

    def test_create_and_publish(self):
        self.client.force_authenticate(self.admin)
        res = self.client.post(
            "/api/content/admin/news/",
            {"title": "New Yard in Pune", "content": "We opened a yard.", "status": "Published"},
            format="json",
        )
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["slug"], "new-yard-in-pune")
        self.assertIsNotNone(res.data["published_at"])

    def test_admin_list_includes_drafts(self):
        NewsArticle.objects.create(title="Hidden", content="body")
        self.client.force_authenticate(self.admin)
        res = self.client.get("/api/content/admin/news/")
        self.assertEqual(res.data["count"], 1)

    def test_toggle_featured(self):
        a = NewsArticle.objects.create(title="Toggle me", content="body")
        self.client.force_authenticate(self.admin)

        res = self.client.post(f"/api/content/admin/news/{a.id}/toggle-featured/")
        self.assertEqual(res.status_code, 200)
        self.assertTrue(res.data["is_featured"])

        res = self.client.post(f"/api/content/admin/news/{a.id}/toggle-featured/")
        self.assertFalse(res.data["is_featured"])

    def test_upload_image(self):
        self.client.force_authenticate(self.admin)
        image = SimpleUploadedFile("cover.png", b"\x89PNG\r\n", content_type="image/png")
        res = self.client.post("/api/content/admin/news/upload-image/", {"image": image}, format="multipart")
        self.assertEqual(res.status_code, 201)
        self.assertIn("news-images/", res.data["url"])
        self.assertTrue(res.data["url"].endswith(".png"))

    def test_upload_rejects_wrong_type(self):
        self.client.force_authenticate(self.admin)
        doc = SimpleUploadedFile("cover.exe", b"MZ", content_type="application/octet-stream")
        res = self.client.post("/api/content/admin/news/upload-image/", {"image": doc}, format="multipart")
        self.assertEqual(res.status_code, 400)

    def test_buyer_forbidden(self):
        self.client.force_authenticate(self.buyer)
        self.assertEqual(self.client.get("/api/content/admin/news/").status_code, 403)


class ContactMessageTests(TestCase):
    """
    GUARANTEES:
    - Anyone can submit a valid, trimmed message
    - Length rules are enforced after trimming
    - Listing is admin only and marks the served page read
    """

    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(email="admin@lohakart.in", password="x", role="admin")

    def test_submit(self):
        res = self.client.post(
            "/api/content/contact/",
            {"name": "  Ravi Kumar  ", "email": "ravi@steelco.in", "message": "Need a quote on HR coil."},
            format="json",
        )
        self.assertEqual(res.status_code, 201)
        msg = ContactMessage.objects.get()
        self.assertEqual(msg.name, "Ravi Kumar")
        self.assertFalse(msg.is_read)

    def test_validation(self):
        res = self.client.post(
            "/api/content/contact/",
            {"name": " R ", "email": "not-an-email", "message": "   short   "},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("name", res.data)
        self.assertIn("email", res.data)
        self.assertIn("message", res.data)

    def test_anonymous_cannot_list(self):
        self.assertEqual(self.client.get("/api/content/contact/").status_code, 401)

    def test_admin_list_marks_read(self):
        ContactMessage.objects.create(name="Asha", email="asha@x.in", message="Hello there, team.")
        self.client.force_authenticate(self.admin)

        res = self.client.get("/api/content/contact/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 1)
        self.assertFalse(ContactMessage.objects.filter(is_read=False).exists())

    def test_only_served_page_is_marked_read(self):
        ContactMessage.objects.bulk_create(
            [ContactMessage(name=f"Buyer {i}", email=f"b{i}@x.in", message="Please send a quote.") for i in range(25)]
        )
        self.client.force_authenticate(self.admin)

        res = self.client.get("/api/content/contact/")
        self.assertEqual(len(res.data["results"]), 20)
        self.assertEqual(ContactMessage.objects.filter(is_read=False).count(), 5)

        self.client.get("/api/content/contact/", {"page": 2})
        self.assertFalse(ContactMessage.objects.filter(is_read=False).exists())

    def test_admin_delete(self):
        msg = ContactMessage.objects.create(name="Asha", email="asha@x.in", message="Hello there, team.")
        self.client.force_authenticate(self.admin)
        res = self.client.delete(f"/api/content/contact/{msg.id}/")
        self.assertEqual(res.status_code, 204)
        self.assertFalse(ContactMessage.objects.exists())
