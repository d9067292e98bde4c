# content/views.py

"""
CONTENT

News (public):
- GET /api/content/news/                published only, newest first (?category=, ?featured=true)
- GET /api/content/news/<slug>/         article + up to 3 related published articles

News (content.edit):
- /api/content/admin/news/              CRUD by id, toggle-featured, upload-image

Contact:
- POST   /api/content/contact/          public, throttled
- GET    /api/content/contact/          messages.view (listing marks unread as read)
- DELETE /api/content/contact/<id>/     messages.view
"""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from backend.throttles import PublicCatalogThrottle, PublicWriteThrottle
from backend.uploads import IMAGE_EXTENSIONS, store_upload
from content.models import ContactMessage, NewsArticle
from content.serializers import (
    ContactMessageSerializer,
    NewsArticleListSerializer,
    NewsArticleSerializer,
)
from permissions.roles import CAP_CONTENT_EDIT, CAP_MESSAGES_VIEW, HasCapability

logger = logging.getLogger(__name__)

RELATED_LIMIT = 3


# -----------------------------
# Public news
# -----------------------------
class NewsViewSet(viewsets.ReadOnlyModelViewSet):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]
    lookup_field = "slug"

    def get_queryset(self):
        qs = NewsArticle.objects.filter(status=NewsArticle.STATUS_PUBLISHED)

        category = (self.request.query_params.get("category") or "").strip()
        if category and category.lower() != "all":
            qs = qs.filter(category=category)

        featured = (self.request.query_params.get("featured") or "").strip().lower()
        if featured in ("1", "true", "yes"):
            qs = qs.filter(is_featured=True)

        return qs.order_by("-published_at")

    def get_serializer_class(self):
        if self.action == "list":
            return NewsArticleListSerializer
        return NewsArticleSerializer

    @extend_schema(
        tags=["Content"],
        parameters=[
            OpenApiParameter("category", str),
            OpenApiParameter("featured", bool),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(tags=["Content"], responses={200: NewsArticleSerializer})
    def retrieve(self, request, *args, **kwargs):
        article = self.get_object()

        related = (
            NewsArticle.objects.filter(status=NewsArticle.STATUS_PUBLISHED, category=article.category)
            .exclude(pk=article.pk)
            .order_by("-published_at")[:RELATED_LIMIT]
        )

        data = dict(NewsArticleSerializer(article).data)
        data["related"] = NewsArticleListSerializer(related, many=True).data
        return Response(data)


# -----------------------------
# Back-office news
# -----------------------------
class AdminNewsViewSet(viewsets.ModelViewSet):
    serializer_class = NewsArticleSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_CONTENT_EDIT
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    filterset_fields = ["category", "status", "is_featured"]

    def get_queryset(self):
        return NewsArticle.objects.order_by("-created_at")

    def perform_create(self, serializer):
        article = serializer.save()
        logger.info("Article created", extra={"article_id": str(article.id), "status": article.status})

    @extend_schema(tags=["Content"], request=None, responses={200: NewsArticleSerializer})
    @action(detail=True, methods=["post"], url_path="toggle-featured")
    def toggle_featured(self, request, pk=None):
        article = self.get_object()
        article.is_featured = not article.is_featured
        article.save(update_fields=["is_featured", "updated_at"])
        return Response(self.get_serializer(article).data)

    @extend_schema(
        tags=["Content"],
        request={"multipart/form-data": {"type": "object", "properties": {"image": {"type": "string", "format": "binary"}}}},
        responses={201: OpenApiResponse(description="{url}"), 400: OpenApiResponse(description="Missing/invalid file")},
    )
    @action(detail=False, methods=["post"], url_path="upload-image")
    def upload_image(self, request):
        """
        Upload a cover image (bucket: news-images) and return its URL for image_url.
        """
        uploaded = request.FILES.get("image")
        if not uploaded:
            return Response({"detail": "image file is required"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            url = store_upload(uploaded, bucket=settings.BUCKET_NEWS_IMAGES, allowed_extensions=IMAGE_EXTENSIONS)
        except DjangoValidationError as exc:
            return Response({"image": exc.messages}, status=status.HTTP_400_BAD_REQUEST)

        return Response({"url": url}, status=status.HTTP_201_CREATED)


# -----------------------------
# Contact messages
# -----------------------------
class ContactMessageViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = ContactMessageSerializer
    required_capability = CAP_MESSAGES_VIEW
    filterset_fields = ["is_read"]

    def get_queryset(self):
        return ContactMessage.objects.order_by("-created_at", "id")

    def get_permissions(self):
        if self.action == "create":
            return [AllowAny()]
        return [IsAuthenticated(), HasCapability()]

    def get_throttles(self):
        if self.action == "create":
            return [PublicWriteThrottle()]
        return super().get_throttles()

    def perform_create(self, serializer):
        msg = serializer.save()
        logger.info("Contact message received", extra={"message_id": str(msg.id)})

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())

        page = self.paginate_queryset(queryset)
        messages = list(page) if page is not None else list(queryset)
        data = self.get_serializer(messages, many=True).data

        # only the messages actually served count as seen
        unread_ids = [m.id for m in messages if not m.is_read]
        if unread_ids:
            ContactMessage.objects.filter(id__in=unread_ids).update(is_read=True)

        if page is not None:
            return self.get_paginated_response(data)
        return Response(data)
