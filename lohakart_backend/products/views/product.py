# products/views/product.py

"""
PRODUCT VIEWSET

Purpose:
- Public catalog browsing (AllowAny, active products only)
- Back-office product management (CRUD, image upload, review badges)
- Product reviews (public read, buyer write, admin mark-read)

Key rules:
- Storefront never sees inactive products.
- Admins see inactive rows only when asking for them (?include_inactive=true).
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Count, Q
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from backend.throttles import PublicCatalogThrottle
from backend.uploads import IMAGE_EXTENSIONS, store_upload
from permissions.roles import (
    CAP_CATALOG_EDIT,
    CAP_SHOP_REVIEW,
    HasCapability,
    is_admin,
)
from products.filters import ProductFilter
from products.models import Product, Review
from products.serializers import ProductSerializer, ReviewSerializer

logger = logging.getLogger(__name__)

PUBLIC_ACTIONS = {"list", "retrieve"}


def _truthy(raw) -> bool:
    return (raw or "").strip().lower() in ("1", "true", "yes")


class ProductViewSet(viewsets.ModelViewSet):
    serializer_class = ProductSerializer
    filterset_class = ProductFilter
    ordering_fields = ["price", "name", "created_at"]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get_queryset(self):
        qs = Product.objects.select_related("category")

        admin_view = is_admin(self.request.user)
        if admin_view:
            qs = qs.annotate(
                unread_reviews_count=Count("reviews", filter=Q(reviews__is_read=False))
            )

        # Back-office actions (update, delete, upload ...) always reach inactive rows.
        show_inactive = admin_view and (
            self.action not in PUBLIC_ACTIONS
            or _truthy(self.request.query_params.get("include_inactive"))
        )
        if not show_inactive:
            qs = qs.filter(active=True)

        return qs.order_by("-created_at")

    def get_permissions(self):
        if self.action in PUBLIC_ACTIONS:
            return [AllowAny()]

        if self.action == "reviews":
            if self.request.method == "GET":
                return [AllowAny()]
            self.required_capability = CAP_SHOP_REVIEW
            return [IsAuthenticated(), HasCapability()]

        self.required_capability = CAP_CATALOG_EDIT
        return [IsAuthenticated(), HasCapability()]

    def get_throttles(self):
        if self.action in PUBLIC_ACTIONS:
            return [PublicCatalogThrottle()]
        return super().get_throttles()

    @extend_schema(
        tags=["Catalog"],
        parameters=[
            OpenApiParameter("category", str, description="Category UUID or slug"),
            OpenApiParameter("q", str, description="Search name / sku / metal type / grade"),
            OpenApiParameter("featured", bool),
            OpenApiParameter("metal_type", str),
            OpenApiParameter("include_inactive", bool, description="Admins only"),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def perform_create(self, serializer):
        product = serializer.save()
        logger.info("Product created", extra={"product_id": str(product.id), "user_id": str(self.request.user.id)})

    def perform_destroy(self, instance):
        logger.warning("Product deleted", extra={"product_id": str(instance.id), "user_id": str(self.request.user.id)})
        instance.delete()

    # -----------------------------
    # Image upload (bucket: product-images)
    # -----------------------------
    @extend_schema(
        tags=["Catalog"],
        request={"multipart/form-data": {"type": "object", "properties": {"image": {"type": "string", "format": "binary"}}}},
        responses={200: ProductSerializer, 400: OpenApiResponse(description="Missing/invalid file")},
    )
    @action(detail=True, methods=["post"], url_path="upload-image")
    def upload_image(self, request, pk=None):
        product = self.get_object()

        uploaded = request.FILES.get("image")
        if not uploaded:
            return Response({"detail": "image file is required"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            url = store_upload(uploaded, bucket=settings.BUCKET_PRODUCT_IMAGES, allowed_extensions=IMAGE_EXTENSIONS)
        except DjangoValidationError as exc:
            return Response({"image": exc.messages}, status=status.HTTP_400_BAD_REQUEST)

        product.images = [*(product.images or []), url]
        product.save(update_fields=["images", "updated_at"])

        return Response(self.get_serializer(product).data)

    # -----------------------------
    # Reviews
    # -----------------------------
    @extend_schema(
        tags=["Catalog"],
        request=ReviewSerializer,
        responses={200: ReviewSerializer(many=True), 201: ReviewSerializer},
    )
    @action(detail=True, methods=["get", "post"], url_path="reviews")
    def reviews(self, request, pk=None):
        """
        GET  -> published reviews (public)
        POST -> {rating, comment} (signed-in buyers)
        """
        product = self.get_object()

        if request.method == "GET":
            qs = (
                Review.objects.filter(product=product, status=Review.STATUS_PUBLISHED)
                .select_related("user__profile")
                .order_by("-created_at")
            )
            data = ReviewSerializer(qs, many=True).data
            return Response({"count": len(data), "results": data})

        serializer = ReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = serializer.save(product=product, user=request.user)

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(tags=["Catalog"], request=None, responses={200: OpenApiResponse(description="{updated: n}")})
    @action(detail=True, methods=["post"], url_path="reviews/mark-read")
    def mark_reviews_read(self, request, pk=None):
        product = self.get_object()
        updated = Review.objects.filter(product=product, is_read=False).update(is_read=True)
        return Response({"updated": updated})
