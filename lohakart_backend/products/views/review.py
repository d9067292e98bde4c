# products/views/review.py

from rest_framework import mixins, viewsets
from rest_framework.permissions import IsAuthenticated

from permissions.roles import CAP_CATALOG_EDIT, HasCapability
from products.models import Review
from products.serializers import ReviewModerationSerializer, ReviewSerializer


class ReviewModerationViewSet(
    mixins.ListModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    Back-office review moderation: list all, hide/publish, delete.
    """

    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_CATALOG_EDIT
    filterset_fields = ["product", "status", "is_read"]

    def get_queryset(self):
        return Review.objects.select_related("product", "user__profile").order_by("-created_at")

    def get_serializer_class(self):
        if self.action in {"update", "partial_update"}:
            return ReviewModerationSerializer
        return ReviewSerializer
