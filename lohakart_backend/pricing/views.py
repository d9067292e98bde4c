# pricing/views.py

"""
PRICING INDEX

GET  /api/pricing/          public, ordered by product name (pricing page)
GET  /api/pricing/latest/   public, newest price per product (ticker)
GET  /api/pricing/admin/    back office, newest date first
POST/PUT/PATCH/DELETE       back office (pricing.edit)
"""

from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from backend.throttles import PublicCatalogThrottle
from permissions.roles import CAP_PRICING_EDIT, HasCapability
from pricing.models import PricingIndexEntry
from pricing.serializers import PricingIndexEntrySerializer
from pricing.services.index import latest_prices

PUBLIC_ACTIONS = {"list", "retrieve", "latest"}


class PricingIndexViewSet(viewsets.ModelViewSet):
    serializer_class = PricingIndexEntrySerializer
    required_capability = CAP_PRICING_EDIT
    filterset_fields = ["product_name", "date"]

    def get_queryset(self):
        return PricingIndexEntry.objects.order_by("product_name", "-date")

    def get_permissions(self):
        if self.action in PUBLIC_ACTIONS:
            return [AllowAny()]
        return [IsAuthenticated(), HasCapability()]

    def get_throttles(self):
        if self.action in PUBLIC_ACTIONS:
            return [PublicCatalogThrottle()]
        return super().get_throttles()

    @extend_schema(tags=["Pricing"], responses={200: PricingIndexEntrySerializer(many=True)})
    @action(detail=False, methods=["get"], url_path="latest", pagination_class=None)
    def latest(self, request):
        data = self.get_serializer(latest_prices(), many=True).data
        return Response(data)

    @extend_schema(tags=["Pricing"], responses={200: PricingIndexEntrySerializer(many=True)})
    @action(detail=False, methods=["get"], url_path="admin")
    def admin_list(self, request):
        qs = self.filter_queryset(PricingIndexEntry.objects.order_by("-date", "product_name"))
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(self.get_serializer(page, many=True).data)
        return Response(self.get_serializer(qs, many=True).data)
