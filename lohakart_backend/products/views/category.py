# products/views/category.py

from django.db.models import Count, Q
from rest_framework import viewsets
from rest_framework.permissions import AllowAny, IsAuthenticated

from permissions.roles import CAP_CATALOG_EDIT, HasCapability
from products.models import Category
from products.serializers import CategorySerializer


class CategoryViewSet(viewsets.ModelViewSet):
    """
    Category API

    Policy:
    - Anyone can READ categories (storefront navigation)
    - Only catalog editors can CREATE/UPDATE/DELETE
    """

    serializer_class = CategorySerializer
    required_capability = CAP_CATALOG_EDIT
    pagination_class = None

    def get_queryset(self):
        return Category.objects.annotate(
            product_count=Count("products", filter=Q(products__active=True))
        ).order_by("name")

    def get_permissions(self):
        if self.action in {"list", "retrieve"}:
            return [AllowAny()]
        return [IsAuthenticated(), HasCapability()]
