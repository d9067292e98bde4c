# products/filters.py

import uuid

import django_filters
from django.db.models import Q

from products.models import Product


class ProductFilter(django_filters.FilterSet):
    """
    ?category=<uuid|slug>&q=<text>&featured=true&metal_type=steel
    """

    category = django_filters.CharFilter(method="filter_category")
    q = django_filters.CharFilter(method="filter_search")
    featured = django_filters.BooleanFilter()
    metal_type = django_filters.CharFilter(lookup_expr="iexact")

    class Meta:
        model = Product
        fields = ["category", "q", "featured", "metal_type"]

    def filter_category(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        try:
            return queryset.filter(category_id=uuid.UUID(value))
        except ValueError:
            return queryset.filter(category__slug=value)

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value)
            | Q(sku__icontains=value)
            | Q(metal_type__icontains=value)
            | Q(grade__icontains=value)
        )
