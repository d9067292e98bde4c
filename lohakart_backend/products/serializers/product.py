# products/serializers/product.py

"""
PRODUCT SERIALIZER

Purpose:
- Canonical Product serializer for both the storefront and the back office.
- in_stock is derived from active + stock_qty (never written by clients).
- unread_reviews_count is filled from the admin queryset annotation.
"""

from rest_framework import serializers

from products.models import Category, Product


class ProductSerializer(serializers.ModelSerializer):
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    category_name = serializers.CharField(source="category.name", read_only=True, default="")

    sku = serializers.CharField(max_length=128, required=False, allow_null=True, allow_blank=True)

    in_stock = serializers.BooleanField(read_only=True)
    unread_reviews_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "slug",
            "sku",
            "category",
            "category_name",
            "description",
            "metal_type",
            "grade",
            "price",
            "unit",
            "stock_qty",
            "min_order",
            "supplier_ref",
            "images",
            "datasheets",
            "specs",
            "featured",
            "active",
            "in_stock",
            "unread_reviews_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "category_name",
            "in_stock",
            "unread_reviews_count",
            "created_at",
            "updated_at",
        ]
        extra_kwargs = {"slug": {"required": False}}

    def validate_sku(self, value):
        value = (value or "").strip().upper() or None
        if value is None:
            return None

        qs = Product.objects.filter(sku=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("A product with this SKU already exists.")
        return value

    def validate_price(self, value):
        if value is None or value < 0:
            raise serializers.ValidationError("Price must be non-negative")
        return value

    def _validate_url_list(self, value, label):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise serializers.ValidationError(f"{label} must be a list of URLs")
        return value

    def validate_images(self, value):
        return self._validate_url_list(value, "images")

    def validate_datasheets(self, value):
        return self._validate_url_list(value, "datasheets")

    def validate_specs(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("specs must be an object")
        return value
