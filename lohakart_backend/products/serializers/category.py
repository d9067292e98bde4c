# products/serializers/category.py

from rest_framework import serializers

from products.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """
    Category serializer.

    Rules:
    - slug is derived from name when omitted
    - product_count is only present on annotated querysets
    """

    name = serializers.CharField(required=True, allow_blank=False, max_length=120)
    product_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Category
        fields = ["id", "name", "slug", "description", "image_url", "product_count", "created_at"]
        read_only_fields = ["id", "product_count", "created_at"]
        extra_kwargs = {"slug": {"required": False}}

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v
