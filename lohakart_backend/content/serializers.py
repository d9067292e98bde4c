# content/serializers.py

from rest_framework import serializers

from backend.slugs import slugify_title
from content.models import ContactMessage, NewsArticle


class NewsArticleSerializer(serializers.ModelSerializer):
    class Meta:
        model = NewsArticle
        fields = [
            "id",
            "title",
            "slug",
            "excerpt",
            "content",
            "category",
            "image_url",
            "author",
            "status",
            "is_featured",
            "published_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "published_at", "created_at", "updated_at"]
        extra_kwargs = {"slug": {"required": False, "validators": []}}

    def validate_slug(self, value):
        value = slugify_title(value)
        if not value:
            return ""

        qs = NewsArticle.objects.filter(slug=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("An article with this slug already exists.")
        return value


class NewsArticleListSerializer(serializers.ModelSerializer):
    class Meta:
        model = NewsArticle
        fields = ["id", "title", "slug", "excerpt", "category", "image_url", "author", "is_featured", "published_at"]
        read_only_fields = fields


class ContactMessageSerializer(serializers.ModelSerializer):
    """
    Trimmed input:
    - name     2..100 chars
    - email    valid, <= 255 chars
    - message 10..1000 chars
    """

    name = serializers.CharField(
        min_length=2,
        max_length=100,
        error_messages={"min_length": "Name must be at least 2 characters"},
    )
    email = serializers.EmailField(max_length=255, error_messages={"invalid": "Invalid email address"})
    message = serializers.CharField(
        min_length=10,
        max_length=1000,
        error_messages={"min_length": "Message must be at least 10 characters"},
    )

    class Meta:
        model = ContactMessage
        fields = ["id", "name", "email", "message", "is_read", "created_at"]
        read_only_fields = ["id", "is_read", "created_at"]
