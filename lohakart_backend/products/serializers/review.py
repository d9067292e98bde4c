# products/serializers/review.py

from rest_framework import serializers

from products.models import Review


class ReviewSerializer(serializers.ModelSerializer):
    user_name = serializers.SerializerMethodField()

    class Meta:
        model = Review
        fields = ["id", "product", "user", "user_name", "rating", "comment", "status", "is_read", "created_at"]
        read_only_fields = ["id", "product", "user", "user_name", "status", "is_read", "created_at"]

    def get_user_name(self, obj) -> str:
        profile = getattr(obj.user, "profile", None)
        return (profile.full_name if profile else "") or "Verified buyer"

    def validate_rating(self, value):
        if value < 1 or value > 5:
            raise serializers.ValidationError("Rating must be between 1 and 5")
        return value

    def validate_comment(self, value):
        return (value or "").strip()


class ReviewModerationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Review
        fields = ["status"]
