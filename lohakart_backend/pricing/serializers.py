# pricing/serializers.py

from rest_framework import serializers

from pricing.models import PricingIndexEntry
from pricing.services.index import derive_change_percent


class PricingIndexEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = PricingIndexEntry
        fields = ["id", "product_name", "price", "change_percent", "date", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]
        extra_kwargs = {
            "change_percent": {"required": False},
            "date": {"required": False},
        }

    def validate_product_name(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("product_name cannot be blank")
        return value

    def validate_price(self, value):
        if value is None or value <= 0:
            raise serializers.ValidationError("Price must be greater than zero")
        return value

    def create(self, validated_data):
        if validated_data.get("change_percent") is None:
            instance = PricingIndexEntry(**validated_data)
            validated_data["change_percent"] = derive_change_percent(
                product_name=instance.product_name,
                price=instance.price,
                date=instance.date,
            )
        return super().create(validated_data)
