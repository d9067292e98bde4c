# service_requests/serializers.py

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from backend.uploads import DRAWING_EXTENSIONS, validate_upload
from service_requests.models import FabricationRequest, RecyclingRequest

WORKFLOW_FIELDS = ["status", "admin_response", "admin_is_read", "user_is_read", "created_at", "updated_at"]


class FabricationRequestSerializer(serializers.ModelSerializer):
    drawing_url = serializers.SerializerMethodField()
    customer_email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = FabricationRequest
        fields = [
            "id",
            "customer_email",
            "full_name",
            "email",
            "phone",
            "company_name",
            "material",
            "quantity",
            "description",
            "drawing",
            "drawing_url",
            "quote_amount",
            *WORKFLOW_FIELDS,
        ]
        read_only_fields = ["id", "customer_email", "drawing_url", "quote_amount", *WORKFLOW_FIELDS]
        extra_kwargs = {"drawing": {"write_only": True, "required": False}}

    def get_drawing_url(self, obj) -> str:
        return obj.drawing.url if obj.drawing else ""

    def validate_drawing(self, value):
        if value:
            try:
                validate_upload(value, allowed_extensions=DRAWING_EXTENSIONS)
            except DjangoValidationError as exc:
                raise serializers.ValidationError(exc.messages)
        return value


class RecyclingRequestSerializer(serializers.ModelSerializer):
    customer_email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = RecyclingRequest
        fields = [
            "id",
            "customer_email",
            "company_name",
            "contact_person",
            "email",
            "phone",
            "metal_type",
            "estimated_quantity",
            "location",
            "description",
            *WORKFLOW_FIELDS,
        ]
        read_only_fields = ["id", "customer_email", *WORKFLOW_FIELDS]


# -----------------------------
# Admin responses
# -----------------------------
class FabricationResponseSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=FabricationRequest.STATUS_CHOICES)
    admin_response = serializers.CharField(required=False, allow_blank=True, default="")
    quote_amount = serializers.DecimalField(
        max_digits=14, decimal_places=2, required=False, allow_null=True, min_value=0
    )


class RecyclingResponseSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=RecyclingRequest.STATUS_CHOICES)
    admin_response = serializers.CharField(required=False, allow_blank=True, default="")

    def to_internal_value(self, data):
        # older clients send "Approved" / "Completed" ...
        if hasattr(data, "get") and isinstance(data.get("status"), str):
            data = {**data, "status": data["status"].strip().lower()}
        return super().to_internal_value(data)
