# carbon/serializers.py

from rest_framework import serializers

from carbon.services.calculator import (
    METAL_CATEGORIES,
    ROUTE_CHOICES,
    ROUTE_MIXED,
    TRANSPORT_FACTORS,
    UNIT_CHOICES,
    UNIT_TONNE,
)

# largest accepted quantity x distance x truck factor is ~1e15 t, plus 6 places
RESULT_DIGITS = 30


class CarbonCalculationSerializer(serializers.Serializer):
    metal_category = serializers.ChoiceField(choices=METAL_CATEGORIES, default=METAL_CATEGORIES[0])
    production_route = serializers.ChoiceField(choices=ROUTE_CHOICES)
    recycled_percentage = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=0, max_value=100, required=False, allow_null=True
    )
    quantity = serializers.DecimalField(max_digits=14, decimal_places=3, min_value=0)
    unit = serializers.ChoiceField(choices=UNIT_CHOICES, default=UNIT_TONNE)
    distance_km = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, default=0)
    transport_mode = serializers.ChoiceField(choices=list(TRANSPORT_FACTORS), default="truck")

    def validate(self, attrs):
        if attrs["production_route"] == ROUTE_MIXED and attrs.get("recycled_percentage") is None:
            raise serializers.ValidationError(
                {"recycled_percentage": "Required for the mixed production route."}
            )
        return attrs


class CarbonResultSerializer(serializers.Serializer):
    metal_category = serializers.CharField()
    production_route = serializers.CharField()
    quantity_tonnes = serializers.DecimalField(max_digits=RESULT_DIGITS, decimal_places=6)
    factor = serializers.DecimalField(max_digits=RESULT_DIGITS, decimal_places=6)
    production = serializers.DecimalField(max_digits=RESULT_DIGITS, decimal_places=6)
    transport = serializers.DecimalField(max_digits=RESULT_DIGITS, decimal_places=6)
    total = serializers.DecimalField(max_digits=RESULT_DIGITS, decimal_places=6)
    per_tonne = serializers.DecimalField(max_digits=RESULT_DIGITS, decimal_places=6)
    virgin_baseline = serializers.DecimalField(max_digits=RESULT_DIGITS, decimal_places=6)
    savings = serializers.DecimalField(max_digits=RESULT_DIGITS, decimal_places=6)
    efficiency_percent = serializers.DecimalField(max_digits=12, decimal_places=2)
