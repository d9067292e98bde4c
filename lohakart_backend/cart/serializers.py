# cart/serializers.py

from rest_framework import serializers


class CartLineSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    quantity = serializers.IntegerField()
    unit = serializers.CharField(allow_blank=True)


class CartSerializer(serializers.Serializer):
    items = CartLineSerializer(many=True)
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    count = serializers.IntegerField()


class AddCartItemSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class SetQuantitySerializer(serializers.Serializer):
    # <= 0 removes the line
    quantity = serializers.IntegerField()
