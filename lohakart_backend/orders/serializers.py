# orders/serializers.py

from rest_framework import serializers

from orders.models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    line_total = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ["id", "product", "product_name", "unit", "price", "quantity", "line_total"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "order_no",
            "status",
            "shipping_address",
            "subtotal_amount",
            "tax_amount",
            "total_amount",
            "user_is_read",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AdminOrderSerializer(OrderSerializer):
    customer_email = serializers.SerializerMethodField()
    customer_name = serializers.SerializerMethodField()

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ["user", "customer_email", "customer_name", "is_read"]
        read_only_fields = fields

    def get_customer_email(self, obj) -> str:
        return obj.user.email if obj.user_id else ""

    def get_customer_name(self, obj) -> str:
        if not obj.user_id:
            return "Deleted account"
        profile = getattr(obj.user, "profile", None)
        return (profile.full_name if profile else "") or obj.user.email


# -----------------------------
# Inputs
# -----------------------------
class CheckoutLineSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1)


class CheckoutSerializer(serializers.Serializer):
    shipping_address = serializers.CharField(allow_blank=True, trim_whitespace=True)
    items = CheckoutLineSerializer(many=True, required=False)


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES)
