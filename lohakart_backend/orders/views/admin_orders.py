# orders/views/admin_orders.py

"""
ADMIN ORDERS

- list / retrieve / delete every order (with customer email + name)
- PATCH <id>/status/ : change status; flags the order unread for the customer
- POST mark-read/    : admin has seen all orders
"""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from orders.models import Order
from orders.serializers import AdminOrderSerializer, OrderStatusSerializer
from permissions.roles import CAP_ORDERS_MANAGE, HasCapability

logger = logging.getLogger(__name__)


class AdminOrderViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = AdminOrderSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_ORDERS_MANAGE
    filterset_fields = ["status", "is_read"]
    ordering_fields = ["created_at", "total_amount"]

    def get_queryset(self):
        return (
            Order.objects.select_related("user__profile")
            .prefetch_related("items")
            .order_by("-created_at")
        )

    @extend_schema(tags=["Admin"], request=OrderStatusSerializer, responses={200: AdminOrderSerializer})
    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        order = self.get_object()

        serializer = OrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        previous = order.status
        order.status = serializer.validated_data["status"]
        order.user_is_read = False
        order.save(update_fields=["status", "user_is_read", "updated_at"])

        logger.info(
            "Order status changed",
            extra={"order_id": str(order.id), "from": previous, "to": order.status},
        )
        return Response(self.get_serializer(order).data)

    @extend_schema(tags=["Admin"], request=None, responses={200: dict})
    @action(detail=False, methods=["post"], url_path="mark-read")
    def mark_read(self, request):
        updated = Order.objects.filter(is_read=False).update(is_read=True)
        return Response({"updated": updated})

    def perform_destroy(self, instance):
        logger.warning("Order deleted", extra={"order_id": str(instance.id), "order_no": instance.order_no})
        instance.delete()
