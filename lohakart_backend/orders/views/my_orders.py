# orders/views/my_orders.py

from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from orders.models import Order
from orders.serializers import OrderSerializer


class MyOrderViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Customer dashboard: own orders only (row-level scoping via queryset).
    """

    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated]
    filterset_fields = ["status"]

    def get_queryset(self):
        return (
            Order.objects.filter(user=self.request.user)
            .prefetch_related("items")
            .order_by("-created_at")
        )

    @extend_schema(tags=["Orders"], responses={200: dict})
    @action(detail=False, methods=["get"], url_path="unread-count")
    def unread_count(self, request):
        count = self.get_queryset().filter(user_is_read=False).count()
        return Response({"unread": count})

    @extend_schema(tags=["Orders"], request=None, responses={200: dict})
    @action(detail=False, methods=["post"], url_path="mark-read")
    def mark_read(self, request):
        updated = self.get_queryset().filter(user_is_read=False).update(user_is_read=True)
        return Response({"updated": updated})
