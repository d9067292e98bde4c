# orders/views/checkout.py

"""
CHECKOUT

POST /api/orders/checkout/
Body:
- shipping_address (required)
- items [{product_id, quantity}] (optional; defaults to the session cart)

On success the session cart is cleared and the created order is returned.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from cart.services.cart_store import CartStore
from orders.serializers import CheckoutSerializer, OrderSerializer
from orders.services.checkout import place_order
from orders.services.exceptions import CheckoutError
from permissions.roles import CAP_SHOP_CHECKOUT, HasCapability


class CheckoutView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_SHOP_CHECKOUT
    serializer_class = CheckoutSerializer

    @extend_schema(
        tags=["Orders"],
        request=CheckoutSerializer,
        responses={
            201: OrderSerializer,
            400: OpenApiResponse(description="Empty cart, invalid line or missing address"),
        },
    )
    def post(self, request):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = CartStore(request.session)

        if "items" in serializer.validated_data:
            lines = serializer.validated_data["items"]
        else:
            lines = [{"product_id": line["id"], "quantity": line["quantity"]} for line in cart.items]

        try:
            order = place_order(
                user=request.user,
                shipping_address=serializer.validated_data["shipping_address"],
                lines=lines,
            )
        except CheckoutError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        cart.clear()

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)
