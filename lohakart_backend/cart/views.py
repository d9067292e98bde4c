# cart/views.py

"""
SESSION CART

GET    /api/cart/                       -> {items, total, count}
DELETE /api/cart/                       -> clear
POST   /api/cart/items/                 -> add {product_id, quantity}
PATCH  /api/cart/items/<product_id>/    -> set quantity (<= 0 removes)
DELETE /api/cart/items/<product_id>/    -> remove

Rules:
- AllowAny; the cart lives in the caller's session.
- Name / price / unit are read from the ACTIVE product row, never from the client.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from cart.serializers import AddCartItemSerializer, CartSerializer, SetQuantitySerializer
from cart.services.cart_store import CartStore
from products.models import Product


class CartView(APIView):
    permission_classes = [AllowAny]
    serializer_class = CartSerializer

    @extend_schema(tags=["Cart"], responses={200: CartSerializer})
    def get(self, request):
        return Response(CartStore(request.session).snapshot())

    @extend_schema(tags=["Cart"], responses={200: CartSerializer})
    def delete(self, request):
        cart = CartStore(request.session)
        cart.clear()
        return Response(cart.snapshot())


class CartItemsView(APIView):
    permission_classes = [AllowAny]
    serializer_class = AddCartItemSerializer

    @extend_schema(
        tags=["Cart"],
        request=AddCartItemSerializer,
        responses={201: CartSerializer, 404: OpenApiResponse(description="Unknown or inactive product")},
    )
    def post(self, request):
        serializer = AddCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = Product.objects.filter(
            id=serializer.validated_data["product_id"], active=True
        ).first()
        if product is None:
            return Response({"detail": "Product not found."}, status=status.HTTP_404_NOT_FOUND)

        cart = CartStore(request.session)
        cart.add(
            product_id=product.id,
            name=product.name,
            price=product.price,
            unit=product.unit,
            quantity=serializer.validated_data["quantity"],
        )
        return Response(cart.snapshot(), status=status.HTTP_201_CREATED)


class CartItemView(APIView):
    permission_classes = [AllowAny]
    serializer_class = SetQuantitySerializer

    @extend_schema(
        tags=["Cart"],
        request=SetQuantitySerializer,
        responses={200: CartSerializer, 404: OpenApiResponse(description="Not in cart")},
    )
    def patch(self, request, product_id):
        serializer = SetQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = CartStore(request.session)
        try:
            cart.set_quantity(product_id, serializer.validated_data["quantity"])
        except KeyError:
            return Response({"detail": "Item is not in the cart."}, status=status.HTTP_404_NOT_FOUND)

        return Response(cart.snapshot())

    @extend_schema(tags=["Cart"], responses={200: CartSerializer})
    def delete(self, request, product_id):
        cart = CartStore(request.session)
        cart.remove(product_id)
        return Response(cart.snapshot())
