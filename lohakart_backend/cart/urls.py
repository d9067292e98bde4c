# cart/urls.py

from django.urls import path

from cart.views import CartItemView, CartItemsView, CartView

app_name = "cart"

urlpatterns = [
    path("", CartView.as_view(), name="cart"),
    path("items/", CartItemsView.as_view(), name="cart-items"),
    path("items/<uuid:product_id>/", CartItemView.as_view(), name="cart-item"),
]
