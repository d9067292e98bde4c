# orders/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from orders.views import AdminOrderViewSet, CheckoutView, MyOrderViewSet

router = DefaultRouter()
router.register(r"my", MyOrderViewSet, basename="my-orders")
router.register(r"admin", AdminOrderViewSet, basename="admin-orders")

urlpatterns = [
    path("checkout/", CheckoutView.as_view(), name="checkout"),
    path("", include(router.urls)),
]
