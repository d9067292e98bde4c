from .admin_orders import AdminOrderViewSet
from .checkout import CheckoutView
from .my_orders import MyOrderViewSet

__all__ = ["AdminOrderViewSet", "CheckoutView", "MyOrderViewSet"]
