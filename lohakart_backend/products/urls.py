# products/urls.py

"""
PRODUCTS URLS

Mounted under /api/catalog/:
    categories/
    products/                       (AllowAny read)
    products/<id>/reviews/          (GET public, POST buyers)
    products/<id>/upload-image/     (admin)
    reviews/                        (admin moderation)
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from products.views import CategoryViewSet, ProductViewSet, ReviewModerationViewSet

router = DefaultRouter()

router.register(r"categories", CategoryViewSet, basename="categories")
router.register(r"products", ProductViewSet, basename="products")
router.register(r"reviews", ReviewModerationViewSet, basename="reviews")

urlpatterns = [
    path("", include(router.urls)),
]
