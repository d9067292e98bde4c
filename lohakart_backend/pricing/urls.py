# pricing/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from pricing.views import PricingIndexViewSet

router = SimpleRouter()
router.register(r"", PricingIndexViewSet, basename="pricing")

urlpatterns = [
    path("", include(router.urls)),
]
