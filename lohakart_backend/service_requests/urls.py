# service_requests/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from service_requests.views import (
    AdminFabricationRequestViewSet,
    AdminRecyclingRequestViewSet,
    FabricationRequestViewSet,
    RecyclingRequestViewSet,
)

router = DefaultRouter()
router.register(r"fabrication", FabricationRequestViewSet, basename="fabrication")
router.register(r"recycling", RecyclingRequestViewSet, basename="recycling")
router.register(r"admin/fabrication", AdminFabricationRequestViewSet, basename="admin-fabrication")
router.register(r"admin/recycling", AdminRecyclingRequestViewSet, basename="admin-recycling")

urlpatterns = [
    path("", include(router.urls)),
]
