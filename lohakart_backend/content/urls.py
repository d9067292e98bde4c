# content/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from content.views import AdminNewsViewSet, ContactMessageViewSet, NewsViewSet

router = DefaultRouter()
router.register(r"news", NewsViewSet, basename="news")
router.register(r"admin/news", AdminNewsViewSet, basename="admin-news")
router.register(r"contact", ContactMessageViewSet, basename="contact")

urlpatterns = [
    path("", include(router.urls)),
]
