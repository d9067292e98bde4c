# careers/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from careers.views import JobApplicationViewSet, JobViewSet

router = DefaultRouter()
router.register(r"jobs", JobViewSet, basename="jobs")
router.register(r"applications", JobApplicationViewSet, basename="applications")

urlpatterns = [
    path("", include(router.urls)),
]
