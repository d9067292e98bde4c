# backoffice/urls.py

from django.urls import path

from backoffice.views import AdminBadgesView, AnalyticsView, CustomerBadgesView, DashboardView

urlpatterns = [
    path("dashboard/", DashboardView.as_view(), name="backoffice-dashboard"),
    path("analytics/", AnalyticsView.as_view(), name="backoffice-analytics"),
    path("badges/admin/", AdminBadgesView.as_view(), name="backoffice-badges-admin"),
    path("badges/me/", CustomerBadgesView.as_view(), name="backoffice-badges-me"),
]
