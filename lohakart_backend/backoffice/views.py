# backoffice/views.py

"""
BACK OFFICE

- GET /api/backoffice/dashboard/        KPI cards            (analytics.view)
- GET /api/backoffice/analytics/        status + revenue     (analytics.view)
- GET /api/backoffice/badges/admin/     admin unread counts  (admin role)
- GET /api/backoffice/badges/me/        own unread counts    (signed in)
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from backoffice.services.analytics import dashboard_kpis, order_analytics
from backoffice.services.badges import admin_badges, customer_badges
from permissions.roles import CAP_ANALYTICS_VIEW, HasCapability, IsAdmin


class DashboardView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_ANALYTICS_VIEW

    @extend_schema(tags=["Back office"], responses={200: OpenApiResponse(description="Dashboard KPIs")})
    def get(self, request):
        return Response(dashboard_kpis())


class AnalyticsView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_ANALYTICS_VIEW

    @extend_schema(
        tags=["Back office"],
        responses={200: OpenApiResponse(description="Order counts by status and revenue by month")},
    )
    def get(self, request):
        return Response(order_analytics())


class AdminBadgesView(APIView):
    permission_classes = [IsAuthenticated, IsAdmin]

    @extend_schema(tags=["Back office"], responses={200: OpenApiResponse(description="Admin unread counts")})
    def get(self, request):
        return Response(admin_badges())


class CustomerBadgesView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["Back office"], responses={200: OpenApiResponse(description="Own unread counts")})
    def get(self, request):
        return Response(customer_badges(request.user))
