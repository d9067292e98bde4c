# service_requests/views.py

"""
FABRICATION + RECYCLING REQUESTS

Customer (services.request):
- POST /api/services/<kind>/                submit (fabrication: optional drawing upload)
- GET  /api/services/<kind>/                own requests
- GET  /api/services/<kind>/unread-count/
- POST /api/services/<kind>/mark-read/      user_is_read = True

Back office (requests.manage):
- GET    /api/services/admin/<kind>/        all requests
- GET    /api/services/admin/<kind>/<id>/   marks admin_is_read
- POST   /api/services/admin/<kind>/<id>/respond/
- DELETE /api/services/admin/<kind>/<id>/
- POST   /api/services/admin/<kind>/mark-read/
"""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import CAP_REQUESTS_MANAGE, CAP_SERVICES_REQUEST, HasCapability
from service_requests.models import FabricationRequest, RecyclingRequest
from service_requests.serializers import (
    FabricationRequestSerializer,
    FabricationResponseSerializer,
    RecyclingRequestSerializer,
    RecyclingResponseSerializer,
)

logger = logging.getLogger(__name__)


# -----------------------------
# Customer side
# -----------------------------
class CustomerRequestViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_SERVICES_REQUEST
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    model = None

    def get_queryset(self):
        return self.model.objects.filter(user=self.request.user).order_by("-created_at")

    def perform_create(self, serializer):
        obj = serializer.save(user=self.request.user, admin_is_read=False, user_is_read=True)
        logger.info(
            "Service request submitted",
            extra={"kind": self.model.__name__, "request_id": str(obj.id), "user_id": str(self.request.user.id)},
        )

    @extend_schema(responses={200: dict})
    @action(detail=False, methods=["get"], url_path="unread-count")
    def unread_count(self, request):
        return Response({"unread": self.get_queryset().filter(user_is_read=False).count()})

    @extend_schema(request=None, responses={200: dict})
    @action(detail=False, methods=["post"], url_path="mark-read")
    def mark_read(self, request):
        updated = self.get_queryset().filter(user_is_read=False).update(user_is_read=True)
        return Response({"updated": updated})


class FabricationRequestViewSet(CustomerRequestViewSet):
    model = FabricationRequest
    serializer_class = FabricationRequestSerializer


class RecyclingRequestViewSet(CustomerRequestViewSet):
    model = RecyclingRequest
    serializer_class = RecyclingRequestSerializer


# -----------------------------
# Back office
# -----------------------------
class AdminRequestViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_REQUESTS_MANAGE
    filterset_fields = ["status", "admin_is_read"]
    model = None
    response_serializer_class = None

    def get_queryset(self):
        return self.model.objects.select_related("user").order_by("-created_at")

    def retrieve(self, request, *args, **kwargs):
        obj = self.get_object()
        if not obj.admin_is_read:
            obj.admin_is_read = True
            obj.save(update_fields=["admin_is_read", "updated_at"])
        return Response(self.get_serializer(obj).data)

    @extend_schema(description="Body: status + admin_response (+ quote_amount for fabrication)")
    @action(detail=True, methods=["post"], url_path="respond")
    def respond(self, request, pk=None):
        obj = self.get_object()

        serializer = self.response_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        update_fields = ["status", "admin_response", "admin_is_read", "user_is_read", "updated_at"]
        for field, value in serializer.validated_data.items():
            setattr(obj, field, value)
            if field not in update_fields:
                update_fields.append(field)

        obj.admin_is_read = True
        obj.user_is_read = False
        obj.save(update_fields=update_fields)

        logger.info(
            "Service request answered",
            extra={"kind": self.model.__name__, "request_id": str(obj.id), "status": obj.status},
        )
        return Response(self.get_serializer(obj).data)

    @extend_schema(request=None, responses={200: dict})
    @action(detail=False, methods=["post"], url_path="mark-read")
    def mark_read(self, request):
        updated = self.model.objects.filter(admin_is_read=False).update(admin_is_read=True)
        return Response({"updated": updated})


class AdminFabricationRequestViewSet(AdminRequestViewSet):
    model = FabricationRequest
    serializer_class = FabricationRequestSerializer
    response_serializer_class = FabricationResponseSerializer

    def perform_destroy(self, instance):
        if instance.drawing:
            instance.drawing.delete(save=False)
        instance.delete()


class AdminRecyclingRequestViewSet(AdminRequestViewSet):
    model = RecyclingRequest
    serializer_class = RecyclingRequestSerializer
    response_serializer_class = RecyclingResponseSerializer
