# careers/views.py

"""
CAREERS

Public:
- GET  /api/careers/jobs/              open jobs (?department=)
- GET  /api/careers/jobs/<id>/
- POST /api/careers/jobs/<id>/apply/   multipart, resume in bucket "resumes"

Back office (careers.manage):
- job CRUD (closed jobs included)
- /api/careers/applications/           list / retrieve (marks read) / status / delete
"""

import logging

from django.db.models import Count
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from backend.throttles import PublicWriteThrottle
from careers.models import Job, JobApplication
from careers.serializers import (
    ApplicationStatusSerializer,
    JobApplicationSerializer,
    JobSerializer,
)
from permissions.roles import CAP_CAREERS_MANAGE, HasCapability, is_admin

logger = logging.getLogger(__name__)


class JobViewSet(viewsets.ModelViewSet):
    serializer_class = JobSerializer
    required_capability = CAP_CAREERS_MANAGE
    filterset_fields = ["department", "employment_type", "status"]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get_queryset(self):
        qs = Job.objects.all()
        if is_admin(self.request.user) and self.action != "apply":
            return qs.annotate(application_count=Count("applications")).order_by("-created_at")
        return qs.filter(status=Job.STATUS_OPEN).order_by("-created_at")

    def get_permissions(self):
        if self.action in {"list", "retrieve", "apply"}:
            return [AllowAny()]
        return [IsAuthenticated(), HasCapability()]

    def get_throttles(self):
        if self.action == "apply":
            return [PublicWriteThrottle()]
        return super().get_throttles()

    @extend_schema(
        tags=["Careers"],
        request={"multipart/form-data": JobApplicationSerializer},
        responses={201: JobApplicationSerializer, 400: OpenApiResponse(description="Validation error")},
    )
    @action(detail=True, methods=["post"], url_path="apply")
    def apply(self, request, pk=None):
        job = self.get_object()

        serializer = JobApplicationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        application = serializer.save(job=job)

        logger.info("Job application received", extra={"job_id": str(job.id), "application_id": str(application.id)})
        return Response(JobApplicationSerializer(application).data, status=status.HTTP_201_CREATED)


class JobApplicationViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = JobApplicationSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_CAREERS_MANAGE
    filterset_fields = ["job", "status", "is_read"]

    def get_queryset(self):
        return JobApplication.objects.select_related("job").order_by("-created_at")

    def retrieve(self, request, *args, **kwargs):
        application = self.get_object()
        if not application.is_read:
            application.is_read = True
            application.save(update_fields=["is_read", "updated_at"])
        return Response(self.get_serializer(application).data)

    @extend_schema(tags=["Careers"], request=ApplicationStatusSerializer, responses={200: JobApplicationSerializer})
    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        application = self.get_object()

        serializer = ApplicationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        application.status = serializer.validated_data["status"]
        application.save(update_fields=["status", "updated_at"])
        return Response(self.get_serializer(application).data)

    @extend_schema(tags=["Careers"], request=None, responses={200: dict})
    @action(detail=False, methods=["post"], url_path="mark-read")
    def mark_read(self, request):
        updated = JobApplication.objects.filter(is_read=False).update(is_read=True)
        return Response({"updated": updated})

    def perform_destroy(self, instance):
        if instance.resume:
            instance.resume.delete(save=False)
        instance.delete()
