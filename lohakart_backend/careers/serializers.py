# careers/serializers.py

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from backend.uploads import DOCUMENT_EXTENSIONS, validate_upload
from careers.models import Job, JobApplication


class JobSerializer(serializers.ModelSerializer):
    requirements = serializers.ListField(
        child=serializers.CharField(max_length=300), required=False, default=list
    )
    application_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Job
        fields = [
            "id",
            "title",
            "department",
            "location",
            "employment_type",
            "description",
            "requirements",
            "status",
            "application_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "application_count", "created_at", "updated_at"]

    def validate_requirements(self, value):
        return [r.strip() for r in value if r and r.strip()]


class JobApplicationSerializer(serializers.ModelSerializer):
    job_title = serializers.CharField(source="job.title", read_only=True)
    resume_url = serializers.SerializerMethodField()

    class Meta:
        model = JobApplication
        fields = [
            "id",
            "job",
            "job_title",
            "full_name",
            "email",
            "phone",
            "resume",
            "resume_url",
            "cover_letter",
            "status",
            "is_read",
            "created_at",
        ]
        read_only_fields = ["id", "job", "job_title", "resume_url", "status", "is_read", "created_at"]
        extra_kwargs = {"resume": {"write_only": True}}

    def get_resume_url(self, obj) -> str:
        return obj.resume.url if obj.resume else ""

    def validate_resume(self, value):
        try:
            validate_upload(value, allowed_extensions=DOCUMENT_EXTENSIONS)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)
        return value

    def validate_full_name(self, value):
        value = (value or "").strip()
        if len(value) < 2:
            raise serializers.ValidationError("Please enter your full name")
        return value


class ApplicationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=JobApplication.STATUS_CHOICES)
