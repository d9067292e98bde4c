# careers/admin.py

from django.contrib import admin

from careers.models import Job, JobApplication


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ("title", "department", "location", "employment_type", "status", "created_at")
    list_filter = ("status", "employment_type", "department")
    search_fields = ("title",)


@admin.register(JobApplication)
class JobApplicationAdmin(admin.ModelAdmin):
    list_display = ("full_name", "job", "email", "status", "is_read", "created_at")
    list_filter = ("status", "is_read")
    search_fields = ("full_name", "email")
