# service_requests/admin.py

from django.contrib import admin

from service_requests.models import FabricationRequest, RecyclingRequest


@admin.register(FabricationRequest)
class FabricationRequestAdmin(admin.ModelAdmin):
    list_display = ("full_name", "material", "quantity", "status", "quote_amount", "admin_is_read", "created_at")
    list_filter = ("status", "admin_is_read")
    search_fields = ("full_name", "email", "company_name", "material")


@admin.register(RecyclingRequest)
class RecyclingRequestAdmin(admin.ModelAdmin):
    list_display = ("company_name", "contact_person", "metal_type", "estimated_quantity", "status", "created_at")
    list_filter = ("status", "admin_is_read")
    search_fields = ("company_name", "contact_person", "email")
