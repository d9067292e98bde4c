# pricing/admin.py

from django.contrib import admin

from pricing.models import PricingIndexEntry


@admin.register(PricingIndexEntry)
class PricingIndexEntryAdmin(admin.ModelAdmin):
    list_display = ("product_name", "price", "change_percent", "date")
    list_filter = ("date",)
    search_fields = ("product_name",)
