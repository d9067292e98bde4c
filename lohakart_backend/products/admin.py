# products/admin.py

from django.contrib import admin

from products.models import Category, Product, Review


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "created_at")
    search_fields = ("name",)
    prepopulated_fields = {"slug": ("name",)}


class ReviewInline(admin.TabularInline):
    model = Review
    extra = 0
    fields = ("user", "rating", "comment", "status", "is_read")
    readonly_fields = ("user", "rating", "comment")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "sku", "category", "metal_type", "price", "unit", "stock_qty", "featured", "active")
    list_filter = ("active", "featured", "category", "metal_type")
    search_fields = ("name", "sku", "grade")
    readonly_fields = ("created_at", "updated_at")
    inlines = [ReviewInline]


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("product", "user", "rating", "status", "is_read", "created_at")
    list_filter = ("status", "is_read", "rating")
