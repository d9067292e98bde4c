# content/admin.py

from django.contrib import admin

from content.models import ContactMessage, NewsArticle


@admin.register(NewsArticle)
class NewsArticleAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "status", "is_featured", "published_at")
    list_filter = ("status", "category", "is_featured")
    search_fields = ("title", "author")
    readonly_fields = ("published_at", "created_at", "updated_at")


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "is_read", "created_at")
    list_filter = ("is_read",)
    search_fields = ("name", "email")
