# orders/admin.py

from django.contrib import admin

from orders.models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("product", "product_name", "unit", "price", "quantity")
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("order_no", "user", "status", "total_amount", "is_read", "created_at")
    list_filter = ("status", "is_read")
    search_fields = ("order_no", "user__email")
    readonly_fields = ("order_no", "subtotal_amount", "tax_amount", "total_amount", "created_at", "updated_at")
    inlines = [OrderItemInline]
