from django.contrib import admin

from restaurant.models import MenuItem, Order


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "category", "price", "status")
    search_fields = ("name",)
    list_filter = ("category", "status")


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("code", "table", "price", "status", "room", "created_at")
    search_fields = ("code", "items")
    list_filter = ("status",)
