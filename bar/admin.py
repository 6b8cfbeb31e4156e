from django.contrib import admin

from bar.models import BarProduct, BarSale


@admin.register(BarProduct)
class BarProductAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "type", "stock", "price")
    search_fields = ("name",)
    list_filter = ("type",)


@admin.register(BarSale)
class BarSaleAdmin(admin.ModelAdmin):
    list_display = ("id", "product", "quantity", "total_price", "room", "sold_at")
    list_filter = ("room",)
    readonly_fields = ("product", "quantity", "total_price", "room", "sold_at")
