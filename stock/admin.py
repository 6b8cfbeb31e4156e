from django.contrib import admin

from stock.models import StockItem


@admin.register(StockItem)
class StockItemAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "category", "current", "min_level", "max_level", "unit")
    search_fields = ("name", "supplier")
    list_filter = ("category",)
