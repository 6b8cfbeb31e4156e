from django.contrib import admin

from hall.models import Hall


@admin.register(Hall)
class HallAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "capacity", "status", "price", "customer_name", "check_out")
    search_fields = ("name", "customer_name")
    list_filter = ("status",)
