from django.contrib import admin

from payment.models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ("id", "room", "date", "amount", "method")
    list_filter = ("method", "date")
    search_fields = ("room__number",)

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
