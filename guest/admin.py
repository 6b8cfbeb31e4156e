from django.contrib import admin

from guest.models import Guest


@admin.register(Guest)
class GuestAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "phone", "id_proof")
    search_fields = ("name", "email", "phone")
