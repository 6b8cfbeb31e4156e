from django.contrib import admin

from room.models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("id", "number", "type", "status", "price", "guest", "check_out")
    search_fields = ("number", "guest")
    list_filter = ("type", "status")
