from django.contrib import admin

from notifications.models import TelegramSubscriber


@admin.register(TelegramSubscriber)
class TelegramSubscriberAdmin(admin.ModelAdmin):
    list_display = ("chat_id", "name", "created_at")
    search_fields = ("name",)
