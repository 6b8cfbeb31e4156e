from django.contrib import admin

from booking.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "room",
        "customer_name",
        "check_in_date",
        "check_out_date",
        "status",
    )

    list_filter = (
        "status",
        "check_in_date",
        "check_out_date",
    )

    search_fields = (
        "customer_name",
        "room",
    )

    ordering = ("-check_in_date",)
