from django.db import models


class Booking(models.Model):
    class BookingStatus(models.TextChoices):
        CONFIRMED = "confirmed"
        CANCELLED = "cancelled"

    room = models.CharField(max_length=255)
    customer_name = models.CharField(max_length=255)
    check_in_date = models.DateTimeField()
    check_out_date = models.DateTimeField()
    status = models.CharField(
        choices=BookingStatus,
        max_length=20,
        default=BookingStatus.CONFIRMED,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.customer_name} - room {self.room}"
