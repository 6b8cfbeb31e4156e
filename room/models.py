from django.db import models


class Room(models.Model):
    class RoomStatus(models.TextChoices):
        AVAILABLE = "Available"
        OCCUPIED = "Occupied"
        CLEANING = "Cleaning"
        MAINTENANCE = "Maintenance"

    number = models.CharField(max_length=255, unique=True)
    type = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(
        choices=RoomStatus,
        max_length=20,
        default=RoomStatus.AVAILABLE,
    )
    guest = models.CharField(max_length=255, null=True, blank=True)
    people_count = models.PositiveIntegerField(null=True, blank=True)
    id_proof = models.CharField(max_length=100, null=True, blank=True)
    email = models.EmailField(null=True, blank=True)
    facilities = models.JSONField(default=list, blank=True)
    check_in = models.DateTimeField(null=True, blank=True)
    check_out = models.DateTimeField(null=True, blank=True)
    total_price = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )
    advance_amount = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )
    paid_amount = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )

    def __str__(self):
        return f"Room {self.number}"
