from django.db import models
from django.db.models import ForeignKey

from room.models import Room


class Transaction(models.Model):
    class PaymentMethod(models.TextChoices):
        CASH = "Cash"
        CARD = "Card"
        UPI = "UPI"
        BANK_TRANSFER = "Bank Transfer"

    room = ForeignKey(Room, related_name="transactions",
                      on_delete=models.CASCADE)
    date = models.DateTimeField()
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    method = models.CharField(choices=PaymentMethod, max_length=20)

    class Meta:
        ordering = ("date", "id")

    def __str__(self):
        return f"{self.method} {self.amount} for room {self.room.number}"
