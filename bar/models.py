from django.db import models
from django.utils import timezone


class BarProduct(models.Model):
    name = models.CharField(max_length=255, unique=True)
    type = models.CharField(max_length=100)
    stock = models.PositiveIntegerField(default=0)
    price = models.DecimalField(max_digits=10, decimal_places=2)

    def __str__(self):
        return self.name


class BarSale(models.Model):
    product = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField()
    total_price = models.DecimalField(max_digits=10, decimal_places=2)
    room = models.CharField(max_length=20, null=True, blank=True)
    sold_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ("-sold_at", "-id")

    def __str__(self):
        return f"{self.quantity} x {self.product}"
