from django.db import models
from django.utils import timezone


class MenuItem(models.Model):
    class ItemStatus(models.TextChoices):
        AVAILABLE = "Available"
        OUT_OF_STOCK = "Out of Stock"

    name = models.CharField(max_length=255, unique=True)
    category = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(
        choices=ItemStatus,
        max_length=20,
        default=ItemStatus.AVAILABLE,
    )

    def __str__(self):
        return self.name


class Order(models.Model):
    class OrderStatus(models.TextChoices):
        PENDING = "pending"
        PREPARING = "preparing"
        READY = "ready"
        SERVED = "served"

    code = models.CharField(max_length=20, unique=True)
    table = models.PositiveIntegerField()
    items = models.TextField()
    price = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(
        choices=OrderStatus,
        max_length=20,
        default=OrderStatus.PENDING,
    )
    room = models.CharField(max_length=20, null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ("-created_at",)

    def __str__(self):
        return f"{self.code} (table {self.table})"
