from django.db import models


class StockItem(models.Model):
    name = models.CharField(max_length=255, unique=True)
    category = models.CharField(max_length=100)
    current = models.PositiveIntegerField(default=0)
    min_level = models.PositiveIntegerField()
    max_level = models.PositiveIntegerField()
    unit = models.CharField(max_length=50)
    supplier = models.CharField(max_length=255, blank=True, default="")

    def __str__(self):
        return f"{self.name} ({self.current} {self.unit})"
