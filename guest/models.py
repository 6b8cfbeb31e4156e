from django.db import models


class Guest(models.Model):
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=50)
    address = models.TextField(blank=True, default="")
    id_proof = models.CharField(max_length=100)
    booking_history = models.JSONField(default=list, blank=True)

    def __str__(self):
        return self.name
