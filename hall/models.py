from django.db import models


class Hall(models.Model):
    class HallStatus(models.TextChoices):
        AVAILABLE = "Available"
        BOOKED = "Booked"
        MAINTENANCE = "Maintenance"

    class FoodPreference(models.TextChoices):
        VEG = "veg"
        NON_VEG = "non-veg"
        BOTH = "both"

    name = models.CharField(max_length=255, unique=True)
    capacity = models.PositiveIntegerField()
    facilities = models.JSONField(default=list, blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(
        choices=HallStatus,
        max_length=20,
        default=HallStatus.AVAILABLE,
    )
    customer_name = models.CharField(max_length=255, null=True, blank=True)
    contact = models.CharField(max_length=50, null=True, blank=True)
    purpose = models.CharField(max_length=255, null=True, blank=True)
    id_proof = models.CharField(max_length=100, null=True, blank=True)
    email = models.EmailField(null=True, blank=True)
    check_in = models.DateTimeField(null=True, blank=True)
    check_out = models.DateTimeField(null=True, blank=True)
    check_in_time = models.CharField(max_length=5, null=True, blank=True)
    check_out_time = models.CharField(max_length=5, null=True, blank=True)
    total_price = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True
    )
    adults = models.PositiveIntegerField(null=True, blank=True)
    children = models.PositiveIntegerField(null=True, blank=True)
    food_preference = models.CharField(
        choices=FoodPreference, max_length=10, null=True, blank=True
    )
    add_ons = models.JSONField(default=list, blank=True)
    food_cost = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True
    )

    def __str__(self):
        return self.name
