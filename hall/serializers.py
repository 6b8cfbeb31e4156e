from rest_framework import serializers

from booking.services.occupancy import HALL, resolve
from booking.services.pricing import HALL_ADD_ONS
from hall.models import Hall


class HallSerializer(serializers.ModelSerializer):
    facilities = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )

    class Meta:
        model = Hall
        fields = (
            "id",
            "name",
            "capacity",
            "facilities",
            "price",
            "status",
            "customer_name",
            "contact",
            "purpose",
            "id_proof",
            "email",
            "check_in",
            "check_out",
            "check_in_time",
            "check_out_time",
            "total_price",
            "adults",
            "children",
            "food_preference",
            "add_ons",
            "food_cost",
        )
        read_only_fields = (
            "id",
            "customer_name",
            "contact",
            "purpose",
            "id_proof",
            "email",
            "check_in",
            "check_out",
            "check_in_time",
            "check_out_time",
            "total_price",
            "adults",
            "children",
            "food_preference",
            "add_ons",
            "food_cost",
        )

    def validate_facilities(self, value):
        return sorted(set(value))

    def validate_status(self, value):
        current = self.instance.status if self.instance else None
        if value == Hall.HallStatus.BOOKED and current != Hall.HallStatus.BOOKED:
            raise serializers.ValidationError("Use the book action to book a hall.")
        return value

    def to_representation(self, instance):
        return resolve(super().to_representation(instance), HALL)


class BookHallSerializer(serializers.Serializer):
    customer_name = serializers.CharField(max_length=255)
    contact = serializers.CharField(max_length=50)
    purpose = serializers.CharField(max_length=255, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    id_proof = serializers.CharField(max_length=100)
    check_in_date = serializers.DateField()
    check_in_time = serializers.TimeField(format="%H:%M")
    check_out_date = serializers.DateField()
    check_out_time = serializers.TimeField(format="%H:%M")
    adults = serializers.IntegerField(min_value=0, default=0)
    children = serializers.IntegerField(min_value=0, default=0)
    food_preference = serializers.ChoiceField(
        choices=Hall.FoodPreference.choices, default=Hall.FoodPreference.VEG
    )
    add_ons = serializers.ListField(
        child=serializers.ChoiceField(choices=list(HALL_ADD_ONS)),
        required=False,
        default=list,
    )


class HallQuoteSerializer(serializers.Serializer):
    hours = serializers.IntegerField()
    hall_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
    food_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
    add_ons_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class AddOnSerializer(serializers.Serializer):
    id = serializers.CharField()
    label = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
