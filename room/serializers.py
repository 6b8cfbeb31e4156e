from decimal import Decimal

from rest_framework import serializers

from booking.services.occupancy import ROOM, resolve
from payment.services.ledger import balance_due
from room.models import Room


class RoomSerializer(serializers.ModelSerializer):
    class Meta:
        model = Room
        fields = (
            "id",
            "number",
            "type",
            "price",
            "status",
            "guest",
            "people_count",
            "id_proof",
            "email",
            "facilities",
            "check_in",
            "check_out",
            "total_price",
            "advance_amount",
            "paid_amount",
        )
        read_only_fields = (
            "id",
            "guest",
            "people_count",
            "id_proof",
            "email",
            "check_in",
            "check_out",
            "total_price",
            "advance_amount",
            "paid_amount",
        )

    def validate_status(self, value):
        current = self.instance.status if self.instance else None
        if value == Room.RoomStatus.OCCUPIED and current != Room.RoomStatus.OCCUPIED:
            raise serializers.ValidationError(
                "Use the occupy action to check a guest in."
            )
        return value

    def to_representation(self, instance):
        data = resolve(super().to_representation(instance), ROOM)
        if data.get("total_price") is not None:
            data["balance_due"] = str(
                balance_due(data["total_price"], data.get("paid_amount"))
            )
        return data


class OccupyRoomSerializer(serializers.Serializer):
    guest = serializers.CharField(max_length=255)
    people_count = serializers.IntegerField(min_value=1)
    id_proof = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    check_in = serializers.DateTimeField()
    check_out = serializers.DateTimeField()
    facilities = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    advance_amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        required=False,
        default=Decimal("0"),
    )

    def validate(self, attrs):
        if attrs["check_out"] <= attrs["check_in"]:
            raise serializers.ValidationError(
                "Check-out date must be after check-in date."
            )
        return attrs


class RoomCalendarSerializer(serializers.Serializer):
    date = serializers.DateField()
    available = serializers.BooleanField()


class RoomBillSerializer(serializers.Serializer):
    room_number = serializers.CharField()
    guest = serializers.CharField(allow_null=True)
    room = serializers.DecimalField(max_digits=12, decimal_places=2)
    bar = serializers.DecimalField(max_digits=12, decimal_places=2)
    restaurant = serializers.DecimalField(max_digits=12, decimal_places=2)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    paid = serializers.DecimalField(max_digits=12, decimal_places=2)
    balance_due = serializers.DecimalField(max_digits=12, decimal_places=2)
