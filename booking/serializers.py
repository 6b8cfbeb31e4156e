from rest_framework import serializers

from booking.models import Booking


class BookRoomSerializer(serializers.Serializer):
    """Request body of the public booking endpoint."""

    roomId = serializers.CharField()
    customerName = serializers.CharField()
    checkInDate = serializers.DateTimeField()
    checkOutDate = serializers.DateTimeField()

    def to_record(self) -> dict:
        data = self.validated_data
        return {
            "room": data["roomId"],
            "customer_name": data["customerName"],
            "check_in_date": data["checkInDate"],
            "check_out_date": data["checkOutDate"],
            "status": Booking.BookingStatus.CONFIRMED,
        }


class BookingSerializer(serializers.ModelSerializer):
    roomId = serializers.CharField(source="room")
    customerName = serializers.CharField(source="customer_name")
    checkInDate = serializers.DateTimeField(source="check_in_date")
    checkOutDate = serializers.DateTimeField(source="check_out_date")

    class Meta:
        model = Booking
        fields = (
            "id",
            "roomId",
            "customerName",
            "checkInDate",
            "checkOutDate",
            "status",
        )
