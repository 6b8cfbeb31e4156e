from rest_framework import serializers

from guest.models import Guest


class GuestSerializer(serializers.ModelSerializer):
    booking_history = serializers.ListField(
        child=serializers.CharField(max_length=255), required=False, default=list
    )

    class Meta:
        model = Guest
        fields = (
            "id",
            "name",
            "email",
            "phone",
            "address",
            "id_proof",
            "booking_history",
        )


class HistoryEntrySerializer(serializers.Serializer):
    entry = serializers.CharField(max_length=255)
