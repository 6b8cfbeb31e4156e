from rest_framework import serializers

from restaurant.models import MenuItem, Order
from room.models import Room


class MenuItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = MenuItem
        fields = ("id", "name", "category", "price", "status")


class OrderSerializer(serializers.ModelSerializer):
    class Meta:
        model = Order
        fields = ("id", "code", "table", "items", "price", "status", "room", "created_at")
        read_only_fields = ("id", "code", "created_at")

    def validate_room(self, value):
        if not value:
            return None
        if not Room.objects.filter(number=value).exists():
            raise serializers.ValidationError(f"Room {value} does not exist.")
        return value


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.OrderStatus.choices)
