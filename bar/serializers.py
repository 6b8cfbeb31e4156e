from rest_framework import serializers

from bar.models import BarProduct, BarSale
from bar.services.inventory import product_status
from room.models import Room


class BarProductSerializer(serializers.ModelSerializer):
    status = serializers.SerializerMethodField()

    class Meta:
        model = BarProduct
        fields = ("id", "name", "type", "stock", "price", "status")

    def get_status(self, obj) -> str:
        return product_status(obj.stock)


class StockLevelSerializer(serializers.Serializer):
    stock = serializers.IntegerField(min_value=0)


class BarSaleSerializer(serializers.ModelSerializer):
    class Meta:
        model = BarSale
        fields = ("id", "product", "quantity", "total_price", "room", "sold_at")
        read_only_fields = fields


class RecordSaleSerializer(serializers.Serializer):
    product = serializers.SlugRelatedField(
        slug_field="name", queryset=BarProduct.objects.all()
    )
    quantity = serializers.IntegerField(min_value=1)
    room = serializers.CharField(max_length=20, required=False, allow_blank=True)

    def validate_room(self, value):
        if value and not Room.objects.filter(number=value).exists():
            raise serializers.ValidationError(f"Room {value} does not exist.")
        return value or None
