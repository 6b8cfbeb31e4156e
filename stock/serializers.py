from rest_framework import serializers

from stock.models import StockItem
from stock.services.levels import stock_status


class StockItemSerializer(serializers.ModelSerializer):
    min = serializers.IntegerField(source="min_level", min_value=0)
    max = serializers.IntegerField(source="max_level", min_value=1)
    status = serializers.SerializerMethodField()

    class Meta:
        model = StockItem
        fields = (
            "id",
            "name",
            "category",
            "current",
            "min",
            "max",
            "unit",
            "supplier",
            "status",
        )

    def get_status(self, obj) -> str:
        return stock_status(obj.current, obj.min_level)

    def validate(self, attrs):
        minimum = attrs.get("min_level", getattr(self.instance, "min_level", None))
        maximum = attrs.get("max_level", getattr(self.instance, "max_level", None))
        if minimum is not None and maximum is not None and minimum > maximum:
            raise serializers.ValidationError(
                {"min": "Minimum stock cannot exceed maximum stock."}
            )
        return attrs


class StockCountSerializer(serializers.Serializer):
    current = serializers.IntegerField(min_value=0)


class StockSummarySerializer(serializers.Serializer):
    total = serializers.IntegerField()
    critical = serializers.IntegerField()
    low = serializers.IntegerField()
    normal = serializers.IntegerField()
