from rest_framework import serializers


class DailyNoteSerializer(serializers.Serializer):
    date = serializers.DateField(read_only=True)
    content = serializers.CharField(allow_blank=True, trim_whitespace=False)


class TrendInputSerializer(serializers.Serializer):
    total_revenue = serializers.FloatField(min_value=0)
    revenue_last_month = serializers.FloatField(min_value=0)
    occupied_rooms = serializers.IntegerField(min_value=0)
    total_rooms = serializers.IntegerField(min_value=0)
    occupied_rooms_last_month = serializers.IntegerField(min_value=0)
    active_guests = serializers.IntegerField(min_value=0)
    active_guests_last_month = serializers.IntegerField(min_value=0)
    restaurant_orders = serializers.IntegerField(min_value=0)
    restaurant_orders_last_month = serializers.IntegerField(min_value=0)


class TrendOutputSerializer(serializers.Serializer):
    is_anomalous_revenue_trend = serializers.BooleanField()
    is_anomalous_occupancy_trend = serializers.BooleanField()
    is_anomalous_guest_trend = serializers.BooleanField()
    is_anomalous_restaurant_order_trend = serializers.BooleanField()
    insights = serializers.CharField(allow_blank=True)
