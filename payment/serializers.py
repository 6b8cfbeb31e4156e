from decimal import Decimal

from rest_framework import serializers

from payment.models import Transaction


class TransactionSerializer(serializers.ModelSerializer):
    room_number = serializers.CharField(source="room.number", read_only=True)

    class Meta:
        model = Transaction
        fields = ("id", "room_number", "date", "amount", "method")
        read_only_fields = fields


class RecordPaymentSerializer(serializers.Serializer):
    amount = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0")
    )
    method = serializers.ChoiceField(
        choices=Transaction.PaymentMethod.choices,
        default=Transaction.PaymentMethod.CASH,
    )


class LedgerSerializer(serializers.Serializer):
    total_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    paid_amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    balance_due = serializers.DecimalField(max_digits=10, decimal_places=2)
    transactions = TransactionSerializer(many=True)
