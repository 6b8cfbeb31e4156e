from dataclasses import dataclass
from decimal import Decimal

from django.db import transaction
from django.db.models import DecimalField, F
from django.db.models.functions import Coalesce
from django.utils import timezone

from booking.services.pricing import to_money
from payment.models import Transaction
from room.models import Room


@dataclass(frozen=True)
class LedgerEntry:
    new_paid_amount: Decimal
    transactions: list


def balance_due(total_price, paid_amount) -> Decimal:
    """Outstanding amount; negative when the guest has overpaid."""
    return to_money(total_price) - to_money(paid_amount)


def record_payment(room: Room, amount, method: str, now=None) -> LedgerEntry:
    """
    Append a payment to the room's ledger and raise its paid amount.

    Amount validation happens in the request serializer; earlier entries
    are never modified.
    """
    now = now or timezone.now()
    amount = to_money(amount)

    with transaction.atomic():
        Transaction.objects.create(room=room, date=now, amount=amount, method=method)
        Room.objects.filter(pk=room.pk).update(
            paid_amount=Coalesce(
                F("paid_amount"),
                Decimal("0"),
                output_field=DecimalField(max_digits=10, decimal_places=2),
            ) + amount
        )
        room.refresh_from_db(fields=["paid_amount"])
        transactions = list(room.transactions.all())

    return LedgerEntry(new_paid_amount=room.paid_amount, transactions=transactions)
