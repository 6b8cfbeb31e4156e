from dataclasses import dataclass

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from bar.models import BarProduct, BarSale
from booking.services.pricing import to_money

CRITICAL = "critical"
LOW = "low"
GOOD = "good"

CRITICAL_BELOW = 10
LOW_BELOW = 20


class InsufficientStock(Exception):
    """Raised when a sale asks for more bottles than are on the shelf"""

    def __init__(self, product: str, available: int, requested: int) -> None:
        super().__init__(
            f"Only {available} of {product} in stock, {requested} requested."
        )
        self.product = product
        self.available = available
        self.requested = requested


@dataclass(frozen=True)
class SaleReceipt:
    sale: BarSale
    remaining_stock: int


def product_status(stock) -> str:
    stock = stock or 0
    if stock < CRITICAL_BELOW:
        return CRITICAL
    if stock < LOW_BELOW:
        return LOW
    return GOOD


def record_sale(product: BarProduct, quantity: int, room=None, now=None) -> SaleReceipt:
    """
    Record a sale at the product's current price and take the bottles off
    the shelf. The stock decrement is conditional so two concurrent sales
    cannot push stock below zero.
    """
    now = now or timezone.now()

    with transaction.atomic():
        taken = BarProduct.objects.filter(
            pk=product.pk, stock__gte=quantity
        ).update(stock=F("stock") - quantity)
        if not taken:
            product.refresh_from_db(fields=["stock"])
            raise InsufficientStock(product.name, product.stock, quantity)

        sale = BarSale.objects.create(
            product=product.name,
            quantity=quantity,
            total_price=to_money(product.price) * quantity,
            room=room or None,
            sold_at=now,
        )
        product.refresh_from_db(fields=["stock"])

    return SaleReceipt(sale=sale, remaining_stock=product.stock)
