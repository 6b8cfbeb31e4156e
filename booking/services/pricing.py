"""
Charges for room stays and hall bookings.

Every function here is total: missing or invalid inputs contribute zero
to the result instead of raising, so a half-filled booking form can be
priced while it is being edited.
"""
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

from store.timestamps import parse_instant

ADULT_FOOD_RATE = Decimal("800")
CHILD_FOOD_RATE = Decimal("400")

HALL_ADD_ONS = {
    "decoration": {"label": "Decoration", "price": Decimal("15000")},
    "stageSetup": {"label": "Stage Setup", "price": Decimal("8000")},
    "soundSystem": {"label": "Sound System", "price": Decimal("5000")},
    "parking": {"label": "Parking", "price": Decimal("3000")},
    "cleaning": {"label": "Cleaning Service", "price": Decimal("4000")},
}

ZERO = Decimal("0")


def to_money(value) -> Decimal:
    if value is None or value == "":
        return ZERO
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return ZERO


def room_nights(check_in, check_out) -> int:
    start = parse_instant(check_in)
    end = parse_instant(check_out)
    if start is None or end is None:
        return 0
    return (end - start).days


def room_total(nightly_rate, check_in, check_out) -> Decimal:
    nights = max(0, room_nights(check_in, check_out))
    return to_money(nightly_rate) * nights


def combine(day, at) -> datetime | None:
    """Build the instant for a calendar day and an "HH:MM" (or time) value."""
    if isinstance(day, str):
        instant = parse_instant(day)
        day = instant.date() if instant else None
    if isinstance(day, datetime):
        day = day.date()
    if not isinstance(day, date):
        return None

    if isinstance(at, str):
        try:
            at = time.fromisoformat(at)
        except ValueError:
            return None
    if not isinstance(at, time):
        return None

    return parse_instant(datetime.combine(day, at))


def hall_hours(start, end) -> int:
    start = parse_instant(start)
    end = parse_instant(end)
    if start is None or end is None or start >= end:
        return 0
    return int((end - start).total_seconds() // 3600)


def food_cost(
        adults,
        children,
        adult_rate=ADULT_FOOD_RATE,
        child_rate=CHILD_FOOD_RATE,
) -> Decimal:
    return (
        to_money(adults) * to_money(adult_rate)
        + to_money(children) * to_money(child_rate)
    )


def add_on_cost(selected, catalog=None) -> Decimal:
    catalog = HALL_ADD_ONS if catalog is None else catalog
    total = ZERO
    for add_on_id in selected or ():
        add_on = catalog.get(add_on_id)
        if add_on:
            total += to_money(add_on["price"])
    return total


def hall_total(hourly_rate, start, end, adults=0, children=0, add_ons=None) -> Decimal:
    total = (
        hall_hours(start, end) * to_money(hourly_rate)
        + food_cost(adults, children)
        + add_on_cost(add_ons)
    )
    return max(ZERO, total)


def folio_total(room_charge, bar_charges=ZERO, restaurant_charges=ZERO) -> Decimal:
    return (
        to_money(room_charge)
        + to_money(bar_charges)
        + to_money(restaurant_charges)
    )
