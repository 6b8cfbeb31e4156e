from datetime import date, datetime, time
from decimal import Decimal

import pytest
from django.utils import timezone

from booking.services.pricing import (
    add_on_cost,
    combine,
    folio_total,
    food_cost,
    hall_hours,
    hall_total,
    room_nights,
    room_total,
    to_money,
)


def aware(*args):
    return timezone.make_aware(datetime(*args))


def test_room_total_for_two_nights():
    total = room_total(1200, aware(2024, 1, 10), aware(2024, 1, 12))

    assert total == Decimal("2400")


@pytest.mark.parametrize("nights", [0, 1, 7])
def test_room_total_is_nights_times_rate(nights):
    check_in = aware(2024, 3, 1)
    check_out = aware(2024, 3, 1 + nights)

    assert room_total(Decimal("950"), check_in, check_out) == Decimal("950") * nights


def test_room_total_accepts_iso_strings():
    assert room_total("1500", "2024-01-10", "2024-01-13") == Decimal("4500")


def test_room_total_with_missing_dates_is_zero():
    assert room_total(1200, None, aware(2024, 1, 12)) == Decimal("0")
    assert room_nights("garbage", "2024-01-12") == 0


def test_room_total_never_negative():
    assert room_total(1200, aware(2024, 1, 12), aware(2024, 1, 10)) == Decimal("0")


def test_grand_ballroom_booking():
    start = combine(date(2024, 6, 1), "10:00")
    end = combine(date(2024, 6, 1), "14:00")

    total = hall_total(10000, start, end, adults=2, children=1, add_ons=["decoration"])

    assert total == Decimal("57000")


def test_hall_hours_truncate_partial_hours():
    start = combine(date(2024, 6, 1), time(10, 0))
    end = combine(date(2024, 6, 1), time(13, 45))

    assert hall_hours(start, end) == 3


def test_hall_hours_zero_when_end_not_after_start():
    start = aware(2024, 6, 1, 14)

    assert hall_hours(start, start) == 0
    assert hall_hours(start, aware(2024, 6, 1, 10)) == 0


def test_hall_total_charges_only_extras_for_reversed_times():
    total = hall_total(
        10000, aware(2024, 6, 1, 14), aware(2024, 6, 1, 10), adults=1, add_ons=["parking"]
    )

    assert total == Decimal("3800")


def test_food_cost_rates():
    assert food_cost(2, 1) == Decimal("2000")
    assert food_cost(None, "") == Decimal("0")


def test_add_on_cost_ignores_unknown_ids():
    assert add_on_cost(["decoration", "fireworks", "soundSystem"]) == Decimal("20000")
    assert add_on_cost(None) == Decimal("0")


def test_combine_rejects_bad_time():
    assert combine(date(2024, 6, 1), "25:99") is None
    assert combine(None, "10:00") is None


def test_folio_total():
    assert folio_total(Decimal("2400"), Decimal("90"), Decimal("40")) == Decimal("2530")


def test_to_money():
    assert to_money("12.50") == Decimal("12.50")
    assert to_money(None) == Decimal("0")
    assert to_money("n/a") == Decimal("0")
