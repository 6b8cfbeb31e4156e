from datetime import date, datetime

import pytest
from django.utils import timezone

from store.timestamps import parse_instant, to_iso, to_timestamp


def test_empty_values_are_none():
    assert to_timestamp(None) is None
    assert to_timestamp("") is None


def test_date_becomes_aware_midnight():
    value = to_timestamp(date(2024, 1, 10))

    assert timezone.is_aware(value)
    assert (value.year, value.month, value.day, value.hour) == (2024, 1, 10, 0)


def test_iso_string_with_offset_is_kept():
    value = to_timestamp("2024-06-01T10:00:00+00:00")

    assert value == datetime(2024, 6, 1, 10, 0, tzinfo=timezone.get_fixed_timezone(0))


def test_invalid_string_raises():
    with pytest.raises(ValueError):
        to_timestamp("tomorrow")


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        to_timestamp(20240110)


def test_parse_instant_is_lenient():
    assert parse_instant("tomorrow") is None
    assert parse_instant(42) is None
    assert parse_instant("2024-01-10") is not None


def test_to_iso():
    assert to_iso(date(2024, 1, 10)) == "2024-01-10"
    assert to_iso("already text") == "already text"
    assert to_iso(None) is None
