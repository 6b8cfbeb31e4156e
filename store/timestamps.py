"""
Date coercion at the store boundary.

Callers hand the store ISO strings or native ``date``/``datetime`` values;
the store persists timezone-aware datetimes and hands ISO strings back.
"""
from datetime import date, datetime, time

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime


def to_timestamp(value):
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        parsed = parse_datetime(value)
        if parsed is None:
            day = parse_date(value)
            if day is None:
                raise ValueError(f"Invalid date value: {value!r}")
            parsed = datetime.combine(day, time.min)
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to a timestamp")

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def to_iso(value):
    if isinstance(value, datetime) and timezone.is_aware(value):
        value = timezone.localtime(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def parse_instant(value):
    """Lenient variant of ``to_timestamp`` returning None for bad input."""
    try:
        return to_timestamp(value)
    except (TypeError, ValueError):
        return None
