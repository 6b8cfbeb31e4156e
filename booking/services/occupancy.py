"""
Read-time occupancy resolution for rooms and halls.

A stored Occupied room (or Booked hall) whose checkout instant has passed
is shown as Available with its guest fields removed. The demotion is a
projection only: nothing is written back, so it is re-applied on every
load until the next explicit write to the record.
"""
from django.utils import timezone

from store.timestamps import parse_instant

ROOM = "room"
HALL = "hall"

IDLE_STATUS = "Available"

ENGAGED_STATUS = {
    ROOM: "Occupied",
    HALL: "Booked",
}

OCCUPANCY_FIELDS = {
    ROOM: (
        "guest",
        "people_count",
        "id_proof",
        "email",
        "check_in",
        "check_out",
        "total_price",
        "advance_amount",
        "paid_amount",
    ),
    HALL: (
        "customer_name",
        "contact",
        "purpose",
        "id_proof",
        "email",
        "check_in",
        "check_out",
        "check_in_time",
        "check_out_time",
        "total_price",
        "adults",
        "children",
        "food_preference",
        "add_ons",
        "food_cost",
    ),
}


def has_lapsed(record: dict, kind: str, now=None) -> bool:
    if record.get("status") != ENGAGED_STATUS[kind]:
        return False

    check_out = parse_instant(record.get("check_out"))
    if check_out is None:
        return False

    now = now or timezone.now()
    return now > check_out


def resolve(record: dict, kind: str, now=None) -> dict:
    """Return the record as it should be displayed at ``now``."""
    if not has_lapsed(record, kind, now):
        return record

    resolved = {
        field: value
        for field, value in record.items()
        if field not in OCCUPANCY_FIELDS[kind]
    }
    resolved["status"] = IDLE_STATUS
    return resolved


def resolve_all(records, kind: str, now=None) -> list[dict]:
    now = now or timezone.now()
    return [resolve(record, kind, now) for record in records]


def vacated_fields(kind: str) -> dict:
    """Field values that clear an occupancy when written to the store."""
    cleared = {field: None for field in OCCUPANCY_FIELDS[kind]}
    if kind == HALL:
        cleared["add_ons"] = []
    return cleared
