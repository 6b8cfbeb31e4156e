from django.utils import timezone

from booking.services.occupancy import ENGAGED_STATUS, HALL, IDLE_STATUS, ROOM
from store.timestamps import parse_instant

BOOKED = "BOOKED"
AVAILABLE = "AVAILABLE"


def local_day(value):
    instant = parse_instant(value)
    if instant is None:
        return None
    return timezone.localtime(instant).date()


def stay_covers(record: dict, day) -> bool:
    """True when ``day`` falls between the check-in and check-out days, inclusive."""
    first_day = local_day(record.get("check_in"))
    last_day = local_day(record.get("check_out"))
    if first_day is None or last_day is None:
        return False
    return first_day <= day <= last_day


def availability_on(records, day, key_field: str, name_field: str) -> dict:
    availability = {}
    for record in records:
        if stay_covers(record, day):
            availability[record[key_field]] = {
                "status": BOOKED,
                "name": record.get(name_field),
            }
        else:
            availability[record[key_field]] = {"status": AVAILABLE, "name": None}
    return availability


def room_stats(rooms, today=None, day=None) -> dict:
    """
    Headline counts for the room board.

    Without a selected day an Occupied room whose check-in day is still
    ahead counts as booked rather than occupied.
    """
    rooms = list(rooms)
    stats = {"total": len(rooms), "booked": 0, "occupied": 0, "available": 0}

    if day is not None:
        for entry in availability_on(rooms, day, "number", "guest").values():
            if entry["status"] == BOOKED:
                stats["booked"] += 1
            else:
                stats["available"] += 1
        stats["occupied"] = stats["booked"]
        return stats

    today = today or timezone.localdate()
    for room in rooms:
        if room.get("status") == IDLE_STATUS:
            stats["available"] += 1
        elif room.get("status") == ENGAGED_STATUS[ROOM]:
            first_day = local_day(room.get("check_in"))
            if first_day is not None and first_day > today:
                stats["booked"] += 1
            else:
                stats["occupied"] += 1
    return stats


def hall_stats(halls, day=None) -> dict:
    halls = list(halls)
    stats = {"total": len(halls), "booked": 0, "available": 0}

    if day is not None:
        for entry in availability_on(halls, day, "name", "customer_name").values():
            if entry["status"] == BOOKED:
                stats["booked"] += 1
            else:
                stats["available"] += 1
        return stats

    for hall in halls:
        if hall.get("status") == ENGAGED_STATUS[HALL]:
            stats["booked"] += 1
        elif hall.get("status") == IDLE_STATUS:
            stats["available"] += 1
    return stats
