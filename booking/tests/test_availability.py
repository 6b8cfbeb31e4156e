from datetime import date, datetime

from django.utils import timezone

from booking.services.availability import (
    AVAILABLE,
    BOOKED,
    availability_on,
    hall_stats,
    room_stats,
    stay_covers,
)


def instant(*args):
    return timezone.make_aware(datetime(*args)).isoformat()


ROOMS = [
    {
        "number": "101",
        "status": "Occupied",
        "guest": "John Smith",
        "check_in": instant(2024, 1, 10, 14),
        "check_out": instant(2024, 1, 12, 11),
    },
    {
        "number": "102",
        "status": "Occupied",
        "guest": "Priya Nair",
        "check_in": instant(2024, 1, 20, 14),
        "check_out": instant(2024, 1, 22, 11),
    },
    {"number": "103", "status": "Available"},
    {"number": "104", "status": "Maintenance"},
]


def test_stay_covers_whole_first_and_last_day():
    assert stay_covers(ROOMS[0], date(2024, 1, 10))
    assert stay_covers(ROOMS[0], date(2024, 1, 12))
    assert not stay_covers(ROOMS[0], date(2024, 1, 13))
    assert not stay_covers(ROOMS[2], date(2024, 1, 10))


def test_availability_on_day():
    availability = availability_on(ROOMS, date(2024, 1, 11), "number", "guest")

    assert availability["101"] == {"status": BOOKED, "name": "John Smith"}
    assert availability["102"] == {"status": AVAILABLE, "name": None}
    assert availability["103"]["status"] == AVAILABLE


def test_room_stats_counts_future_check_in_as_booked():
    stats = room_stats(ROOMS, today=date(2024, 1, 11))

    assert stats == {"total": 4, "booked": 1, "occupied": 1, "available": 1}


def test_room_stats_for_selected_day():
    stats = room_stats(ROOMS, day=date(2024, 1, 21))

    assert stats["total"] == 4
    assert stats["booked"] == 1
    assert stats["available"] == 3


def test_hall_stats():
    halls = [
        {
            "name": "Grand Ballroom",
            "status": "Booked",
            "customer_name": "Mehta Wedding",
            "check_in": instant(2024, 6, 1, 10),
            "check_out": instant(2024, 6, 1, 14),
        },
        {"name": "Conference Room", "status": "Available"},
        {"name": "Terrace", "status": "Maintenance"},
    ]

    assert hall_stats(halls) == {"total": 3, "booked": 1, "available": 1}
    assert hall_stats(halls, day=date(2024, 6, 2)) == {
        "total": 3,
        "booked": 0,
        "available": 3,
    }
