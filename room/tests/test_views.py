from datetime import date, datetime, timedelta
from decimal import Decimal
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from bar.models import BarSale
from payment.models import Transaction
from restaurant.models import Order
from room.models import Room
from store.adapter import WriteResult, default_store


def rooms_url():
    return reverse("room:rooms-list")


def room_detail_url(number: str) -> str:
    return reverse("room:rooms-detail", args=[number])


def room_action_url(action: str, number: str) -> str:
    return reverse(f"room:rooms-{action}", args=[number])


def create_user(**params):
    defaults = {
        "username": "frontdesk",
        "password": "test12345",
    }
    defaults.update(params)
    return get_user_model().objects.create_user(**defaults)


def create_admin(**params):
    defaults = {
        "username": "manager",
        "email": "admin@test.com",
        "password": "test12345",
    }
    defaults.update(params)
    return get_user_model().objects.create_superuser(**defaults)


def create_room(**params):
    defaults = {
        "number": "101",
        "type": "Deluxe",
        "price": "1200.00",
    }
    defaults.update(params)
    return Room.objects.create(**defaults)


def occupy_room(room, check_in, check_out, **params):
    defaults = {
        "status": Room.RoomStatus.OCCUPIED,
        "guest": "John Smith",
        "people_count": 2,
        "id_proof": "AADHAAR-1234",
        "email": "john@example.com",
        "check_in": check_in,
        "check_out": check_out,
        "total_price": Decimal("57000"),
        "paid_amount": Decimal("0"),
    }
    defaults.update(params)
    Room.objects.filter(pk=room.pk).update(**defaults)
    room.refresh_from_db()
    return room


class PublicRoomApiTests(APITestCase):
    def setUp(self):
        self.client = APIClient()

    def test_auth_required(self):
        create_room()

        res = self.client.get(rooms_url())

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_occupy_requires_auth(self):
        room = create_room()

        res = self.client.post(room_action_url("occupy", room.number), {})

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)


class PrivateRoomApiTests(APITestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = create_user()
        self.client.force_authenticate(self.user)
        self.now = timezone.now()

    def test_list_rooms(self):
        create_room(number="101")
        create_room(number="102")

        res = self.client.get(rooms_url())

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([room["number"] for room in res.data], ["101", "102"])

    def test_create_room_forbidden_for_non_admin(self):
        payload = {"number": "888", "type": "Suite", "price": "3000.00"}

        res = self.client.post(rooms_url(), payload)

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_delete_room_forbidden_for_non_admin(self):
        room = create_room(number="151")

        res = self.client.delete(room_detail_url(room.number))

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_occupy_room(self):
        room = create_room()
        check_in = self.now + timedelta(hours=1)
        payload = {
            "guest": "Asha Rao",
            "people_count": 2,
            "id_proof": "PAN-99",
            "email": "asha@example.com",
            "check_in": check_in.isoformat(),
            "check_out": (check_in + timedelta(days=2)).isoformat(),
            "advance_amount": "500.00",
        }

        res = self.client.post(room_action_url("occupy", room.number), payload)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "Occupied")
        self.assertEqual(res.data["guest"], "Asha Rao")
        self.assertEqual(res.data["total_price"], "2400.00")
        self.assertEqual(res.data["paid_amount"], "500.00")
        self.assertEqual(res.data["balance_due"], "1900.00")

    def test_occupy_rejects_checkout_before_checkin(self):
        room = create_room()
        payload = {
            "guest": "Asha Rao",
            "people_count": 1,
            "id_proof": "PAN-99",
            "email": "asha@example.com",
            "check_in": "2024-01-12T12:00:00+05:30",
            "check_out": "2024-01-10T12:00:00+05:30",
        }

        res = self.client.post(room_action_url("occupy", room.number), payload)

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        room.refresh_from_db()
        self.assertEqual(room.status, Room.RoomStatus.AVAILABLE)

    def test_lapsed_stay_shows_available_without_guest(self):
        room = create_room()
        occupy_room(
            room,
            timezone.make_aware(datetime(2024, 1, 10, 12)),
            timezone.make_aware(datetime(2024, 1, 12, 11)),
            total_price=Decimal("2400"),
        )

        res = self.client.get(room_detail_url(room.number))

        self.assertEqual(res.data["status"], "Available")
        self.assertNotIn("guest", res.data)
        self.assertNotIn("total_price", res.data)
        room.refresh_from_db()
        self.assertEqual(room.status, Room.RoomStatus.OCCUPIED)

    def test_occupy_store_failure(self):
        room = create_room()
        payload = {
            "guest": "Asha Rao",
            "people_count": 1,
            "id_proof": "PAN-99",
            "email": "asha@example.com",
            "check_in": self.now.isoformat(),
            "check_out": (self.now + timedelta(days=1)).isoformat(),
        }

        with patch.object(
            default_store, "update", return_value=WriteResult(ok=False, error="locked")
        ):
            res = self.client.post(room_action_url("occupy", room.number), payload)

        self.assertEqual(res.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)

    def test_checkout(self):
        room = occupy_room(
            create_room(), self.now - timedelta(days=1), self.now + timedelta(days=1)
        )

        res = self.client.post(room_action_url("checkout", room.number))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "Cleaning")
        room.refresh_from_db()
        self.assertIsNone(room.guest)
        self.assertIsNone(room.check_out)
        self.assertIsNone(room.total_price)

    def test_checkout_requires_occupied_room(self):
        room = create_room()

        res = self.client.post(room_action_url("checkout", room.number))

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_maintenance(self):
        room = create_room()

        res = self.client.post(room_action_url("maintenance", room.number))

        self.assertEqual(res.data["status"], "Maintenance")

    def test_maintenance_clears_current_stay(self):
        room = occupy_room(
            create_room(), self.now - timedelta(days=1), self.now + timedelta(days=2)
        )

        res = self.client.post(room_action_url("maintenance", room.number))

        self.assertEqual(res.data["status"], "Maintenance")
        self.assertIsNone(res.data["guest"])
        self.assertIsNone(res.data["check_out"])
        room.refresh_from_db()
        self.assertIsNone(room.guest)
        self.assertIsNone(room.id_proof)
        self.assertIsNone(room.total_price)

        tomorrow = timezone.localdate(self.now) + timedelta(days=1)
        res = self.client.get(rooms_url(), {"date": tomorrow.isoformat()})

        self.assertEqual(
            res.data[0]["availability"], {"status": "AVAILABLE", "name": None}
        )

    def test_record_payment(self):
        room = occupy_room(
            create_room(), self.now - timedelta(days=1), self.now + timedelta(days=1)
        )

        res = self.client.post(
            room_action_url("payments", room.number),
            {"amount": "5000", "method": "UPI"},
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["paid_amount"], "5000.00")
        self.assertEqual(res.data["balance_due"], "52000.00")
        self.assertEqual(len(res.data["transactions"]), 1)
        self.assertEqual(res.data["transactions"][0]["method"], "UPI")

    def test_payment_rejected_for_negative_amount(self):
        room = occupy_room(
            create_room(), self.now - timedelta(days=1), self.now + timedelta(days=1)
        )

        res = self.client.post(
            room_action_url("payments", room.number), {"amount": "-10"}
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Transaction.objects.exists())

    def test_payment_rejected_for_available_room(self):
        room = create_room()

        res = self.client.post(
            room_action_url("payments", room.number), {"amount": "100"}
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_payment_rejected_once_stay_lapsed(self):
        room = occupy_room(
            create_room(), self.now - timedelta(days=3), self.now - timedelta(days=1)
        )

        res = self.client.post(
            room_action_url("payments", room.number), {"amount": "100"}
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_payments(self):
        room = occupy_room(
            create_room(), self.now - timedelta(days=1), self.now + timedelta(days=1),
            paid_amount=Decimal("1000"),
        )
        Transaction.objects.create(
            room=room, date=self.now, amount=Decimal("1000"), method="Cash"
        )

        res = self.client.get(room_action_url("payments", room.number))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["balance_due"], "56000.00")
        self.assertEqual(len(res.data["transactions"]), 1)

    def test_bill_includes_bar_and_restaurant_charges(self):
        room = occupy_room(
            create_room(), self.now - timedelta(days=1), self.now + timedelta(days=1),
            total_price=Decimal("2400"),
            paid_amount=Decimal("400"),
        )
        BarSale.objects.create(
            product="Red Wine", quantity=2, total_price=Decimal("50"), room="101"
        )
        BarSale.objects.create(
            product="Red Wine", quantity=1, total_price=Decimal("25"),
            room="101", sold_at=self.now - timedelta(days=5),
        )
        Order.objects.create(
            code="ORD001", table=4, items="Caesar Salad", price=Decimal("40"), room="101"
        )
        Order.objects.create(
            code="ORD002", table=9, items="Ribeye Steak", price=Decimal("45")
        )

        res = self.client.get(room_action_url("bill", room.number))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["room"], "2400.00")
        self.assertEqual(res.data["bar"], "50.00")
        self.assertEqual(res.data["restaurant"], "40.00")
        self.assertEqual(res.data["total"], "2490.00")
        self.assertEqual(res.data["balance_due"], "2090.00")

    def test_stats(self):
        occupy_room(
            create_room(number="101"),
            self.now - timedelta(days=1),
            self.now + timedelta(days=1),
        )
        occupy_room(
            create_room(number="102"),
            self.now + timedelta(days=3),
            self.now + timedelta(days=5),
        )
        create_room(number="103")
        create_room(number="104", status=Room.RoomStatus.CLEANING)

        res = self.client.get(reverse("room:rooms-stats"))

        self.assertEqual(
            res.data, {"total": 4, "booked": 1, "occupied": 1, "available": 1}
        )

    def test_list_with_date_attaches_availability(self):
        occupy_room(
            create_room(number="101"),
            timezone.make_aware(datetime(2030, 5, 1, 12)),
            timezone.make_aware(datetime(2030, 5, 3, 11)),
        )
        create_room(number="102")

        res = self.client.get(rooms_url(), {"date": "2030-05-02"})

        self.assertEqual(
            res.data[0]["availability"], {"status": "BOOKED", "name": "John Smith"}
        )
        self.assertEqual(res.data[1]["availability"]["status"], "AVAILABLE")

    def test_list_with_bad_date(self):
        res = self.client.get(rooms_url(), {"date": "02/05/2030"})

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_filter_by_status(self):
        create_room(number="101")
        create_room(number="102", status=Room.RoomStatus.MAINTENANCE)

        res = self.client.get(rooms_url(), {"status": "Maintenance"})

        self.assertEqual(len(res.data), 1)
        self.assertEqual(res.data[0]["number"], "102")


class AdminRoomApiTests(APITestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = create_admin()
        self.client.force_authenticate(self.admin)

    def test_create_room_success(self):
        payload = {
            "number": "900",
            "type": "Suite",
            "price": "3000.00",
            "facilities": ["AC", "Mini Bar"],
        }

        res = self.client.post(rooms_url(), payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["status"], "Available")
        self.assertTrue(Room.objects.filter(number="900").exists())

    def test_create_duplicate_number(self):
        create_room(number="900")

        res = self.client.post(
            rooms_url(), {"number": "900", "type": "Suite", "price": "3000.00"}
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_patch_room_success(self):
        room = create_room(number="901")

        res = self.client.patch(room_detail_url(room.number), {"price": "1500.00"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        room.refresh_from_db()
        self.assertEqual(room.price, Decimal("1500.00"))

    def test_patch_cannot_mark_room_occupied(self):
        room = create_room(number="902")

        res = self.client.patch(room_detail_url(room.number), {"status": "Occupied"})

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_patch_occupied_room_to_available_clears_stay(self):
        now = timezone.now()
        room = occupy_room(
            create_room(number="904"), now - timedelta(days=1), now + timedelta(days=1)
        )

        res = self.client.patch(room_detail_url(room.number), {"status": "Available"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "Available")
        self.assertIsNone(res.data["guest"])
        self.assertNotIn("balance_due", res.data)
        room.refresh_from_db()
        self.assertIsNone(room.guest)
        self.assertIsNone(room.check_in)
        self.assertIsNone(room.total_price)

    def test_patch_price_keeps_current_stay(self):
        now = timezone.now()
        room = occupy_room(
            create_room(number="905"), now - timedelta(days=1), now + timedelta(days=1)
        )

        res = self.client.patch(room_detail_url(room.number), {"price": "1500.00"})

        self.assertEqual(res.data["status"], "Occupied")
        self.assertEqual(res.data["guest"], "John Smith")

    def test_patch_missing_room(self):
        res = self.client.patch(room_detail_url("404"), {"price": "1.00"})

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_room_success(self):
        room = create_room(number="903")

        res = self.client.delete(room_detail_url(room.number))

        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Room.objects.filter(number="903").exists())


class RoomCalendarApiTests(APITestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = create_user()
        self.client.force_authenticate(self.user)
        self.room = create_room(number="500")
        self.url = room_action_url("get-calendar", self.room.number)

    def test_get_calendar_success(self):
        check_in = timezone.localdate() + timedelta(days=2)
        check_out = check_in + timedelta(days=2)
        occupy_room(
            self.room,
            timezone.make_aware(datetime.combine(check_in, datetime.min.time())),
            timezone.make_aware(datetime.combine(check_out, datetime.min.time())),
        )

        date_from = check_in - timedelta(days=1)
        date_to = check_out + timedelta(days=1)

        res = self.client.get(
            self.url, {"date_from": date_from.isoformat(), "date_to": date_to.isoformat()}
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 5)
        availability = {item["date"]: item["available"] for item in res.data}
        self.assertTrue(availability[date_from.isoformat()])
        self.assertFalse(availability[check_in.isoformat()])
        self.assertFalse(availability[check_out.isoformat()])
        self.assertTrue(availability[date_to.isoformat()])

    def test_calendar_requires_dates(self):
        res = self.client.get(self.url)

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_calendar_rejects_reversed_range(self):
        res = self.client.get(
            self.url,
            {
                "date_from": date(2030, 1, 5).isoformat(),
                "date_to": date(2030, 1, 1).isoformat(),
            },
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_calendar_rejects_impossible_dates(self):
        res = self.client.get(
            self.url, {"date_from": "2030-02-30", "date_to": "2030-03-02"}
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
