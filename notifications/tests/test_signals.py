from unittest.mock import patch

from django.test import TestCase, override_settings

from room.models import Room
from store.adapter import default_store

DELAY = "notifications.signals.send_telegram_notification.delay"


@override_settings(TELEGRAM_BOT_TOKEN="123:abc")
class FrontDeskNotificationTests(TestCase):
    def setUp(self):
        Room.objects.create(number="101", type="Suite", price=3000)

    @patch(DELAY)
    def test_checkout_is_announced_after_commit(self, delay):
        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            default_store.update("rooms", "number", "101", {"status": "Cleaning"})

        self.assertEqual(len(callbacks), 1)
        delay.assert_called_once_with(
            "🧹 Room 101 checked out and waiting for cleaning"
        )

    @patch(DELAY)
    def test_check_in_message(self, delay):
        with self.captureOnCommitCallbacks(execute=True):
            default_store.update(
                "rooms",
                "number",
                "101",
                {
                    "status": "Occupied",
                    "guest": "Jane Roe",
                    "check_out": "2025-03-12T11:00:00+05:30",
                },
            )

        message = delay.call_args.args[0]
        self.assertIn("Guest checked in", message)
        self.assertIn("Guest: Jane Roe", message)
        self.assertIn("Check-out: 2025-03-12", message)

    @patch(DELAY)
    def test_edit_of_occupied_room_is_not_a_check_in(self, delay):
        Room.objects.filter(number="101").update(status="Occupied", guest="Jane Roe")

        with self.captureOnCommitCallbacks(execute=True):
            default_store.update(
                "rooms", "number", "101", {"status": "Occupied", "price": 3200}
            )

        delay.assert_not_called()

    @patch(DELAY)
    def test_routine_writes_are_quiet(self, delay):
        with self.captureOnCommitCallbacks(execute=True):
            default_store.update("rooms", "number", "101", {"type": "Deluxe Suite"})

        delay.assert_not_called()

    @patch(DELAY)
    def test_failed_write_is_reported(self, delay):
        with self.captureOnCommitCallbacks(execute=True):
            result = default_store.update(
                "rooms", "number", "101", {"check_out": "not a date"}
            )

        self.assertFalse(result.ok)
        self.assertIn("Could not save update on rooms", delay.call_args.args[0])

    @override_settings(TELEGRAM_BOT_TOKEN="")
    @patch(DELAY)
    def test_nothing_sent_without_token(self, delay):
        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            default_store.update("rooms", "number", "101", {"status": "Cleaning"})

        self.assertEqual(callbacks, [])
        delay.assert_not_called()
