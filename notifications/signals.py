import logging

from django.conf import settings
from django.db import transaction
from django.dispatch import receiver

from notifications.tasks import send_telegram_notification
from store.signals import record_written, write_failed

logger = logging.getLogger(__name__)


def notify_staff(message: str) -> None:
    if not settings.TELEGRAM_BOT_TOKEN:
        logger.debug("Telegram is not configured, notification skipped")
        return
    transaction.on_commit(lambda: send_telegram_notification.delay(message))


def _day(value):
    return value.date().isoformat() if hasattr(value, "date") else value


@receiver(record_written)
def front_desk_notification(sender, collection, operation, key, payload, **kwargs):
    status = payload.get("status")

    if collection == "bookings" and operation == "create":
        message = (
            "🆕 New booking request\n"
            f"Guest: {payload.get('customer_name')}\n"
            f"Room: {payload.get('room')}\n"
            f"Dates: {_day(payload.get('check_in_date'))} - "
            f"{_day(payload.get('check_out_date'))}"
        )
    elif collection == "rooms" and status == "Occupied" and payload.get("guest"):
        message = (
            "🛎 Guest checked in\n"
            f"Room: {key}\n"
            f"Guest: {payload.get('guest')}\n"
            f"Check-out: {_day(payload.get('check_out'))}"
        )
    elif collection == "rooms" and status == "Cleaning":
        message = f"🧹 Room {key} checked out and waiting for cleaning"
    elif collection == "halls" and status == "Booked" and payload.get("customer_name"):
        message = (
            "🎉 Hall booked\n"
            f"Hall: {key}\n"
            f"Customer: {payload.get('customer_name')}\n"
            f"From: {payload.get('check_in')}\n"
            f"Total: {payload.get('total_price')}"
        )
    else:
        return

    notify_staff(message)


@receiver(write_failed)
def write_failure_notification(sender, collection, operation, error, **kwargs):
    notify_staff(f"⚠️ Could not save {operation} on {collection}\nError: {error}")
