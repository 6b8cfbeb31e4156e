import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent with collection, operation, payload and error when a write fails.
write_failed = Signal()

# Sent with collection, operation, key and payload after a write succeeds.
record_written = Signal()


@receiver(write_failed)
def log_write_failure(sender, collection, operation, error, **kwargs):
    logger.error(f"Store {operation} on '{collection}' failed: {error}")
