from django.core.management.base import BaseCommand
from django.utils import timezone

from dashboard.seed import seed_records
from dashboard.state import STATE_COLLECTIONS
from store.adapter import default_store


class Command(BaseCommand):
    help = "Load the sample rooms, menu, bar and stock records into empty collections"

    def handle(self, *args, **options):
        now = timezone.now()

        for name in STATE_COLLECTIONS:
            records = seed_records(name, now)
            if not records:
                continue
            if default_store.list(name):
                self.stdout.write(f"{name}: already has records, skipped")
                continue

            failed = 0
            for record in records:
                if not default_store.create(name, record).ok:
                    failed += 1

            self.stdout.write(
                self.style.SUCCESS(f"{name}: {len(records) - failed} records loaded")
            )
            if failed:
                self.stderr.write(f"{name}: {failed} records could not be saved")
