"""
Application state assembled for a dashboard request.

``HotelState.load`` reads every collection once, runs rooms and halls through
the occupancy resolver and substitutes sample records for any collection that
is empty or could not be read. The reads are gathered as one batch, but
``sync_to_async`` keeps them thread sensitive so they share the request's
database connection and run one after another. Views then keep the snapshot
in step with their own writes through ``commit``, which only merges a change
once the store has acknowledged it.
"""
import asyncio
import logging

from asgiref.sync import async_to_sync, sync_to_async
from django.db import DatabaseError
from django.utils import timezone

from bar.services.inventory import product_status
from booking.services.availability import local_day, stay_covers
from booking.services.occupancy import ENGAGED_STATUS, HALL, ROOM, resolve_all
from booking.services.pricing import ZERO, to_money
from dashboard.seed import seed_records
from stock.services.levels import stock_status
from store.adapter import default_store
from store.collections import get_collection

logger = logging.getLogger(__name__)

STATE_COLLECTIONS = (
    "rooms",
    "halls",
    "guests",
    "menuItems",
    "orders",
    "barProducts",
    "barSales",
    "stockItems",
    "bookings",
)

RESOLVED_KINDS = {"rooms": ROOM, "halls": HALL}

ROOM_STATUSES = ("Available", "Occupied", "Cleaning", "Maintenance")


class HotelState:
    def __init__(self, now=None):
        self.now = now or timezone.now()
        self.loading = True
        self.seeded = set()
        self._collections = {name: [] for name in STATE_COLLECTIONS}

    @classmethod
    def load(cls, store=default_store, now=None) -> "HotelState":
        state = cls(now)
        async_to_sync(state._fetch_all)(store)
        return state

    async def _fetch_all(self, store) -> None:
        results = await asyncio.gather(
            *(sync_to_async(store.list)(name) for name in STATE_COLLECTIONS),
            return_exceptions=True,
        )
        for name, result in zip(STATE_COLLECTIONS, results):
            if isinstance(result, DatabaseError):
                logger.warning(f"Could not load '{name}', using sample data: {result}")
                result = []
            elif isinstance(result, BaseException):
                raise result

            if not result:
                result = seed_records(name, self.now)
                if result:
                    self.seeded.add(name)
            self._collections[name] = self._resolved(name, result)

        self.loading = False

    def _resolved(self, name, records) -> list[dict]:
        if name in RESOLVED_KINDS:
            return resolve_all(records, RESOLVED_KINDS[name], self.now)
        if name == "barProducts":
            return [
                {**record, "status": product_status(record.get("stock"))}
                for record in records
            ]
        if name == "stockItems":
            return [
                {
                    **record,
                    "status": stock_status(record.get("current"), record.get("min_level")),
                }
                for record in records
            ]
        return list(records)

    def __getitem__(self, name) -> list[dict]:
        return self._collections[name]

    @property
    def rooms(self):
        return self._collections["rooms"]

    @property
    def halls(self):
        return self._collections["halls"]

    @property
    def orders(self):
        return self._collections["orders"]

    def snapshot(self) -> dict:
        return {name: list(records) for name, records in self._collections.items()}

    def _key(self, name) -> str:
        return get_collection(name).natural_key

    def apply(self, name, key, changes: dict) -> None:
        """Merge ``changes`` into the record whose natural key is ``key``."""
        key_field = self._key(name)
        records = []
        for record in self._collections[name]:
            if record.get(key_field) == key:
                record = {**record, **changes}
            records.append(record)
        self._collections[name] = self._resolved(name, records)

    def add(self, name, record: dict) -> None:
        key_field = self._key(name)
        records = [*self._collections[name], record]
        records.sort(key=lambda item: str(item.get(key_field, "")))
        self._collections[name] = self._resolved(name, records)

    def remove(self, name, key) -> None:
        key_field = self._key(name)
        self._collections[name] = [
            record
            for record in self._collections[name]
            if record.get(key_field) != key
        ]

    def commit(self, result, name, key=None, changes=None, operation="update") -> bool:
        """
        Merge a write into local state once the store has acknowledged it.
        A failed ``result`` leaves the state untouched.
        """
        if not result.ok:
            return False

        if operation == "create":
            record = dict(changes or {})
            if result.id is not None:
                record.setdefault("id", result.id)
            self.add(name, record)
        elif operation == "delete":
            self.remove(name, key)
        else:
            self.apply(name, key, changes or {})
        return True

    def summary(self) -> dict:
        rooms_by_status = {status: 0 for status in ROOM_STATUSES}
        active_guests = 0
        room_revenue = ZERO
        for room in self.rooms:
            status = room.get("status")
            rooms_by_status[status] = rooms_by_status.get(status, 0) + 1
            if status == ENGAGED_STATUS[ROOM]:
                active_guests += room.get("people_count") or 1
                room_revenue += to_money(room.get("total_price"))

        hall_revenue = sum(
            (
                to_money(hall.get("total_price"))
                for hall in self.halls
                if hall.get("status") == ENGAGED_STATUS[HALL]
            ),
            ZERO,
        )
        bar_revenue = sum(
            (to_money(sale.get("total_price")) for sale in self["barSales"]), ZERO
        )

        return {
            "total_rooms": len(self.rooms),
            "rooms_by_status": rooms_by_status,
            "active_guests": active_guests,
            "restaurant_orders": len(self.orders),
            "open_orders": sum(
                1 for order in self.orders if order.get("status") != "served"
            ),
            "revenue": {
                "rooms": room_revenue,
                "halls": hall_revenue,
                "bar": bar_revenue,
                "total": room_revenue + hall_revenue + bar_revenue,
            },
        }

    def daily_summary(self, day=None) -> dict:
        """Figures for one calendar day: payments taken, rooms in use, orders."""
        day = day or timezone.localdate(self.now)

        transactions = []
        occupied_rooms = 0
        active_guests = 0
        for room in self.rooms:
            for entry in room.get("transactions") or ():
                if local_day(entry.get("date")) == day:
                    transactions.append(
                        {
                            **entry,
                            "room_number": room.get("number"),
                            "guest": room.get("guest"),
                        }
                    )

            if room.get("status") == ENGAGED_STATUS[ROOM] and stay_covers(room, day):
                occupied_rooms += 1
                active_guests += room.get("people_count") or 1

        restaurant_orders = sum(
            1 for order in self.orders if local_day(order.get("created_at")) == day
        )

        return {
            "date": day,
            "revenue": sum((to_money(entry.get("amount")) for entry in transactions), ZERO),
            "transactions": transactions,
            "occupied_rooms": occupied_rooms,
            "total_rooms": len(self.rooms),
            "active_guests": active_guests,
            "restaurant_orders": restaurant_orders,
        }
