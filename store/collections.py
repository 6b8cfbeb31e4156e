from typing import NamedTuple, Optional

from django.apps import apps

from store.exceptions import UnknownCollection


class Collection(NamedTuple):
    name: str
    model_label: str
    natural_key: str
    value_field: Optional[str] = None
    embedded: tuple = ()

    @property
    def model(self):
        return apps.get_model(self.model_label)


COLLECTIONS = {
    collection.name: collection
    for collection in (
        Collection("rooms", "room.Room", "number", embedded=("transactions",)),
        Collection("halls", "hall.Hall", "name"),
        Collection("menuItems", "restaurant.MenuItem", "name"),
        Collection("orders", "restaurant.Order", "code"),
        Collection("barProducts", "bar.BarProduct", "name"),
        Collection("barSales", "bar.BarSale", "id"),
        Collection("stockItems", "stock.StockItem", "name"),
        Collection("dailyNotes", "dashboard.DailyNote", "date", "content"),
        Collection("bookings", "booking.Booking", "id"),
        Collection("guests", "guest.Guest", "id"),
    )
}


def get_collection(name: str) -> Collection:
    try:
        return COLLECTIONS[name]
    except KeyError:
        raise UnknownCollection(name) from None
