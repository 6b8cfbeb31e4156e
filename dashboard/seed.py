"""
Sample records shown when a collection is empty or cannot be read, so a
fresh install still renders a populated dashboard.
"""
from datetime import timedelta
from decimal import Decimal

ROOMS = [
    {
        "number": "101",
        "type": "Standard Single",
        "status": "Occupied",
        "guest": "John Smith",
        "check_in": "2024-01-10T00:00:00+05:30",
        "check_out": "2024-01-12T00:00:00+05:30",
        "price": Decimal("120"),
    },
    {"number": "102", "type": "Deluxe Double", "status": "Available", "price": Decimal("180")},
    {"number": "103", "type": "Suite", "status": "Cleaning", "price": Decimal("300")},
    {
        "number": "201",
        "type": "Standard Double",
        "status": "Occupied",
        "guest": "Sarah Johnson",
        "check_in": "2024-01-09T00:00:00+05:30",
        "check_out": "2024-01-11T00:00:00+05:30",
        "price": Decimal("150"),
    },
    {"number": "202", "type": "Deluxe Single", "status": "Maintenance", "price": Decimal("140")},
    {"number": "203", "type": "Suite", "status": "Available", "price": Decimal("320")},
]

MENU_ITEMS = [
    {"name": "Grilled Salmon", "category": "Main Course", "price": Decimal("28"), "status": "Available"},
    {"name": "Caesar Salad", "category": "Appetizer", "price": Decimal("12"), "status": "Available"},
    {"name": "Ribeye Steak", "category": "Main Course", "price": Decimal("45"), "status": "Out of Stock"},
    {"name": "Chocolate Mousse", "category": "Dessert", "price": Decimal("9"), "status": "Available"},
]

# (code, status, table, items, price, minutes ago)
ORDERS = [
    ("ORD001", "preparing", 5, "Grilled Salmon, Caesar Salad", Decimal("40"), 15),
    ("ORD002", "pending", 12, "Ribeye Steak, Chocolate Mousse", Decimal("54"), 5),
    ("ORD003", "ready", 3, "Caesar Salad, Chocolate Mousse", Decimal("21"), 25),
]

BAR_PRODUCTS = [
    {"name": "Premium Whiskey", "type": "Whiskey", "stock": 24, "price": Decimal("15")},
    {"name": "Vodka Premium", "type": "Vodka", "stock": 8, "price": Decimal("12")},
    {"name": "Craft Beer", "type": "Beer", "stock": 48, "price": Decimal("6")},
    {"name": "Red Wine", "type": "Wine", "stock": 16, "price": Decimal("25")},
    {"name": "Gin Tonic", "type": "Gin", "stock": 5, "price": Decimal("10")},
    {"name": "Champagne", "type": "Champagne", "stock": 12, "price": Decimal("40")},
]

# (product, quantity, total price, room, minutes ago)
BAR_SALES = [
    ("Premium Whiskey", 2, Decimal("30"), "201", 5),
    ("Red Wine", 1, Decimal("25"), None, 12),
    ("Craft Beer", 4, Decimal("24"), None, 18),
    ("Champagne", 1, Decimal("40"), "101", 25),
]

STOCK_ITEMS = [
    {"name": "Bath Towels", "category": "Linens", "current": 15, "min_level": 25,
     "max_level": 100, "unit": "pieces", "supplier": "Hotel Supplies Co."},
    {"name": "Toilet Paper", "category": "Bathroom", "current": 45, "min_level": 30,
     "max_level": 200, "unit": "rolls", "supplier": "Clean Supply Inc."},
    {"name": "Bed Sheets", "category": "Linens", "current": 8, "min_level": 20,
     "max_level": 80, "unit": "sets", "supplier": "Hotel Supplies Co."},
    {"name": "Hand Soap", "category": "Bathroom", "current": 35, "min_level": 15,
     "max_level": 60, "unit": "bottles", "supplier": "Clean Supply Inc."},
    {"name": "Coffee Pods", "category": "Room Service", "current": 120, "min_level": 50,
     "max_level": 300, "unit": "pods", "supplier": "Beverage Direct"},
    {"name": "Vacuum Bags", "category": "Cleaning", "current": 5, "min_level": 10,
     "max_level": 50, "unit": "pieces", "supplier": "Clean Supply Inc."},
]


def seed_records(collection: str, now) -> list[dict]:
    """Fresh copies of the sample records for ``collection``."""
    if collection == "rooms":
        return [dict(room) for room in ROOMS]
    if collection == "menuItems":
        return [dict(item) for item in MENU_ITEMS]
    if collection == "orders":
        return [
            {
                "code": code,
                "status": status,
                "table": table,
                "items": items,
                "price": price,
                "created_at": (now - timedelta(minutes=minutes)).isoformat(),
            }
            for code, status, table, items, price, minutes in ORDERS
        ]
    if collection == "barProducts":
        return [dict(product) for product in BAR_PRODUCTS]
    if collection == "barSales":
        return [
            {
                "product": product,
                "quantity": quantity,
                "total_price": total_price,
                "room": room,
                "sold_at": (now - timedelta(minutes=minutes)).isoformat(),
            }
            for product, quantity, total_price, room, minutes in BAR_SALES
        ]
    if collection == "stockItems":
        return [dict(item) for item in STOCK_ITEMS]
    return []
