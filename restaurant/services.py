import re

from restaurant.models import Order

CODE_PREFIX = "ORD"


def next_order_code() -> str:
    """Next sequential order code, e.g. ORD001, ORD002."""
    highest = 0
    for code in Order.objects.values_list("code", flat=True):
        match = re.fullmatch(rf"{CODE_PREFIX}(\d+)", code)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{CODE_PREFIX}{highest + 1:03d}"
