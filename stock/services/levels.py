from decimal import Decimal

CRITICAL = "critical"
LOW = "low"
NORMAL = "normal"

LOW_MARGIN = Decimal("1.2")


def stock_status(current, minimum) -> str:
    """critical below the minimum, low within 20% above it, else normal."""
    current = current or 0
    minimum = minimum or 0
    if current < minimum:
        return CRITICAL
    if current < minimum * LOW_MARGIN:
        return LOW
    return NORMAL


def stock_summary(items) -> dict:
    summary = {"total": 0, CRITICAL: 0, LOW: 0, NORMAL: 0}
    for item in items:
        summary["total"] += 1
        summary[stock_status(item.current, item.min_level)] += 1
    return summary
