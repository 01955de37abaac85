"""Display formatting helpers."""

from decimal import ROUND_HALF_UP, Decimal


def format_currency(amount: float) -> str:
    """Format an amount as Vietnamese dong, e.g. ``25.000 ₫``.

    Rounding to whole dong happens here only, never during accumulation.
    """
    value = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return f"{value:,} ₫".replace(",", ".")


def format_distance(km: float) -> str:
    """Format a distance as metres below 1 km, else km with one decimal."""
    if km < 1:
        return f"{round(km * 1000)}m"
    return f"{km:.1f}km"
