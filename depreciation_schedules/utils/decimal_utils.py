"""Helpers for Decimal normalization, rounding, and display."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a snapshot or adapter.

    Returns:
        Decimal: Normalized numeric value. Blank or unparseable values
        become zero.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return ZERO
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return ZERO
    return result if result.is_finite() else ZERO


def round_money(value) -> Decimal:
    """Round an amount to two decimal places (half up)."""
    return coerce_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_inr(value) -> str:
    """Format an amount as Indian rupees with lakh/crore grouping.

    Example: ``format_inr(Decimal("1234567.5"))`` -> ``"₹12,34,567.50"``.
    """
    amount = round_money(value)
    sign = "-" if amount < 0 else ""
    whole, fraction = f"{abs(amount):.2f}".split(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join([*groups, tail])
    return f"₹{sign}{whole}.{fraction}"


def format_rate(rate, places: int | None = None) -> str:
    """Format a fractional rate as a percentage string.

    Args:
        rate: Rate expressed as a fraction (0.15 for 15%).
        places: Fixed decimal places; None trims trailing zeros.

    Returns:
        str: Percentage such as ``"15%"`` or ``"18.10%"``.
    """
    percent = coerce_decimal(rate) * 100
    if places is not None:
        quantum = Decimal(1).scaleb(-places)
        return f"{percent.quantize(quantum, rounding=ROUND_HALF_UP)}%"
    text = format(percent.normalize(), "f")
    return f"{text}%"


__all__ = [
    "TWO_PLACES",
    "ZERO",
    "coerce_decimal",
    "round_money",
    "format_inr",
    "format_rate",
]
