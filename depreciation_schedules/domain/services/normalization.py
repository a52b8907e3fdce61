"""Domain normalization helpers.

The engines never raise on malformed input: amounts clamp to zero and
unusable dates fall back to the fiscal-year boundary (None).
"""

from datetime import date, datetime
from decimal import Decimal

from depreciation_schedules.domain.constants import UNCLASSIFIED
from depreciation_schedules.domain.models.assets import DepreciationMethod
from depreciation_schedules.utils.decimal_utils import ZERO, coerce_decimal


def normalize_amount(value) -> Decimal:
    """Normalize a money amount.

    Args:
        value: Raw amount (Decimal, number, string or None).

    Returns:
        Decimal: The amount, or zero when blank, unparseable or negative.
    """
    amount = coerce_decimal(value)
    return amount if amount > 0 else ZERO


def normalize_date(value) -> date | None:
    """Normalize a date value.

    Args:
        value: A ``date``, ``datetime`` or ISO ``YYYY-MM-DD`` string.

    Returns:
        date | None: Parsed date, or None when missing or invalid.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return None
        try:
            return date.fromisoformat(cleaned[:10])
        except ValueError:
            return None
    return None


def normalize_method(value) -> DepreciationMethod:
    """Resolve a Companies Act method, defaulting to WDV."""
    if isinstance(value, DepreciationMethod):
        return value
    try:
        return DepreciationMethod(str(value).strip().upper())
    except ValueError:
        return DepreciationMethod.WDV


def normalize_type_key(value: str | None) -> str:
    """Return the grouping key for an asset or block type."""
    if not value:
        return UNCLASSIFIED
    cleaned = value.strip()
    return cleaned or UNCLASSIFIED


def humanize_type_key(value: str) -> str:
    """Turn ``general_machinery`` into ``General Machinery``."""
    return " ".join(part.capitalize() for part in value.split("_") if part)


__all__ = [
    "normalize_amount",
    "normalize_date",
    "normalize_method",
    "normalize_type_key",
    "humanize_type_key",
]
