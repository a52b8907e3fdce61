"""Fiscal-year day-count helpers."""

from datetime import date

from depreciation_schedules.domain.models.fiscal_year import (
    FISCAL_YEAR_START_MONTH,
    DaysUsed,
    FiscalYearWindow,
    is_leap_year,
)


def days_in_fiscal_year(value: date) -> int:
    """Return the length of the April-March year containing ``value``."""
    end_year = (
        value.year + 1 if value.month >= FISCAL_YEAR_START_MONTH
        else value.year
    )
    return 366 if is_leap_year(end_year) else 365


def compute_days_used(
    purchase_date: date | None,
    disposal_date: date | None,
    window: FiscalYearWindow,
) -> DaysUsed:
    """Count the days an asset was in use within ``window``.

    Both endpoints are inclusive. A purchase before the window never
    extends it backwards; a disposal outside the window is ignored.

    Args:
        purchase_date: Date put to use, if known.
        disposal_date: Date of disposal, if any.
        window: Fiscal year being computed.

    Returns:
        DaysUsed: Days in use (never negative) and days in the year.
    """
    effective_start = window.start
    if purchase_date is not None and purchase_date > effective_start:
        effective_start = purchase_date

    effective_end = window.end
    if window.contains(disposal_date):
        effective_end = disposal_date

    days_in_year = days_in_fiscal_year(effective_start)
    if effective_end < effective_start:
        return DaysUsed(days_used=0, days_in_year=days_in_year)
    days_used = (effective_end - effective_start).days + 1
    return DaysUsed(days_used=max(0, days_used), days_in_year=days_in_year)


__all__ = ["days_in_fiscal_year", "compute_days_used"]
