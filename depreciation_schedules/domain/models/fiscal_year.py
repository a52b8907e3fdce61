"""Domain models for Indian financial years."""

from dataclasses import dataclass
from datetime import date

FISCAL_YEAR_START_MONTH = 4


def is_leap_year(year: int) -> bool:
    """Return True when ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


@dataclass(frozen=True)
class FiscalYearWindow:
    """Inclusive date window of a financial year.

    Attributes:
        start: First day of the year (1 April for Indian financial years).
        end: Last day of the year, inclusive.
        label: Display label such as ``"2024-25"``.
    """

    start: date
    end: date
    label: str = ""

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"Fiscal year end {self.end} precedes start {self.start}"
            )

    @classmethod
    def for_end_year(cls, end_year: int) -> "FiscalYearWindow":
        """Build the April-March year ending in ``end_year``."""
        start_year = end_year - 1
        return cls(
            start=date(start_year, FISCAL_YEAR_START_MONTH, 1),
            end=date(end_year, FISCAL_YEAR_START_MONTH - 1, 31),
            label=f"{start_year}-{str(end_year)[-2:]}",
        )

    @classmethod
    def from_label(cls, label: str) -> "FiscalYearWindow":
        """Parse a label such as ``"2024-25"`` or ``"2024-2025"``.

        Raises:
            ValueError: If the label is not a consecutive year pair.
        """
        try:
            first, second = label.strip().split("-")
            start_year = int(first)
        except ValueError as exc:
            raise ValueError(f"Invalid fiscal year label: {label!r}") from exc
        end_year = start_year + 1
        if second.strip() not in (str(end_year), str(end_year)[-2:]):
            raise ValueError(f"Invalid fiscal year label: {label!r}")
        return cls.for_end_year(end_year)

    @property
    def days_in_year(self) -> int:
        """Return 366 when the end calendar year is a leap year."""
        return 366 if is_leap_year(self.end.year) else 365

    def contains(self, value: date | None) -> bool:
        """Return True when ``value`` falls inside the window."""
        return value is not None and self.start <= value <= self.end

    def next(self) -> "FiscalYearWindow":
        """Return the following April-March year."""
        return FiscalYearWindow.for_end_year(self.end.year + 1)


@dataclass(frozen=True)
class DaysUsed:
    """Days an asset was in use within a fiscal year."""

    days_used: int
    days_in_year: int


__all__ = [
    "FISCAL_YEAR_START_MONTH",
    "is_leap_year",
    "FiscalYearWindow",
    "DaysUsed",
]
