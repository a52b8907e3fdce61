"""Domain models for depreciation calculation results.

Results are derived entirely from their inputs and are recomputed on every
change; nothing here is persisted on its own.
"""

from dataclasses import dataclass, field
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class Working:
    """One line of the itemized calculation shown for audit.

    Attributes:
        description: What the line computes.
        calculation: Formula with the actual numbers substituted.
        amount: Result of the line, rounded to two decimals.
        note: Optional advisory, e.g. when a cap was applied.
    """

    description: str
    calculation: str
    amount: Decimal
    note: str | None = None


@dataclass(frozen=True)
class CompaniesActResult:
    """Companies Act result for a single asset."""

    depreciation_for_year: Decimal = ZERO
    closing_wdv: Decimal = ZERO
    workings: tuple[Working, ...] = ()
    profit_or_loss: Decimal = ZERO
    opening_gross_block: Decimal = ZERO
    gross_block_additions: Decimal = ZERO
    disposals_cost: Decimal = ZERO
    closing_gross_block: Decimal = ZERO
    opening_accumulated_depreciation: Decimal = ZERO
    closing_accumulated_depreciation: Decimal = ZERO
    opening_wdv: Decimal = ZERO
    sale_value: Decimal = ZERO


@dataclass(frozen=True)
class IncomeTaxResult:
    """Income Tax result for a single block of assets."""

    opening_wdv: Decimal = ZERO
    additions: Decimal = ZERO
    additions_full_rate: Decimal = ZERO
    additions_half_rate: Decimal = ZERO
    sale_value: Decimal = ZERO
    wdv_for_dep: Decimal = ZERO
    depreciation_for_year: Decimal = ZERO
    additional_depreciation: Decimal = ZERO
    closing_wdv: Decimal = ZERO
    short_term_capital_gain_loss: Decimal = ZERO
    workings: tuple[Working, ...] = ()


@dataclass
class CompaniesActTypeSummary:
    """Aggregated Companies Act figures for one asset type."""

    name: str
    internal_name: str
    opening_gross_block: Decimal = ZERO
    additions: Decimal = ZERO
    disposals_cost: Decimal = ZERO
    closing_gross_block: Decimal = ZERO
    opening_accumulated_depreciation: Decimal = ZERO
    depreciation_for_year: Decimal = ZERO
    closing_accumulated_depreciation: Decimal = ZERO
    opening_net_block: Decimal = ZERO
    closing_net_block: Decimal = ZERO


@dataclass
class IncomeTaxBlockSummary:
    """Aggregated Income Tax figures for one block type."""

    name: str
    internal_name: str
    opening_wdv: Decimal = ZERO
    additions: Decimal = ZERO
    sale_value: Decimal = ZERO
    wdv_for_dep: Decimal = ZERO
    depreciation_for_year: Decimal = ZERO
    closing_net_block: Decimal = ZERO
    short_term_capital_gain_loss: Decimal = ZERO


COMPANIES_ACT_SUMMARY_FIELDS = (
    "opening_gross_block",
    "additions",
    "disposals_cost",
    "closing_gross_block",
    "opening_accumulated_depreciation",
    "depreciation_for_year",
    "closing_accumulated_depreciation",
    "opening_net_block",
    "closing_net_block",
)

INCOME_TAX_SUMMARY_FIELDS = (
    "opening_wdv",
    "additions",
    "sale_value",
    "wdv_for_dep",
    "depreciation_for_year",
    "closing_net_block",
    "short_term_capital_gain_loss",
)


@dataclass(frozen=True)
class CompaniesActSummary:
    """Companies Act figures grouped by asset type, with totals."""

    by_type: dict[str, CompaniesActTypeSummary] = field(default_factory=dict)
    totals: CompaniesActTypeSummary = field(
        default_factory=lambda: CompaniesActTypeSummary(
            name="TOTAL",
            internal_name="totals",
        )
    )


@dataclass(frozen=True)
class IncomeTaxSummary:
    """Income Tax figures grouped by block type, with totals."""

    by_type: dict[str, IncomeTaxBlockSummary] = field(default_factory=dict)
    totals: IncomeTaxBlockSummary = field(
        default_factory=lambda: IncomeTaxBlockSummary(
            name="TOTAL",
            internal_name="totals",
        )
    )


__all__ = [
    "Working",
    "CompaniesActResult",
    "IncomeTaxResult",
    "CompaniesActTypeSummary",
    "IncomeTaxBlockSummary",
    "COMPANIES_ACT_SUMMARY_FIELDS",
    "INCOME_TAX_SUMMARY_FIELDS",
    "CompaniesActSummary",
    "IncomeTaxSummary",
]
