"""Domain models for the deferred tax reconciliation."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DeferredTaxInputs:
    """Aggregate figures from both regimes.

    Attributes:
        companies_act_depreciation: Total book depreciation for the year.
        income_tax_depreciation: Total tax depreciation for the year.
        opening_companies_act_wdv: Opening net block under the Companies Act.
        opening_income_tax_wdv: Opening WDV of all Income Tax blocks.
        tax_rate: Applicable tax rate in percent (25 for 25%).
        accounting_profit: Profit before tax for the disclosure note.
    """

    companies_act_depreciation: Decimal
    income_tax_depreciation: Decimal
    opening_companies_act_wdv: Decimal
    opening_income_tax_wdv: Decimal
    tax_rate: Decimal = Decimal("25")
    accounting_profit: Decimal = Decimal("0")


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry recording the deferred tax movement."""

    debit: str
    credit: str
    amount: Decimal
    narration: str


@dataclass(frozen=True)
class TaxExpenseDisclosure:
    """Current plus deferred tax expense for the P&L note.

    ``deferred_tax`` is the P&L charge (negative when it is a credit).
    """

    accounting_profit: Decimal
    taxable_profit: Decimal
    current_tax: Decimal
    deferred_tax: Decimal
    total_tax_expense: Decimal


@dataclass(frozen=True)
class DeferredTaxReconciliation:
    """Opening, movement and closing deferred tax with presentation."""

    opening_timing_difference: Decimal
    opening_deferred_tax: Decimal
    movement_timing_difference: Decimal
    movement_deferred_tax: Decimal
    closing_timing_difference: Decimal
    closing_deferred_tax: Decimal
    journal_entry: JournalEntry
    disclosure: TaxExpenseDisclosure

    @property
    def opening_classification(self) -> str:
        return "Asset" if self.opening_deferred_tax >= 0 else "Liability"

    @property
    def closing_classification(self) -> str:
        return "Asset" if self.closing_deferred_tax >= 0 else "Liability"


__all__ = [
    "DeferredTaxInputs",
    "JournalEntry",
    "TaxExpenseDisclosure",
    "DeferredTaxReconciliation",
]
