"""Domain models package."""

from .assets import (
    AdditionalDepreciationChecklist,
    Addition,
    CompaniesActAsset,
    DepreciationMethod,
    IncomeTaxBlock,
)
from .deferred_tax import (
    DeferredTaxInputs,
    DeferredTaxReconciliation,
    JournalEntry,
    TaxExpenseDisclosure,
)
from .fiscal_year import DaysUsed, FiscalYearWindow, is_leap_year
from .results import (
    CompaniesActResult,
    CompaniesActSummary,
    CompaniesActTypeSummary,
    IncomeTaxBlockSummary,
    IncomeTaxResult,
    IncomeTaxSummary,
    Working,
)
from .snapshot import RegisterSnapshot

__all__ = [
    "AdditionalDepreciationChecklist",
    "Addition",
    "CompaniesActAsset",
    "DepreciationMethod",
    "IncomeTaxBlock",
    "DeferredTaxInputs",
    "DeferredTaxReconciliation",
    "JournalEntry",
    "TaxExpenseDisclosure",
    "DaysUsed",
    "FiscalYearWindow",
    "is_leap_year",
    "CompaniesActResult",
    "CompaniesActSummary",
    "CompaniesActTypeSummary",
    "IncomeTaxBlockSummary",
    "IncomeTaxResult",
    "IncomeTaxSummary",
    "Working",
    "RegisterSnapshot",
]
