"""Domain package for depreciation rules and core models."""

from .constants import (
    DEFAULT_RATE_TABLES,
    EXCLUDED_BLOCK_TYPES_FOR_ADDITIONAL_DEP,
    INCOME_TAX_BLOCKS,
    SCHEDULE_II_SLM_USEFUL_LIFE,
    SCHEDULE_II_WDV_RATES,
    RateTables,
)
from .models import (
    Addition,
    CompaniesActAsset,
    CompaniesActResult,
    DepreciationMethod,
    FiscalYearWindow,
    IncomeTaxBlock,
    IncomeTaxResult,
    RegisterSnapshot,
)
from .policies import (
    apply_block_type,
    confirm_additional_depreciation,
    is_excluded_block_type,
)
from .services import (
    compute_companies_act_result,
    compute_deferred_tax,
    compute_days_used,
    compute_income_tax_result,
    summarize_companies_act,
    summarize_income_tax,
)

__all__ = [
    "DEFAULT_RATE_TABLES",
    "EXCLUDED_BLOCK_TYPES_FOR_ADDITIONAL_DEP",
    "INCOME_TAX_BLOCKS",
    "SCHEDULE_II_SLM_USEFUL_LIFE",
    "SCHEDULE_II_WDV_RATES",
    "RateTables",
    "Addition",
    "CompaniesActAsset",
    "CompaniesActResult",
    "DepreciationMethod",
    "FiscalYearWindow",
    "IncomeTaxBlock",
    "IncomeTaxResult",
    "RegisterSnapshot",
    "apply_block_type",
    "confirm_additional_depreciation",
    "is_excluded_block_type",
    "compute_companies_act_result",
    "compute_deferred_tax",
    "compute_days_used",
    "compute_income_tax_result",
    "summarize_companies_act",
    "summarize_income_tax",
]
