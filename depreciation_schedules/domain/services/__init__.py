"""Domain services package."""

from .companies_act import (
    compute_companies_act_result,
    compute_companies_act_results,
)
from .deferred_tax import compute_deferred_tax
from .fiscal_year import compute_days_used, days_in_fiscal_year
from .income_tax import (
    compute_income_tax_result,
    compute_income_tax_results,
    split_additions_by_days,
)
from .normalization import (
    normalize_amount,
    normalize_date,
    normalize_method,
    normalize_type_key,
)
from .roll_forward import roll_forward_assets, roll_forward_blocks
from .summary import summarize_companies_act, summarize_income_tax
from .validation import collect_asset_warnings, collect_block_warnings

__all__ = [
    "compute_companies_act_result",
    "compute_companies_act_results",
    "compute_deferred_tax",
    "compute_days_used",
    "days_in_fiscal_year",
    "compute_income_tax_result",
    "compute_income_tax_results",
    "split_additions_by_days",
    "normalize_amount",
    "normalize_date",
    "normalize_method",
    "normalize_type_key",
    "roll_forward_assets",
    "roll_forward_blocks",
    "summarize_companies_act",
    "summarize_income_tax",
    "collect_asset_warnings",
    "collect_block_warnings",
]
