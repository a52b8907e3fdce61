"""Domain services aggregating per-entity results by type."""

from collections.abc import Iterable
from decimal import Decimal

from depreciation_schedules.domain.constants import (
    DEFAULT_RATE_TABLES,
    UNCLASSIFIED,
    UNCLASSIFIED_BLOCK_NAME,
    RateTables,
)
from depreciation_schedules.domain.models.assets import (
    CompaniesActAsset,
    IncomeTaxBlock,
)
from depreciation_schedules.domain.models.results import (
    COMPANIES_ACT_SUMMARY_FIELDS,
    INCOME_TAX_SUMMARY_FIELDS,
    CompaniesActResult,
    CompaniesActSummary,
    CompaniesActTypeSummary,
    IncomeTaxBlockSummary,
    IncomeTaxResult,
    IncomeTaxSummary,
)
from depreciation_schedules.domain.services.normalization import (
    humanize_type_key,
    normalize_type_key,
)


def summarize_companies_act(
    entries: Iterable[tuple[CompaniesActAsset, CompaniesActResult]],
) -> CompaniesActSummary:
    """Group Companies Act results by asset type.

    Args:
        entries: Pairs of asset and its computed result.

    Returns:
        CompaniesActSummary: Per-type totals and the grand total.
    """
    by_type: dict[str, CompaniesActTypeSummary] = {}
    for asset, result in entries:
        key = normalize_type_key(asset.asset_type)
        group = by_type.get(key)
        if group is None:
            group = CompaniesActTypeSummary(
                name=humanize_type_key(key),
                internal_name=key,
            )
            by_type[key] = group
        values = _companies_act_values(result)
        for field_name in COMPANIES_ACT_SUMMARY_FIELDS:
            setattr(
                group,
                field_name,
                getattr(group, field_name) + values[field_name],
            )

    totals = CompaniesActTypeSummary(name="TOTAL", internal_name="totals")
    _accumulate(totals, by_type.values(), COMPANIES_ACT_SUMMARY_FIELDS)
    return CompaniesActSummary(by_type=by_type, totals=totals)


def summarize_income_tax(
    entries: Iterable[tuple[IncomeTaxBlock, IncomeTaxResult]],
    rates: RateTables = DEFAULT_RATE_TABLES,
) -> IncomeTaxSummary:
    """Group Income Tax results by block type.

    Args:
        entries: Pairs of block and its computed result.
        rates: Rate tables supplying block display names.

    Returns:
        IncomeTaxSummary: Per-block-type totals and the grand total.
    """
    by_type: dict[str, IncomeTaxBlockSummary] = {}
    for block, result in entries:
        key = normalize_type_key(block.block_type)
        group = by_type.get(key)
        if group is None:
            name = (
                UNCLASSIFIED_BLOCK_NAME
                if key == UNCLASSIFIED
                else rates.block_name(key)
            )
            group = IncomeTaxBlockSummary(name=name, internal_name=key)
            by_type[key] = group
        values = _income_tax_values(result)
        for field_name in INCOME_TAX_SUMMARY_FIELDS:
            setattr(
                group,
                field_name,
                getattr(group, field_name) + values[field_name],
            )

    totals = IncomeTaxBlockSummary(name="TOTAL", internal_name="totals")
    _accumulate(totals, by_type.values(), INCOME_TAX_SUMMARY_FIELDS)
    return IncomeTaxSummary(by_type=by_type, totals=totals)


def _companies_act_values(result: CompaniesActResult) -> dict[str, Decimal]:
    return {
        "opening_gross_block": result.opening_gross_block,
        "additions": result.gross_block_additions,
        "disposals_cost": result.disposals_cost,
        "closing_gross_block": result.closing_gross_block,
        "opening_accumulated_depreciation": (
            result.opening_accumulated_depreciation
        ),
        "depreciation_for_year": result.depreciation_for_year,
        "closing_accumulated_depreciation": (
            result.closing_accumulated_depreciation
        ),
        "opening_net_block": result.opening_wdv,
        "closing_net_block": result.closing_wdv,
    }


def _income_tax_values(result: IncomeTaxResult) -> dict[str, Decimal]:
    return {
        "opening_wdv": result.opening_wdv,
        "additions": result.additions,
        "sale_value": result.sale_value,
        "wdv_for_dep": result.wdv_for_dep,
        "depreciation_for_year": result.depreciation_for_year,
        "closing_net_block": result.closing_wdv,
        "short_term_capital_gain_loss": result.short_term_capital_gain_loss,
    }


def _accumulate(target, groups, field_names: tuple[str, ...]) -> None:
    for group in groups:
        for field_name in field_names:
            setattr(
                target,
                field_name,
                getattr(target, field_name) + getattr(group, field_name),
            )


__all__ = ["summarize_companies_act", "summarize_income_tax"]
