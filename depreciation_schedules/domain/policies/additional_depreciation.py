"""Policies for block classification and additional depreciation."""

from dataclasses import replace

from depreciation_schedules.domain.constants import (
    DEFAULT_RATE_TABLES,
    RateTables,
)
from depreciation_schedules.domain.models.assets import (
    AdditionalDepreciationChecklist,
    IncomeTaxBlock,
)


def is_excluded_block_type(
    block_type: str,
    rates: RateTables = DEFAULT_RATE_TABLES,
) -> bool:
    """Return True when the block can never claim additional depreciation."""
    return block_type in rates.excluded_for_additional


def apply_block_type(
    block: IncomeTaxBlock,
    block_type: str,
    rates: RateTables = DEFAULT_RATE_TABLES,
) -> IncomeTaxBlock:
    """Reclassify a block, keeping its rate in step with the rate table.

    Moving to an excluded block type also withdraws any additional
    depreciation eligibility and clears the checklist.

    Args:
        block: Block to reclassify.
        block_type: New block type key.
        rates: Rate tables supplying the block rate.

    Returns:
        IncomeTaxBlock: Updated copy of the block.
    """
    updated = replace(block, block_type=block_type)
    if block_type in rates.income_tax_blocks:
        updated = replace(updated, rate=rates.block_rate(block_type))
    if is_excluded_block_type(block_type, rates):
        updated = replace(
            updated,
            eligible_for_additional=False,
            checklist=AdditionalDepreciationChecklist(),
        )
    return updated


def confirm_additional_depreciation(
    block: IncomeTaxBlock,
    checklist: AdditionalDepreciationChecklist,
    rates: RateTables = DEFAULT_RATE_TABLES,
) -> IncomeTaxBlock:
    """Record the eligibility checklist and derive the eligibility flag."""
    eligible = (
        bool(block.block_type)
        and not is_excluded_block_type(block.block_type, rates)
        and checklist.all_confirmed
    )
    return replace(
        block,
        checklist=checklist,
        eligible_for_additional=eligible,
    )


__all__ = [
    "is_excluded_block_type",
    "apply_block_type",
    "confirm_additional_depreciation",
]
