"""Carry closing balances into the next financial year's opening records."""

from collections.abc import Sequence
from dataclasses import replace

from depreciation_schedules.domain.constants import (
    DEFAULT_RATE_TABLES,
    RateTables,
)
from depreciation_schedules.domain.models.assets import (
    CompaniesActAsset,
    DepreciationMethod,
    IncomeTaxBlock,
)
from depreciation_schedules.domain.models.fiscal_year import FiscalYearWindow
from depreciation_schedules.domain.services.companies_act import (
    compute_companies_act_result,
)
from depreciation_schedules.domain.services.income_tax import (
    compute_income_tax_result,
)
from depreciation_schedules.utils.decimal_utils import ZERO


def roll_forward_assets(
    assets: Sequence[CompaniesActAsset],
    method: DepreciationMethod | str,
    window: FiscalYearWindow,
    rates: RateTables = DEFAULT_RATE_TABLES,
) -> list[CompaniesActAsset]:
    """Build next year's asset register from this year's results.

    Disposed assets leave the register. The others open with this year's
    closing gross block and accumulated depreciation and start with no
    additions, disposal or sale.
    """
    rolled: list[CompaniesActAsset] = []
    for asset in assets:
        if asset.is_disposed:
            continue
        result = compute_companies_act_result(
            asset, method, window, rates=rates
        )
        rolled.append(
            replace(
                asset,
                opening_gross_block=result.closing_gross_block,
                opening_accumulated_depreciation=(
                    result.closing_accumulated_depreciation
                ),
                additions=(),
                disposal_date=None,
                sale_value=ZERO,
            )
        )
    return rolled


def roll_forward_blocks(
    blocks: Sequence[IncomeTaxBlock],
    window: FiscalYearWindow,
    rates: RateTables = DEFAULT_RATE_TABLES,
) -> list[IncomeTaxBlock]:
    """Build next year's blocks from this year's closing WDV.

    Ceased blocks with nothing left drop out; the rest open with this
    year's closing WDV and start with no additions or sales.
    """
    rolled: list[IncomeTaxBlock] = []
    for block in blocks:
        result = compute_income_tax_result(block, window, rates=rates)
        if result.closing_wdv <= 0 and block.block_ceased:
            continue
        rolled.append(
            replace(
                block,
                opening_wdv=result.closing_wdv,
                additions=(),
                sale_proceeds=ZERO,
                block_ceased=False,
            )
        )
    return rolled


__all__ = ["roll_forward_assets", "roll_forward_blocks"]
