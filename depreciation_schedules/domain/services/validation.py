"""Domain validation helpers.

Validation never blocks a calculation; it returns advisory messages for the
interface to display and logs them when a logger is supplied.
"""

from logging import Logger

from depreciation_schedules.domain.models.assets import (
    CompaniesActAsset,
    IncomeTaxBlock,
)
from depreciation_schedules.domain.models.fiscal_year import FiscalYearWindow
from depreciation_schedules.domain.services.normalization import (
    normalize_amount,
    normalize_date,
)


def collect_asset_warnings(
    asset: CompaniesActAsset,
    window: FiscalYearWindow,
    logger: Logger | None = None,
) -> list[str]:
    """Return data-entry warnings for a Companies Act asset.

    Args:
        asset: Asset record to check.
        window: Fiscal year being computed.
        logger: Optional logger receiving each warning.

    Returns:
        list[str]: Human-readable warnings, empty when the asset is clean.
    """
    warnings: list[str] = []
    gross_block = normalize_amount(asset.opening_gross_block)
    accumulated = normalize_amount(asset.opening_accumulated_depreciation)
    residual = normalize_amount(asset.residual_value)
    purchase_date = normalize_date(asset.purchase_date)
    disposal_date = normalize_date(asset.disposal_date)

    if accumulated > gross_block:
        warnings.append(
            "Opening accumulated depreciation exceeds opening gross block."
        )
    if residual > gross_block and gross_block > 0:
        warnings.append("Residual value exceeds opening gross block.")
    if purchase_date is not None and purchase_date > window.end:
        warnings.append("Purchase date falls after the financial year.")
    if (
        disposal_date is not None
        and purchase_date is not None
        and disposal_date < purchase_date
    ):
        warnings.append("Disposal date is before the purchase date.")
    if disposal_date is None and normalize_amount(asset.sale_value) > 0:
        warnings.append("Sale value entered without a disposal date.")
    for position, addition in enumerate(asset.additions, start=1):
        added_on = normalize_date(addition.date)
        if added_on is None:
            warnings.append(f"Addition #{position} has no valid date.")
        elif not window.contains(added_on):
            warnings.append(
                f"Addition #{position} is dated outside the financial year."
            )

    _log(logger, f"asset {asset.id}", warnings)
    return warnings


def collect_block_warnings(
    block: IncomeTaxBlock,
    window: FiscalYearWindow,
    logger: Logger | None = None,
) -> list[str]:
    """Return data-entry warnings for an Income Tax block.

    Args:
        block: Block record to check.
        window: Fiscal year being computed.
        logger: Optional logger receiving each warning.

    Returns:
        list[str]: Human-readable warnings, empty when the block is clean.
    """
    warnings: list[str] = []
    if not block.block_type:
        warnings.append("Select a block type to calculate depreciation.")
    for position, addition in enumerate(block.additions, start=1):
        added_on = normalize_date(addition.date)
        if added_on is None:
            warnings.append(f"Addition #{position} has no valid date.")
        elif not window.contains(added_on):
            warnings.append(
                f"Addition #{position} is dated outside the financial year."
            )
    if block.eligible_for_additional and not block.checklist.all_confirmed:
        warnings.append(
            "Additional depreciation claimed without a confirmed checklist."
        )

    _log(logger, f"block {block.id}", warnings)
    return warnings


def _log(logger: Logger | None, subject: str, warnings: list[str]) -> None:
    if logger is None:
        return
    for message in warnings:
        logger.warning(f"Validation warning for {subject}: {message}")


__all__ = ["collect_asset_warnings", "collect_block_warnings"]
