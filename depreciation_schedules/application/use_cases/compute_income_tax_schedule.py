"""Use case to compute the Income Tax block depreciation schedule."""

from collections.abc import Sequence
from dataclasses import dataclass

from depreciation_schedules.domain.constants import (
    DEFAULT_RATE_TABLES,
    RateTables,
)
from depreciation_schedules.domain.models import (
    FiscalYearWindow,
    IncomeTaxBlock,
    IncomeTaxResult,
    IncomeTaxSummary,
)
from depreciation_schedules.domain.services import (
    collect_block_warnings,
    compute_income_tax_results,
    summarize_income_tax,
)
from depreciation_schedules.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class IncomeTaxEntry:
    """Block, its result and any data-entry warnings."""

    block: IncomeTaxBlock
    result: IncomeTaxResult
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class IncomeTaxSchedule:
    """Income Tax schedule for one fiscal year."""

    window: FiscalYearWindow
    entries: tuple[IncomeTaxEntry, ...]
    summary: IncomeTaxSummary


class ComputeIncomeTaxScheduleUseCase:
    """Compute per-block results and the block-type summary."""

    def __init__(
        self,
        logger=None,
        rates: RateTables | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            rates: Optional rate tables overriding the statutory defaults.
        """
        self._logger = logger or get_app_logger()
        self._rates = rates or DEFAULT_RATE_TABLES

    def execute(
        self,
        blocks: Sequence[IncomeTaxBlock],
        window: FiscalYearWindow,
    ) -> IncomeTaxSchedule:
        """Return the Income Tax schedule.

        Args:
            blocks: Blocks of assets for the year.
            window: Fiscal year to compute.

        Returns:
            IncomeTaxSchedule: Per-block results and summary.
        """
        pairs = compute_income_tax_results(
            blocks,
            window,
            rates=self._rates,
            logger=self._logger,
        )
        entries = tuple(
            IncomeTaxEntry(
                block=block,
                result=result,
                warnings=tuple(collect_block_warnings(block, window)),
            )
            for block, result in pairs
        )
        summary = summarize_income_tax(pairs, rates=self._rates)

        self._logger.info(
            f"Income Tax schedule computed for FY {window.label}: "
            f"blocks={len(entries)}, "
            f"depreciation={summary.totals.depreciation_for_year}"
        )

        return IncomeTaxSchedule(
            window=window,
            entries=entries,
            summary=summary,
        )


__all__ = [
    "IncomeTaxEntry",
    "IncomeTaxSchedule",
    "ComputeIncomeTaxScheduleUseCase",
]
