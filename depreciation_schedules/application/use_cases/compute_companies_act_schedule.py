"""Use case to compute the Companies Act depreciation schedule."""

from collections.abc import Sequence
from dataclasses import dataclass

from depreciation_schedules.domain.constants import (
    DEFAULT_RATE_TABLES,
    RateTables,
)
from depreciation_schedules.domain.models import (
    CompaniesActAsset,
    CompaniesActResult,
    CompaniesActSummary,
    DepreciationMethod,
    FiscalYearWindow,
)
from depreciation_schedules.domain.services import (
    collect_asset_warnings,
    compute_companies_act_results,
    normalize_method,
    summarize_companies_act,
)
from depreciation_schedules.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class CompaniesActEntry:
    """Asset, its result and any data-entry warnings."""

    asset: CompaniesActAsset
    result: CompaniesActResult
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompaniesActSchedule:
    """Companies Act schedule for one fiscal year.

    Attributes:
        window: Fiscal year computed.
        method: Method applied to every asset.
        entries: Per-asset results in register order.
        summary: Totals grouped by asset type.
    """

    window: FiscalYearWindow
    method: DepreciationMethod
    entries: tuple[CompaniesActEntry, ...]
    summary: CompaniesActSummary


class ComputeCompaniesActScheduleUseCase:
    """Compute per-asset results and the type summary."""

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
        assets: Sequence[CompaniesActAsset],
        method: DepreciationMethod | str,
        window: FiscalYearWindow,
    ) -> CompaniesActSchedule:
        """Return the Companies Act schedule.

        Args:
            assets: Asset register for the year.
            method: ``SLM`` or ``WDV``.
            window: Fiscal year to compute.

        Returns:
            CompaniesActSchedule: Per-asset results and summary.
        """
        resolved_method = normalize_method(method)
        pairs = compute_companies_act_results(
            assets,
            resolved_method,
            window,
            rates=self._rates,
            logger=self._logger,
        )
        entries = tuple(
            CompaniesActEntry(
                asset=asset,
                result=result,
                warnings=tuple(collect_asset_warnings(asset, window)),
            )
            for asset, result in pairs
        )
        summary = summarize_companies_act(pairs)

        self._logger.info(
            f"Companies Act schedule computed for FY {window.label}: "
            f"assets={len(entries)}, method={resolved_method.value}, "
            f"depreciation={summary.totals.depreciation_for_year}"
        )

        return CompaniesActSchedule(
            window=window,
            method=resolved_method,
            entries=entries,
            summary=summary,
        )


__all__ = [
    "CompaniesActEntry",
    "CompaniesActSchedule",
    "ComputeCompaniesActScheduleUseCase",
]
