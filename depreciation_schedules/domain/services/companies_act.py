"""Companies Act (Schedule II) depreciation for individual assets."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from logging import Logger

from depreciation_schedules.domain.constants import (
    DEFAULT_RATE_TABLES,
    RateTables,
)
from depreciation_schedules.domain.models.assets import (
    Addition,
    CompaniesActAsset,
    DepreciationMethod,
)
from depreciation_schedules.domain.models.fiscal_year import FiscalYearWindow
from depreciation_schedules.domain.models.results import (
    CompaniesActResult,
    Working,
)
from depreciation_schedules.domain.services.fiscal_year import (
    compute_days_used,
)
from depreciation_schedules.domain.services.normalization import (
    normalize_amount,
    normalize_date,
    normalize_method,
)
from depreciation_schedules.utils.decimal_utils import (
    ZERO,
    format_inr,
    format_rate,
    round_money,
)

RESIDUAL_CAP_NOTE = "Depreciation capped to not fall below residual value"
WDV_CAP_NOTE = "Depreciation capped at the written down value"
ADDITION_CAP_NOTE = "Depreciation capped at the cost of the addition"


def compute_companies_act_result(
    asset: CompaniesActAsset,
    method: DepreciationMethod | str,
    window: FiscalYearWindow,
    *,
    rates: RateTables = DEFAULT_RATE_TABLES,
    logger: Logger | None = None,
) -> CompaniesActResult:
    """Compute the Companies Act depreciation schedule line for one asset.

    Args:
        asset: Asset record as entered by the user.
        method: ``SLM`` or ``WDV``.
        window: Fiscal year being computed.
        rates: Rate and useful-life tables.
        logger: Optional logger for data-entry warnings.

    Returns:
        CompaniesActResult: Depreciation, closing balances, profit or loss
        on disposal and the itemized workings.
    """
    method = normalize_method(method)
    opening_gross_block = normalize_amount(asset.opening_gross_block)
    opening_accumulated = normalize_amount(
        asset.opening_accumulated_depreciation
    )
    residual_value = normalize_amount(asset.residual_value)
    purchase_date = normalize_date(asset.purchase_date)
    disposal_date = normalize_date(asset.disposal_date)
    gross_block_additions = round_money(
        sum((normalize_amount(add.cost) for add in asset.additions), ZERO)
    )

    has_value = opening_gross_block > 0 or gross_block_additions > 0
    if not has_value:
        return CompaniesActResult()
    sale_value = normalize_amount(asset.sale_value)

    is_disposed = disposal_date is not None
    additions_before_disposal = [
        add
        for add in asset.additions
        if not is_disposed
        or (
            normalize_date(add.date) is not None
            and normalize_date(add.date) <= disposal_date
        )
    ]
    additions_cost_before_disposal = round_money(
        sum(
            (normalize_amount(add.cost) for add in additions_before_disposal),
            ZERO,
        )
    )

    if opening_accumulated > opening_gross_block:
        if logger is not None:
            logger.warning(
                f"Accumulated depreciation {opening_accumulated} exceeds "
                f"gross block {opening_gross_block} for asset {asset.id}; "
                "depreciation not computed"
            )
        if is_disposed:
            cost_of_disposed = round_money(
                opening_gross_block + additions_cost_before_disposal
            )
            wdv_on_sale_date = max(
                ZERO, round_money(cost_of_disposed - opening_accumulated)
            )
            return CompaniesActResult(
                opening_gross_block=opening_gross_block,
                gross_block_additions=gross_block_additions,
                disposals_cost=cost_of_disposed,
                opening_accumulated_depreciation=opening_accumulated,
                opening_wdv=ZERO,
                profit_or_loss=round_money(sale_value - wdv_on_sale_date),
                sale_value=sale_value,
            )
        closing_gross_block = round_money(
            opening_gross_block + gross_block_additions
        )
        return CompaniesActResult(
            opening_gross_block=opening_gross_block,
            gross_block_additions=gross_block_additions,
            closing_gross_block=closing_gross_block,
            opening_accumulated_depreciation=opening_accumulated,
            closing_accumulated_depreciation=opening_accumulated,
            opening_wdv=ZERO,
            closing_wdv=max(
                ZERO, round_money(closing_gross_block - opening_accumulated)
            ),
            sale_value=sale_value,
        )

    opening_wdv = round_money(opening_gross_block - opening_accumulated)
    workings: list[Working] = []
    depreciation = ZERO

    if method is DepreciationMethod.SLM:
        useful_life = rates.useful_life(asset.asset_type)
        rate = ZERO
        if useful_life > 0:
            opening_working = _slm_opening_working(
                opening_gross_block,
                opening_wdv,
                residual_value,
                useful_life,
                purchase_date,
                disposal_date,
                window,
            )
            if opening_working is not None:
                workings.append(opening_working)
                depreciation += opening_working.amount
    else:
        useful_life = 0
        rate = rates.wdv_rate(asset.asset_type)
        if opening_wdv > 0 and rate > 0:
            opening_working = _wdv_opening_working(
                opening_wdv,
                rate,
                purchase_date,
                disposal_date,
                window,
            )
            workings.append(opening_working)
            depreciation += opening_working.amount

    for position, addition in enumerate(additions_before_disposal, start=1):
        working = _addition_working(
            addition,
            position,
            method,
            useful_life,
            rate,
            disposal_date,
            window,
        )
        if working is not None:
            workings.append(working)
            depreciation += working.amount
    depreciation_for_year = round_money(depreciation)

    if is_disposed:
        cost_of_disposed = round_money(
            opening_gross_block + additions_cost_before_disposal
        )
        wdv_on_sale_date = round_money(
            cost_of_disposed - (opening_accumulated + depreciation_for_year)
        )
        return CompaniesActResult(
            depreciation_for_year=depreciation_for_year,
            closing_wdv=ZERO,
            workings=tuple(workings),
            profit_or_loss=round_money(sale_value - wdv_on_sale_date),
            opening_gross_block=opening_gross_block,
            gross_block_additions=gross_block_additions,
            disposals_cost=cost_of_disposed,
            closing_gross_block=ZERO,
            opening_accumulated_depreciation=opening_accumulated,
            closing_accumulated_depreciation=ZERO,
            opening_wdv=opening_wdv,
            sale_value=sale_value,
        )

    closing_gross_block = round_money(
        opening_gross_block + gross_block_additions
    )
    closing_accumulated = round_money(
        opening_accumulated + depreciation_for_year
    )
    return CompaniesActResult(
        depreciation_for_year=depreciation_for_year,
        closing_wdv=round_money(closing_gross_block - closing_accumulated),
        workings=tuple(workings),
        opening_gross_block=opening_gross_block,
        gross_block_additions=gross_block_additions,
        closing_gross_block=closing_gross_block,
        opening_accumulated_depreciation=opening_accumulated,
        closing_accumulated_depreciation=closing_accumulated,
        opening_wdv=opening_wdv,
        sale_value=sale_value,
    )


def compute_companies_act_results(
    assets: Sequence[CompaniesActAsset],
    method: DepreciationMethod | str,
    window: FiscalYearWindow,
    *,
    rates: RateTables = DEFAULT_RATE_TABLES,
    logger: Logger | None = None,
) -> list[tuple[CompaniesActAsset, CompaniesActResult]]:
    """Compute results for every asset, preserving input order."""
    return [
        (
            asset,
            compute_companies_act_result(
                asset,
                method,
                window,
                rates=rates,
                logger=logger,
            ),
        )
        for asset in assets
    ]


def _slm_opening_working(
    opening_gross_block: Decimal,
    opening_wdv: Decimal,
    residual_value: Decimal,
    useful_life: int,
    purchase_date: date | None,
    disposal_date: date | None,
    window: FiscalYearWindow,
) -> Working | None:
    depreciable_base = round_money(opening_gross_block - residual_value)
    max_allowable = max(ZERO, round_money(opening_wdv - residual_value))
    if depreciable_base <= 0 or max_allowable <= 0:
        return None
    days = compute_days_used(purchase_date, disposal_date, window)
    annual = round_money(depreciable_base / useful_life)
    prorated = annual * days.days_used / days.days_in_year
    capped = prorated > max_allowable
    return Working(
        description="Dep on Opening Cost",
        calculation=(
            f"(({format_inr(opening_gross_block)} - "
            f"{format_inr(residual_value)}) / {useful_life} yrs) × "
            f"{days.days_used}/{days.days_in_year} days"
        ),
        amount=round_money(min(prorated, max_allowable)),
        note=RESIDUAL_CAP_NOTE if capped else None,
    )


def _wdv_opening_working(
    opening_wdv: Decimal,
    rate: Decimal,
    purchase_date: date | None,
    disposal_date: date | None,
    window: FiscalYearWindow,
) -> Working:
    days = compute_days_used(purchase_date, disposal_date, window)
    prorated = opening_wdv * rate * days.days_used / days.days_in_year
    capped = prorated > opening_wdv
    return Working(
        description="Dep on Opening WDV",
        calculation=(
            f"({format_inr(opening_wdv)} × {format_rate(rate, 2)}) × "
            f"{days.days_used}/{days.days_in_year} days"
        ),
        amount=round_money(min(prorated, opening_wdv)),
        note=WDV_CAP_NOTE if capped else None,
    )


def _addition_working(
    addition: Addition,
    position: int,
    method: DepreciationMethod,
    useful_life: int,
    rate: Decimal,
    disposal_date: date | None,
    window: FiscalYearWindow,
) -> Working | None:
    cost = normalize_amount(addition.cost)
    added_on = normalize_date(addition.date)
    if cost <= 0 or added_on is None:
        return None
    days = compute_days_used(added_on, disposal_date, window)
    fraction = Decimal(days.days_used) / Decimal(days.days_in_year)

    if method is DepreciationMethod.SLM and useful_life > 0:
        residual_value = normalize_amount(addition.residual_value)
        depreciable = round_money(cost - residual_value)
        if depreciable <= 0:
            return None
        prorated = depreciable / useful_life * fraction
        capped = prorated > depreciable
        return Working(
            description=f"Dep on Addition #{position}",
            calculation=(
                f"(({format_inr(cost)} - {format_inr(residual_value)}) / "
                f"{useful_life} years) × "
                f"{days.days_used}/{days.days_in_year} days"
            ),
            amount=round_money(min(prorated, depreciable)),
            note=ADDITION_CAP_NOTE if capped else None,
        )
    if method is DepreciationMethod.WDV and rate > 0:
        prorated = cost * rate * fraction
        capped = prorated > cost
        return Working(
            description=f"Dep on Addition #{position}",
            calculation=(
                f"({format_inr(cost)} × {format_rate(rate, 2)}) × "
                f"{days.days_used}/{days.days_in_year} days"
            ),
            amount=round_money(min(prorated, cost)),
            note=ADDITION_CAP_NOTE if capped else None,
        )
    return None


__all__ = [
    "compute_companies_act_result",
    "compute_companies_act_results",
    "RESIDUAL_CAP_NOTE",
    "WDV_CAP_NOTE",
    "ADDITION_CAP_NOTE",
]
