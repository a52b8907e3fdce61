"""Income Tax Act depreciation for blocks of assets."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from depreciation_schedules.domain.constants import (
    ADDITIONAL_DEPRECIATION_FULL_RATE,
    ADDITIONAL_DEPRECIATION_HALF_RATE,
    DEFAULT_RATE_TABLES,
    HALF_RATE_THRESHOLD_DAYS,
    RateTables,
)
from depreciation_schedules.domain.models.assets import IncomeTaxBlock
from depreciation_schedules.domain.models.fiscal_year import FiscalYearWindow
from depreciation_schedules.domain.models.results import (
    IncomeTaxResult,
    Working,
)
from depreciation_schedules.domain.policies.additional_depreciation import (
    is_excluded_block_type,
)
from depreciation_schedules.domain.services.fiscal_year import (
    compute_days_used,
)
from depreciation_schedules.domain.services.normalization import (
    normalize_amount,
    normalize_date,
)
from depreciation_schedules.utils.decimal_utils import (
    ZERO,
    coerce_decimal,
    format_inr,
    format_rate,
    round_money,
)

SELECT_BLOCK_TYPE_MESSAGE = "Select a block type to calculate depreciation."
WDV_CAP_NOTE = "Depreciation cannot exceed the written down value of the block"


def split_additions_by_days(
    block: IncomeTaxBlock,
    window: FiscalYearWindow,
) -> tuple[Decimal, Decimal]:
    """Split block additions by the 180-day rule.

    Additions used for at least 180 days in the year qualify for the full
    rate; the rest get half the rate. Additions without a date or cost are
    ignored.

    Returns:
        tuple[Decimal, Decimal]: Full-rate and half-rate addition totals.
    """
    full_rate = ZERO
    half_rate = ZERO
    for addition in block.additions:
        cost = normalize_amount(addition.cost)
        added_on = normalize_date(addition.date)
        if cost <= 0 or added_on is None:
            continue
        days = compute_days_used(added_on, None, window)
        if days.days_used >= HALF_RATE_THRESHOLD_DAYS:
            full_rate += cost
        else:
            half_rate += cost
    return round_money(full_rate), round_money(half_rate)


def compute_income_tax_result(
    block: IncomeTaxBlock,
    window: FiscalYearWindow,
    *,
    rates: RateTables = DEFAULT_RATE_TABLES,
    logger: Logger | None = None,
) -> IncomeTaxResult:
    """Compute the Income Tax depreciation for one block of assets.

    Args:
        block: Block record as entered by the user.
        window: Fiscal year being computed.
        rates: Rate tables (block rates and exclusions).
        logger: Optional logger for advisory messages.

    Returns:
        IncomeTaxResult: Depreciation, closing WDV, short-term capital gain
        or loss and the itemized workings.
    """
    opening_wdv = normalize_amount(block.opening_wdv)
    additions_full_rate, additions_half_rate = split_additions_by_days(
        block, window
    )
    total_additions = round_money(additions_full_rate + additions_half_rate)

    has_value = opening_wdv > 0 or total_additions > 0
    sale_proceeds = normalize_amount(block.sale_proceeds) if has_value else ZERO
    wdv_before_dep = round_money(opening_wdv + total_additions - sale_proceeds)

    base = dict(
        opening_wdv=opening_wdv,
        additions=total_additions,
        additions_full_rate=additions_full_rate,
        additions_half_rate=additions_half_rate,
        sale_value=sale_proceeds,
        wdv_for_dep=wdv_before_dep,
    )

    if not block.block_type:
        if logger is not None:
            logger.info(f"Block {block.id} has no block type; deferred")
        return IncomeTaxResult(
            **base,
            closing_wdv=max(ZERO, wdv_before_dep),
            workings=(
                Working(
                    description=SELECT_BLOCK_TYPE_MESSAGE,
                    calculation="",
                    amount=ZERO,
                ),
            ),
        )

    if block.block_ceased:
        gain_or_loss = round_money(
            sale_proceeds - (opening_wdv + total_additions)
        )
        return IncomeTaxResult(
            **base,
            closing_wdv=ZERO,
            short_term_capital_gain_loss=gain_or_loss,
            workings=(
                Working(
                    description=(
                        "Short Term Capital Gain"
                        if gain_or_loss >= 0
                        else "Short Term Capital Loss"
                    ),
                    calculation=(
                        f"{format_inr(sale_proceeds)} - "
                        f"({format_inr(opening_wdv)} + "
                        f"{format_inr(total_additions)})"
                    ),
                    amount=gain_or_loss,
                ),
            ),
        )

    if wdv_before_dep <= 0:
        return IncomeTaxResult(
            **base,
            closing_wdv=ZERO,
            short_term_capital_gain_loss=wdv_before_dep,
            workings=(
                Working(
                    description="Short Term Capital Gain (Sale > WDV)",
                    calculation=(
                        f"({format_inr(opening_wdv)} + "
                        f"{format_inr(total_additions)}) - "
                        f"{format_inr(sale_proceeds)}"
                    ),
                    amount=-wdv_before_dep,
                ),
            ),
        )

    rate = _resolve_rate(block, rates)
    half_rate = rate / 2
    workings: list[Working] = []

    wdv_for_opening_dep = round_money(
        wdv_before_dep - additions_full_rate - additions_half_rate
    )
    dep_on_opening = round_money(max(ZERO, wdv_for_opening_dep * rate))
    dep_on_full = round_money(additions_full_rate * rate)
    dep_on_half = round_money(additions_half_rate * half_rate)
    depreciation = round_money(dep_on_opening + dep_on_full + dep_on_half)

    if dep_on_opening > 0:
        workings.append(
            Working(
                description="Dep on Opening WDV balance",
                calculation=(
                    f"{format_inr(wdv_for_opening_dep)} × {format_rate(rate)}"
                ),
                amount=dep_on_opening,
            )
        )
    if dep_on_full > 0:
        workings.append(
            Working(
                description="Dep on Additions (>= 180 days)",
                calculation=(
                    f"{format_inr(additions_full_rate)} × {format_rate(rate)}"
                ),
                amount=dep_on_full,
            )
        )
    if dep_on_half > 0:
        workings.append(
            Working(
                description="Dep on Additions (< 180 days)",
                calculation=(
                    f"{format_inr(additions_half_rate)} × "
                    f"{format_rate(half_rate)}"
                ),
                amount=dep_on_half,
            )
        )

    additional = ZERO
    if (
        block.eligible_for_additional
        and block.checklist.all_confirmed
        and not is_excluded_block_type(block.block_type, rates)
    ):
        additional = round_money(
            round_money(additions_full_rate * ADDITIONAL_DEPRECIATION_FULL_RATE)
            + round_money(
                additions_half_rate * ADDITIONAL_DEPRECIATION_HALF_RATE
            )
        )
        if additional > 0:
            workings.append(
                Working(
                    description="Additional Depreciation",
                    calculation=(
                        f"{format_inr(additions_full_rate)} × "
                        f"{format_rate(ADDITIONAL_DEPRECIATION_FULL_RATE)} + "
                        f"{format_inr(additions_half_rate)} × "
                        f"{format_rate(ADDITIONAL_DEPRECIATION_HALF_RATE)}"
                    ),
                    amount=additional,
                )
            )
            depreciation = round_money(depreciation + additional)

    if depreciation > wdv_before_dep:
        excess = round_money(depreciation - wdv_before_dep)
        workings.append(
            Working(
                description="Restricted to WDV available",
                calculation=(
                    f"{format_inr(depreciation)} - "
                    f"{format_inr(wdv_before_dep)}"
                ),
                amount=-excess,
                note=WDV_CAP_NOTE,
            )
        )
        depreciation = wdv_before_dep

    return IncomeTaxResult(
        **base,
        depreciation_for_year=depreciation,
        additional_depreciation=additional,
        closing_wdv=round_money(wdv_before_dep - depreciation),
        workings=tuple(workings),
    )


def compute_income_tax_results(
    blocks: Sequence[IncomeTaxBlock],
    window: FiscalYearWindow,
    *,
    rates: RateTables = DEFAULT_RATE_TABLES,
    logger: Logger | None = None,
) -> list[tuple[IncomeTaxBlock, IncomeTaxResult]]:
    """Compute results for every block, preserving input order."""
    return [
        (
            block,
            compute_income_tax_result(
                block,
                window,
                rates=rates,
                logger=logger,
            ),
        )
        for block in blocks
    ]


def _resolve_rate(block: IncomeTaxBlock, rates: RateTables) -> Decimal:
    rate = coerce_decimal(block.rate)
    if rate > 0:
        return rate
    return rates.block_rate(block.block_type)


__all__ = [
    "SELECT_BLOCK_TYPE_MESSAGE",
    "WDV_CAP_NOTE",
    "split_additions_by_days",
    "compute_income_tax_result",
    "compute_income_tax_results",
]
