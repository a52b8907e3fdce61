"""CLI adapter to compute both depreciation schedules for a saved register.

The command loads the snapshot named by ``SNAPSHOT_NAME`` and computes the
Companies Act and Income Tax schedules with the year, method, tax rate and
accounting profit saved in it. ``FISCAL_YEAR``, ``DEPRECIATION_METHOD``,
``DEFERRED_TAX_RATE`` and ``ACCOUNTING_PROFIT`` override the saved values
when set. Summaries are printed with the deferred tax position, and CSV
files are written when ``EXPORT_DIR`` is set.
"""

from depreciation_schedules.application.use_cases import (
    CompaniesActSchedule,
    IncomeTaxSchedule,
)
from depreciation_schedules.domain.models import DeferredTaxReconciliation
from depreciation_schedules.infrastructure.container import (
    build_companies_act_use_case,
    build_deferred_tax_use_case,
    build_income_tax_use_case,
    build_load_snapshot_use_case,
    build_settings,
)
from depreciation_schedules.infrastructure.csv_export import (
    export_summary_csv,
)
from depreciation_schedules.infrastructure.logging.logger import get_app_logger
from depreciation_schedules.utils.decimal_utils import format_inr


def _print_companies_act(schedule: CompaniesActSchedule) -> None:
    """Print the Companies Act type summary."""
    print(
        f"Companies Act schedule FY {schedule.window.label} "
        f"({schedule.method.value})"
    )
    for group in [*schedule.summary.by_type.values(), schedule.summary.totals]:
        print(
            f"  {group.name}: opening={format_inr(group.opening_net_block)}, "
            f"additions={format_inr(group.additions)}, "
            f"depreciation={format_inr(group.depreciation_for_year)}, "
            f"closing={format_inr(group.closing_net_block)}"
        )


def _print_income_tax(schedule: IncomeTaxSchedule) -> None:
    """Print the Income Tax block summary."""
    print(f"Income Tax schedule FY {schedule.window.label}")
    for group in [*schedule.summary.by_type.values(), schedule.summary.totals]:
        print(
            f"  {group.name}: opening={format_inr(group.opening_wdv)}, "
            f"additions={format_inr(group.additions)}, "
            f"depreciation={format_inr(group.depreciation_for_year)}, "
            f"closing={format_inr(group.closing_net_block)}, "
            f"stcg/l={format_inr(group.short_term_capital_gain_loss)}"
        )


def _print_deferred_tax(reconciliation: DeferredTaxReconciliation) -> None:
    """Print the deferred tax position and journal entry."""
    entry = reconciliation.journal_entry
    print(
        "Deferred tax: "
        f"opening={format_inr(reconciliation.opening_deferred_tax)} "
        f"({reconciliation.opening_classification}), "
        f"movement={format_inr(reconciliation.movement_deferred_tax)}, "
        f"closing={format_inr(reconciliation.closing_deferred_tax)} "
        f"({reconciliation.closing_classification})"
    )
    print(
        f"  Dr {entry.debit} / Cr {entry.credit}: {format_inr(entry.amount)}"
    )


def main() -> None:
    """Compute and print the schedules for the configured snapshot."""
    logger = get_app_logger()
    settings = build_settings()

    try:
        snapshot = build_load_snapshot_use_case().execute(
            settings.snapshot_name
        )
    except LookupError:
        print(
            f"No saved register named '{settings.snapshot_name}'. "
            "Import one with depreciation-import first."
        )
        return
    except ValueError as exc:
        logger.error(f"Could not read snapshot: {exc}")
        return

    settings = settings.for_snapshot(snapshot)
    window = settings.window
    if snapshot.fiscal_year != window.label:
        logger.warning(
            f"Snapshot '{settings.snapshot_name}' is for FY "
            f"{snapshot.fiscal_year}; computing FY {window.label}"
        )

    companies_act = build_companies_act_use_case().execute(
        snapshot.assets,
        settings.method,
        window,
    )
    income_tax = build_income_tax_use_case().execute(snapshot.blocks, window)
    reconciliation = build_deferred_tax_use_case().execute(
        companies_act,
        income_tax,
        tax_rate=settings.deferred_tax_rate,
        accounting_profit=settings.accounting_profit,
    )

    _print_companies_act(companies_act)
    _print_income_tax(income_tax)
    _print_deferred_tax(reconciliation)

    if settings.export_dir is not None:
        for summary in (companies_act.summary, income_tax.summary):
            path = export_summary_csv(
                summary,
                window,
                settings.export_dir,
                logger=logger,
            )
            print(f"Exported {path}")


if __name__ == "__main__":  # pragma: no cover
    main()
