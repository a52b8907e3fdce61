"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from depreciation_schedules.application.use_cases import (
    CompaniesActSchedule,
    ComputeCompaniesActScheduleUseCase,
    ComputeIncomeTaxScheduleUseCase,
    IncomeTaxSchedule,
    ListSnapshotsUseCase,
    LoadSnapshotUseCase,
    ReconcileDeferredTaxUseCase,
    SaveSnapshotUseCase,
)
from depreciation_schedules.domain.models import (
    DeferredTaxReconciliation,
    DepreciationMethod,
    FiscalYearWindow,
    RegisterSnapshot,
    Working,
)
from depreciation_schedules.infrastructure.csv_export import (
    COMPANIES_ACT,
    INCOME_TAX,
    companies_act_summary_frame,
    income_tax_summary_frame,
    summary_filename,
)
from depreciation_schedules.infrastructure.db import (
    SqlAlchemyDatabaseEngineAdapter,
)
from depreciation_schedules.infrastructure.logging.logger import (
    get_usage_logger,
)
from depreciation_schedules.infrastructure.settings import DepreciationSettings
from depreciation_schedules.infrastructure.snapshot_repository import (
    SqlAlchemySnapshotRepository,
)
from depreciation_schedules.infrastructure.snapshot_serialization import (
    snapshot_from_json,
    snapshot_to_json,
)
from depreciation_schedules.utils.decimal_utils import format_inr, format_rate

ACT_COMPANIES = "Companies Act"
ACT_INCOME_TAX = "Income Tax Act"
ACT_DEFERRED_TAX = "Deferred Tax"


def _fetch_snapshot(name: str) -> RegisterSnapshot | None:
    """Load the named snapshot, or None when nothing is saved yet."""
    repository = SqlAlchemySnapshotRepository(SqlAlchemyDatabaseEngineAdapter())
    try:
        return LoadSnapshotUseCase(repository).execute(name)
    except LookupError:
        return None


def _register_names(default_name: str) -> list[str]:
    """Return saved register names with ``default_name`` always offered."""
    repository = SqlAlchemySnapshotRepository(SqlAlchemyDatabaseEngineAdapter())
    names = ListSnapshotsUseCase(repository).execute()
    if default_name not in names:
        names = [default_name, *names]
    return names


def _save_snapshot(name: str, snapshot: RegisterSnapshot) -> None:
    """Persist ``snapshot`` under ``name``."""
    repository = SqlAlchemySnapshotRepository(SqlAlchemyDatabaseEngineAdapter())
    SaveSnapshotUseCase(repository).execute(name, snapshot)


def _compute_schedules(
    snapshot: RegisterSnapshot,
    method: DepreciationMethod,
    window: FiscalYearWindow,
) -> tuple[CompaniesActSchedule, IncomeTaxSchedule]:
    """Compute both schedules for the register."""
    companies_act = ComputeCompaniesActScheduleUseCase().execute(
        snapshot.assets,
        method,
        window,
    )
    income_tax = ComputeIncomeTaxScheduleUseCase().execute(
        snapshot.blocks,
        window,
    )
    return companies_act, income_tax


def _workings_rows(workings: Sequence[Working]) -> list[dict[str, str]]:
    """Return table rows for a list of workings."""
    return [
        {
            "Description": working.description,
            "Calculation": working.calculation,
            "Amount": format_inr(working.amount),
            "Note": working.note or "",
        }
        for working in workings
    ]


def _prepare_depreciation_chart_data(
    summary,
) -> list[dict[str, str | float]]:
    """Return Altair-ready rows of depreciation by type.

    Types with no depreciation for the year are left out.
    """
    data: list[dict[str, str | float]] = []
    for group in summary.by_type.values():
        if group.depreciation_for_year <= 0:
            continue
        data.append(
            {
                "category": group.name,
                "internal_name": group.internal_name,
                "amount": float(group.depreciation_for_year),
                "amount_label": format_inr(group.depreciation_for_year),
            }
        )
    return sorted(data, key=lambda row: row["amount"], reverse=True)


def _render_depreciation_chart(summary, title: str) -> None:
    """Render a horizontal bar chart of depreciation by type."""
    data = _prepare_depreciation_chart_data(summary)
    if not data:
        st.info("No depreciation to chart for this year.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
    ).encode(
        x=alt.X("amount:Q", title="Depreciation (₹)"),
        y=alt.Y("category:N", sort="-x", title=None),
        color=alt.Color("category:N", legend=None),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _render_companies_act(schedule: CompaniesActSchedule) -> None:
    """Render the Companies Act summary, chart and workings."""
    frame = companies_act_summary_frame(schedule.summary)
    st.subheader("Asset Type Summary Schedule")
    st.dataframe(frame, width="stretch", hide_index=True)
    st.download_button(
        "Export CSV",
        frame.to_csv(index=False),
        file_name=summary_filename(COMPANIES_ACT, schedule.window),
        mime="text/csv",
    )
    _render_depreciation_chart(schedule.summary, "Depreciation by Asset Type")

    for entry in schedule.entries:
        label = entry.asset.name or entry.asset.id
        with st.expander(
            f"{label}: {format_inr(entry.result.depreciation_for_year)}"
        ):
            for warning in entry.warnings:
                st.warning(warning)
            st.dataframe(
                _workings_rows(entry.result.workings),
                width="stretch",
                hide_index=True,
            )
            st.caption(
                f"Closing WDV {format_inr(entry.result.closing_wdv)}"
            )


def _render_income_tax(schedule: IncomeTaxSchedule) -> None:
    """Render the Income Tax summary, chart and workings."""
    frame = income_tax_summary_frame(schedule.summary)
    st.subheader("Asset Block Summary (Income Tax)")
    st.dataframe(frame, width="stretch", hide_index=True)
    st.download_button(
        "Export CSV",
        frame.to_csv(index=False),
        file_name=summary_filename(INCOME_TAX, schedule.window),
        mime="text/csv",
    )
    _render_depreciation_chart(schedule.summary, "Depreciation by Block")

    for entry in schedule.entries:
        label = entry.block.name or entry.block.id
        with st.expander(
            f"{label} @ {format_rate(entry.block.rate)}: "
            f"{format_inr(entry.result.depreciation_for_year)}"
        ):
            for warning in entry.warnings:
                st.warning(warning)
            st.dataframe(
                _workings_rows(entry.result.workings),
                width="stretch",
                hide_index=True,
            )
            st.caption(
                f"Closing WDV {format_inr(entry.result.closing_wdv)}"
            )


def _render_deferred_tax(reconciliation: DeferredTaxReconciliation) -> None:
    """Render the deferred tax balances, journal entry and disclosure."""
    opening_col, movement_col, closing_col = st.columns(3)
    opening_col.metric(
        f"Opening DT {reconciliation.opening_classification}",
        format_inr(reconciliation.opening_deferred_tax),
    )
    movement_col.metric(
        "Movement for the Year",
        format_inr(reconciliation.movement_deferred_tax),
    )
    closing_col.metric(
        f"Closing DT {reconciliation.closing_classification}",
        format_inr(reconciliation.closing_deferred_tax),
    )

    entry = reconciliation.journal_entry
    st.subheader("Journal Entry")
    amount = format_inr(entry.amount)
    st.dataframe(
        [
            {"Account": f"{entry.debit} Dr.", "Amount": amount},
            {"Account": f"To {entry.credit}", "Amount": amount},
        ],
        width="stretch",
        hide_index=True,
    )
    st.caption(entry.narration)

    disclosure = reconciliation.disclosure
    st.subheader("Tax Expense Disclosure")
    items = (
        ("Accounting Profit", disclosure.accounting_profit),
        ("Taxable Profit", disclosure.taxable_profit),
        ("Current Tax", disclosure.current_tax),
        ("Deferred Tax", disclosure.deferred_tax),
        ("Total Tax Expense", disclosure.total_tax_expense),
    )
    st.dataframe(
        [{"Item": item, "Amount": format_inr(amount)} for item, amount in items],
        width="stretch",
        hide_index=True,
    )


def _render_backup(name: str, snapshot: RegisterSnapshot | None) -> None:
    """Render JSON backup download and upload controls in the sidebar."""
    if snapshot is not None:
        st.sidebar.download_button(
            "Download backup",
            snapshot_to_json(snapshot),
            file_name="depreciation_data_backup.json",
            mime="application/json",
        )
    uploaded = st.sidebar.file_uploader("Import backup", type=["json"])
    if uploaded is None:
        return
    try:
        imported = snapshot_from_json(uploaded.getvalue().decode("utf-8"))
    except ValueError:
        st.sidebar.error("Invalid or corrupted data file.")
        return
    _save_snapshot(name, imported)
    st.sidebar.success("Data imported successfully!")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Depreciation Schedules", layout="wide")
    st.title("Depreciation Schedules")

    settings = DepreciationSettings.from_env()
    names = _register_names(settings.snapshot_name)
    snapshot_name = st.sidebar.selectbox(
        "Register",
        names,
        index=names.index(settings.snapshot_name),
    )
    act = st.sidebar.selectbox(
        "Act",
        [ACT_COMPANIES, ACT_INCOME_TAX, ACT_DEFERRED_TAX],
    )

    get_usage_logger().info(f"Viewed {act} for register '{snapshot_name}'")
    snapshot = _fetch_snapshot(snapshot_name)
    _render_backup(snapshot_name, snapshot)
    if snapshot is None:
        st.warning("No register saved yet. Import a backup to get started.")
        return

    window = FiscalYearWindow.from_label(snapshot.fiscal_year)
    method = DepreciationMethod(
        st.sidebar.selectbox(
            "Method",
            [DepreciationMethod.WDV.value, DepreciationMethod.SLM.value],
            index=0 if snapshot.method == DepreciationMethod.WDV else 1,
        )
    )
    st.caption(f"For the Financial Year {window.label}")

    companies_act, income_tax = _compute_schedules(snapshot, method, window)

    if act == ACT_COMPANIES:
        _render_companies_act(companies_act)
    elif act == ACT_INCOME_TAX:
        _render_income_tax(income_tax)
    else:
        tax_rate = st.sidebar.number_input(
            "Tax Rate (%)",
            min_value=0.0,
            max_value=100.0,
            value=float(snapshot.deferred_tax_rate),
        )
        accounting_profit = st.sidebar.number_input(
            "Accounting Profit",
            value=float(snapshot.accounting_profit),
        )
        reconciliation = ReconcileDeferredTaxUseCase().execute(
            companies_act,
            income_tax,
            tax_rate=Decimal(str(tax_rate)),
            accounting_profit=Decimal(str(accounting_profit)),
        )
        _render_deferred_tax(reconciliation)


if __name__ == "__main__":  # pragma: no cover
    main()
