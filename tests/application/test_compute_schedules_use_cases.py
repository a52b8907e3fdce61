"""Tests for the schedule and deferred tax use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from depreciation_schedules.application.use_cases import (
    ComputeCompaniesActScheduleUseCase,
    ComputeIncomeTaxScheduleUseCase,
    ReconcileDeferredTaxUseCase,
)
from depreciation_schedules.domain.models import (
    Addition,
    CompaniesActAsset,
    DepreciationMethod,
    FiscalYearWindow,
    IncomeTaxBlock,
)


WINDOW = FiscalYearWindow.for_end_year(2025)


def _asset() -> CompaniesActAsset:
    return CompaniesActAsset(
        id="a1",
        name="Lathe",
        asset_type="general_machinery",
        opening_gross_block=Decimal("100000"),
        additions=(Addition(None, Decimal("500")),),
    )


def _block() -> IncomeTaxBlock:
    return IncomeTaxBlock(
        id="b1",
        name="Plant",
        block_type="machinery_general",
        rate=Decimal("0.15"),
        opening_wdv=Decimal("100000"),
    )


def test_companies_act_schedule_collects_results_and_warnings() -> None:
    """Entries should pair assets with results and their warnings."""
    logger = MagicMock()
    use_case = ComputeCompaniesActScheduleUseCase(logger=logger)

    schedule = use_case.execute([_asset()], "wdv", WINDOW)

    assert schedule.method is DepreciationMethod.WDV
    assert schedule.window == WINDOW
    entry = schedule.entries[0]
    assert entry.asset.id == "a1"
    assert entry.result.depreciation_for_year == Decimal("18100.00")
    assert entry.warnings == ("Addition #1 has no valid date.",)
    assert schedule.summary.totals.depreciation_for_year == Decimal(
        "18100.00"
    )
    logger.info.assert_called_once()


def test_income_tax_schedule_summarizes_blocks() -> None:
    """The Income Tax use case should compute and summarize blocks."""
    logger = MagicMock()
    use_case = ComputeIncomeTaxScheduleUseCase(logger=logger)

    schedule = use_case.execute([_block()], WINDOW)

    assert schedule.entries[0].result.closing_wdv == Decimal("85000.00")
    assert schedule.entries[0].warnings == ()
    assert "machinery_general" in schedule.summary.by_type
    logger.info.assert_called_once()


def test_reconcile_uses_schedule_totals() -> None:
    """Deferred tax should be fed from both schedules' totals."""
    logger = MagicMock()
    companies_act = ComputeCompaniesActScheduleUseCase(logger=logger).execute(
        [_asset()], "WDV", WINDOW
    )
    income_tax = ComputeIncomeTaxScheduleUseCase(logger=logger).execute(
        [_block()], WINDOW
    )

    result = ReconcileDeferredTaxUseCase(logger=logger).execute(
        companies_act,
        income_tax,
        tax_rate=Decimal("25"),
        accounting_profit=Decimal("1000000"),
    )

    assert result.opening_deferred_tax == Decimal("0")
    assert result.movement_deferred_tax == Decimal("775")
    assert result.closing_classification == "Asset"
    assert result.disclosure.total_tax_expense == Decimal("250000")


def test_use_cases_default_to_app_logger(monkeypatch) -> None:
    """Use cases should fall back to the shared app logger."""
    from depreciation_schedules.application.use_cases import (
        compute_companies_act_schedule as module,
    )

    fake_logger = MagicMock()
    monkeypatch.setattr(module, "get_app_logger", lambda: fake_logger)

    module.ComputeCompaniesActScheduleUseCase().execute(
        [], DepreciationMethod.SLM, WINDOW
    )

    fake_logger.info.assert_called_once()


def test_additions_dated_after_purchase_are_kept_in_order() -> None:
    """Register order is preserved in the schedule entries."""
    assets = [
        _asset(),
        CompaniesActAsset(
            id="a2",
            name="Drill",
            asset_type="general_machinery",
            opening_gross_block=Decimal("0"),
            additions=(Addition(date(2024, 10, 3), Decimal("100000")),),
        ),
    ]

    schedule = ComputeCompaniesActScheduleUseCase(
        logger=MagicMock()
    ).execute(assets, "WDV", WINDOW)

    assert [entry.asset.id for entry in schedule.entries] == ["a1", "a2"]
    assert schedule.entries[1].result.depreciation_for_year == Decimal(
        "8926.03"
    )
