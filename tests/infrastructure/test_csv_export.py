"""Tests for the summary CSV export."""

from decimal import Decimal
from unittest.mock import MagicMock

import pandas as pd

from depreciation_schedules.domain.models import (
    CompaniesActAsset,
    FiscalYearWindow,
    IncomeTaxBlock,
)
from depreciation_schedules.domain.services import (
    compute_companies_act_results,
    compute_income_tax_results,
    summarize_companies_act,
    summarize_income_tax,
)
from depreciation_schedules.infrastructure.csv_export import (
    companies_act_summary_frame,
    export_summary_csv,
    income_tax_summary_frame,
    summary_filename,
)

WINDOW = FiscalYearWindow.for_end_year(2025)


def _companies_act_summary():
    assets = [
        CompaniesActAsset(
            id="a1",
            name="Lathe",
            asset_type="general_machinery",
            opening_gross_block=Decimal("100000"),
        ),
        CompaniesActAsset(
            id="a2",
            name="Laptop",
            asset_type="computers_laptops",
            opening_gross_block=Decimal("50000"),
        ),
    ]
    return summarize_companies_act(
        compute_companies_act_results(assets, "WDV", WINDOW)
    )


def _income_tax_summary():
    blocks = [
        IncomeTaxBlock(
            id="b1",
            name="Plant",
            block_type="machinery_general",
            rate=Decimal("0.15"),
            opening_wdv=Decimal("100000"),
        )
    ]
    return summarize_income_tax(compute_income_tax_results(blocks, WINDOW))


def test_companies_act_frame_has_type_rows_and_total() -> None:
    """Each asset type gets a row and the last row is the total."""
    frame = companies_act_summary_frame(_companies_act_summary())

    assert list(frame.columns)[:3] == [
        "Asset Type",
        "Op. Gross Block",
        "Additions",
    ]
    assert list(frame["Asset Type"]) == [
        "General Machinery",
        "Computers Laptops",
        "TOTAL",
    ]
    assert frame.iloc[-1]["Op. Gross Block"] == Decimal("150000.00")
    assert frame.iloc[0]["Dep. for Year"] == Decimal("18100.00")


def test_income_tax_frame_uses_block_columns() -> None:
    """Income Tax rows expose WDV, depreciation and STCG/L."""
    frame = income_tax_summary_frame(_income_tax_summary())

    assert "STCG/L" in frame.columns
    assert frame.iloc[-1]["Asset Block"] == "TOTAL"
    assert frame.iloc[-1]["Closing WDV"] == Decimal("85000.00")


def test_summary_filename_includes_act_and_year() -> None:
    """File names follow the Depreciation_Summary pattern."""
    assert (
        summary_filename("companies", WINDOW)
        == "Depreciation_Summary_companies_FY2024-25.csv"
    )


def test_export_summary_csv_writes_file(tmp_path) -> None:
    """Exports create the directory and a UTF-8 CSV file."""
    logger = MagicMock()
    export_dir = tmp_path / "exports"

    path = export_summary_csv(
        _income_tax_summary(),
        WINDOW,
        export_dir,
        logger=logger,
    )

    assert path == export_dir / "Depreciation_Summary_income_tax_FY2024-25.csv"
    written = pd.read_csv(path)
    assert list(written["Asset Block"])[-1] == "TOTAL"
    assert written.iloc[-1]["Dep. for Year"] == 15000.0
    logger.info.assert_called_once()


def test_export_picks_companies_act_layout(tmp_path) -> None:
    """Companies Act summaries are exported under the companies name."""
    path = export_summary_csv(
        _companies_act_summary(),
        WINDOW,
        tmp_path,
        logger=MagicMock(),
    )

    assert path.name == "Depreciation_Summary_companies_FY2024-25.csv"
    header = path.read_text(encoding="utf-8").splitlines()[0]
    assert header.startswith("Asset Type,Op. Gross Block")
