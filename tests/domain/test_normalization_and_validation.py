"""Tests for input normalization and data-entry warnings."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from depreciation_schedules.domain.models import (
    AdditionalDepreciationChecklist,
    Addition,
    CompaniesActAsset,
    DepreciationMethod,
    FiscalYearWindow,
    IncomeTaxBlock,
)
from depreciation_schedules.domain.services import (
    collect_asset_warnings,
    collect_block_warnings,
    normalize_amount,
    normalize_date,
    normalize_method,
    normalize_type_key,
)
from depreciation_schedules.domain.services.normalization import (
    humanize_type_key,
)


WINDOW = FiscalYearWindow.for_end_year(2025)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1,500.25", Decimal("1500.25")),
        (250, Decimal("250")),
        (-10, Decimal("0")),
        ("", Decimal("0")),
        ("abc", Decimal("0")),
        (None, Decimal("0")),
    ],
)
def test_normalize_amount(raw, expected) -> None:
    """Amounts clamp to zero when blank, invalid or negative."""
    assert normalize_amount(raw) == expected


def test_normalize_date_accepts_common_inputs() -> None:
    """Dates, datetimes and ISO strings parse; junk becomes None."""
    assert normalize_date(date(2024, 5, 1)) == date(2024, 5, 1)
    assert normalize_date(datetime(2024, 5, 1, 12, 30)) == date(2024, 5, 1)
    assert normalize_date("2024-05-01") == date(2024, 5, 1)
    assert normalize_date("2024-05-01T10:00:00") == date(2024, 5, 1)
    assert normalize_date("01/05/2024") is None
    assert normalize_date("") is None
    assert normalize_date(20240501) is None


def test_normalize_method_defaults_to_wdv() -> None:
    """Only SLM and WDV are recognized, case-insensitively."""
    assert normalize_method("slm") is DepreciationMethod.SLM
    assert normalize_method(DepreciationMethod.SLM) is DepreciationMethod.SLM
    assert normalize_method("straight") is DepreciationMethod.WDV
    assert normalize_method(None) is DepreciationMethod.WDV


def test_type_keys_and_display_names() -> None:
    """Empty types group as unclassified and keys humanize for display."""
    assert normalize_type_key("") == "unclassified"
    assert normalize_type_key(None) == "unclassified"
    assert normalize_type_key(" motor_cars ") == "motor_cars"
    assert humanize_type_key("computers_laptops") == "Computers Laptops"


def test_clean_asset_has_no_warnings() -> None:
    """A consistent asset produces no warnings."""
    asset = CompaniesActAsset(
        id="a1",
        name="Lathe",
        asset_type="general_machinery",
        opening_gross_block=Decimal("1000"),
        additions=(Addition(date(2024, 6, 1), Decimal("100")),),
    )

    assert collect_asset_warnings(asset, WINDOW) == []


def test_inconsistent_asset_reports_each_problem() -> None:
    """Every data-entry problem is reported and logged."""
    logger = MagicMock()
    asset = CompaniesActAsset(
        id="a1",
        name="Lathe",
        asset_type="general_machinery",
        opening_gross_block=Decimal("1000"),
        opening_accumulated_depreciation=Decimal("2000"),
        residual_value=Decimal("1500"),
        purchase_date=date(2025, 5, 1),
        sale_value=Decimal("10"),
        additions=(
            Addition(None, Decimal("100")),
            Addition(date(2023, 1, 1), Decimal("100")),
        ),
    )

    warnings = collect_asset_warnings(asset, WINDOW, logger=logger)

    assert warnings == [
        "Opening accumulated depreciation exceeds opening gross block.",
        "Residual value exceeds opening gross block.",
        "Purchase date falls after the financial year.",
        "Sale value entered without a disposal date.",
        "Addition #1 has no valid date.",
        "Addition #2 is dated outside the financial year.",
    ]
    assert logger.warning.call_count == len(warnings)


def test_disposal_before_purchase_is_reported() -> None:
    """A disposal preceding the purchase date is flagged."""
    asset = CompaniesActAsset(
        id="a1",
        name="Lathe",
        asset_type="general_machinery",
        opening_gross_block=Decimal("1000"),
        purchase_date=date(2024, 8, 1),
        disposal_date=date(2024, 7, 1),
    )

    assert collect_asset_warnings(asset, WINDOW) == [
        "Disposal date is before the purchase date."
    ]


def test_block_warnings_cover_type_and_checklist() -> None:
    """Untyped blocks and unconfirmed claims are flagged."""
    block = IncomeTaxBlock(
        id="b1",
        name="Kit",
        eligible_for_additional=True,
        checklist=AdditionalDepreciationChecklist(True, False, True),
        additions=(Addition(date(2025, 4, 1), Decimal("100")),),
    )

    assert collect_block_warnings(block, WINDOW) == [
        "Select a block type to calculate depreciation.",
        "Addition #1 is dated outside the financial year.",
        "Additional depreciation claimed without a confirmed checklist.",
    ]
