"""Tests for the snapshot and roll-forward use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from depreciation_schedules.application.use_cases import (
    ListSnapshotsUseCase,
    LoadSnapshotUseCase,
    RollForwardUseCase,
    SaveSnapshotUseCase,
)
from depreciation_schedules.domain.models import (
    CompaniesActAsset,
    DepreciationMethod,
    IncomeTaxBlock,
    RegisterSnapshot,
)


def _snapshot() -> RegisterSnapshot:
    return RegisterSnapshot(
        fiscal_year="2024-25",
        method=DepreciationMethod.WDV,
        assets=(
            CompaniesActAsset(
                id="a1",
                name="Lathe",
                asset_type="general_machinery",
                opening_gross_block=Decimal("500000"),
                opening_accumulated_depreciation=Decimal("50000"),
            ),
        ),
        blocks=(
            IncomeTaxBlock(
                id="b1",
                name="Plant",
                block_type="machinery_general",
                rate=Decimal("0.15"),
                opening_wdv=Decimal("100000"),
            ),
        ),
        deferred_tax_rate=Decimal("25.17"),
        accounting_profit=Decimal("1000"),
    )


def test_save_snapshot_delegates_to_repository() -> None:
    """SaveSnapshotUseCase should store the snapshot and log it."""
    repository = MagicMock()
    logger = MagicMock()
    snapshot = _snapshot()

    SaveSnapshotUseCase(repository, logger=logger).execute("main", snapshot)

    repository.save_snapshot.assert_called_once_with("main", snapshot)
    logger.info.assert_called_once()


def test_load_snapshot_returns_repository_value() -> None:
    """LoadSnapshotUseCase should return what the repository holds."""
    repository = MagicMock()
    repository.load_snapshot.return_value = _snapshot()

    result = LoadSnapshotUseCase(repository, logger=MagicMock()).execute(
        "main"
    )

    assert result.fiscal_year == "2024-25"
    repository.load_snapshot.assert_called_once_with("main")


def test_load_snapshot_propagates_missing_snapshot() -> None:
    """A missing snapshot should be logged and re-raised."""
    repository = MagicMock()
    repository.load_snapshot.side_effect = LookupError("missing")
    logger = MagicMock()

    with pytest.raises(LookupError):
        LoadSnapshotUseCase(repository, logger=logger).execute("nope")

    logger.warning.assert_called_once()


def test_list_snapshots_returns_repository_names() -> None:
    """ListSnapshotsUseCase should return the stored register names."""
    repository = MagicMock()
    repository.list_snapshots.return_value = ["alpha", "main"]
    logger = MagicMock()

    names = ListSnapshotsUseCase(repository, logger=logger).execute()

    assert names == ["alpha", "main"]
    logger.info.assert_called_once()


def test_roll_forward_opens_next_year() -> None:
    """Roll forward should move balances and the year label."""
    rolled = RollForwardUseCase(logger=MagicMock()).execute(_snapshot())

    assert rolled.fiscal_year == "2025-26"
    assert rolled.method is DepreciationMethod.WDV
    assert rolled.deferred_tax_rate == Decimal("25.17")
    assert rolled.accounting_profit == Decimal("0")
    asset = rolled.assets[0]
    assert asset.opening_gross_block == Decimal("500000.00")
    assert asset.opening_accumulated_depreciation == Decimal("131450.00")
    assert rolled.blocks[0].opening_wdv == Decimal("85000.00")


def test_roll_forward_rejects_invalid_year() -> None:
    """Snapshots with an unreadable year cannot be rolled forward."""
    snapshot = RegisterSnapshot(fiscal_year="someday")

    with pytest.raises(ValueError):
        RollForwardUseCase(logger=MagicMock()).execute(snapshot)
