"""Tests for the SQLAlchemy snapshot repository."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text

from depreciation_schedules.domain.models import (
    CompaniesActAsset,
    RegisterSnapshot,
)
from depreciation_schedules.infrastructure.snapshot_repository import (
    SqlAlchemySnapshotRepository,
)


@pytest.fixture
def engine(tmp_path):
    """Return an engine bound to a throwaway SQLite file."""
    engine = create_engine(f"sqlite:///{tmp_path / 'register.sqlite3'}")
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    """Return a repository wired to the temporary engine."""
    db_port = MagicMock()
    db_port.get_snapshot_engine.return_value = engine
    return SqlAlchemySnapshotRepository(db_port, logger=MagicMock())


def _snapshot(fiscal_year: str = "2024-25") -> RegisterSnapshot:
    return RegisterSnapshot(
        fiscal_year=fiscal_year,
        assets=(
            CompaniesActAsset(
                id="a1",
                name="Lathe",
                asset_type="general_machinery",
                opening_gross_block=Decimal("100000"),
            ),
        ),
    )


def test_save_then_load_returns_snapshot(repository) -> None:
    """Saved snapshots should load back unchanged."""
    snapshot = _snapshot()

    repository.save_snapshot("main", snapshot)

    assert repository.load_snapshot("main") == snapshot


def test_save_replaces_existing_snapshot(repository) -> None:
    """Saving under an existing name overwrites the previous payload."""
    repository.save_snapshot("main", _snapshot("2024-25"))
    repository.save_snapshot("main", _snapshot("2025-26"))

    assert repository.load_snapshot("main").fiscal_year == "2025-26"
    assert repository.list_snapshots() == ["main"]


def test_list_snapshots_is_sorted(repository) -> None:
    """Snapshot names are listed alphabetically."""
    repository.save_snapshot("zeta", _snapshot())
    repository.save_snapshot("alpha", _snapshot())

    assert repository.list_snapshots() == ["alpha", "zeta"]


def test_load_missing_snapshot_raises_lookup_error(repository) -> None:
    """Unknown names raise LookupError."""
    with pytest.raises(LookupError):
        repository.load_snapshot("missing")


def test_corrupted_payload_raises_value_error(repository, engine) -> None:
    """Rows with invalid JSON are reported as ValueError."""
    repository.save_snapshot("main", _snapshot())
    with engine.begin() as conn:
        conn.execute(
            text("UPDATE register_snapshots SET payload = :payload"),
            {"payload": "{broken"},
        )

    with pytest.raises(ValueError):
        repository.load_snapshot("main")

    repository._logger.error.assert_called_once()


def test_table_is_created_once(engine) -> None:
    """The schema is prepared on first use only."""
    db_port = MagicMock()
    db_port.get_snapshot_engine.return_value = engine
    repository = SqlAlchemySnapshotRepository(db_port, logger=MagicMock())

    repository.list_snapshots()
    repository.list_snapshots()

    assert repository._prepared is True
    assert db_port.get_snapshot_engine.call_count == 2
