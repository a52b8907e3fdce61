"""SQLAlchemy-backed storage for register snapshots."""

from datetime import datetime, timezone
import json

from sqlalchemy import text

from depreciation_schedules.application.ports.database import (
    DatabaseEnginePort,
)
from depreciation_schedules.application.ports.snapshot_repository import (
    SnapshotRepositoryPort,
)
from depreciation_schedules.domain.models import RegisterSnapshot
from depreciation_schedules.infrastructure.logging.logger import get_app_logger
from depreciation_schedules.infrastructure.snapshot_serialization import (
    snapshot_from_dict,
    snapshot_to_dict,
)


CREATE_SNAPSHOTS_SQL = """
CREATE TABLE IF NOT EXISTS register_snapshots (
    name TEXT PRIMARY KEY,
    fiscal_year TEXT NOT NULL,
    payload TEXT NOT NULL,
    saved_at TEXT NOT NULL
)
"""

DELETE_SNAPSHOT_SQL = text(
    """
    DELETE FROM register_snapshots
    WHERE name = :name
    """
)

INSERT_SNAPSHOT_SQL = text(
    """
    INSERT INTO register_snapshots (name, fiscal_year, payload, saved_at)
    VALUES (:name, :fiscal_year, :payload, :saved_at)
    """
)

SELECT_SNAPSHOT_SQL = text(
    """
    SELECT name, fiscal_year, payload, saved_at
    FROM register_snapshots
    WHERE name = :name
    """
)

SELECT_SNAPSHOT_NAMES_SQL = text(
    """
    SELECT name
    FROM register_snapshots
    ORDER BY name
    """
)


class SqlAlchemySnapshotRepository(SnapshotRepositoryPort):
    """Snapshot repository storing JSON payloads in a SQL table."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the snapshot engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._prepared = False

    def save_snapshot(self, name: str, snapshot: RegisterSnapshot) -> None:
        """Store ``snapshot`` under ``name``, replacing any previous one.

        Args:
            name: Snapshot name.
            snapshot: Register state to persist.
        """
        payload = json.dumps(snapshot_to_dict(snapshot))
        saved_at = datetime.now(timezone.utc).isoformat()
        engine = self._db_port.get_snapshot_engine()
        self._prepare(engine)
        with engine.begin() as conn:
            conn.execute(DELETE_SNAPSHOT_SQL, {"name": name})
            conn.execute(
                INSERT_SNAPSHOT_SQL,
                {
                    "name": name,
                    "fiscal_year": snapshot.fiscal_year,
                    "payload": payload,
                    "saved_at": saved_at,
                },
            )

    def load_snapshot(self, name: str) -> RegisterSnapshot:
        """Return the snapshot stored under ``name``.

        Args:
            name: Snapshot name.

        Returns:
            RegisterSnapshot: Deserialized register state.

        Raises:
            LookupError: If no snapshot exists under ``name``.
            ValueError: If the stored payload is corrupted.
        """
        engine = self._db_port.get_snapshot_engine()
        self._prepare(engine)
        with engine.connect() as conn:
            row = conn.execute(SELECT_SNAPSHOT_SQL, {"name": name}).first()
        if row is None:
            raise LookupError(f"No snapshot named {name!r}")
        try:
            payload = json.loads(row.payload)
        except json.JSONDecodeError as exc:
            self._logger.error(f"Snapshot '{name}' payload is not valid JSON")
            raise ValueError(f"Corrupted snapshot payload: {name}") from exc
        return snapshot_from_dict(payload)

    def list_snapshots(self) -> list[str]:
        """Return the stored snapshot names in alphabetical order."""
        engine = self._db_port.get_snapshot_engine()
        self._prepare(engine)
        with engine.connect() as conn:
            rows = conn.execute(SELECT_SNAPSHOT_NAMES_SQL).all()
        return [row.name for row in rows]

    def _prepare(self, engine) -> None:
        """Create the snapshot table on first use."""
        if self._prepared:
            return
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_SNAPSHOTS_SQL)
        self._prepared = True


__all__ = ["SqlAlchemySnapshotRepository"]
