"""Database infrastructure for the depreciation register.

This module exposes helpers to create and reuse the SQLAlchemy engine that
stores register snapshots. It belongs to the infrastructure layer because it
deals with an external system (SQLite by default, any SQLAlchemy URL when
configured).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from depreciation_schedules.application.ports.database import (
    DatabaseEnginePort,
)
from depreciation_schedules.utils.utils import get_project_root

SNAPSHOT_DB_URL_ENV = "SNAPSHOT_DB_URL"
DEFAULT_SNAPSHOT_DB_FILENAME = "depreciation_register.sqlite3"
SQLITE_URL_PREFIX = "sqlite:"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _default_snapshot_db_url() -> str:
    """Return the SQLite URL under ``<project root>/data``."""
    data_dir = get_project_root() / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / DEFAULT_SNAPSHOT_DB_FILENAME}"


def _resolve_snapshot_db_url() -> str:
    """Return the configured snapshot URL, falling back to SQLite."""
    try:
        return _get_env_var(SNAPSHOT_DB_URL_ENV)
    except RuntimeError:
        return _default_snapshot_db_url()


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the snapshot store.

    SQLite connections are shared across the Streamlit script threads, so the
    same-thread check is disabled for SQLite URLs.

    Args:
        db_url: SQLAlchemy database URL.

    Returns:
        Engine: Engine with a small connection pool and health checks.
    """
    options = {
        "poolclass": QueuePool,
        "pool_size": 5,
        "max_overflow": 5,
        "pool_pre_ping": True,
        "future": True,
    }
    if db_url.startswith(SQLITE_URL_PREFIX):
        options["connect_args"] = {"check_same_thread": False}
    return create_engine(db_url, **options)


_snapshot_engine: Optional[Engine] = None


def get_snapshot_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the snapshot store.

    Returns:
        Engine: Lazily initialized engine connected to the snapshot database.
    """
    global _snapshot_engine
    if _snapshot_engine is None:
        _snapshot_engine = _create_engine(_resolve_snapshot_db_url())
    return _snapshot_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application code can depend only on the protocol.
    """

    def get_snapshot_engine(self) -> Engine:
        """Get the engine for the snapshot database.

        Returns:
            Engine: SQLAlchemy engine connected to the snapshot store.
        """
        return get_snapshot_engine()


__all__ = [
    "SNAPSHOT_DB_URL_ENV",
    "get_snapshot_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
