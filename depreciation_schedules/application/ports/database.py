"""Database ports for the depreciation schedules application.

This module defines the application-layer protocol for accessing the
database engine that stores register snapshots. Infrastructure
implementations are expected to provide concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the snapshot database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_snapshot_engine(self) -> Engine:
        """Get the engine for the snapshot database.

        Returns:
            Engine: SQLAlchemy engine connected to the snapshot store.
        """


__all__ = ["DatabaseEnginePort"]
