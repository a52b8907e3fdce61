"""Application ports package."""

from .database import DatabaseEnginePort
from .snapshot_repository import SnapshotRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "SnapshotRepositoryPort",
]
