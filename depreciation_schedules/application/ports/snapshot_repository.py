"""Port for persisting register snapshots."""

from typing import Protocol

from depreciation_schedules.domain.models.snapshot import RegisterSnapshot


class SnapshotRepositoryPort(Protocol):
    """Port exposing save/load access to register snapshots."""

    def save_snapshot(self, name: str, snapshot: RegisterSnapshot) -> None:
        """Store ``snapshot`` under ``name``, replacing any previous one."""

    def load_snapshot(self, name: str) -> RegisterSnapshot:
        """Return the snapshot stored under ``name``.

        Raises:
            LookupError: If no snapshot exists under ``name``.
        """

    def list_snapshots(self) -> list[str]:
        """Return the stored snapshot names."""


__all__ = ["SnapshotRepositoryPort"]
