"""Use cases for saving and loading register snapshots."""

from depreciation_schedules.application.ports.snapshot_repository import (
    SnapshotRepositoryPort,
)
from depreciation_schedules.domain.models import RegisterSnapshot
from depreciation_schedules.infrastructure.logging.logger import get_app_logger


class SaveSnapshotUseCase:
    """Persist the register state under a name."""

    def __init__(self, repository: SnapshotRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port storing snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, name: str, snapshot: RegisterSnapshot) -> None:
        """Store ``snapshot`` under ``name``, replacing any previous one."""
        self._repository.save_snapshot(name, snapshot)
        self._logger.info(
            f"Snapshot '{name}' saved for FY {snapshot.fiscal_year}: "
            f"assets={len(snapshot.assets)}, blocks={len(snapshot.blocks)}"
        )


class LoadSnapshotUseCase:
    """Load a previously saved register state."""

    def __init__(self, repository: SnapshotRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port storing snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, name: str) -> RegisterSnapshot:
        """Return the snapshot stored under ``name``.

        Raises:
            LookupError: If no snapshot exists under ``name``.
        """
        try:
            snapshot = self._repository.load_snapshot(name)
        except LookupError:
            self._logger.warning(f"Snapshot '{name}' not found")
            raise
        self._logger.info(
            f"Snapshot '{name}' loaded for FY {snapshot.fiscal_year}"
        )
        return snapshot


class ListSnapshotsUseCase:
    """List the names of the saved registers."""

    def __init__(self, repository: SnapshotRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[str]:
        """Return saved register names in alphabetical order."""
        names = self._repository.list_snapshots()
        self._logger.info(f"Found {len(names)} saved snapshot(s)")
        return names


__all__ = ["SaveSnapshotUseCase", "LoadSnapshotUseCase", "ListSnapshotsUseCase"]
