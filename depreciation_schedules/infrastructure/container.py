"""Composition root for wiring infrastructure adapters."""

from depreciation_schedules.application.ports.database import DatabaseEnginePort
from depreciation_schedules.application.ports.snapshot_repository import (
    SnapshotRepositoryPort,
)
from depreciation_schedules.application.use_cases import (
    ComputeCompaniesActScheduleUseCase,
    ComputeIncomeTaxScheduleUseCase,
    LoadSnapshotUseCase,
    ReconcileDeferredTaxUseCase,
    RollForwardUseCase,
    SaveSnapshotUseCase,
)
from depreciation_schedules.infrastructure.db import (
    SqlAlchemyDatabaseEngineAdapter,
)
from depreciation_schedules.infrastructure.logging.logger import get_app_logger
from depreciation_schedules.infrastructure.settings import DepreciationSettings
from depreciation_schedules.infrastructure.snapshot_repository import (
    SqlAlchemySnapshotRepository,
)


def build_settings() -> DepreciationSettings:
    """Return settings sourced from the environment."""
    return DepreciationSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_snapshot_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SnapshotRepositoryPort:
    """Return the snapshot repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySnapshotRepository(resolved_db, logger=get_app_logger())


def build_save_snapshot_use_case(
    repository: SnapshotRepositoryPort | None = None,
) -> SaveSnapshotUseCase:
    """Return the save-snapshot use case."""
    return SaveSnapshotUseCase(repository or build_snapshot_repository())


def build_load_snapshot_use_case(
    repository: SnapshotRepositoryPort | None = None,
) -> LoadSnapshotUseCase:
    """Return the load-snapshot use case."""
    return LoadSnapshotUseCase(repository or build_snapshot_repository())


def build_companies_act_use_case() -> ComputeCompaniesActScheduleUseCase:
    """Return the Companies Act schedule use case."""
    return ComputeCompaniesActScheduleUseCase(logger=get_app_logger())


def build_income_tax_use_case() -> ComputeIncomeTaxScheduleUseCase:
    """Return the Income Tax schedule use case."""
    return ComputeIncomeTaxScheduleUseCase(logger=get_app_logger())


def build_deferred_tax_use_case() -> ReconcileDeferredTaxUseCase:
    """Return the deferred tax reconciliation use case."""
    return ReconcileDeferredTaxUseCase(logger=get_app_logger())


def build_roll_forward_use_case() -> RollForwardUseCase:
    """Return the year roll-forward use case."""
    return RollForwardUseCase(logger=get_app_logger())


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_snapshot_repository",
    "build_save_snapshot_use_case",
    "build_load_snapshot_use_case",
    "build_companies_act_use_case",
    "build_income_tax_use_case",
    "build_deferred_tax_use_case",
    "build_roll_forward_use_case",
]
