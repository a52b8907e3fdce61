"""Application use cases package."""

from .compute_companies_act_schedule import (
    CompaniesActEntry,
    CompaniesActSchedule,
    ComputeCompaniesActScheduleUseCase,
)
from .compute_income_tax_schedule import (
    ComputeIncomeTaxScheduleUseCase,
    IncomeTaxEntry,
    IncomeTaxSchedule,
)
from .reconcile_deferred_tax import ReconcileDeferredTaxUseCase
from .roll_forward import RollForwardUseCase
from .snapshots import (
    ListSnapshotsUseCase,
    LoadSnapshotUseCase,
    SaveSnapshotUseCase,
)

__all__ = [
    "CompaniesActEntry",
    "CompaniesActSchedule",
    "ComputeCompaniesActScheduleUseCase",
    "ComputeIncomeTaxScheduleUseCase",
    "IncomeTaxEntry",
    "IncomeTaxSchedule",
    "ReconcileDeferredTaxUseCase",
    "RollForwardUseCase",
    "ListSnapshotsUseCase",
    "LoadSnapshotUseCase",
    "SaveSnapshotUseCase",
]
