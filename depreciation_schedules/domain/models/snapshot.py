"""Domain model for the persisted register state."""

from dataclasses import dataclass
from decimal import Decimal

from .assets import CompaniesActAsset, DepreciationMethod, IncomeTaxBlock


@dataclass(frozen=True)
class RegisterSnapshot:
    """Everything needed to recompute both schedules for one year."""

    fiscal_year: str
    method: DepreciationMethod = DepreciationMethod.WDV
    assets: tuple[CompaniesActAsset, ...] = ()
    blocks: tuple[IncomeTaxBlock, ...] = ()
    deferred_tax_rate: Decimal = Decimal("25")
    accounting_profit: Decimal = Decimal("0")


__all__ = ["RegisterSnapshot"]
