"""Domain models for Companies Act assets and Income Tax blocks."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class DepreciationMethod(str, Enum):
    """Companies Act depreciation method."""

    SLM = "SLM"
    WDV = "WDV"


@dataclass(frozen=True)
class Addition:
    """Capital addition made during the fiscal year.

    Attributes:
        date: Date the addition was put to use.
        cost: Cost of the addition.
        residual_value: Residual value used by SLM (ignored for blocks).
    """

    date: date | None
    cost: Decimal
    residual_value: Decimal = Decimal("0")


@dataclass(frozen=True)
class CompaniesActAsset:
    """Individual fixed asset under Schedule II of the Companies Act."""

    id: str
    name: str
    asset_type: str
    opening_gross_block: Decimal = Decimal("0")
    opening_accumulated_depreciation: Decimal = Decimal("0")
    residual_value: Decimal = Decimal("0")
    purchase_date: date | None = None
    disposal_date: date | None = None
    sale_value: Decimal = Decimal("0")
    additions: tuple[Addition, ...] = ()

    @property
    def is_disposed(self) -> bool:
        return self.disposal_date is not None


@dataclass(frozen=True)
class AdditionalDepreciationChecklist:
    """Statutory conditions for additional depreciation.

    Attributes:
        is_new_plant_machinery: Additions are new plant or machinery.
        is_manufacturing: The assessee is engaged in manufacture or
            production of an article or thing.
        is_not_excluded: The assets are not in a category the statute
            excludes (second-hand, office, residential, vehicles, ...).
    """

    is_new_plant_machinery: bool = False
    is_manufacturing: bool = False
    is_not_excluded: bool = False

    @property
    def all_confirmed(self) -> bool:
        return (
            self.is_new_plant_machinery
            and self.is_manufacturing
            and self.is_not_excluded
        )


@dataclass(frozen=True)
class IncomeTaxBlock:
    """Block of assets under the Income Tax Act.

    ``rate`` mirrors the rate table entry for ``block_type``; use
    ``apply_block_type`` to change the type so the two stay in sync.
    """

    id: str
    name: str
    block_type: str = ""
    rate: Decimal = Decimal("0")
    opening_wdv: Decimal = Decimal("0")
    additions: tuple[Addition, ...] = ()
    sale_proceeds: Decimal = Decimal("0")
    block_ceased: bool = False
    eligible_for_additional: bool = False
    checklist: AdditionalDepreciationChecklist = field(
        default_factory=AdditionalDepreciationChecklist
    )


__all__ = [
    "DepreciationMethod",
    "Addition",
    "CompaniesActAsset",
    "AdditionalDepreciationChecklist",
    "IncomeTaxBlock",
]
