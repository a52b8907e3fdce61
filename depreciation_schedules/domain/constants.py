"""Statutory rate tables for Companies Act and Income Tax depreciation."""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

UNCLASSIFIED = "unclassified"
UNCLASSIFIED_BLOCK_NAME = "Unclassified Block"

ADDITIONAL_DEPRECIATION_FULL_RATE = Decimal("0.20")
ADDITIONAL_DEPRECIATION_HALF_RATE = Decimal("0.10")
HALF_RATE_THRESHOLD_DAYS = 180

DEFAULT_DEFERRED_TAX_RATE = Decimal("25")

# Schedule II, Companies Act 2013.
SCHEDULE_II_WDV_RATES = MappingProxyType(
    {
        "general_machinery": Decimal("0.1810"),
        "computers_laptops": Decimal("0.6316"),
        "servers_networks": Decimal("0.3930"),
        "general_furniture": Decimal("0.2589"),
        "office_equipment": Decimal("0.4507"),
        "motor_cars": Decimal("0.2589"),
        "buildings_rcc": Decimal("0.0487"),
        "buildings_non_rcc": Decimal("0.0950"),
    }
)

SCHEDULE_II_SLM_USEFUL_LIFE = MappingProxyType(
    {
        "general_machinery": 15,
        "computers_laptops": 3,
        "servers_networks": 6,
        "general_furniture": 10,
        "office_equipment": 5,
        "motor_cars": 8,
        "buildings_rcc": 60,
        "buildings_non_rcc": 30,
    }
)


@dataclass(frozen=True)
class BlockDefinition:
    """Income Tax block of assets and its WDV rate."""

    name: str
    rate: Decimal


INCOME_TAX_BLOCKS = MappingProxyType(
    {
        "building_residential": BlockDefinition(
            "Building (Residential)", Decimal("0.05")
        ),
        "building_general": BlockDefinition(
            "Building (Office, Factory, etc.)", Decimal("0.10")
        ),
        "furniture_fittings": BlockDefinition(
            "Furniture & Fittings", Decimal("0.10")
        ),
        "machinery_general": BlockDefinition(
            "Plant & Machinery (General)", Decimal("0.15")
        ),
        "motor_cars": BlockDefinition("Motor Cars", Decimal("0.15")),
        "office_equipment": BlockDefinition(
            "Office Equipment", Decimal("0.15")
        ),
        "ships_vessels": BlockDefinition("Ships, Vessels", Decimal("0.20")),
        "intangibles": BlockDefinition(
            "Intangible Assets (Patents, Copyrights)", Decimal("0.25")
        ),
        "motor_buses_lorries_taxis_hire": BlockDefinition(
            "Motor Buses, Lorries & Taxis (Hiring Business)", Decimal("0.30")
        ),
        "building_temporary": BlockDefinition(
            "Buildings (Temporary Structures)", Decimal("0.40")
        ),
        "aircraft": BlockDefinition("Aircraft", Decimal("0.40")),
        "computers_software": BlockDefinition(
            "Computers & Software", Decimal("0.40")
        ),
        "energy_saving_devices": BlockDefinition(
            "Energy Saving Devices", Decimal("0.40")
        ),
        "pollution_control": BlockDefinition(
            "Pollution Control Equipment", Decimal("0.40")
        ),
        "books_professional": BlockDefinition(
            "Books (for Professionals)", Decimal("0.40")
        ),
        "books_annual": BlockDefinition(
            "Books (Annual Publications)", Decimal("1.00")
        ),
    }
)

# Section 32(1)(iia) excludes these blocks from additional depreciation.
EXCLUDED_BLOCK_TYPES_FOR_ADDITIONAL_DEP = frozenset(
    {
        "ships_vessels",
        "motor_cars",
        "motor_buses_lorries_taxis_hire",
        "aircraft",
        "intangibles",
        "building_residential",
        "building_general",
        "building_temporary",
    }
)


@dataclass(frozen=True)
class RateTables:
    """Read-only rate configuration injected into the engines."""

    wdv_rates: Mapping[str, Decimal] = field(
        default_factory=lambda: SCHEDULE_II_WDV_RATES
    )
    slm_useful_life: Mapping[str, int] = field(
        default_factory=lambda: SCHEDULE_II_SLM_USEFUL_LIFE
    )
    income_tax_blocks: Mapping[str, BlockDefinition] = field(
        default_factory=lambda: INCOME_TAX_BLOCKS
    )
    excluded_for_additional: frozenset[str] = (
        EXCLUDED_BLOCK_TYPES_FOR_ADDITIONAL_DEP
    )

    def wdv_rate(self, asset_type: str) -> Decimal:
        return self.wdv_rates.get(asset_type, Decimal("0"))

    def useful_life(self, asset_type: str) -> int:
        return self.slm_useful_life.get(asset_type, 0)

    def block_rate(self, block_type: str) -> Decimal:
        definition = self.income_tax_blocks.get(block_type)
        return definition.rate if definition else Decimal("0")

    def block_name(self, block_type: str) -> str:
        definition = self.income_tax_blocks.get(block_type)
        return definition.name if definition else UNCLASSIFIED_BLOCK_NAME


DEFAULT_RATE_TABLES = RateTables()


__all__ = [
    "UNCLASSIFIED",
    "UNCLASSIFIED_BLOCK_NAME",
    "ADDITIONAL_DEPRECIATION_FULL_RATE",
    "ADDITIONAL_DEPRECIATION_HALF_RATE",
    "HALF_RATE_THRESHOLD_DAYS",
    "DEFAULT_DEFERRED_TAX_RATE",
    "SCHEDULE_II_WDV_RATES",
    "SCHEDULE_II_SLM_USEFUL_LIFE",
    "BlockDefinition",
    "INCOME_TAX_BLOCKS",
    "EXCLUDED_BLOCK_TYPES_FOR_ADDITIONAL_DEP",
    "RateTables",
    "DEFAULT_RATE_TABLES",
]
