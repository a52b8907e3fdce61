"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path
from typing import Optional

import dotenv

from depreciation_schedules.domain.constants import DEFAULT_DEFERRED_TAX_RATE
from depreciation_schedules.domain.models import (
    DepreciationMethod,
    FiscalYearWindow,
    RegisterSnapshot,
)
from depreciation_schedules.infrastructure.logging.logger import get_app_logger
from depreciation_schedules.utils.utils import get_project_root

DEFAULT_FISCAL_YEAR = "2024-25"
DEFAULT_SNAPSHOT_NAME = "default"

# Fields a saved register can supply when the environment leaves them unset.
SNAPSHOT_FIELDS = (
    "fiscal_year",
    "method",
    "deferred_tax_rate",
    "accounting_profit",
)


@dataclass(frozen=True)
class DepreciationSettings:
    """Settings for computing and exporting the schedules.

    Attributes:
        fiscal_year: Fiscal year label such as ``"2024-25"``.
        method: Companies Act depreciation method.
        deferred_tax_rate: Tax rate in percent.
        accounting_profit: Profit before tax for the disclosure note.
        snapshot_name: Name of the register snapshot to load.
        export_dir: Optional directory for CSV exports.
        overridden: Names of the fields set explicitly by the environment.
    """

    fiscal_year: str = DEFAULT_FISCAL_YEAR
    method: DepreciationMethod = DepreciationMethod.WDV
    deferred_tax_rate: Decimal = DEFAULT_DEFERRED_TAX_RATE
    accounting_profit: Decimal = Decimal("0")
    snapshot_name: str = DEFAULT_SNAPSHOT_NAME
    export_dir: Optional[Path] = None
    overridden: frozenset[str] = frozenset()

    @property
    def window(self) -> FiscalYearWindow:
        """Return the fiscal year window for ``fiscal_year``."""
        return FiscalYearWindow.from_label(self.fiscal_year)

    def for_snapshot(self, snapshot: RegisterSnapshot) -> "DepreciationSettings":
        """Fill the fields the environment left unset from ``snapshot``.

        Args:
            snapshot: Saved register whose year, method, tax rate and
                accounting profit apply unless explicitly overridden.

        Returns:
            DepreciationSettings: Settings for computing ``snapshot``.
        """
        values = {
            name: getattr(snapshot, name)
            for name in SNAPSHOT_FIELDS
            if name not in self.overridden
        }
        return replace(self, **values)

    @classmethod
    def from_env(cls) -> "DepreciationSettings":
        """Build settings from environment variables.

        Unset or invalid values keep the defaults and are not recorded in
        ``overridden``.

        Returns:
            DepreciationSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_export = os.getenv("EXPORT_DIR", "").strip()
        parsed = {
            "fiscal_year": cls._parse_fiscal_year(
                os.getenv("FISCAL_YEAR", ""),
                logger=logger,
            ),
            "method": cls._parse_method(
                os.getenv("DEPRECIATION_METHOD", ""),
                logger=logger,
            ),
            "deferred_tax_rate": cls._parse_decimal(
                "DEFERRED_TAX_RATE",
                logger=logger,
            ),
            "accounting_profit": cls._parse_decimal(
                "ACCOUNTING_PROFIT",
                logger=logger,
            ),
        }
        explicit = {
            name: value for name, value in parsed.items() if value is not None
        }
        return cls(
            snapshot_name=(
                os.getenv("SNAPSHOT_NAME", "").strip() or DEFAULT_SNAPSHOT_NAME
            ),
            export_dir=cls._normalize_path(raw_export) if raw_export else None,
            overridden=frozenset(explicit),
            **explicit,
        )

    @staticmethod
    def _parse_fiscal_year(raw_value: str, logger) -> Optional[str]:
        """Return a canonical fiscal year label.

        Args:
            raw_value: Raw label from the environment.
            logger: Logger used for warnings.

        Returns:
            Optional[str]: Label such as ``"2024-25"``, or None when unset
            or invalid.
        """
        if not raw_value.strip():
            return None
        try:
            return FiscalYearWindow.from_label(raw_value).label
        except ValueError:
            logger.warning(f"Invalid FISCAL_YEAR {raw_value!r}; ignoring it")
            return None

    @staticmethod
    def _parse_method(raw_value: str, logger) -> Optional[DepreciationMethod]:
        if not raw_value.strip():
            return None
        try:
            return DepreciationMethod(raw_value.strip().upper())
        except ValueError:
            logger.warning(
                f"Invalid DEPRECIATION_METHOD {raw_value!r}; ignoring it"
            )
            return None

    @staticmethod
    def _parse_decimal(name: str, logger) -> Optional[Decimal]:
        raw_value = os.getenv(name)
        if raw_value is None or not raw_value.strip():
            return None
        try:
            value = Decimal(raw_value.strip())
        except InvalidOperation:
            logger.warning(f"Invalid {name} {raw_value!r}; ignoring it")
            return None
        if not value.is_finite():
            logger.warning(f"Invalid {name} {raw_value!r}; ignoring it")
            return None
        return value

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Resolve ``raw_path`` relative to the project root."""
        path = Path(raw_path).expanduser()
        if not path.is_absolute():
            path = get_project_root() / path
        return path.resolve()


__all__ = ["DepreciationSettings"]
