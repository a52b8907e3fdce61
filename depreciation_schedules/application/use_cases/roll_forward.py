"""Use case to open the next financial year from a saved register."""

from dataclasses import replace

from depreciation_schedules.domain.constants import (
    DEFAULT_RATE_TABLES,
    RateTables,
)
from depreciation_schedules.domain.models import (
    FiscalYearWindow,
    RegisterSnapshot,
)
from depreciation_schedules.domain.services import (
    roll_forward_assets,
    roll_forward_blocks,
)
from depreciation_schedules.infrastructure.logging.logger import get_app_logger
from depreciation_schedules.utils.decimal_utils import ZERO


class RollForwardUseCase:
    """Turn this year's closing balances into next year's register."""

    def __init__(
        self,
        logger=None,
        rates: RateTables | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            rates: Optional rate tables overriding the statutory defaults.
        """
        self._logger = logger or get_app_logger()
        self._rates = rates or DEFAULT_RATE_TABLES

    def execute(self, snapshot: RegisterSnapshot) -> RegisterSnapshot:
        """Return the snapshot for the following fiscal year.

        Args:
            snapshot: Register state for the year being closed.

        Returns:
            RegisterSnapshot: Register opening the next fiscal year. Tax
            rate and method carry over; accounting profit resets to zero.

        Raises:
            ValueError: If the snapshot's fiscal year label is invalid.
        """
        window = FiscalYearWindow.from_label(snapshot.fiscal_year)
        next_window = window.next()

        assets = roll_forward_assets(
            snapshot.assets,
            snapshot.method,
            window,
            rates=self._rates,
        )
        blocks = roll_forward_blocks(snapshot.blocks, window, rates=self._rates)

        self._logger.info(
            f"Rolled FY {window.label} forward to FY {next_window.label}: "
            f"assets {len(snapshot.assets)} -> {len(assets)}, "
            f"blocks {len(snapshot.blocks)} -> {len(blocks)}"
        )

        return replace(
            snapshot,
            fiscal_year=next_window.label,
            assets=tuple(assets),
            blocks=tuple(blocks),
            accounting_profit=ZERO,
        )


__all__ = ["RollForwardUseCase"]
