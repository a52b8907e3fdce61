"""Use case to reconcile deferred tax from both schedules."""

from decimal import Decimal

from depreciation_schedules.application.use_cases.compute_companies_act_schedule import (
    CompaniesActSchedule,
)
from depreciation_schedules.application.use_cases.compute_income_tax_schedule import (
    IncomeTaxSchedule,
)
from depreciation_schedules.domain.constants import DEFAULT_DEFERRED_TAX_RATE
from depreciation_schedules.domain.models import (
    DeferredTaxInputs,
    DeferredTaxReconciliation,
)
from depreciation_schedules.domain.services import compute_deferred_tax
from depreciation_schedules.infrastructure.logging.logger import get_app_logger


class ReconcileDeferredTaxUseCase:
    """Combine schedule totals into a deferred tax reconciliation."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        companies_act: CompaniesActSchedule,
        income_tax: IncomeTaxSchedule,
        tax_rate: Decimal = DEFAULT_DEFERRED_TAX_RATE,
        accounting_profit: Decimal = Decimal("0"),
    ) -> DeferredTaxReconciliation:
        """Return the deferred tax reconciliation.

        Args:
            companies_act: Companies Act schedule for the year.
            income_tax: Income Tax schedule for the same year.
            tax_rate: Tax rate in percent.
            accounting_profit: Profit before tax for the disclosure.

        Returns:
            DeferredTaxReconciliation: Opening, movement and closing balances.
        """
        inputs = DeferredTaxInputs(
            companies_act_depreciation=(
                companies_act.summary.totals.depreciation_for_year
            ),
            income_tax_depreciation=(
                income_tax.summary.totals.depreciation_for_year
            ),
            opening_companies_act_wdv=(
                companies_act.summary.totals.opening_net_block
            ),
            opening_income_tax_wdv=income_tax.summary.totals.opening_wdv,
            tax_rate=tax_rate,
            accounting_profit=accounting_profit,
        )
        reconciliation = compute_deferred_tax(inputs)

        self._logger.info(
            "Deferred tax reconciled: "
            f"opening={reconciliation.opening_deferred_tax}, "
            f"movement={reconciliation.movement_deferred_tax}, "
            f"closing={reconciliation.closing_deferred_tax} "
            f"({reconciliation.closing_classification})"
        )
        return reconciliation


__all__ = ["ReconcileDeferredTaxUseCase"]
