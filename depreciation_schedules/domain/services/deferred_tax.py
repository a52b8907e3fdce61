"""Deferred tax reconciliation between book and tax depreciation.

Sign convention: a positive timing difference means the Income Tax WDV
exceeds the Companies Act WDV, i.e. a deferred tax asset. The movement for
the year is book depreciation less tax depreciation, which is the change in
that same difference, so ``closing = opening + movement`` always holds.
"""

from decimal import Decimal

from depreciation_schedules.domain.models.deferred_tax import (
    DeferredTaxInputs,
    DeferredTaxReconciliation,
    JournalEntry,
    TaxExpenseDisclosure,
)
from depreciation_schedules.utils.decimal_utils import coerce_decimal

DEFERRED_TAX_ASSET = "Deferred Tax Asset (B/S)"
DEFERRED_TAX_LIABILITY = "Deferred Tax Liability (B/S)"
DEFERRED_TAX_EXPENSE = "Deferred Tax Expense (P&L)"
JOURNAL_NARRATION = (
    "Being the movement in deferred tax for the year recognized on timing "
    "differences in depreciation."
)


def compute_deferred_tax(inputs: DeferredTaxInputs) -> DeferredTaxReconciliation:
    """Reconcile opening, movement and closing deferred tax.

    Args:
        inputs: Aggregate depreciation and opening WDV of both regimes.

    Returns:
        DeferredTaxReconciliation: Balances, journal entry and the tax
        expense disclosure.
    """
    rate = coerce_decimal(inputs.tax_rate) / Decimal("100")
    companies_act_dep = coerce_decimal(inputs.companies_act_depreciation)
    income_tax_dep = coerce_decimal(inputs.income_tax_depreciation)
    accounting_profit = coerce_decimal(inputs.accounting_profit)

    opening_difference = coerce_decimal(
        inputs.opening_income_tax_wdv
    ) - coerce_decimal(inputs.opening_companies_act_wdv)
    opening_deferred_tax = opening_difference * rate

    movement_difference = companies_act_dep - income_tax_dep
    movement_deferred_tax = movement_difference * rate

    closing_difference = opening_difference + movement_difference
    closing_deferred_tax = opening_deferred_tax + movement_deferred_tax

    if movement_deferred_tax >= 0:
        journal_entry = JournalEntry(
            debit=DEFERRED_TAX_ASSET,
            credit=DEFERRED_TAX_EXPENSE,
            amount=abs(movement_deferred_tax),
            narration=JOURNAL_NARRATION,
        )
    else:
        journal_entry = JournalEntry(
            debit=DEFERRED_TAX_EXPENSE,
            credit=DEFERRED_TAX_LIABILITY,
            amount=abs(movement_deferred_tax),
            narration=JOURNAL_NARRATION,
        )

    # An increase in the deferred tax asset is a credit to the P&L.
    deferred_tax_charge = -movement_deferred_tax
    taxable_profit = accounting_profit + movement_difference
    current_tax = taxable_profit * rate
    disclosure = TaxExpenseDisclosure(
        accounting_profit=accounting_profit,
        taxable_profit=taxable_profit,
        current_tax=current_tax,
        deferred_tax=deferred_tax_charge,
        total_tax_expense=current_tax + deferred_tax_charge,
    )

    return DeferredTaxReconciliation(
        opening_timing_difference=opening_difference,
        opening_deferred_tax=opening_deferred_tax,
        movement_timing_difference=movement_difference,
        movement_deferred_tax=movement_deferred_tax,
        closing_timing_difference=closing_difference,
        closing_deferred_tax=closing_deferred_tax,
        journal_entry=journal_entry,
        disclosure=disclosure,
    )


__all__ = [
    "DEFERRED_TAX_ASSET",
    "DEFERRED_TAX_LIABILITY",
    "DEFERRED_TAX_EXPENSE",
    "compute_deferred_tax",
]
