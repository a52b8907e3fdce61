"""Tests for the deferred tax reconciliation."""

from decimal import Decimal

from depreciation_schedules.domain.models import DeferredTaxInputs
from depreciation_schedules.domain.services import compute_deferred_tax
from depreciation_schedules.domain.services.deferred_tax import (
    DEFERRED_TAX_ASSET,
    DEFERRED_TAX_EXPENSE,
    DEFERRED_TAX_LIABILITY,
)


def test_book_depreciation_above_tax_creates_asset() -> None:
    """Higher book depreciation builds a deferred tax asset."""
    inputs = DeferredTaxInputs(
        companies_act_depreciation=Decimal("18100"),
        income_tax_depreciation=Decimal("15000"),
        opening_companies_act_wdv=Decimal("100000"),
        opening_income_tax_wdv=Decimal("100000"),
        tax_rate=Decimal("25"),
        accounting_profit=Decimal("1000000"),
    )

    result = compute_deferred_tax(inputs)

    assert result.opening_deferred_tax == Decimal("0")
    assert result.movement_timing_difference == Decimal("3100")
    assert result.movement_deferred_tax == Decimal("775")
    assert result.closing_deferred_tax == Decimal("775")
    assert result.closing_classification == "Asset"
    assert result.journal_entry.debit == DEFERRED_TAX_ASSET
    assert result.journal_entry.credit == DEFERRED_TAX_EXPENSE
    assert result.journal_entry.amount == Decimal("775")


def test_disclosure_total_equals_profit_times_rate() -> None:
    """Current plus deferred tax should equal tax on book profit."""
    inputs = DeferredTaxInputs(
        companies_act_depreciation=Decimal("18100"),
        income_tax_depreciation=Decimal("15000"),
        opening_companies_act_wdv=Decimal("100000"),
        opening_income_tax_wdv=Decimal("100000"),
        accounting_profit=Decimal("1000000"),
    )

    disclosure = compute_deferred_tax(inputs).disclosure

    assert disclosure.taxable_profit == Decimal("1003100")
    assert disclosure.current_tax == Decimal("250775")
    assert disclosure.deferred_tax == Decimal("-775")
    assert disclosure.total_tax_expense == Decimal("250000")


def test_tax_depreciation_above_book_creates_liability() -> None:
    """Higher tax depreciation builds a deferred tax liability."""
    inputs = DeferredTaxInputs(
        companies_act_depreciation=Decimal("10000"),
        income_tax_depreciation=Decimal("20000"),
        opening_companies_act_wdv=Decimal("90000"),
        opening_income_tax_wdv=Decimal("80000"),
    )

    result = compute_deferred_tax(inputs)

    assert result.opening_deferred_tax == Decimal("-2500")
    assert result.opening_classification == "Liability"
    assert result.movement_deferred_tax == Decimal("-2500")
    assert result.closing_deferred_tax == Decimal("-5000")
    assert result.closing_classification == "Liability"
    assert result.journal_entry.debit == DEFERRED_TAX_EXPENSE
    assert result.journal_entry.credit == DEFERRED_TAX_LIABILITY
    assert result.journal_entry.amount == Decimal("2500")


def test_closing_equals_opening_plus_movement() -> None:
    """The reconciliation always closes."""
    inputs = DeferredTaxInputs(
        companies_act_depreciation=Decimal("12345.67"),
        income_tax_depreciation=Decimal("23456.78"),
        opening_companies_act_wdv=Decimal("345678.90"),
        opening_income_tax_wdv=Decimal("298765.43"),
        tax_rate=Decimal("25.17"),
    )

    result = compute_deferred_tax(inputs)

    assert result.closing_deferred_tax == (
        result.opening_deferred_tax + result.movement_deferred_tax
    )
    assert result.closing_timing_difference == (
        result.opening_timing_difference + result.movement_timing_difference
    )


def test_zero_rate_gives_zero_balances() -> None:
    """A zero tax rate produces no deferred tax."""
    inputs = DeferredTaxInputs(
        companies_act_depreciation=Decimal("100"),
        income_tax_depreciation=Decimal("50"),
        opening_companies_act_wdv=Decimal("1000"),
        opening_income_tax_wdv=Decimal("900"),
        tax_rate=Decimal("0"),
    )

    result = compute_deferred_tax(inputs)

    assert result.closing_deferred_tax == Decimal("0")
    assert result.journal_entry.amount == Decimal("0")
