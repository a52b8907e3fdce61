"""CSV export of the depreciation summaries using pandas."""

from pathlib import Path

import pandas as pd

from depreciation_schedules.domain.models import (
    CompaniesActSummary,
    FiscalYearWindow,
    IncomeTaxSummary,
)
from depreciation_schedules.infrastructure.logging.logger import get_app_logger
from depreciation_schedules.utils.decimal_utils import round_money

COMPANIES_ACT = "companies"
INCOME_TAX = "income_tax"

COMPANIES_ACT_COLUMNS = (
    ("Asset Type", "name"),
    ("Op. Gross Block", "opening_gross_block"),
    ("Additions", "additions"),
    ("Disposals", "disposals_cost"),
    ("Cl. Gross Block", "closing_gross_block"),
    ("Op. Accum. Dep.", "opening_accumulated_depreciation"),
    ("Dep. for Year", "depreciation_for_year"),
    ("Cl. Accum. Dep.", "closing_accumulated_depreciation"),
    ("Op. Net Block", "opening_net_block"),
    ("Cl. Net Block", "closing_net_block"),
)

INCOME_TAX_COLUMNS = (
    ("Asset Block", "name"),
    ("Opening WDV", "opening_wdv"),
    ("Additions", "additions"),
    ("Sale Proceeds", "sale_value"),
    ("WDV for Dep.", "wdv_for_dep"),
    ("Dep. for Year", "depreciation_for_year"),
    ("Closing WDV", "closing_net_block"),
    ("STCG/L", "short_term_capital_gain_loss"),
)


def _summary_frame(summary, columns) -> pd.DataFrame:
    """Build a DataFrame of per-type rows followed by the TOTAL row."""
    rows = [*summary.by_type.values(), summary.totals]
    records = []
    for row in rows:
        record = {}
        for header, attribute in columns:
            value = getattr(row, attribute)
            if attribute != "name":
                value = round_money(value)
            record[header] = value
        records.append(record)
    return pd.DataFrame(records, columns=[header for header, _ in columns])


def companies_act_summary_frame(summary: CompaniesActSummary) -> pd.DataFrame:
    """Return the Companies Act type summary as a DataFrame."""
    return _summary_frame(summary, COMPANIES_ACT_COLUMNS)


def income_tax_summary_frame(summary: IncomeTaxSummary) -> pd.DataFrame:
    """Return the Income Tax block summary as a DataFrame."""
    return _summary_frame(summary, INCOME_TAX_COLUMNS)


def summary_filename(act: str, window: FiscalYearWindow) -> str:
    """Return ``Depreciation_Summary_<act>_FY<label>.csv``."""
    return f"Depreciation_Summary_{act}_FY{window.label}.csv"


def export_summary_csv(
    summary: CompaniesActSummary | IncomeTaxSummary,
    window: FiscalYearWindow,
    export_dir: Path,
    logger=None,
) -> Path:
    """Write a summary to CSV and return the file path.

    Args:
        summary: Companies Act or Income Tax summary.
        window: Fiscal year used in the file name.
        export_dir: Directory receiving the file; created when missing.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        Path: Location of the written CSV file.
    """
    resolved_logger = logger or get_app_logger()
    if isinstance(summary, CompaniesActSummary):
        act = COMPANIES_ACT
        frame = companies_act_summary_frame(summary)
    else:
        act = INCOME_TAX
        frame = income_tax_summary_frame(summary)

    export_dir = Path(export_dir)
    export_dir.mkdir(parents=True, exist_ok=True)
    path = export_dir / summary_filename(act, window)
    frame.to_csv(path, index=False, encoding="utf-8")
    resolved_logger.info(f"Exported {len(frame)} summary rows to {path}")
    return path


__all__ = [
    "COMPANIES_ACT",
    "INCOME_TAX",
    "COMPANIES_ACT_COLUMNS",
    "INCOME_TAX_COLUMNS",
    "companies_act_summary_frame",
    "income_tax_summary_frame",
    "summary_filename",
    "export_summary_csv",
]
