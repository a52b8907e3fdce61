"""Map register snapshots to and from JSON-compatible dictionaries.

Decimals are written as strings and dates as ISO ``YYYY-MM-DD`` so the
payload round-trips without floating point drift. Loading normalizes raw
values the same way the engines do: blank or negative amounts become zero
and unusable dates become None.
"""

import json
from datetime import date
from typing import Any

from depreciation_schedules.domain.constants import DEFAULT_DEFERRED_TAX_RATE
from depreciation_schedules.domain.models import (
    AdditionalDepreciationChecklist,
    Addition,
    CompaniesActAsset,
    FiscalYearWindow,
    IncomeTaxBlock,
    RegisterSnapshot,
)
from depreciation_schedules.domain.services import (
    normalize_amount,
    normalize_date,
    normalize_method,
)
from depreciation_schedules.utils.decimal_utils import coerce_decimal


def snapshot_to_dict(snapshot: RegisterSnapshot) -> dict[str, Any]:
    """Return a JSON-compatible dictionary for ``snapshot``."""
    return {
        "fiscal_year": snapshot.fiscal_year,
        "method": snapshot.method.value,
        "deferred_tax_rate": str(snapshot.deferred_tax_rate),
        "accounting_profit": str(snapshot.accounting_profit),
        "assets": [_asset_to_dict(asset) for asset in snapshot.assets],
        "blocks": [_block_to_dict(block) for block in snapshot.blocks],
    }


def snapshot_from_dict(payload: Any) -> RegisterSnapshot:
    """Build a snapshot from a raw dictionary.

    Args:
        payload: Dictionary produced by ``snapshot_to_dict`` or a backup file.

    Returns:
        RegisterSnapshot: Normalized snapshot.

    Raises:
        ValueError: If the payload structure or fiscal year is invalid.
    """
    if not isinstance(payload, dict):
        raise ValueError("Snapshot payload must be a JSON object")
    raw_assets = payload.get("assets") or []
    raw_blocks = payload.get("blocks") or []
    if not isinstance(raw_assets, list) or not isinstance(raw_blocks, list):
        raise ValueError("Snapshot assets and blocks must be lists")

    fiscal_year = FiscalYearWindow.from_label(
        str(payload.get("fiscal_year") or "2024-25")
    ).label
    raw_rate = payload.get("deferred_tax_rate")
    tax_rate = (
        coerce_decimal(raw_rate)
        if raw_rate not in (None, "")
        else DEFAULT_DEFERRED_TAX_RATE
    )

    return RegisterSnapshot(
        fiscal_year=fiscal_year,
        method=normalize_method(payload.get("method")),
        assets=tuple(_asset_from_dict(item) for item in raw_assets),
        blocks=tuple(_block_from_dict(item) for item in raw_blocks),
        deferred_tax_rate=tax_rate,
        accounting_profit=coerce_decimal(payload.get("accounting_profit")),
    )


def snapshot_to_json(snapshot: RegisterSnapshot) -> str:
    """Return the snapshot as an indented JSON document."""
    return json.dumps(snapshot_to_dict(snapshot), indent=2)


def snapshot_from_json(raw: str) -> RegisterSnapshot:
    """Parse a JSON document into a snapshot.

    Raises:
        ValueError: If the document is not valid JSON or not a snapshot.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid snapshot JSON: {exc}") from exc
    return snapshot_from_dict(payload)


def _date_to_str(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _addition_to_dict(addition: Addition) -> dict[str, Any]:
    return {
        "date": _date_to_str(addition.date),
        "cost": str(addition.cost),
        "residual_value": str(addition.residual_value),
    }


def _addition_from_dict(item: Any) -> Addition:
    if not isinstance(item, dict):
        raise ValueError("Snapshot additions must be objects")
    return Addition(
        date=normalize_date(item.get("date")),
        cost=normalize_amount(item.get("cost")),
        residual_value=normalize_amount(item.get("residual_value")),
    )


def _additions_from(raw: Any) -> tuple[Addition, ...]:
    if raw in (None, ""):
        return ()
    if not isinstance(raw, list):
        raise ValueError("Snapshot additions must be a list")
    return tuple(_addition_from_dict(item) for item in raw)


def _asset_to_dict(asset: CompaniesActAsset) -> dict[str, Any]:
    return {
        "id": asset.id,
        "name": asset.name,
        "asset_type": asset.asset_type,
        "opening_gross_block": str(asset.opening_gross_block),
        "opening_accumulated_depreciation": str(
            asset.opening_accumulated_depreciation
        ),
        "residual_value": str(asset.residual_value),
        "purchase_date": _date_to_str(asset.purchase_date),
        "disposal_date": _date_to_str(asset.disposal_date),
        "sale_value": str(asset.sale_value),
        "additions": [_addition_to_dict(item) for item in asset.additions],
    }


def _asset_from_dict(item: Any) -> CompaniesActAsset:
    if not isinstance(item, dict):
        raise ValueError("Snapshot assets must be objects")
    return CompaniesActAsset(
        id=str(item.get("id") or ""),
        name=str(item.get("name") or ""),
        asset_type=str(item.get("asset_type") or ""),
        opening_gross_block=normalize_amount(item.get("opening_gross_block")),
        opening_accumulated_depreciation=normalize_amount(
            item.get("opening_accumulated_depreciation")
        ),
        residual_value=normalize_amount(item.get("residual_value")),
        purchase_date=normalize_date(item.get("purchase_date")),
        disposal_date=normalize_date(item.get("disposal_date")),
        sale_value=normalize_amount(item.get("sale_value")),
        additions=_additions_from(item.get("additions")),
    )


def _flag(value: Any) -> bool:
    """Return True only for true, 1 or the strings "true", "1" and "yes"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    if isinstance(value, int):
        return value == 1
    return False


def _block_to_dict(block: IncomeTaxBlock) -> dict[str, Any]:
    return {
        "id": block.id,
        "name": block.name,
        "block_type": block.block_type,
        "rate": str(block.rate),
        "opening_wdv": str(block.opening_wdv),
        "additions": [_addition_to_dict(item) for item in block.additions],
        "sale_proceeds": str(block.sale_proceeds),
        "block_ceased": block.block_ceased,
        "eligible_for_additional": block.eligible_for_additional,
        "checklist": {
            "is_new_plant_machinery": block.checklist.is_new_plant_machinery,
            "is_manufacturing": block.checklist.is_manufacturing,
            "is_not_excluded": block.checklist.is_not_excluded,
        },
    }


def _block_from_dict(item: Any) -> IncomeTaxBlock:
    if not isinstance(item, dict):
        raise ValueError("Snapshot blocks must be objects")
    raw_checklist = item.get("checklist") or {}
    if not isinstance(raw_checklist, dict):
        raise ValueError("Snapshot block checklist must be an object")
    return IncomeTaxBlock(
        id=str(item.get("id") or ""),
        name=str(item.get("name") or ""),
        block_type=str(item.get("block_type") or ""),
        rate=normalize_amount(item.get("rate")),
        opening_wdv=normalize_amount(item.get("opening_wdv")),
        additions=_additions_from(item.get("additions")),
        sale_proceeds=normalize_amount(item.get("sale_proceeds")),
        block_ceased=_flag(item.get("block_ceased")),
        eligible_for_additional=_flag(item.get("eligible_for_additional")),
        checklist=AdditionalDepreciationChecklist(
            is_new_plant_machinery=_flag(
                raw_checklist.get("is_new_plant_machinery")
            ),
            is_manufacturing=_flag(raw_checklist.get("is_manufacturing")),
            is_not_excluded=_flag(raw_checklist.get("is_not_excluded")),
        ),
    )


__all__ = [
    "snapshot_to_dict",
    "snapshot_from_dict",
    "snapshot_to_json",
    "snapshot_from_json",
]
