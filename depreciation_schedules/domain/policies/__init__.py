"""Domain policies package."""

from .additional_depreciation import (
    apply_block_type,
    confirm_additional_depreciation,
    is_excluded_block_type,
)

__all__ = [
    "apply_block_type",
    "confirm_additional_depreciation",
    "is_excluded_block_type",
]
