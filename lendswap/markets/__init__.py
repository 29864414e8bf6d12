"""Borrow market calculations."""
from .limits import SAFE_BORROW_LIMIT_PERCENTAGE, BorrowLimits, calculate_borrow_limits
from .metrics import (
    borrow_apy,
    borrow_balance_cents,
    has_collateralized_supplied_assets,
    percent_of_limit,
)

__all__ = [
    "SAFE_BORROW_LIMIT_PERCENTAGE",
    "BorrowLimits",
    "calculate_borrow_limits",
    "borrow_apy",
    "borrow_balance_cents",
    "has_collateralized_supplied_assets",
    "percent_of_limit",
]
