"""Swap quoting and validation."""
from .quote import SLIPPAGE_TOLERANCE_PERCENTAGE, build_swap, slippage_tolerance_fraction
from .validation import SwapFormError, amount_at_risk_wei, get_max_from_input, validate_swap

__all__ = [
    "SLIPPAGE_TOLERANCE_PERCENTAGE",
    "build_swap",
    "slippage_tolerance_fraction",
    "SwapFormError",
    "amount_at_risk_wei",
    "get_max_from_input",
    "validate_swap",
]
