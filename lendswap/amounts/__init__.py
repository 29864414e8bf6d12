"""Amount conversion and formatting."""
from .conversion import round_down_to_decimals, to_base_units, to_plain_string, to_tokens
from .formatting import (
    calculate_percentage,
    convert_wei_to_readable_tokens,
    format_cents_to_readable_value,
    format_to_readable_percentage,
    format_tokens_to_readable_value,
)

__all__ = [
    "to_base_units",
    "to_tokens",
    "round_down_to_decimals",
    "to_plain_string",
    "calculate_percentage",
    "convert_wei_to_readable_tokens",
    "format_cents_to_readable_value",
    "format_to_readable_percentage",
    "format_tokens_to_readable_value",
]
