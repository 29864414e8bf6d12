"""Human-readable amount formatting."""
from __future__ import annotations

from decimal import ROUND_DOWN, Decimal

from ..models import Token
from .conversion import UINT256_CONTEXT, to_tokens

MAX_READABLE_DECIMALS = 6
MIN_READABLE_PERCENTAGE = Decimal("0.01")
MAX_READABLE_PERCENTAGE = Decimal("10000")

_SUFFIXES = (
    (Decimal(10) ** 12, "T"),
    (Decimal(10) ** 9, "B"),
    (Decimal(10) ** 6, "M"),
    (Decimal(10) ** 3, "K"),
)


def _group(value: Decimal, places: int) -> str:
    """Round down to ``places`` and add thousands separators, no trailing zeros."""
    rounded = value.quantize(
        Decimal(1).scaleb(-places), rounding=ROUND_DOWN, context=UINT256_CONTEXT
    )
    text = f"{rounded:,.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _shorten(value: Decimal, places: int) -> str:
    for threshold, suffix in _SUFFIXES:
        if abs(value) >= threshold:
            return f"{_group(value / threshold, 2)}{suffix}"
    return _group(value, places)


def format_tokens_to_readable_value(
    value: Decimal,
    token: Token,
    shorten_large_value: bool = False,
) -> str:
    """Format a token amount for display.

    Examples:
        1234.5678901 XCN -> "1,234.56789 XCN"
        0.0000001 XCN    -> "< 0.000001 XCN"
        1500000 XCN      -> "1.5M XCN" (shortened)
    """
    places = min(token.decimals, MAX_READABLE_DECIMALS)
    if value.is_zero():
        return f"0 {token.symbol}"

    min_value = Decimal(1).scaleb(-places)
    if 0 < value < min_value:
        return f"< {_group(min_value, places)} {token.symbol}"

    if shorten_large_value:
        return f"{_shorten(value, places)} {token.symbol}"
    return f"{_group(value, places)} {token.symbol}"


def convert_wei_to_readable_tokens(
    value_wei: int,
    token: Token,
    shorten_large_value: bool = False,
) -> str:
    return format_tokens_to_readable_value(
        to_tokens(value_wei, token), token, shorten_large_value
    )


def format_cents_to_readable_value(
    value: Decimal,
    shorten_large_value: bool = False,
) -> str:
    """Format an amount of cents as dollars ("$1,234.56")."""
    dollars = value / 100
    if dollars.is_zero():
        return "$0"
    if 0 < dollars < Decimal("0.01"):
        return "< $0.01"
    if shorten_large_value:
        return f"${_shorten(dollars, 2)}"
    return f"${_group(dollars, 2)}"


def format_to_readable_percentage(value: Decimal | float) -> str:
    value = Decimal(str(value))
    if value.is_nan():
        return "PENDING"
    if value.is_zero():
        return "0%"

    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if magnitude < MIN_READABLE_PERCENTAGE:
        return f"< {sign}{MIN_READABLE_PERCENTAGE}%"
    if magnitude > MAX_READABLE_PERCENTAGE:
        return f"> {sign}{MAX_READABLE_PERCENTAGE:,}%"
    return f"{sign}{_group(magnitude, 2)}%"


def calculate_percentage(numerator: Decimal, denominator: Decimal) -> Decimal:
    """``numerator / denominator * 100``, or 0 when the denominator is 0."""
    if denominator.is_zero():
        return Decimal(0)
    return numerator * 100 / denominator
