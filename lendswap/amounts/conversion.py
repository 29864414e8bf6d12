"""Token amount <-> base unit conversion — pure functions, no I/O.

Conversions never round on their own: ``to_base_units`` truncates toward zero
and callers that commit the user to an amount round it down first with
``round_down_to_decimals``.
"""
from __future__ import annotations

from decimal import ROUND_DOWN, Context, Decimal

from ..errors import PrecisionError
from ..models import Token

# Enough significant digits for any uint256 value.
UINT256_CONTEXT = Context(prec=78)


def _checked_decimals(token: Token) -> int:
    decimals = getattr(token, "decimals", None)
    if not isinstance(decimals, int) or isinstance(decimals, bool) or decimals < 0:
        raise PrecisionError(
            f"Token {getattr(token, 'symbol', '?')} has invalid decimals: {decimals!r}"
        )
    return decimals


def to_base_units(value: Decimal | int | str, token: Token) -> int:
    """Convert a token amount to base units, truncating extra precision.

    Examples:
        to_base_units(Decimal("1.5"), <6 decimals>) -> 1500000
        to_base_units(Decimal("0.0000009"), <6 decimals>) -> 0
    """
    decimals = _checked_decimals(token)
    scaled = UINT256_CONTEXT.scaleb(Decimal(value), decimals)
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def to_tokens(value_wei: int | Decimal | str, token: Token) -> Decimal:
    """Convert a base-unit amount to tokens (exact)."""
    decimals = _checked_decimals(token)
    return UINT256_CONTEXT.scaleb(Decimal(value_wei), -decimals)


def round_down_to_decimals(value: Decimal, token: Token) -> Decimal:
    """Drop every digit beyond the token's native precision."""
    decimals = _checked_decimals(token)
    return value.quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_DOWN, context=UINT256_CONTEXT
    )


def to_plain_string(value: Decimal) -> str:
    """Render a Decimal without exponent or trailing zeros ("1.50" -> "1.5")."""
    if value.is_zero():
        return "0"
    return format(value.normalize(UINT256_CONTEXT), "f")
