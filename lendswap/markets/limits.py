"""Borrow limits of a single asset, in tokens."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext

from ..amounts.conversion import UINT256_CONTEXT, round_down_to_decimals, to_plain_string
from ..models import Asset

logger = logging.getLogger(__name__)

SAFE_BORROW_LIMIT_PERCENTAGE = 80


@dataclass(frozen=True)
class BorrowLimits:
    """Maximum and safe maximum borrowable amounts, as plain token strings."""

    limit_tokens: str
    safe_limit_tokens: str


_NO_LIMIT = BorrowLimits(limit_tokens="0", safe_limit_tokens="0")


def calculate_borrow_limits(
    user_total_borrow_limit_cents: Decimal,
    user_total_borrow_balance_cents: Decimal,
    asset: Asset,
    safe_borrow_limit_percentage: Decimal | int = SAFE_BORROW_LIMIT_PERCENTAGE,
) -> BorrowLimits:
    """Calculate how many tokens of ``asset`` the user can borrow.

    max  = min(liquidity, (limit - balance) / 100 / price_dollars)
    safe = (limit * safe% / 100 - balance) / 100 / price_dollars, capped at max

    Both values are rounded down to the token's decimals so the displayed
    amount never exceeds what the protocol will accept.
    """
    percentage = Decimal(safe_borrow_limit_percentage)
    if not 0 <= percentage <= 100:
        raise ValueError(
            f"safe_borrow_limit_percentage must be within [0, 100], got {percentage}"
        )

    # Borrow limit already reached
    if user_total_borrow_balance_cents >= user_total_borrow_limit_cents:
        return _NO_LIMIT

    if asset.token_price <= 0:
        logger.warning("No usable price for %s, borrow limit is 0", asset.token.symbol)
        return _NO_LIMIT

    # Keep every significant digit until the final round-down
    with localcontext(UINT256_CONTEXT):
        token_price_dollars = asset.token_price / 100

        margin_with_borrow_limit_dollars = (
            user_total_borrow_limit_cents - user_total_borrow_balance_cents
        ) / 100
        max_tokens = min(
            asset.liquidity, margin_with_borrow_limit_dollars / token_price_dollars
        )

        safe_borrow_limit_cents = user_total_borrow_limit_cents * percentage / 100
        if user_total_borrow_balance_cents < safe_borrow_limit_cents:
            margin_with_safe_borrow_limit_dollars = (
                safe_borrow_limit_cents - user_total_borrow_balance_cents
            ) / 100
            safe_max_tokens = min(
                max_tokens, margin_with_safe_borrow_limit_dollars / token_price_dollars
            )
        else:
            safe_max_tokens = Decimal(0)

    limits = BorrowLimits(
        limit_tokens=to_plain_string(round_down_to_decimals(max_tokens, asset.token)),
        safe_limit_tokens=to_plain_string(
            round_down_to_decimals(safe_max_tokens, asset.token)
        ),
    )
    logger.debug(
        "Borrow limits for %s: max %s, safe %s",
        asset.token.symbol, limits.limit_tokens, limits.safe_limit_tokens,
    )
    return limits
