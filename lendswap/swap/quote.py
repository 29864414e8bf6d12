"""Turn a quoting-engine trade into a slippage-bounded swap."""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from eth_utils import to_checksum_address

from ..amounts.conversion import UINT256_CONTEXT, to_base_units
from ..interfaces.quoting import Trade
from ..models import ExactAmountInSwap, ExactAmountOutSwap, Swap, SwapDirection, Token

logger = logging.getLogger(__name__)

SLIPPAGE_TOLERANCE_PERCENTAGE = Decimal("0.5")


def slippage_tolerance_fraction(percentage: Decimal | float | str) -> Decimal:
    """0.5 (%) -> Decimal("0.005")."""
    value = Decimal(str(percentage))
    if not 0 <= value <= 100:
        raise ValueError(f"Slippage tolerance must be within [0, 100], got {value}")
    return value / 100


def build_swap(
    trade: Trade,
    direction: SwapDirection,
    from_token: Token,
    to_token: Token,
    slippage_tolerance_percentage: Decimal | float | str = SLIPPAGE_TOLERANCE_PERCENTAGE,
) -> Swap:
    """Build the swap the user commits to from ``trade``.

    Exact-in swaps carry the minimum the user accepts to receive, exact-out
    swaps the maximum they accept to sell. The same tolerance applies to both.
    """
    tolerance = slippage_tolerance_fraction(slippage_tolerance_percentage)
    route_path = tuple(to_checksum_address(t.address) for t in trade.route.path)
    exchange_rate = Decimal(trade.execution_price).quantize(
        Decimal(1).scaleb(-to_token.decimals),
        rounding=ROUND_HALF_UP,
        context=UINT256_CONTEXT,
    )

    if direction == SwapDirection.EXACT_AMOUNT_IN:
        swap: Swap = ExactAmountInSwap(
            from_token=from_token,
            to_token=to_token,
            route_path=route_path,
            exchange_rate=exchange_rate,
            from_token_amount_sold_wei=to_base_units(trade.input_amount, from_token),
            expected_to_token_amount_received_wei=to_base_units(
                trade.output_amount, to_token
            ),
            minimum_to_token_amount_received_wei=to_base_units(
                trade.minimum_amount_out(tolerance), to_token
            ),
        )
    else:
        swap = ExactAmountOutSwap(
            from_token=from_token,
            to_token=to_token,
            route_path=route_path,
            exchange_rate=exchange_rate,
            expected_from_token_amount_sold_wei=to_base_units(
                trade.input_amount, from_token
            ),
            maximum_from_token_amount_sold_wei=to_base_units(
                trade.maximum_amount_in(tolerance), from_token
            ),
            to_token_amount_received_wei=to_base_units(trade.output_amount, to_token),
        )

    logger.debug(
        "Built %s swap %s -> %s via %d hops at rate %s",
        direction.value, from_token.symbol, to_token.symbol,
        len(route_path) - 1, exchange_rate,
    )
    return swap
