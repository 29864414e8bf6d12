"""Swap form checks against the user's wallet balance."""
from __future__ import annotations

from enum import Enum

from ..amounts.conversion import to_plain_string, to_tokens
from ..models import ExactAmountInSwap, Swap, Token


class SwapFormError(str, Enum):
    EMPTY_AMOUNT = "EMPTY_AMOUNT"
    FROM_TOKEN_AMOUNT_HIGHER_THAN_USER_BALANCE = "FROM_TOKEN_AMOUNT_HIGHER_THAN_USER_BALANCE"


def get_max_from_input(from_token: Token, from_token_user_balance_wei: int | None) -> str:
    """Largest amount of ``from_token`` the user can sell, in tokens."""
    if not from_token_user_balance_wei:
        return "0"
    return to_plain_string(to_tokens(from_token_user_balance_wei, from_token))


def amount_at_risk_wei(swap: Swap) -> int:
    """Most the user can end up selling once the swap executes."""
    if isinstance(swap, ExactAmountInSwap):
        return swap.from_token_amount_sold_wei
    return swap.maximum_from_token_amount_sold_wei


def validate_swap(
    swap: Swap,
    from_token_user_balance_wei: int | None,
) -> list[SwapFormError]:
    errors: list[SwapFormError] = []
    sold_wei = amount_at_risk_wei(swap)

    if sold_wei <= 0:
        errors.append(SwapFormError.EMPTY_AMOUNT)

    if from_token_user_balance_wei is not None and sold_wei > from_token_user_balance_wei:
        errors.append(SwapFormError.FROM_TOKEN_AMOUNT_HIGHER_THAN_USER_BALANCE)

    return errors
