"""Unit tests for swap form validation."""
from __future__ import annotations

from decimal import Decimal

from lendswap.models import ExactAmountInSwap, ExactAmountOutSwap, Token
from lendswap.swap.validation import (
    SwapFormError,
    amount_at_risk_wei,
    get_max_from_input,
    validate_swap,
)


def _exact_in(from_token: Token, to_token: Token, sold_wei: int) -> ExactAmountInSwap:
    return ExactAmountInSwap(
        from_token=from_token,
        to_token=to_token,
        route_path=(from_token.address, to_token.address),
        exchange_rate=Decimal("1"),
        from_token_amount_sold_wei=sold_wei,
        expected_to_token_amount_received_wei=sold_wei,
        minimum_to_token_amount_received_wei=sold_wei,
    )


def _exact_out(
    from_token: Token, to_token: Token, expected_wei: int, max_wei: int
) -> ExactAmountOutSwap:
    return ExactAmountOutSwap(
        from_token=from_token,
        to_token=to_token,
        route_path=(from_token.address, to_token.address),
        exchange_rate=Decimal("1"),
        expected_from_token_amount_sold_wei=expected_wei,
        maximum_from_token_amount_sold_wei=max_wei,
        to_token_amount_received_wei=1,
    )


class TestGetMaxFromInput:
    def test_balance_in_tokens(self, usdc: Token) -> None:
        assert get_max_from_input(usdc, 1_234_500) == "1.2345"

    def test_no_balance(self, usdc: Token) -> None:
        assert get_max_from_input(usdc, None) == "0"
        assert get_max_from_input(usdc, 0) == "0"


class TestValidateSwap:
    def test_valid(self, usdc: Token, xcn: Token) -> None:
        swap = _exact_in(usdc, xcn, 1_000_000)
        assert validate_swap(swap, 2_000_000) == []

    def test_empty_amount(self, usdc: Token, xcn: Token) -> None:
        swap = _exact_in(usdc, xcn, 0)
        assert validate_swap(swap, 2_000_000) == [SwapFormError.EMPTY_AMOUNT]

    def test_amount_above_balance(self, usdc: Token, xcn: Token) -> None:
        swap = _exact_in(usdc, xcn, 3_000_000)
        assert validate_swap(swap, 2_000_000) == [
            SwapFormError.FROM_TOKEN_AMOUNT_HIGHER_THAN_USER_BALANCE
        ]

    def test_unknown_balance_skips_balance_check(self, usdc: Token, xcn: Token) -> None:
        swap = _exact_in(usdc, xcn, 3_000_000)
        assert validate_swap(swap, None) == []

    def test_exact_out_checks_maximum_sold(self, usdc: Token, xcn: Token) -> None:
        swap = _exact_out(usdc, xcn, expected_wei=1_000_000, max_wei=1_005_000)
        assert amount_at_risk_wei(swap) == 1_005_000
        assert validate_swap(swap, 1_000_000) == [
            SwapFormError.FROM_TOKEN_AMOUNT_HIGHER_THAN_USER_BALANCE
        ]
        assert validate_swap(swap, 1_005_000) == []
