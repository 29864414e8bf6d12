"""Integration tests for protocol operations with mocked contracts."""
from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from lendswap.errors import OnChainFailureError, UnexpectedError
from lendswap.models import (
    EventLog,
    ExactAmountInSwap,
    ExactAmountOutSwap,
    Token,
    TransactionReceipt,
)
from lendswap.transactions import operations

ACCOUNT = "0x" + "88" * 20
OTOKEN = "0x" + "44" * 20
DEADLINE = 1_700_000_600


@pytest.fixture()
def method(make_method, success_receipt: TransactionReceipt) -> MagicMock:
    return make_method(receipt=success_receipt)


def _exact_in(from_token: Token, to_token: Token) -> ExactAmountInSwap:
    return ExactAmountInSwap(
        from_token=from_token,
        to_token=to_token,
        route_path=(from_token.address, to_token.address),
        exchange_rate=Decimal("2"),
        from_token_amount_sold_wei=1000,
        expected_to_token_amount_received_wei=2000,
        minimum_to_token_amount_received_wei=1990,
    )


def _exact_out(from_token: Token, to_token: Token) -> ExactAmountOutSwap:
    return ExactAmountOutSwap(
        from_token=from_token,
        to_token=to_token,
        route_path=(from_token.address, to_token.address),
        exchange_rate=Decimal("2"),
        expected_from_token_amount_sold_wei=1000,
        maximum_from_token_amount_sold_wei=1005,
        to_token_amount_received_wei=2000,
    )


class TestRequireAccount:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("account", [None, ""])
    async def test_wallet_not_connected_before_send(self, method: MagicMock, account) -> None:
        comptroller = MagicMock()
        comptroller.exit_market.return_value = method

        with pytest.raises(UnexpectedError) as exc_info:
            await operations.exit_market(comptroller, account, OTOKEN)

        assert exc_info.value.code == "walletNotConnected"
        comptroller.exit_market.assert_not_called()
        method.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_swap_requires_account(
        self, method: MagicMock, xcn: Token, usdc: Token
    ) -> None:
        router = MagicMock()
        with pytest.raises(UnexpectedError, match="walletNotConnected"):
            await operations.swap_tokens(router, _exact_in(xcn, usdc), None, DEADLINE)
        router.swap_exact_tokens_for_tokens.assert_not_called()


class TestComptrollerOperations:
    @pytest.mark.asyncio
    async def test_exit_market(
        self, method: MagicMock, success_receipt: TransactionReceipt
    ) -> None:
        comptroller = MagicMock()
        comptroller.exit_market.return_value = method

        receipt = await operations.exit_market(comptroller, ACCOUNT, OTOKEN)

        assert receipt is success_receipt
        comptroller.exit_market.assert_called_once_with(OTOKEN)
        method.send.assert_awaited_once_with({"from": ACCOUNT})

    @pytest.mark.asyncio
    async def test_enter_markets(self, method: MagicMock) -> None:
        comptroller = MagicMock()
        comptroller.enter_markets.return_value = method

        await operations.enter_markets(comptroller, ACCOUNT, (OTOKEN,))

        comptroller.enter_markets.assert_called_once_with([OTOKEN])

    @pytest.mark.asyncio
    async def test_exit_market_failure_uses_comptroller_codes(self, make_method) -> None:
        receipt = TransactionReceipt(
            transaction_hash="0x1",
            events={"Failure": EventLog(return_values={"error": "14", "info": "3"})},
        )
        comptroller = MagicMock()
        comptroller.exit_market.return_value = make_method(receipt=receipt)

        with pytest.raises(OnChainFailureError) as exc_info:
            await operations.exit_market(comptroller, ACCOUNT, OTOKEN)

        assert exc_info.value.code == "REJECTION"
        assert exc_info.value.info == "EXIT_MARKET_REJECTION"


class TestApprove:
    @pytest.mark.asyncio
    async def test_unlimited_by_default(
        self, method: MagicMock, success_receipt: TransactionReceipt
    ) -> None:
        token = MagicMock()
        token.approve.return_value = method

        receipt = await operations.approve(token, ACCOUNT, OTOKEN)

        assert receipt is success_receipt
        token.approve.assert_called_once_with(OTOKEN, 2**256 - 1)
        assert operations.MAX_UINT256 == 2**256 - 1
        method.send.assert_awaited_once_with({"from": ACCOUNT})

    @pytest.mark.asyncio
    async def test_explicit_amount(self, method: MagicMock) -> None:
        token = MagicMock()
        token.approve.return_value = method

        await operations.approve(token, ACCOUNT, OTOKEN, amount_wei=5_000)

        token.approve.assert_called_once_with(OTOKEN, 5_000)

    @pytest.mark.asyncio
    async def test_requires_account(self, method: MagicMock) -> None:
        token = MagicMock()
        token.approve.return_value = method

        with pytest.raises(UnexpectedError, match="walletNotConnected"):
            await operations.approve(token, None, OTOKEN)

        token.approve.assert_not_called()
        method.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_uses_token_codes(self, make_method, failure_receipt) -> None:
        token = MagicMock()
        token.approve.return_value = make_method(receipt=failure_receipt)

        with pytest.raises(OnChainFailureError) as exc_info:
            await operations.approve(token, ACCOUNT, OTOKEN)

        assert exc_info.value.code == "UNAUTHORIZED"


class TestOTokenOperations:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation,contract_method",
        [
            (operations.supply, "mint"),
            (operations.redeem_underlying, "redeem_underlying"),
            (operations.borrow, "borrow"),
            (operations.repay_borrow, "repay_borrow"),
        ],
    )
    async def test_sends_amount(self, method: MagicMock, operation, contract_method: str) -> None:
        otoken = MagicMock()
        getattr(otoken, contract_method).return_value = method

        await operation(otoken, ACCOUNT, 12345)

        getattr(otoken, contract_method).assert_called_once_with(12345)
        method.send.assert_awaited_once_with({"from": ACCOUNT})

    @pytest.mark.asyncio
    async def test_failure_uses_token_codes(self, make_method, failure_receipt) -> None:
        otoken = MagicMock()
        otoken.borrow.return_value = make_method(receipt=failure_receipt)

        with pytest.raises(OnChainFailureError) as exc_info:
            await operations.borrow(otoken, ACCOUNT, 1)

        assert exc_info.value.code == "UNAUTHORIZED"
        assert exc_info.value.info == "ACCRUE_INTEREST_ACCUMULATED_INTEREST_CALCULATION_FAILED"


class TestSwapTokens:
    @pytest.mark.asyncio
    async def test_exact_in_tokens(self, method: MagicMock, xcn: Token, usdc: Token) -> None:
        router = MagicMock()
        router.swap_exact_tokens_for_tokens.return_value = method

        await operations.swap_tokens(router, _exact_in(xcn, usdc), ACCOUNT, DEADLINE)

        router.swap_exact_tokens_for_tokens.assert_called_once_with(
            1000, 1990, [xcn.address, usdc.address], ACCOUNT, DEADLINE
        )
        method.send.assert_awaited_once_with({"from": ACCOUNT})

    @pytest.mark.asyncio
    async def test_exact_in_from_native(self, method: MagicMock, eth: Token, usdc: Token) -> None:
        router = MagicMock()
        router.swap_exact_eth_for_tokens.return_value = method

        await operations.swap_tokens(router, _exact_in(eth, usdc), ACCOUNT, DEADLINE)

        router.swap_exact_eth_for_tokens.assert_called_once_with(
            1990, [eth.address, usdc.address], ACCOUNT, DEADLINE
        )
        method.send.assert_awaited_once_with({"from": ACCOUNT, "value": 1000})

    @pytest.mark.asyncio
    async def test_exact_in_to_native(self, method: MagicMock, eth: Token, usdc: Token) -> None:
        router = MagicMock()
        router.swap_exact_tokens_for_eth.return_value = method

        await operations.swap_tokens(router, _exact_in(usdc, eth), ACCOUNT, DEADLINE)

        router.swap_exact_tokens_for_eth.assert_called_once_with(
            1000, 1990, [usdc.address, eth.address], ACCOUNT, DEADLINE
        )
        method.send.assert_awaited_once_with({"from": ACCOUNT})

    @pytest.mark.asyncio
    async def test_exact_out_tokens(self, method: MagicMock, xcn: Token, usdc: Token) -> None:
        router = MagicMock()
        router.swap_tokens_for_exact_tokens.return_value = method

        await operations.swap_tokens(router, _exact_out(xcn, usdc), ACCOUNT, DEADLINE)

        router.swap_tokens_for_exact_tokens.assert_called_once_with(
            2000, 1005, [xcn.address, usdc.address], ACCOUNT, DEADLINE
        )

    @pytest.mark.asyncio
    async def test_exact_out_from_native(self, method: MagicMock, eth: Token, usdc: Token) -> None:
        router = MagicMock()
        router.swap_eth_for_exact_tokens.return_value = method

        await operations.swap_tokens(router, _exact_out(eth, usdc), ACCOUNT, DEADLINE)

        router.swap_eth_for_exact_tokens.assert_called_once_with(
            2000, [eth.address, usdc.address], ACCOUNT, DEADLINE
        )
        method.send.assert_awaited_once_with({"from": ACCOUNT, "value": 1005})

    @pytest.mark.asyncio
    async def test_exact_out_to_native(self, method: MagicMock, eth: Token, usdc: Token) -> None:
        router = MagicMock()
        router.swap_tokens_for_exact_eth.return_value = method

        await operations.swap_tokens(router, _exact_out(usdc, eth), ACCOUNT, DEADLINE)

        router.swap_tokens_for_exact_eth.assert_called_once_with(
            2000, 1005, [usdc.address, eth.address], ACCOUNT, DEADLINE
        )

    @pytest.mark.asyncio
    async def test_default_deadline(self, method: MagicMock, xcn: Token, usdc: Token) -> None:
        router = MagicMock()
        router.swap_exact_tokens_for_tokens.return_value = method

        with patch("lendswap.transactions.operations.time.time", return_value=1_700_000_000.5):
            await operations.swap_tokens(router, _exact_in(xcn, usdc), ACCOUNT)

        assert router.swap_exact_tokens_for_tokens.call_args[0][4] == 1_700_000_600


def test_swap_deadline() -> None:
    with patch("lendswap.transactions.operations.time.time", return_value=100.0):
        assert operations.swap_deadline(15) == 100 + 15 * 60
