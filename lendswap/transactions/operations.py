"""Protocol operations — one function per contract method the client sends."""
from __future__ import annotations

import logging
import time
from typing import Sequence

from ..errors import UnexpectedError
from ..interfaces.contracts import (
    ComptrollerContract,
    ContractMethod,
    Erc20Contract,
    OTokenContract,
    SwapRouterContract,
)
from ..models import ExactAmountInSwap, Swap, TransactionReceipt
from .codes import COMPTROLLER_ERROR_REPORTER, TOKEN_ERROR_REPORTER
from .mutation import handle_transaction_mutation

logger = logging.getLogger(__name__)

DEFAULT_SWAP_DEADLINE_MINUTES = 10
MAX_UINT256 = 2**256 - 1


def require_account(account_address: str | None) -> str:
    """Fail before touching the network when no account is connected."""
    if not account_address:
        raise UnexpectedError("walletNotConnected")
    return account_address


def swap_deadline(minutes: int = DEFAULT_SWAP_DEADLINE_MINUTES) -> int:
    return int(time.time()) + minutes * 60


async def enter_markets(
    comptroller: ComptrollerContract,
    account_address: str | None,
    otoken_addresses: Sequence[str],
) -> TransactionReceipt:
    sender = require_account(account_address)
    return await handle_transaction_mutation(
        "enterMarkets",
        comptroller.enter_markets(list(otoken_addresses)),
        sender,
        COMPTROLLER_ERROR_REPORTER,
    )


async def exit_market(
    comptroller: ComptrollerContract,
    account_address: str | None,
    otoken_address: str,
) -> TransactionReceipt:
    sender = require_account(account_address)
    return await handle_transaction_mutation(
        "exitMarket",
        comptroller.exit_market(otoken_address),
        sender,
        COMPTROLLER_ERROR_REPORTER,
    )


async def approve(
    token: Erc20Contract,
    account_address: str | None,
    spender_address: str,
    amount_wei: int = MAX_UINT256,
) -> TransactionReceipt:
    """Let ``spender_address`` pull up to ``amount_wei`` of ``token`` (unlimited by default).

    Supplying, repaying and selling a token through the router all need it.
    """
    sender = require_account(account_address)
    return await handle_transaction_mutation(
        "approve", token.approve(spender_address, amount_wei), sender, TOKEN_ERROR_REPORTER
    )


async def supply(
    otoken: OTokenContract, account_address: str | None, amount_wei: int
) -> TransactionReceipt:
    sender = require_account(account_address)
    return await handle_transaction_mutation(
        "mint", otoken.mint(amount_wei), sender, TOKEN_ERROR_REPORTER
    )


async def redeem_underlying(
    otoken: OTokenContract, account_address: str | None, amount_wei: int
) -> TransactionReceipt:
    sender = require_account(account_address)
    return await handle_transaction_mutation(
        "redeemUnderlying",
        otoken.redeem_underlying(amount_wei),
        sender,
        TOKEN_ERROR_REPORTER,
    )


async def borrow(
    otoken: OTokenContract, account_address: str | None, amount_wei: int
) -> TransactionReceipt:
    sender = require_account(account_address)
    return await handle_transaction_mutation(
        "borrow", otoken.borrow(amount_wei), sender, TOKEN_ERROR_REPORTER
    )


async def repay_borrow(
    otoken: OTokenContract, account_address: str | None, amount_wei: int
) -> TransactionReceipt:
    sender = require_account(account_address)
    return await handle_transaction_mutation(
        "repayBorrow", otoken.repay_borrow(amount_wei), sender, TOKEN_ERROR_REPORTER
    )


def _swap_method(
    router: SwapRouterContract,
    swap: Swap,
    recipient: str,
    deadline: int,
) -> tuple[str, ContractMethod, int | None]:
    """Pick the router method for ``swap``; returns (name, method, value_wei)."""
    path = list(swap.route_path)

    if isinstance(swap, ExactAmountInSwap):
        amount_in = swap.from_token_amount_sold_wei
        amount_out_min = swap.minimum_to_token_amount_received_wei
        if swap.from_token.is_native:
            return (
                "swapExactETHForTokens",
                router.swap_exact_eth_for_tokens(amount_out_min, path, recipient, deadline),
                amount_in,
            )
        if swap.to_token.is_native:
            return (
                "swapExactTokensForETH",
                router.swap_exact_tokens_for_eth(
                    amount_in, amount_out_min, path, recipient, deadline
                ),
                None,
            )
        return (
            "swapExactTokensForTokens",
            router.swap_exact_tokens_for_tokens(
                amount_in, amount_out_min, path, recipient, deadline
            ),
            None,
        )

    amount_out = swap.to_token_amount_received_wei
    amount_in_max = swap.maximum_from_token_amount_sold_wei
    if swap.from_token.is_native:
        return (
            "swapETHForExactTokens",
            router.swap_eth_for_exact_tokens(amount_out, path, recipient, deadline),
            amount_in_max,
        )
    if swap.to_token.is_native:
        return (
            "swapTokensForExactETH",
            router.swap_tokens_for_exact_eth(
                amount_out, amount_in_max, path, recipient, deadline
            ),
            None,
        )
    return (
        "swapTokensForExactTokens",
        router.swap_tokens_for_exact_tokens(
            amount_out, amount_in_max, path, recipient, deadline
        ),
        None,
    )


async def swap_tokens(
    router: SwapRouterContract,
    swap: Swap,
    account_address: str | None,
    deadline: int | None = None,
) -> TransactionReceipt:
    """Execute ``swap`` through the router, sending proceeds to the account."""
    sender = require_account(account_address)
    if deadline is None:
        deadline = swap_deadline()

    name, method, value_wei = _swap_method(router, swap, sender, deadline)
    logger.info(
        "Swapping %s -> %s (%s) via %s",
        swap.from_token.symbol, swap.to_token.symbol, swap.direction.value, name,
    )
    return await handle_transaction_mutation(
        name, method, sender, TOKEN_ERROR_REPORTER, value_wei=value_wei
    )
