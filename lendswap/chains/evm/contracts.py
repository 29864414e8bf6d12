"""web3.py bindings for the contract protocols."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from web3 import Web3
from web3.exceptions import ContractLogicError
from web3.logs import DISCARD

from ...models import EventLog, TransactionReceipt

logger = logging.getLogger(__name__)


def _event_names(contract: Any) -> list[str]:
    return [entry["name"] for entry in contract.abi if entry.get("type") == "event"]


def decode_receipt(contract: Any, raw_receipt: Any) -> TransactionReceipt:
    """Decode the contract's ABI events found in ``raw_receipt``.

    Logs emitted by other contracts are discarded; when an event fires more
    than once the last occurrence is kept.
    """
    events: dict[str, EventLog] = {}
    for name in _event_names(contract):
        decoded = getattr(contract.events, name)().process_receipt(raw_receipt, errors=DISCARD)
        for event in decoded:
            events[name] = EventLog(
                return_values={key: str(value) for key, value in event["args"].items()}
            )

    return TransactionReceipt(
        transaction_hash=Web3.to_hex(raw_receipt["transactionHash"]),
        events=events,
        block_number=raw_receipt.get("blockNumber"),
        status=raw_receipt.get("status"),
    )


class Web3ContractMethod:
    """A bound web3 contract function implementing ``ContractMethod``."""

    def __init__(self, w3: Any, contract: Any, function: Any) -> None:
        self._w3 = w3
        self._contract = contract
        self._function = function

    async def send(self, tx_params: dict[str, Any]) -> TransactionReceipt:
        tx_hash = await self._function.transact(tx_params)
        logger.info("Transaction %s broadcast", Web3.to_hex(tx_hash))

        raw_receipt = await self._w3.eth.wait_for_transaction_receipt(tx_hash)
        if raw_receipt.get("status") == 0:
            raise ContractLogicError(
                f"Transaction {Web3.to_hex(tx_hash)} was reverted by the EVM"
            )
        return decode_receipt(self._contract, raw_receipt)


class _Web3Binding:
    def __init__(self, w3: Any, contract: Any) -> None:
        self._w3 = w3
        self._contract = contract

    @property
    def address(self) -> str:
        return self._contract.address

    def _method(self, name: str, *args: Any) -> Web3ContractMethod:
        function = getattr(self._contract.functions, name)(*args)
        return Web3ContractMethod(self._w3, self._contract, function)


class Web3Comptroller(_Web3Binding):
    def enter_markets(self, otoken_addresses: Sequence[str]) -> Web3ContractMethod:
        return self._method("enterMarkets", list(otoken_addresses))

    def exit_market(self, otoken_address: str) -> Web3ContractMethod:
        return self._method("exitMarket", otoken_address)


class Web3Erc20(_Web3Binding):
    def approve(self, spender_address: str, amount_wei: int) -> Web3ContractMethod:
        return self._method("approve", spender_address, amount_wei)


class Web3OToken(_Web3Binding):
    def mint(self, amount_wei: int) -> Web3ContractMethod:
        return self._method("mint", amount_wei)

    def redeem_underlying(self, amount_wei: int) -> Web3ContractMethod:
        return self._method("redeemUnderlying", amount_wei)

    def borrow(self, amount_wei: int) -> Web3ContractMethod:
        return self._method("borrow", amount_wei)

    def repay_borrow(self, amount_wei: int) -> Web3ContractMethod:
        return self._method("repayBorrow", amount_wei)


class Web3SwapRouter(_Web3Binding):
    def swap_exact_tokens_for_tokens(
        self, amount_in: int, amount_out_min: int, path: Sequence[str], to: str, deadline: int
    ) -> Web3ContractMethod:
        return self._method(
            "swapExactTokensForTokens", amount_in, amount_out_min, list(path), to, deadline
        )

    def swap_exact_eth_for_tokens(
        self, amount_out_min: int, path: Sequence[str], to: str, deadline: int
    ) -> Web3ContractMethod:
        return self._method("swapExactETHForTokens", amount_out_min, list(path), to, deadline)

    def swap_exact_tokens_for_eth(
        self, amount_in: int, amount_out_min: int, path: Sequence[str], to: str, deadline: int
    ) -> Web3ContractMethod:
        return self._method(
            "swapExactTokensForETH", amount_in, amount_out_min, list(path), to, deadline
        )

    def swap_tokens_for_exact_tokens(
        self, amount_out: int, amount_in_max: int, path: Sequence[str], to: str, deadline: int
    ) -> Web3ContractMethod:
        return self._method(
            "swapTokensForExactTokens", amount_out, amount_in_max, list(path), to, deadline
        )

    def swap_eth_for_exact_tokens(
        self, amount_out: int, path: Sequence[str], to: str, deadline: int
    ) -> Web3ContractMethod:
        return self._method("swapETHForExactTokens", amount_out, list(path), to, deadline)

    def swap_tokens_for_exact_eth(
        self, amount_out: int, amount_in_max: int, path: Sequence[str], to: str, deadline: int
    ) -> Web3ContractMethod:
        return self._method(
            "swapTokensForExactETH", amount_out, amount_in_max, list(path), to, deadline
        )
