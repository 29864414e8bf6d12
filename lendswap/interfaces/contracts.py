"""Contract protocols — one capability per contract method the client calls."""
from typing import Any, Protocol, Sequence

from ..models import TransactionReceipt


class ContractMethod(Protocol):
    """A contract call bound to its arguments, ready to be sent."""

    async def send(self, tx_params: dict[str, Any]) -> TransactionReceipt: ...


class ComptrollerContract(Protocol):
    """Market membership on the comptroller."""

    def enter_markets(self, otoken_addresses: Sequence[str]) -> ContractMethod: ...

    def exit_market(self, otoken_address: str) -> ContractMethod: ...


class Erc20Contract(Protocol):
    """Allowance management on an ERC-20 token."""

    def approve(self, spender_address: str, amount_wei: int) -> ContractMethod: ...


class OTokenContract(Protocol):
    """Supply, redeem, borrow and repay on an oToken market."""

    def mint(self, amount_wei: int) -> ContractMethod: ...

    def redeem_underlying(self, amount_wei: int) -> ContractMethod: ...

    def borrow(self, amount_wei: int) -> ContractMethod: ...

    def repay_borrow(self, amount_wei: int) -> ContractMethod: ...


class SwapRouterContract(Protocol):
    """Uniswap-v2-style router swaps."""

    def swap_exact_tokens_for_tokens(
        self, amount_in: int, amount_out_min: int, path: Sequence[str], to: str, deadline: int
    ) -> ContractMethod: ...

    def swap_exact_eth_for_tokens(
        self, amount_out_min: int, path: Sequence[str], to: str, deadline: int
    ) -> ContractMethod: ...

    def swap_exact_tokens_for_eth(
        self, amount_in: int, amount_out_min: int, path: Sequence[str], to: str, deadline: int
    ) -> ContractMethod: ...

    def swap_tokens_for_exact_tokens(
        self, amount_out: int, amount_in_max: int, path: Sequence[str], to: str, deadline: int
    ) -> ContractMethod: ...

    def swap_eth_for_exact_tokens(
        self, amount_out: int, path: Sequence[str], to: str, deadline: int
    ) -> ContractMethod: ...

    def swap_tokens_for_exact_eth(
        self, amount_out: int, amount_in_max: int, path: Sequence[str], to: str, deadline: int
    ) -> ContractMethod: ...
