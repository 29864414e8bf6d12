"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Mapping, Union

from eth_utils import to_checksum_address


@dataclass(frozen=True)
class Token:
    """ERC-20 token (or the native coin, addressed by its wrapped token)."""

    address: str
    decimals: int
    symbol: str
    is_native: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", to_checksum_address(self.address))


@dataclass(frozen=True)
class Asset:
    """A token together with a snapshot of its market state.

    Amounts are in tokens, ``token_price`` is in cents per token and an
    ``xcn_borrow_apy`` of ``NaN`` means the distribution rate is pending.
    """

    token: Token
    borrow_apy: Decimal
    xcn_borrow_apy: Decimal
    borrow_balance: Decimal
    supply_balance: Decimal
    collateral: bool
    liquidity: Decimal
    token_price: Decimal

    def __post_init__(self) -> None:
        for name in ("borrow_balance", "supply_balance", "liquidity"):
            if getattr(self, name) < 0:
                raise ValueError(f"Asset {self.token.symbol} has negative {name}")

    @property
    def is_xcn_borrow_apy_pending(self) -> bool:
        return self.xcn_borrow_apy.is_nan()


class SwapDirection(str, Enum):
    EXACT_AMOUNT_IN = "exactAmountIn"
    EXACT_AMOUNT_OUT = "exactAmountOut"


def _check_route(from_token: Token, to_token: Token, route_path: tuple[str, ...]) -> None:
    if not route_path:
        raise ValueError("Swap route path is empty")
    if route_path[0] != from_token.address or route_path[-1] != to_token.address:
        raise ValueError(
            f"Swap route {route_path[0]} -> {route_path[-1]} does not connect "
            f"{from_token.symbol} to {to_token.symbol}"
        )


@dataclass(frozen=True)
class ExactAmountInSwap:
    """Sell an exact amount, receive at least ``minimum_to_token_amount_received_wei``."""

    from_token: Token
    to_token: Token
    route_path: tuple[str, ...]
    exchange_rate: Decimal
    from_token_amount_sold_wei: int
    expected_to_token_amount_received_wei: int
    minimum_to_token_amount_received_wei: int

    def __post_init__(self) -> None:
        _check_route(self.from_token, self.to_token, self.route_path)
        if self.minimum_to_token_amount_received_wei > self.expected_to_token_amount_received_wei:
            raise ValueError("Minimum amount received exceeds expected amount received")

    @property
    def direction(self) -> SwapDirection:
        return SwapDirection.EXACT_AMOUNT_IN


@dataclass(frozen=True)
class ExactAmountOutSwap:
    """Receive an exact amount, sell at most ``maximum_from_token_amount_sold_wei``."""

    from_token: Token
    to_token: Token
    route_path: tuple[str, ...]
    exchange_rate: Decimal
    expected_from_token_amount_sold_wei: int
    maximum_from_token_amount_sold_wei: int
    to_token_amount_received_wei: int

    def __post_init__(self) -> None:
        _check_route(self.from_token, self.to_token, self.route_path)
        if self.maximum_from_token_amount_sold_wei < self.expected_from_token_amount_sold_wei:
            raise ValueError("Maximum amount sold is below expected amount sold")

    @property
    def direction(self) -> SwapDirection:
        return SwapDirection.EXACT_AMOUNT_OUT


Swap = Union[ExactAmountInSwap, ExactAmountOutSwap]


@dataclass(frozen=True)
class EventLog:
    """Decoded contract event; values are kept as strings."""

    return_values: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TransactionReceipt:
    transaction_hash: str
    events: Mapping[str, EventLog] = field(default_factory=dict)
    block_number: int | None = None
    status: int | None = None
