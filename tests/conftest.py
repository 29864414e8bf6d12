"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from lendswap.config import AppConfig, ChainConfig, ProtocolConfig
from lendswap.models import Asset, EventLog, Token, TransactionReceipt

XCN_ADDRESS = "0x" + "11" * 20
USDC_ADDRESS = "0x" + "22" * 20
WETH_ADDRESS = "0x" + "33" * 20
OXCN_ADDRESS = "0x" + "44" * 20
OUSDC_ADDRESS = "0x" + "55" * 20
COMPTROLLER_ADDRESS = "0x" + "66" * 20
ROUTER_ADDRESS = "0x" + "77" * 20
ACCOUNT_ADDRESS = "0x" + "88" * 20


# ---------------------------------------------------------------------------
# Token / asset fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def xcn() -> Token:
    return Token(address=XCN_ADDRESS, decimals=18, symbol="XCN")


@pytest.fixture()
def usdc() -> Token:
    return Token(address=USDC_ADDRESS, decimals=6, symbol="USDC")


@pytest.fixture()
def eth() -> Token:
    return Token(address=WETH_ADDRESS, decimals=18, symbol="ETH", is_native=True)


@pytest.fixture()
def sample_asset(usdc: Token) -> Asset:
    return Asset(
        token=usdc,
        borrow_apy=Decimal("3.5"),
        xcn_borrow_apy=Decimal("1.25"),
        borrow_balance=Decimal("10"),
        supply_balance=Decimal("100"),
        collateral=True,
        liquidity=Decimal("1000"),
        token_price=Decimal("100"),
    )


# ---------------------------------------------------------------------------
# Quoting engine fake
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FakeRouteToken:
    address: str


@dataclass(frozen=True)
class FakeRoute:
    path: tuple[FakeRouteToken, ...]


@dataclass(frozen=True)
class FakeTrade:
    """Trade with Uniswap-v2 style worst-case amounts."""

    input_amount: Decimal
    output_amount: Decimal
    execution_price: Decimal
    route: FakeRoute

    def minimum_amount_out(self, slippage_tolerance: Decimal) -> Decimal:
        return self.output_amount / (1 + slippage_tolerance)

    def maximum_amount_in(self, slippage_tolerance: Decimal) -> Decimal:
        return self.input_amount * (1 + slippage_tolerance)


@pytest.fixture()
def make_trade() -> Callable[..., FakeTrade]:
    def _make(
        input_amount: str,
        output_amount: str,
        path: tuple[str, ...],
        execution_price: str | None = None,
    ) -> FakeTrade:
        price = (
            Decimal(execution_price)
            if execution_price is not None
            else Decimal(output_amount) / Decimal(input_amount)
        )
        return FakeTrade(
            input_amount=Decimal(input_amount),
            output_amount=Decimal(output_amount),
            execution_price=price,
            route=FakeRoute(path=tuple(FakeRouteToken(a) for a in path)),
        )

    return _make


# ---------------------------------------------------------------------------
# Receipts and contract fakes
# ---------------------------------------------------------------------------


@pytest.fixture()
def success_receipt() -> TransactionReceipt:
    return TransactionReceipt(transaction_hash="0xabc", events={})


@pytest.fixture()
def failure_receipt() -> TransactionReceipt:
    return TransactionReceipt(
        transaction_hash="0xdef",
        events={"Failure": EventLog(return_values={"error": "1", "info": "1", "detail": "0"})},
    )


@pytest.fixture()
def make_method() -> Callable[..., MagicMock]:
    """ContractMethod fake whose ``send`` returns ``receipt`` or raises ``error``."""

    def _make(
        receipt: TransactionReceipt | None = None, error: Exception | None = None
    ) -> MagicMock:
        method = MagicMock()
        if error is not None:
            method.send = AsyncMock(side_effect=error)
        else:
            method.send = AsyncMock(return_value=receipt)
        return method

    return _make


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_app_config(xcn: Token, usdc: Token, eth: Token) -> AppConfig:
    return AppConfig(
        chain=ChainConfig(rpc_url="https://rpc.example.com", rpc_timeout=10, chain_id=5),
        protocol=ProtocolConfig(
            safe_borrow_limit_percentage=80.0,
            slippage_tolerance_percentage=0.5,
            swap_deadline_minutes=10,
        ),
        account_address=ACCOUNT_ADDRESS,
        contracts={"comptroller": COMPTROLLER_ADDRESS, "swapRouter": ROUTER_ADDRESS},
        tokens={"xcn": xcn, "usdc": usdc, "eth": eth},
        otokens={
            "xcn": Token(address=OXCN_ADDRESS, decimals=8, symbol="oXCN"),
            "usdc": Token(address=OUSDC_ADDRESS, decimals=8, symbol="oUSDC"),
        },
    )


SAMPLE_YAML = textwrap.dedent(f"""\
    chain:
      rpc_url: "https://rpc.example.com"
      rpc_timeout: 10
      chain_id: 5
    account:
      address: "{ACCOUNT_ADDRESS}"
    protocol:
      safe_borrow_limit_percentage: 80
      slippage_tolerance_percentage: 0.5
      swap_deadline_minutes: 15
    contracts:
      comptroller: "{COMPTROLLER_ADDRESS}"
      swapRouter: "{ROUTER_ADDRESS}"
    tokens:
      xcn: {{address: "{XCN_ADDRESS}", decimals: 18, symbol: XCN}}
      usdc: {{address: "{USDC_ADDRESS}", decimals: 6, symbol: USDC}}
      eth: {{address: "{WETH_ADDRESS}", decimals: 18, symbol: ETH, native: true}}
    otokens:
      xcn: {{address: "{OXCN_ADDRESS}", decimals: 8, symbol: oXCN}}
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


@pytest.fixture()
def sample_yaml() -> str:
    return SAMPLE_YAML
