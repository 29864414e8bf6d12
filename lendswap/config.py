"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from eth_utils import is_address, to_checksum_address

from .markets.limits import SAFE_BORROW_LIMIT_PERCENTAGE
from .models import Token
from .swap.quote import SLIPPAGE_TOLERANCE_PERCENTAGE
from .transactions.operations import DEFAULT_SWAP_DEADLINE_MINUTES

logger = logging.getLogger(__name__)

REQUIRED_CONTRACTS = ("comptroller", "swapRouter")

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChainConfig:
    rpc_url: str = ""
    rpc_timeout: int = 30
    chain_id: int = 1


@dataclass(frozen=True)
class ProtocolConfig:
    safe_borrow_limit_percentage: float = float(SAFE_BORROW_LIMIT_PERCENTAGE)
    slippage_tolerance_percentage: float = float(SLIPPAGE_TOLERANCE_PERCENTAGE)
    swap_deadline_minutes: int = DEFAULT_SWAP_DEADLINE_MINUTES


@dataclass(frozen=True)
class AppConfig:
    chain: ChainConfig = field(default_factory=ChainConfig)
    protocol: ProtocolConfig = field(default_factory=ProtocolConfig)
    account_address: str = ""
    contracts: dict[str, str] = field(default_factory=dict)
    tokens: dict[str, Token] = field(default_factory=dict)
    otokens: dict[str, Token] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_chain(raw: dict[str, Any]) -> ChainConfig:
    return ChainConfig(
        rpc_url=raw.get("rpc_url", ""),
        rpc_timeout=int(raw.get("rpc_timeout", 30)),
        chain_id=int(raw.get("chain_id", 1)),
    )


def _build_protocol(raw: dict[str, Any]) -> ProtocolConfig:
    return ProtocolConfig(
        safe_borrow_limit_percentage=float(
            raw.get("safe_borrow_limit_percentage", SAFE_BORROW_LIMIT_PERCENTAGE)
        ),
        slippage_tolerance_percentage=float(
            raw.get("slippage_tolerance_percentage", SLIPPAGE_TOLERANCE_PERCENTAGE)
        ),
        swap_deadline_minutes=int(
            raw.get("swap_deadline_minutes", DEFAULT_SWAP_DEADLINE_MINUTES)
        ),
    )


def _build_tokens(raw: dict[str, Any]) -> dict[str, Token]:
    tokens: dict[str, Token] = {}
    for token_id, cfg in raw.items():
        address = str(cfg.get("address", ""))
        if not is_address(address):
            raise ValueError(f"Token '{token_id}' has an invalid address: '{address}'")
        decimals = int(cfg.get("decimals", 18))
        if decimals < 0:
            raise ValueError(f"Token '{token_id}' has negative decimals")
        tokens[token_id] = Token(
            address=address,
            decimals=decimals,
            symbol=cfg.get("symbol", token_id.upper()),
            is_native=bool(cfg.get("native", False)),
        )
    return tokens


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        chain=_build_chain(raw.get("chain", {})),
        protocol=_build_protocol(raw.get("protocol", {})),
        account_address=raw.get("account", {}).get("address", ""),
        contracts=dict(raw.get("contracts", {})),
        tokens=_build_tokens(raw.get("tokens", {})),
        otokens=_build_tokens(raw.get("otokens", {})),
    )

    _validate(cfg)
    cfg = _checksum_addresses(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _checksum_addresses(cfg: AppConfig) -> AppConfig:
    """web3 only accepts checksummed addresses for contracts and senders."""
    return replace(
        cfg,
        account_address=(
            to_checksum_address(cfg.account_address) if cfg.account_address else ""
        ),
        contracts={name: to_checksum_address(a) for name, a in cfg.contracts.items()},
    )


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    protocol = cfg.protocol
    if not 0 <= protocol.safe_borrow_limit_percentage <= 100:
        raise ValueError("safe_borrow_limit_percentage must be between 0 and 100")
    if not 0 <= protocol.slippage_tolerance_percentage <= 100:
        raise ValueError("slippage_tolerance_percentage must be between 0 and 100")
    if protocol.swap_deadline_minutes <= 0:
        raise ValueError("swap_deadline_minutes must be positive")

    for name in REQUIRED_CONTRACTS:
        if name not in cfg.contracts:
            raise ValueError(f"Contract '{name}' is not configured")

    for name, address in cfg.contracts.items():
        if not is_address(address):
            raise ValueError(f"Contract '{name}' has an invalid address: '{address}'")

    if cfg.account_address and not is_address(cfg.account_address):
        raise ValueError(f"Account address is invalid: '{cfg.account_address}'")

    for token_id in cfg.otokens:
        if token_id not in cfg.tokens:
            raise ValueError(f"oToken '{token_id}' references unknown token '{token_id}'")
