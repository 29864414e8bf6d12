"""Known contract addresses, keyed by checksummed address."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from eth_utils import is_address, to_checksum_address

from .config import AppConfig


class ContractRegistry:
    """Read-only address -> name lookup built once from configuration."""

    def __init__(self, entries: Iterable[tuple[str, str]]) -> None:
        names: dict[str, str] = {}
        for name, address in entries:
            # First registration wins: main contracts before tokens before oTokens
            names.setdefault(to_checksum_address(address), name)
        self._names: Mapping[str, str] = MappingProxyType(names)

    @classmethod
    def from_config(cls, config: AppConfig) -> "ContractRegistry":
        entries: list[tuple[str, str]] = list(config.contracts.items())
        entries.extend((token_id, token.address) for token_id, token in config.tokens.items())
        entries.extend(
            (f"o{token_id.capitalize()}", token.address)
            for token_id, token in config.otokens.items()
        )
        return cls(entries)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, address: object) -> bool:
        return isinstance(address, str) and self.name_for(address) is not None

    def name_for(self, address: str) -> str | None:
        if not is_address(address):
            return None
        return self._names.get(to_checksum_address(address))

    def get_contract_name(self, address: str) -> str:
        """Capitalized contract name, or the address itself when unknown."""
        name = self.name_for(address)
        if name is None:
            return address
        return f"{name[0].upper()}{name[1:]}"
