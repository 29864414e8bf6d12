"""Protocol client — wires configuration, contracts and operations together."""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from eth_utils import to_checksum_address

from ..amounts.conversion import to_base_units
from ..amounts.formatting import format_tokens_to_readable_value
from ..chains.evm import (
    COMPTROLLER_ABI,
    ERC20_ABI,
    OTOKEN_ABI,
    SWAP_ROUTER_ABI,
    Web3Comptroller,
    Web3Erc20,
    Web3OToken,
    Web3SwapRouter,
    build_web3,
)
from ..config import AppConfig
from ..errors import UnexpectedError
from ..interfaces.contracts import (
    ComptrollerContract,
    Erc20Contract,
    OTokenContract,
    SwapRouterContract,
)
from ..interfaces.quoting import Trade
from ..markets.limits import BorrowLimits, calculate_borrow_limits
from ..models import Asset, Swap, SwapDirection, Token, TransactionReceipt
from ..registry import ContractRegistry
from ..swap.quote import build_swap
from ..transactions import operations

logger = logging.getLogger(__name__)


class ProtocolClient:
    """Lending and swap mutations for the configured account."""

    def __init__(self, config: AppConfig, w3: Any | None = None) -> None:
        self._config = config
        self._protocol = config.protocol
        self._w3 = w3 if w3 is not None else build_web3(config.chain)
        self.registry = ContractRegistry.from_config(config)

        self._comptroller: ComptrollerContract = Web3Comptroller(
            self._w3, self._contract(config.contracts["comptroller"], COMPTROLLER_ABI)
        )
        self._router: SwapRouterContract = Web3SwapRouter(
            self._w3, self._contract(config.contracts["swapRouter"], SWAP_ROUTER_ABI)
        )
        self._otokens: dict[str, OTokenContract] = {
            token_id: Web3OToken(self._w3, self._contract(otoken.address, OTOKEN_ABI))
            for token_id, otoken in config.otokens.items()
        }
        # The native coin has no allowance to grant
        self._erc20s: dict[str, Erc20Contract] = {
            token_id: Web3Erc20(self._w3, self._contract(token.address, ERC20_ABI))
            for token_id, token in config.tokens.items()
            if not token.is_native
        }

    def _contract(self, address: str, abi: list) -> Any:
        return self._w3.eth.contract(address=to_checksum_address(address), abi=abi)

    @property
    def account_address(self) -> str:
        address = self._config.account_address
        return to_checksum_address(address) if address else address

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def token(self, token_id: str) -> Token:
        try:
            return self._config.tokens[token_id]
        except KeyError:
            raise UnexpectedError("unknownToken", f"Token '{token_id}' is not configured") from None

    def _otoken(self, token_id: str) -> tuple[Token, OTokenContract]:
        if token_id not in self._otokens:
            raise UnexpectedError("unknownMarket", f"No oToken market for '{token_id}'")
        return self.token(token_id), self._otokens[token_id]

    def _otoken_address(self, token_id: str) -> str:
        if token_id not in self._config.otokens:
            raise UnexpectedError("unknownMarket", f"No oToken market for '{token_id}'")
        return self._config.otokens[token_id].address

    # ------------------------------------------------------------------
    # Calculations
    # ------------------------------------------------------------------

    def borrow_limits(
        self,
        asset: Asset,
        user_total_borrow_limit_cents: Decimal,
        user_total_borrow_balance_cents: Decimal,
    ) -> BorrowLimits:
        return calculate_borrow_limits(
            user_total_borrow_limit_cents,
            user_total_borrow_balance_cents,
            asset,
            Decimal(str(self._protocol.safe_borrow_limit_percentage)),
        )

    def quote_swap(
        self,
        trade: Trade,
        direction: SwapDirection,
        from_token: Token,
        to_token: Token,
    ) -> Swap:
        return build_swap(
            trade,
            direction,
            from_token,
            to_token,
            slippage_tolerance_percentage=Decimal(
                str(self._protocol.slippage_tolerance_percentage)
            ),
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def enter_market(self, token_id: str) -> TransactionReceipt:
        otoken_address = self._otoken_address(token_id)
        logger.info("Entering market %s", self.registry.get_contract_name(otoken_address))
        return await operations.enter_markets(
            self._comptroller, self.account_address, [otoken_address]
        )

    async def exit_market(self, token_id: str) -> TransactionReceipt:
        otoken_address = self._otoken_address(token_id)
        logger.info("Exiting market %s", self.registry.get_contract_name(otoken_address))
        return await operations.exit_market(
            self._comptroller, self.account_address, otoken_address
        )

    async def enable_token(
        self, token_id: str, spender: str | None = None
    ) -> TransactionReceipt:
        """Grant ``spender`` an unlimited allowance over the account's ``token_id``.

        ``spender`` names a configured contract (e.g. ``"swapRouter"``); by
        default it is the token's own oToken market.
        """
        token = self.token(token_id)
        if token.is_native:
            raise UnexpectedError(
                "tokenNotApprovable", f"Token '{token_id}' is native and needs no allowance"
            )
        if spender is None:
            spender_address = self._otoken_address(token_id)
        elif spender in self._config.contracts:
            spender_address = to_checksum_address(self._config.contracts[spender])
        else:
            raise UnexpectedError("unknownContract", f"Contract '{spender}' is not configured")

        logger.info(
            "Enabling %s for %s",
            token.symbol, self.registry.get_contract_name(spender_address),
        )
        return await operations.approve(
            self._erc20s[token_id], self.account_address, spender_address
        )

    async def supply(self, token_id: str, amount_tokens: Decimal) -> TransactionReceipt:
        token, otoken = self._otoken(token_id)
        logger.info("Supplying %s", format_tokens_to_readable_value(amount_tokens, token))
        return await operations.supply(
            otoken, self.account_address, to_base_units(amount_tokens, token)
        )

    async def redeem(self, token_id: str, amount_tokens: Decimal) -> TransactionReceipt:
        token, otoken = self._otoken(token_id)
        logger.info("Redeeming %s", format_tokens_to_readable_value(amount_tokens, token))
        return await operations.redeem_underlying(
            otoken, self.account_address, to_base_units(amount_tokens, token)
        )

    async def borrow(self, token_id: str, amount_tokens: Decimal) -> TransactionReceipt:
        token, otoken = self._otoken(token_id)
        logger.info("Borrowing %s", format_tokens_to_readable_value(amount_tokens, token))
        return await operations.borrow(
            otoken, self.account_address, to_base_units(amount_tokens, token)
        )

    async def repay(self, token_id: str, amount_tokens: Decimal) -> TransactionReceipt:
        token, otoken = self._otoken(token_id)
        logger.info("Repaying %s", format_tokens_to_readable_value(amount_tokens, token))
        return await operations.repay_borrow(
            otoken, self.account_address, to_base_units(amount_tokens, token)
        )

    async def swap(self, swap: Swap) -> TransactionReceipt:
        return await operations.swap_tokens(
            self._router,
            swap,
            self.account_address,
            deadline=operations.swap_deadline(self._protocol.swap_deadline_minutes),
        )
