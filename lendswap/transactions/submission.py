"""Transaction submission — one attempt, transport errors pass through."""
from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..interfaces.contracts import ContractMethod
from ..models import TransactionReceipt

logger = logging.getLogger(__name__)


def build_tx_params(sender_address: str, value_wei: int | None = None) -> dict[str, Any]:
    tx_params: dict[str, Any] = {"from": sender_address}
    if value_wei is not None:
        tx_params["value"] = value_wei
    return tx_params


async def submit_transaction(
    method: ContractMethod,
    sender_address: str,
    value_wei: int | None = None,
) -> TransactionReceipt:
    """Send ``method`` from ``sender_address`` and wait for its receipt.

    Whatever the transport raises (node unreachable, signature rejected, gas
    estimation failure) propagates as-is. Cancelling the caller only stops the
    wait: a transaction that was already broadcast can still be mined.
    """
    try:
        return await method.send(build_tx_params(sender_address, value_wei))
    except asyncio.CancelledError:
        logger.warning(
            "Stopped waiting for transaction from %s; if it was broadcast it may still be mined",
            sender_address,
        )
        raise
