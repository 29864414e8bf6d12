"""Failure event decoding (synchronous, no I/O)."""
from __future__ import annotations

import logging

from ..errors import OnChainFailureError
from ..models import TransactionReceipt
from .codes import COMPTROLLER_ERROR_REPORTER, TOKEN_ERROR_REPORTER, ErrorReporter

logger = logging.getLogger(__name__)

FAILURE_EVENT = "Failure"


def check_for_transaction_error(
    receipt: TransactionReceipt,
    reporter: ErrorReporter,
) -> TransactionReceipt:
    """Return ``receipt`` unchanged, or raise if it carries a ``Failure`` event.

    Codes without a symbolic name are reported as their raw numeric string.
    """
    failure = receipt.events.get(FAILURE_EVENT)
    if failure is None:
        return receipt

    raw_error = str(failure.return_values.get("error", ""))
    raw_info = str(failure.return_values.get("info", ""))
    error = reporter.lookup_error(raw_error) or raw_error
    info = reporter.lookup_info(raw_info) or raw_info

    logger.warning(
        "Transaction %s failed on-chain (%s): error=%s info=%s",
        receipt.transaction_hash, reporter.name, error, info,
    )
    raise OnChainFailureError(code=error, info=info)


def check_for_comptroller_transaction_error(receipt: TransactionReceipt) -> TransactionReceipt:
    return check_for_transaction_error(receipt, COMPTROLLER_ERROR_REPORTER)


def check_for_token_transaction_error(receipt: TransactionReceipt) -> TransactionReceipt:
    return check_for_transaction_error(receipt, TOKEN_ERROR_REPORTER)
