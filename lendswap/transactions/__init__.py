"""Contract submission, Failure decoding and mutation orchestration."""
from .codes import COMPTROLLER_ERROR_REPORTER, TOKEN_ERROR_REPORTER, ErrorReporter
from .decoder import (
    FAILURE_EVENT,
    check_for_comptroller_transaction_error,
    check_for_token_transaction_error,
    check_for_transaction_error,
)
from .mutation import MutationState, TransactionMutation, handle_transaction_mutation
from .submission import submit_transaction

__all__ = [
    "COMPTROLLER_ERROR_REPORTER",
    "TOKEN_ERROR_REPORTER",
    "ErrorReporter",
    "FAILURE_EVENT",
    "check_for_comptroller_transaction_error",
    "check_for_token_transaction_error",
    "check_for_transaction_error",
    "MutationState",
    "TransactionMutation",
    "handle_transaction_mutation",
    "submit_transaction",
]
