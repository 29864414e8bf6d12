"""Mutation orchestration — submit, then decode, with a single outcome."""
from __future__ import annotations

import logging
from enum import Enum

from ..errors import OnChainFailureError, UnexpectedError
from ..interfaces.contracts import ContractMethod
from ..models import TransactionReceipt
from .codes import ErrorReporter
from .decoder import check_for_transaction_error
from .submission import submit_transaction

logger = logging.getLogger(__name__)


class MutationState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED_TRANSPORT = "failed_transport"
    FAILED_ON_CHAIN = "failed_on_chain"


TERMINAL_STATES = frozenset(
    {MutationState.SUCCEEDED, MutationState.FAILED_TRANSPORT, MutationState.FAILED_ON_CHAIN}
)


class TransactionMutation:
    """One state-changing contract call.

    ``run`` either returns the receipt, re-raises the transport error
    untouched, or raises ``OnChainFailureError``. There is no retry and no
    partial result.
    """

    def __init__(
        self,
        name: str,
        method: ContractMethod,
        sender_address: str,
        reporter: ErrorReporter,
        value_wei: int | None = None,
    ) -> None:
        self.name = name
        self._method = method
        self._sender_address = sender_address
        self._reporter = reporter
        self._value_wei = value_wei
        self.state = MutationState.IDLE
        self.receipt: TransactionReceipt | None = None
        self.error: Exception | None = None

    @property
    def is_done(self) -> bool:
        """False while idle or still waiting, including after the wait was cancelled."""
        return self.state in TERMINAL_STATES

    def _transition(self, state: MutationState) -> None:
        logger.debug("Mutation %s: %s -> %s", self.name, self.state.value, state.value)
        self.state = state

    async def run(self) -> TransactionReceipt:
        if self.state is not MutationState.IDLE:
            raise UnexpectedError(
                "mutationAlreadyStarted",
                f"Mutation {self.name} cannot run from state {self.state.value}",
            )

        self._transition(MutationState.SUBMITTING)
        logger.info("Submitting %s from %s", self.name, self._sender_address)

        try:
            receipt = await submit_transaction(
                self._method, self._sender_address, self._value_wei
            )
        except Exception as e:
            self.error = e
            self._transition(MutationState.FAILED_TRANSPORT)
            logger.error("%s was not submitted: %s", self.name, e)
            raise

        try:
            check_for_transaction_error(receipt, self._reporter)
        except OnChainFailureError as e:
            self.receipt = receipt
            self.error = e
            self._transition(MutationState.FAILED_ON_CHAIN)
            raise

        self.receipt = receipt
        self._transition(MutationState.SUCCEEDED)
        logger.info("%s succeeded in transaction %s", self.name, receipt.transaction_hash)
        return receipt


async def handle_transaction_mutation(
    name: str,
    method: ContractMethod,
    sender_address: str,
    reporter: ErrorReporter,
    value_wei: int | None = None,
) -> TransactionReceipt:
    return await TransactionMutation(
        name, method, sender_address, reporter, value_wei=value_wei
    ).run()
