"""Error taxonomy — callers match on ``kind`` instead of probing shapes.

Transport failures are not represented here: whatever the transport raises
reaches the caller unmodified.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    TRANSACTION = "transaction"
    UNEXPECTED = "unexpected"


class StructuredError(Exception):
    """Error carrying machine-readable codes next to its message."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(
        self,
        message: str,
        code: str | None = None,
        info: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.info = info

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, code={self.code!r}, "
            f"info={self.info!r}, message={self.message!r})"
        )


class OnChainFailureError(StructuredError):
    """A contract call was mined but emitted a ``Failure`` event."""

    kind = ErrorKind.TRANSACTION

    def __init__(self, code: str, info: str) -> None:
        super().__init__(code, code=code, info=info)


class UnexpectedError(StructuredError):
    """A precondition failed before anything was sent to the network."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, code: str, message: str | None = None) -> None:
        super().__init__(message or code, code=code)


class PrecisionError(ValueError):
    """Token metadata cannot be used to scale amounts."""
