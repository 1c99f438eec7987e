"""
Exception hierarchy for the Record Contract Platform controller.

Write-path errors (configuration, wallet, identity, validation, submission,
timeout) are raised to the caller. Read-path errors derive from ReadError
and are only ever surfaced inside a ReadResult; the reader never raises them.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "RecordPlatformError",
    "ConfigurationError",
    "WalletConnectionError",
    "IdentityError",
    "ValidationError",
    "SubmissionError",
    "OperationTimeoutError",
    "ReadError",
    "ContractNotConfiguredError",
    "MissingOwnerError",
    "ReadTimeoutError",
]


class RecordPlatformError(Exception):
    """
    Base class for controller errors.

    Every error carries a stable ``code`` (the class default unless one is
    passed), the ``tx_hash`` of the transaction it concerns when there is
    one, and a ``details`` dict of log-safe context.
    """

    default_code = "RECORD_PLATFORM_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        tx_hash: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.tx_hash = tx_hash
        self.details = dict(details or {})

    def _fields(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "tx_hash": self.tx_hash,
            "details": self.details,
        }

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if not self.tx_hash:
            return text
        return f"{text} (tx: {self.tx_hash[:10]}...)"

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={value!r}" for name, value in self._fields().items())
        return f"{type(self).__name__}({args})"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form, keyed by the error class name under ``error``."""
        return {"error": type(self).__name__, **self._fields()}


# ---------------------------------------------------------------------------
# Write path
# ---------------------------------------------------------------------------


class ConfigurationError(RecordPlatformError):
    """Raised when no contract is deployed/configured for the active network."""

    default_code = "CONTRACT_NOT_CONFIGURED"


class WalletConnectionError(RecordPlatformError, ConnectionError):
    """Raised when a write is attempted without an attached signing transport."""

    default_code = "WALLET_NOT_CONNECTED"


class IdentityError(RecordPlatformError):
    """Raised when no authenticated account is available for a write."""

    default_code = "ACCOUNT_NOT_SET"


class ValidationError(RecordPlatformError):
    """Raised when input validation fails."""

    default_code = "INVALID_INPUT"


class SubmissionError(RecordPlatformError):
    """Raised when the signing transport fails to submit a transaction."""

    default_code = "SUBMISSION_FAILED"


class OperationTimeoutError(RecordPlatformError, TimeoutError):
    """Raised when a write does not complete before its deadline."""

    default_code = "OPERATION_TIMEOUT"


# ---------------------------------------------------------------------------
# Read path
# ---------------------------------------------------------------------------


class ReadError(RecordPlatformError):
    """Failure of a read-only query (transport, revert or decode)."""

    default_code = "READ_FAILED"


class ContractNotConfiguredError(ReadError):
    """Read skipped because the active network has no contract address."""

    default_code = "CONTRACT_NOT_CONFIGURED"


class MissingOwnerError(ReadError):
    """Read skipped because neither an owner nor a session account was given."""

    default_code = "OWNER_NOT_SET"


class ReadTimeoutError(ReadError):
    """Read did not complete before its deadline."""

    default_code = "READ_TIMEOUT"
