from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .errors import ReadError

__all__ = ["ChildRecord", "ReadResult"]

T = TypeVar("T")


@dataclass(frozen=True)
class ChildRecord:
    """Child account registered under an owner.

    Attributes:
        account: Address of the child EOA
        role: Role label the owner assigned to it (e.g., "admin")
    """
    account: str
    role: str

    @classmethod
    def from_raw(cls, raw: Any) -> "ChildRecord":
        """Map a decoded `(childEOA, role)` struct to a ChildRecord.

        web3.py decodes tuple outputs either as plain tuples or as
        attribute/dict-like structs depending on its version and the ABI,
        so all three shapes are accepted.
        """
        if isinstance(raw, dict):
            account = raw.get("childEOA", raw.get("account"))
            return cls(account=account, role=raw["role"])
        if isinstance(raw, (tuple, list)):
            return cls(account=raw[0], role=raw[1])
        account = getattr(raw, "childEOA", None) or getattr(raw, "account")
        return cls(account=account, role=raw.role)


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """Outcome of a read-only query.

    Exactly one of ``value``/``error`` is meaningful: ``error`` is None on
    success. ``value`` may legitimately be falsy (empty list, 0, None).
    """
    value: Optional[T] = None
    error: Optional[ReadError] = None

    @classmethod
    def success(cls, value: T) -> "ReadResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ReadError) -> "ReadResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: T) -> T:
        """Return the value on success, otherwise ``default``."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]
