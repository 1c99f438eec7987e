from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from .constants import ZERO_ADDRESS

__all__ = ["Session", "StaticSession", "resolve_owner"]


@runtime_checkable
class Session(Protocol):
    """Identity provider; ``account`` is None while nobody is signed in."""

    @property
    def account(self) -> Optional[str]: ...


@dataclass
class StaticSession:
    """Session whose account is set explicitly (scripts, tests)."""
    account: Optional[str] = None


def resolve_owner(explicit: Optional[str], session_account: Optional[str]) -> Optional[str]:
    """Pick the owner a query is scoped to.

    A non-empty explicit owner is used as given, the zero address included.
    Only a missing explicit owner (None or "") falls back to the session
    account, and a session holding the zero address counts as signed out.
    Returns None when no owner can be determined.
    """
    if explicit:
        return explicit
    if session_account and session_account.lower() != ZERO_ADDRESS:
        return session_account
    return None
