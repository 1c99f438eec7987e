"""
Observable controller state.

StateStore holds what a UI layer renders: whether a write is in flight and
the cached child list of the last queried owner. Only ContractWriter touches
the pending counter and only ContractReader replaces the children.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from .models import ChildRecord
from .utils.logging import get_logger

__all__ = ["StateStore", "Listener"]

_logger = get_logger(__name__)

Listener = Callable[["StateStore"], None]


class StateStore:
    """Pending flag plus single-slot children cache."""

    def __init__(self) -> None:
        self._in_flight = 0
        self._children: Tuple[ChildRecord, ...] = ()
        self._owner: Optional[str] = None
        self._listeners: List[Listener] = []

    @property
    def pending(self) -> bool:
        return self._in_flight > 0

    @property
    def children(self) -> Tuple[ChildRecord, ...]:
        return self._children

    @property
    def owner(self) -> Optional[str]:
        """Owner the cached children belong to (None before the first fetch)."""
        return self._owner

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Writer side
    def begin_operation(self) -> None:
        self._in_flight += 1
        self._notify()

    def end_operation(self) -> None:
        self._in_flight = max(self._in_flight - 1, 0)
        self._notify()

    # Reader side
    def replace_children(self, owner: str, records: Iterable[ChildRecord]) -> None:
        self._owner = owner
        self._children = tuple(records)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                _logger.error(
                    "State listener failed",
                    extra={"listener": repr(listener), "error": str(e)},
                )
