"""
Deadline helpers for network-bound coroutines.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Optional, TypeVar, Union

__all__ = ["DEFAULT", "DeadlineExceeded", "Timeout", "pick_timeout", "with_deadline"]

T = TypeVar("T")


class _Default:
    """Marker for "use the configured timeout" (None means no deadline)."""

    def __repr__(self) -> str:
        return "DEFAULT"


DEFAULT = _Default()

Timeout = Union[float, None, _Default]


class DeadlineExceeded(asyncio.TimeoutError):
    """Raised by with_deadline when its own deadline passes.

    A TimeoutError raised by the awaited coroutine itself propagates
    unchanged, so callers can tell the two apart.
    """


def pick_timeout(timeout: Timeout, configured: Optional[float]) -> Optional[float]:
    if isinstance(timeout, _Default):
        return configured
    return timeout


async def with_deadline(awaitable: Awaitable[T], timeout: Optional[float]) -> T:
    """
    Await ``awaitable``, raising DeadlineExceeded after ``timeout`` seconds.

    The awaited task is cancelled when the deadline passes or when the
    caller is cancelled. With ``timeout=None`` this is a plain await.
    """
    if timeout is None:
        return await awaitable
    task = asyncio.ensure_future(awaitable)
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout)
    except asyncio.CancelledError:
        task.cancel()
        raise
    if not done:
        task.cancel()
        # let the task observe its cancellation before we report
        await asyncio.wait({task})
        raise DeadlineExceeded(f"deadline of {timeout}s exceeded")
    return task.result()
