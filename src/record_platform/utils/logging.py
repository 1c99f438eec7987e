"""
Structured logging helpers for the Record Platform package.

Module loggers live under the ``record_platform`` namespace and carry
context through ``extra={...}``. The package installs a NullHandler so
that nothing is emitted until the host application configures logging.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

ROOT_LOGGER_NAME = "record_platform"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())


class _ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as key=value pairs."""

    _reserved = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value for key, value in vars(record).items() if key not in self._reserved
        }
        if not extras:
            return base
        rendered = " ".join(f"{key}={value}" for key, value in sorted(extras.items()))
        return f"{base} [{rendered}]"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A standard library logger.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[TextIO] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Attach a stream handler to the package root logger.

    Calling this more than once replaces the previously configured handler.

    Args:
        level: Log level (name or number).
        stream: Output stream (default: stderr).
        fmt: Log record format string.

    Returns:
        The package root logger.
    """
    for handler in list(_root.handlers):
        if getattr(handler, "_record_platform", False):
            _root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_ExtraFormatter(fmt))
    handler._record_platform = True  # type: ignore[attr-defined]
    _root.addHandler(handler)
    _root.setLevel(level)
    return _root


def set_level(level: Union[int, str]) -> None:
    """Set the package root log level."""
    _root.setLevel(level)


def disable_logging() -> None:
    """Silence all package logging."""
    _root.setLevel(logging.CRITICAL + 1)
