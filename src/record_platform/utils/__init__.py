"""
Record Platform utilities.

This module provides utility functions shared across the package.
"""

from record_platform.utils.logging import (
    configure_logging,
    disable_logging,
    get_logger,
    set_level,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
]
