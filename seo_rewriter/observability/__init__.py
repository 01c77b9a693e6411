"""Observability module for rewrite monitoring.

This module provides:
- Structured logging with request/keyword context
"""

from .logger import (
    StructuredFormatter,
    StructuredLogger,
    clear_context,
    configure_logging,
    get_logger,
    set_context,
)

__all__ = [
    "StructuredFormatter",
    "StructuredLogger",
    "get_logger",
    "set_context",
    "clear_context",
    "configure_logging",
]
