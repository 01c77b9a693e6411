"""Core contract module for the SEO rewriter.

This module provides:
- Error classification: ErrorCategory and UpstreamErrorKind
- Errors surfaced by rewrites: ConfigurationError, UpstreamError
- CollaboratorError for locally recovered lookup failures
"""

from .errors import (
    CollaboratorError,
    ConfigurationError,
    ErrorCategory,
    RewriteError,
    UpstreamError,
    UpstreamErrorKind,
)

__all__ = [
    "ErrorCategory",
    "UpstreamErrorKind",
    "RewriteError",
    "ConfigurationError",
    "UpstreamError",
    "CollaboratorError",
]
