"""Structured logging for rewrite observability.

Provides context-aware logging with automatic request/keyword tagging.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime
from typing import Any

# Context variables for automatic tagging
_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_keyword: ContextVar[str | None] = ContextVar("keyword", default=None)


def set_context(
    request_id: str | None = None,
    keyword: str | None = None,
) -> None:
    """Set logging context variables."""
    if request_id is not None:
        _request_id.set(request_id)
    if keyword is not None:
        _keyword.set(keyword)


def clear_context() -> None:
    """Clear all logging context variables."""
    _request_id.set(None)
    _keyword.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if request_id := _request_id.get():
            log_data["request_id"] = request_id
        if keyword := _keyword.get():
            log_data["keyword"] = keyword

        if hasattr(record, "extra_data"):
            log_data["data"] = record.extra_data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class StructuredLogger:
    """Logger with structured output and context awareness."""

    def __init__(self, name: str, level: int = logging.INFO):
        """Initialize structured logger.

        Args:
            name: Logger name
            level: Logging level
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(StructuredFormatter())
            self._logger.addHandler(handler)

    def _log(
        self,
        level: int,
        msg: str,
        *args: Any,
        extra_data: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Log with optional extra data."""
        extra = kwargs.pop("extra", {})
        if extra_data:
            extra["extra_data"] = extra_data
        self._logger.log(level, msg, *args, extra=extra, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log exception with traceback."""
        self._log(logging.ERROR, msg, *args, exc_info=True, **kwargs)

    def rewrite_started(self, keyword: str, content_length: int, **extra: Any) -> None:
        """Log rewrite started event."""
        self.info(
            f"Rewrite started for '{keyword}'",
            extra_data={"keyword": keyword, "content_length": content_length, **extra},
        )

    def rewrite_completed(
        self,
        keyword: str,
        word_count: int,
        seo_score: int,
        parsed: bool,
        **extra: Any,
    ) -> None:
        """Log rewrite completed event."""
        self.info(
            f"Rewrite completed for '{keyword}'",
            extra_data={
                "keyword": keyword,
                "word_count": word_count,
                "seo_score": seo_score,
                "parsed": parsed,
                **extra,
            },
        )

    def rewrite_failed(self, keyword: str, error: str, kind: str, **extra: Any) -> None:
        """Log rewrite failed event."""
        self.error(
            f"Rewrite failed for '{keyword}': {error}",
            extra_data={"keyword": keyword, "error": error, "kind": kind, **extra},
        )


# Global logger cache
_loggers: dict[str, StructuredLogger] = {}

# Level applied to loggers created after configure_logging
_level: int = logging.INFO


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name

    Returns:
        StructuredLogger instance
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, level=_level)
    return _loggers[name]


def configure_logging(level: str = "INFO") -> None:
    """Apply a log level to every structured logger and the package root."""
    global _level
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    _level = numeric_level
    logging.getLogger("seo_rewriter").setLevel(numeric_level)
    for structured in _loggers.values():
        structured._logger.setLevel(numeric_level)
