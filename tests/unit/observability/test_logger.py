"""Tests for structured logging."""

import json
import logging

from seo_rewriter.observability.logger import (
    StructuredFormatter,
    StructuredLogger,
    clear_context,
    configure_logging,
    get_logger,
    set_context,
)


def _record(msg: str = "hello", **attrs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="seo_rewriter.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestStructuredLogger:
    """Tests for StructuredLogger."""

    def test_get_logger_caches(self) -> None:
        """Test that get_logger returns same instance."""
        logger1 = get_logger("test")
        logger2 = get_logger("test")
        assert logger1 is logger2

    def test_get_logger_different_names(self) -> None:
        """Test that different names get different loggers."""
        logger1 = get_logger("test1")
        logger2 = get_logger("test2")
        assert logger1 is not logger2

    def test_handler_attached_once(self) -> None:
        """Test that re-creating a logger does not duplicate handlers."""
        StructuredLogger("test.handlers")
        second = StructuredLogger("test.handlers")
        assert len(second._logger.handlers) == 1

    def test_configure_logging_sets_level(self) -> None:
        """Test configure_logging updates cached loggers."""
        structured = get_logger("test.level")
        configure_logging("WARNING")
        assert structured._logger.level == logging.WARNING
        configure_logging("INFO")

    def test_configure_logging_unknown_level(self) -> None:
        """Test an unknown level falls back to INFO."""
        structured = get_logger("test.unknown_level")
        configure_logging("LOUD")
        assert structured._logger.level == logging.INFO

    def test_configure_logging_applies_to_new_loggers(self) -> None:
        """Test loggers created after configuration use the configured level."""
        configure_logging("ERROR")
        try:
            structured = get_logger("test.created_after_configure")
            assert structured._logger.level == logging.ERROR
        finally:
            configure_logging("INFO")

    def test_normalizer_uses_structured_logger(self) -> None:
        """Test the normalizer logs through the JSON formatter."""
        from seo_rewriter.services import normalizer

        assert isinstance(normalizer.logger, StructuredLogger)
        handler = normalizer.logger._logger.handlers[0]
        assert isinstance(handler.formatter, StructuredFormatter)


class TestLoggingContext:
    """Tests for logging context management."""

    def test_set_and_clear_context(self) -> None:
        """Test setting and clearing context."""
        set_context(request_id="req-123", keyword="marketing digital")

        # Clear should reset all
        clear_context()

        from seo_rewriter.observability.logger import _keyword, _request_id

        assert _request_id.get() is None
        assert _keyword.get() is None

    def test_partial_context_update(self) -> None:
        """Test that partial updates preserve other values."""
        clear_context()
        set_context(request_id="req-123")

        from seo_rewriter.observability.logger import _keyword, _request_id

        assert _request_id.get() == "req-123"
        assert _keyword.get() is None

        set_context(keyword="seo")
        assert _request_id.get() == "req-123"
        assert _keyword.get() == "seo"
        clear_context()


class TestStructuredFormatter:
    """Tests for the JSON formatter."""

    def test_format_includes_context(self) -> None:
        """Test that context variables are added to the output."""
        set_context(request_id="req-1", keyword="café")
        try:
            output = json.loads(StructuredFormatter().format(_record()))
        finally:
            clear_context()

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["request_id"] == "req-1"
        assert output["keyword"] == "café"

    def test_format_without_context(self) -> None:
        """Test that absent context keys are omitted."""
        clear_context()
        output = json.loads(StructuredFormatter().format(_record()))
        assert "request_id" not in output
        assert "keyword" not in output

    def test_format_extra_data(self) -> None:
        """Test that extra_data is nested under data."""
        output = json.loads(StructuredFormatter().format(_record(extra_data={"seo_score": 42})))
        assert output["data"] == {"seo_score": 42}

    def test_non_ascii_preserved(self) -> None:
        """Test that Portuguese text is not escaped."""
        raw = StructuredFormatter().format(_record("Reescrita concluída"))
        assert "concluída" in raw
