"""Tests for log context fields and call tracing."""

import json
import logging

import pytest

from pint_invoice.config.logging_config import LoggingConfig, configure_logging
from pint_invoice.utils.logging_utils import (
    LogContext,
    get_log_context,
    log_function_call,
)


def _json_entries(capsys):
    return [json.loads(line) for line in capsys.readouterr().err.splitlines()]


class TestLogContext:
    """Test LogContext context manager."""

    def test_context_adds_fields_to_logs(self, capsys):
        """Test context manager adds fields to log records."""
        configure_logging(LoggingConfig(log_level="INFO", log_format="json"))

        with LogContext(source="march.csv"):
            logging.getLogger("test_module").info("Test message")

        assert _json_entries(capsys)[0]["source"] == "march.csv"

    def test_fields_absent_outside_context(self, capsys):
        """Test that records logged after the block carry no context fields."""
        configure_logging(LoggingConfig(log_level="INFO", log_format="json"))

        with LogContext(source="march.csv"):
            pass
        logging.getLogger("test_module").info("After")

        assert "source" not in _json_entries(capsys)[0]

    def test_nested_contexts_restore_previous_fields(self):
        """Test that leaving an inner context restores the outer fields."""
        with LogContext(source="outer.csv"):
            with LogContext(source="inner.csv", line=3):
                assert get_log_context() == {"source": "inner.csv", "line": 3}
            assert get_log_context() == {"source": "outer.csv"}

        assert get_log_context() == {}

    def test_context_cleared_after_exception(self):
        """Test that fields are removed when the block raises."""
        with pytest.raises(ValueError):
            with LogContext(source="march.csv"):
                raise ValueError("boom")

        assert get_log_context() == {}


class TestLogFunctionCall:
    """Test the log_function_call decorator."""

    def test_logs_entry_and_exit(self, capsys):
        """Test that entering and leaving a function is logged at DEBUG."""
        configure_logging(LoggingConfig(log_level="DEBUG", log_format="json"))

        @log_function_call
        def add(a, b):
            return a + b

        assert add(1, 2) == 3

        entries = _json_entries(capsys)
        assert [e["message"] for e in entries] == ["Entering add", "Exiting add"]
        assert {e["level"] for e in entries} == {"DEBUG"}

    def test_silent_above_debug(self, capsys):
        """Test that tracing does not show at the default WARNING level."""
        configure_logging(LoggingConfig(log_format="json"))

        @log_function_call
        def noop():
            return None

        noop()

        assert capsys.readouterr().err == ""

    def test_exceptions_are_logged_and_reraised(self, capsys):
        """Test that exceptions propagate after being logged."""
        configure_logging(LoggingConfig(log_level="DEBUG", log_format="json"))

        @log_function_call
        def fail():
            raise RuntimeError("broken")

        with pytest.raises(RuntimeError, match="broken"):
            fail()

        errors = [e for e in _json_entries(capsys) if e["level"] == "ERROR"]
        assert errors[0]["message"] == "Exception in fail: RuntimeError: broken"
        assert "exception" in errors[0]

    def test_preserves_function_metadata(self):
        """Test that functools.wraps keeps the name and docstring."""

        @log_function_call
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
