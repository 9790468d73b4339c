"""Context fields and call tracing for log records."""

import functools
import logging
import threading
from typing import Any, Callable, Dict

_local = threading.local()


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields the current thread attaches to log records."""
    return dict(getattr(_local, "fields", {}))


class LogContext:
    """
    Attach fields to every record logged inside a ``with`` block.

    Blocks nest; leaving one restores the fields that were active before it.
    The CSV reader uses this to tag each record with the source being read.

    Example:
        with LogContext(source="march.csv"):
            logger.info("Parsed 12 time entries")  # record.source == "march.csv"
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._saved: Dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self._saved = get_log_context()
        _local.fields = {**self._saved, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _local.fields = self._saved


class _ContextFilter(logging.Filter):
    """Copies the active LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True


def log_function_call(func: Callable) -> Callable:
    """
    Log entry to and exit from ``func`` at DEBUG level.

    An exception is logged at ERROR with its traceback and re-raised
    unchanged.

    Example:
        @log_function_call
        def derive_invoice(self):
            ...
    """
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger.debug(f"Entering {func.__name__}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(
                f"Exception in {func.__name__}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise
        logger.debug(f"Exiting {func.__name__}")
        return result

    return wrapper
