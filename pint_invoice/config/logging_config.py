"""Logging setup for the invoice commands.

Every command logs to stderr through a single root handler, so stdout carries
nothing but the rendered invoice or report. Records pick up the fields of any
active ``LogContext`` (for example the CSV source being read).
"""

import json
import logging

from pint_invoice.utils.logging_utils import _ContextFilter

STANDARD_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes of a bare LogRecord; anything else came from extra= or LogContext
_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Formats each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_FIELDS and not key.startswith("_")
        )
        return json.dumps(entry, default=str)


class LoggingConfig:
    """
    Level and format of the stderr log.

    Attributes:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: 'standard' (human readable) or 'json'
    """

    VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    VALID_FORMATS = ("standard", "json")

    def __init__(self, log_level: str = "WARNING", log_format: str = "standard"):
        """
        Raises:
            ValueError: If the level or format is not recognised
        """
        log_level = log_level.upper()
        if log_level not in self.VALID_LEVELS:
            raise ValueError(
                f"Invalid log level: {log_level}. "
                f"Must be one of {', '.join(self.VALID_LEVELS)}"
            )
        if log_format not in self.VALID_FORMATS:
            raise ValueError(
                f"Invalid log format: {log_format}. "
                f"Must be one of {', '.join(self.VALID_FORMATS)}"
            )

        self.log_level = log_level
        self.log_format = log_format

    @classmethod
    def from_settings(cls, settings, debug: bool = False) -> "LoggingConfig":
        """
        Build the logging setup for a command run.

        Args:
            settings: InvoiceSettings supplying LOG_LEVEL and LOG_FORMAT
            debug: The command's --debug flag; forces DEBUG level

        Returns:
            LoggingConfig instance
        """
        return cls(
            log_level="DEBUG" if debug else settings.log_level,
            log_format=settings.log_format,
        )

    def build_formatter(self) -> logging.Formatter:
        if self.log_format == "json":
            return JSONFormatter()
        return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)


def configure_logging(config: LoggingConfig) -> None:
    """
    Route all logging to one stderr handler.

    Handlers from a previous call are replaced, so running several commands
    in one process does not duplicate output.

    Args:
        config: LoggingConfig instance
    """
    reset_logging()

    handler = logging.StreamHandler()
    handler.setFormatter(config.build_formatter())
    handler.addFilter(_ContextFilter())

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level)


def reset_logging() -> None:
    """Remove all root handlers and restore the default WARNING level."""
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(logging.WARNING)
