"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from pint_invoice.cli.utils.formatters import format_error, format_warning
from pint_invoice.exceptions import (
    DurationParseError,
    InvoiceError,
    MissingColumnError,
    SourceUnavailableError,
)

EXIT_CONFIGURATION = 1
EXIT_SOURCE_UNAVAILABLE = 2
EXIT_DATA = 3
EXIT_PROCESSING = 4
EXIT_ABORTED = 130  # Standard exit code for SIGINT
EXIT_UNEXPECTED = 255


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration or command-line options."""

    pass


def _echo_with_hint(message: str, hint: Optional[str]) -> None:
    click.echo(format_error(message), err=True)
    if hint:
        click.echo(format_warning(f"Hint: {hint}"), err=True)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Report an error to stderr and pick the exit code for it.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code (1-4 for known error types, 130 on abort, 255 otherwise)
    """
    if isinstance(error, ConfigurationError):
        _echo_with_hint(f"Configuration Error: {error.message}", error.recovery_hint)
        return EXIT_CONFIGURATION

    elif isinstance(error, ValidationError):
        _echo_with_hint(
            f"Configuration Error: {error.error_count()} invalid value(s)",
            "Check --pay-rate, --gst and the DEFAULT_GST_RATE setting",
        )
        click.echo(str(error), err=True)
        return EXIT_CONFIGURATION

    elif isinstance(error, SourceUnavailableError):
        _echo_with_hint(
            f"Source Unavailable: {error}",
            "Check that the file exists, is readable and is UTF-8 encoded",
        )
        return EXIT_SOURCE_UNAVAILABLE

    elif isinstance(error, DurationParseError):
        _echo_with_hint(
            f"Invalid Duration: {error}",
            "Durations must look like H:M:S, e.g. 1:30:00",
        )
        return EXIT_DATA

    elif isinstance(error, MissingColumnError):
        _echo_with_hint(
            f"Invalid Timesheet: {error}",
            "The export needs the project in column 1 and the duration in column 4",
        )
        return EXIT_DATA

    elif isinstance(error, InvoiceError):
        _echo_with_hint(f"Processing Error: {error}", None)
        return EXIT_PROCESSING

    elif isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return EXIT_ABORTED

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"), err=True)
        click.echo(str(error), err=True)

        if debug:
            click.echo("\nFull stack trace:", err=True)
            click.echo(
                "".join(
                    traceback.format_exception(type(error), error, error.__traceback__)
                ),
                err=True,
            )
        else:
            click.echo(format_warning("\nRun with --debug flag for full stack trace"), err=True)

        return EXIT_UNEXPECTED


def with_error_handling(debug: bool = False):
    """
    Context manager adding standardized error handling to CLI commands.

    Any exception raised in the block is reported through handle_cli_error()
    and the process exits with the matching code.

    Args:
        debug: Whether to show full stack traces

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                ...
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is not None and not isinstance(exc_val, SystemExit):
                exit_code = handle_cli_error(exc_val, self.show_debug)
                sys.exit(exit_code)
            return False

    return ErrorHandler(debug)
