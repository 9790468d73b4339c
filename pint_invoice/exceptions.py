"""
Exceptions raised while turning a timesheet export into an invoice.

Only ``RowStructureError`` is recovered locally (the row is skipped);
every other error aborts the import and reaches the caller.
"""

from typing import Any, Dict, Optional


class InvoiceError(Exception):
    """Base exception for all invoicing errors."""

    def __init__(self, message: str, source: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.source = source
        self.details = details or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.source:
            base_msg = f"{base_msg} (source: {self.source})"
        return base_msg


class SourceUnavailableError(InvoiceError):
    """Raised when the timesheet source cannot be opened, read or decoded."""

    def __init__(self, message: str, source: Optional[str] = None,
                 original_error: Optional[Exception] = None):
        super().__init__(message, source)
        self.original_error = original_error
        if original_error:
            self.details['original_error'] = str(original_error)
            self.details['error_type'] = type(original_error).__name__


class RowStructureError(InvoiceError):
    """Raised when a row's field count disagrees with the header row."""

    def __init__(self, message: str, source: Optional[str] = None,
                 line_number: Optional[int] = None,
                 expected_fields: Optional[int] = None,
                 found_fields: Optional[int] = None):
        super().__init__(message, source)
        self.line_number = line_number
        self.expected_fields = expected_fields
        self.found_fields = found_fields
        self.details.update({
            'line_number': line_number,
            'expected_fields': expected_fields,
            'found_fields': found_fields,
        })


class MissingColumnError(InvoiceError):
    """Raised when a row is too short to hold the project and duration columns."""

    def __init__(self, message: str, source: Optional[str] = None,
                 line_number: Optional[int] = None,
                 column_index: Optional[int] = None):
        super().__init__(message, source)
        self.line_number = line_number
        self.column_index = column_index
        self.details.update({
            'line_number': line_number,
            'column_index': column_index,
        })


class DurationParseError(InvoiceError):
    """Raised when a duration string is not of the form ``H:M:S``."""

    def __init__(self, message: str, value: Optional[str] = None,
                 component: Optional[str] = None,
                 source: Optional[str] = None,
                 line_number: Optional[int] = None):
        super().__init__(message, source)
        self.value = value
        self.component = component
        self.line_number = line_number
        self.details.update({
            'value': value,
            'component': component,
            'line_number': line_number,
        })

    def with_location(self, source: Optional[str],
                      line_number: Optional[int]) -> "DurationParseError":
        """Return a copy of this error annotated with where the value came from."""
        message = self.args[0] if self.args else "Unable to parse duration"
        if line_number is not None:
            message = f"{message} on line {line_number}"
        return DurationParseError(
            message,
            value=self.value,
            component=self.component,
            source=source,
            line_number=line_number,
        )
