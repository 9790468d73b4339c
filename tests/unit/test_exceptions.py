"""Unit tests for invoicing exceptions."""

from pint_invoice.exceptions import (
    DurationParseError,
    InvoiceError,
    MissingColumnError,
    RowStructureError,
    SourceUnavailableError,
)


class TestInvoiceError:
    """Test the base exception."""

    def test_message_without_source(self):
        """Test that the message is unchanged when no source is known."""
        assert str(InvoiceError("Something failed")) == "Something failed"

    def test_message_with_source(self):
        """Test that the source is appended to the message."""
        error = InvoiceError("Something failed", source="march.csv")

        assert str(error) == "Something failed (source: march.csv)"

    def test_subclasses(self):
        """Test that every error derives from InvoiceError."""
        for cls in (
            SourceUnavailableError,
            RowStructureError,
            MissingColumnError,
            DurationParseError,
        ):
            assert issubclass(cls, InvoiceError)


class TestSourceUnavailableError:
    """Test SourceUnavailableError details."""

    def test_original_error_details(self):
        """Test that the underlying error is recorded."""
        cause = FileNotFoundError("no such file")
        error = SourceUnavailableError("Unable to read", "a.csv", original_error=cause)

        assert error.original_error is cause
        assert error.details["error_type"] == "FileNotFoundError"
        assert error.details["original_error"] == "no such file"


class TestDurationParseError:
    """Test DurationParseError context."""

    def test_with_location(self):
        """Test annotating an error with its source and line."""
        error = DurationParseError(
            "Unable to parse minutes string ''", value="10::16", component="minutes"
        )

        located = error.with_location("march.csv", 7)

        assert located.value == "10::16"
        assert located.component == "minutes"
        assert located.line_number == 7
        assert located.details["line_number"] == 7
        assert str(located) == (
            "Unable to parse minutes string '' on line 7 (source: march.csv)"
        )

    def test_with_location_without_line(self):
        """Test that the message is unchanged when the line is unknown."""
        error = DurationParseError("Bad duration", value="x")

        assert str(error.with_location(None, None)) == "Bad duration"
