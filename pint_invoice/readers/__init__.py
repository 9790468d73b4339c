"""Readers for time-tracking exports."""

from pint_invoice.readers.csv_timesheet_reader import (
    CsvTimesheetReader,
    TimesheetReadResult,
)

__all__ = ["CsvTimesheetReader", "TimesheetReadResult"]
