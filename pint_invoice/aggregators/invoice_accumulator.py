"""Invoice accumulator for folding time entries into an invoice.

This module collects (project, duration) pairs into hours per project and
derives the final invoice from them. Hours are rounded to the hundredth on
every addition, so a project's total is the sum of rounded increments rather
than the rounded sum of raw durations.
"""

import datetime as dt
import logging
from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from pint_invoice.calculators.billing_calculator import calculate_invoice_totals
from pint_invoice.calculators.time_utils import add_project_hours
from pint_invoice.models.invoice import Invoice, InvoiceConfig
from pint_invoice.models.timesheet import TimeEntry
from pint_invoice.readers.csv_timesheet_reader import (
    CsvTimesheetReader,
    TimesheetReadResult,
)
from pint_invoice.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)

EntryLike = Union[TimeEntry, Tuple[str, dt.timedelta]]


class InvoiceAccumulator:
    """Accumulates logged time per project and derives invoices.

    The accumulator:
    1. Captures the pay rate and tax rate from an InvoiceConfig
    2. Adds durations per project, rounding each increment to 0.01 hours
    3. Imports whole CSV exports as a single all-or-nothing step
    4. Derives an immutable Invoice from the current state on demand

    Mutating methods return the accumulator so calls can be chained.

    Attributes:
        pay_rate: Pay rate captured at construction
        tax_rate: Tax rate captured at construction
        reader: Reader used by import_source and import_csv

    Example:
        >>> config = InvoiceConfig(pay_rate=Decimal("25"), tax_rate=Decimal("0.08"))
        >>> invoice = (
        ...     InvoiceAccumulator(config)
        ...     .add_duration("Website", dt.timedelta(hours=13))
        ...     .add_duration("Mobile", dt.timedelta(hours=6))
        ...     .derive_invoice()
        ... )
        >>> invoice.total
        Decimal('513.00')
    """

    def __init__(
        self,
        config: InvoiceConfig,
        reader: Optional[CsvTimesheetReader] = None,
    ):
        """Initialize an empty accumulator.

        Args:
            config: Pay rate and tax rate to price the hours with
            reader: CSV reader for imports (default: CsvTimesheetReader())
        """
        self.pay_rate = config.pay_rate
        self.tax_rate = config.tax_rate
        self.reader = reader or CsvTimesheetReader()
        self._project_hours: Dict[str, Decimal] = {}

    @property
    def project_hours(self) -> Dict[str, Decimal]:
        """Copy of the hours accumulated so far, keyed by project."""
        return dict(self._project_hours)

    def add_duration(self, project: str, duration: dt.timedelta) -> "InvoiceAccumulator":
        """Add a duration to a project's hours.

        The duration is converted to hours and rounded before it is added;
        the running total itself is never re-rounded.

        Args:
            project: Project name
            duration: Time logged against the project

        Returns:
            The accumulator, for chaining
        """
        increment = add_project_hours(self._project_hours, project, duration)
        logger.debug(f"Added {increment}h to project '{project}'")
        return self

    def collect_entries(self, entries: Iterable[EntryLike]) -> "InvoiceAccumulator":
        """Add a sequence of entries in order.

        Args:
            entries: TimeEntry objects or (project, duration) tuples

        Returns:
            The accumulator, for chaining
        """
        count = 0
        for entry in entries:
            project, duration = (
                entry.as_pair() if isinstance(entry, TimeEntry) else entry
            )
            self.add_duration(project, duration)
            count += 1

        logger.info(f"Collected {count} time entries")
        return self

    def import_source(
        self, source: Union[bytes, str], source_name: Optional[str] = None
    ) -> "InvoiceAccumulator":
        """Import a CSV export held in memory.

        Every row is parsed before any hours are added, so a failing row
        leaves the accumulator untouched. Rows whose field count disagrees
        with the header are skipped.

        Args:
            source: CSV content as bytes or text
            source_name: Identifier used in error messages

        Returns:
            The accumulator, for chaining

        Raises:
            SourceUnavailableError: If the content cannot be decoded
            MissingColumnError: If a row has no duration column
            DurationParseError: If a duration cannot be parsed
        """
        result = self.reader.read_source(source, source_name=source_name)
        return self._collect_result(result)

    def import_csv(self, path: Union[str, Path]) -> "InvoiceAccumulator":
        """Import a CSV export from a file.

        Args:
            path: Path to the CSV file

        Returns:
            The accumulator, for chaining

        Raises:
            SourceUnavailableError: If the file cannot be opened or read
            MissingColumnError: If a row has no duration column
            DurationParseError: If a duration cannot be parsed
        """
        logger.info(f"Importing time entries from {path}")
        result = self.reader.read_file(path)
        return self._collect_result(result)

    def _collect_result(self, result: TimesheetReadResult) -> "InvoiceAccumulator":
        if result.skipped_rows:
            logger.debug(
                f"{len(result.skipped_rows)} malformed row(s) skipped in "
                f"{result.source or 'source'}"
            )
        return self.collect_entries(result.entries)

    @log_function_call
    def derive_invoice(self) -> Invoice:
        """Derive an invoice from the current state.

        Does not modify the accumulator; calling it twice without adding
        entries in between returns equal invoices.

        Returns:
            Invoice with a snapshot of the project hours and derived totals
        """
        totals = calculate_invoice_totals(
            self._project_hours, self.pay_rate, self.tax_rate
        )

        return Invoice(
            project_hours=dict(self._project_hours),
            total_time=totals.total_time,
            subtotal=totals.subtotal,
            tax=totals.tax,
            total=totals.total,
            pay_rate=self.pay_rate,
            tax_rate=self.tax_rate,
        )
