"""CSV timesheet reader.

This module reads time-tracking exports in CSV format and turns each data row
into a validated TimeEntry. The project name is taken from the first column
and the duration from the fourth.

Row handling is deliberately asymmetric:
- A row whose field count differs from the header is skipped.
- A row with a malformed duration aborts the whole read.
"""

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from pint_invoice.calculators.duration_parser import parse_duration_str
from pint_invoice.exceptions import (
    DurationParseError,
    MissingColumnError,
    RowStructureError,
    SourceUnavailableError,
)
from pint_invoice.models.timesheet import TimeEntry
from pint_invoice.utils.logging_utils import LogContext

logger = logging.getLogger(__name__)

PROJECT_COLUMN = 0
DURATION_COLUMN = 3


@dataclass
class TimesheetReadResult:
    """Outcome of reading one timesheet source.

    Attributes:
        entries: Parsed time entries in file order
        skipped_rows: Rows dropped because their field count disagreed
            with the header
        source: Name of the source that was read, if known
    """

    entries: List[TimeEntry] = field(default_factory=list)
    skipped_rows: List[RowStructureError] = field(default_factory=list)
    source: Optional[str] = None


class CsvTimesheetReader:
    """Reader for time-tracking CSV exports.

    The expected format:
    - Row 1: Headers (discarded)
    - Row 2+: Data rows with at least four fields

    Columns used:
    - Column 1: Project name
    - Column 4: Duration as ``H:M:S`` (extra ``:`` fields ignored)

    Attributes:
        encoding: Text encoding used to decode byte sources

    Example:
        >>> reader = CsvTimesheetReader()
        >>> result = reader.read_source("Project,Client,Task,Duration\\nWeb,,,1:30:00\\n")
        >>> result.entries[0].duration
        datetime.timedelta(seconds=5400)
    """

    def __init__(self, encoding: str = "utf-8-sig"):
        """Initialize the reader.

        Args:
            encoding: Encoding for byte sources (default strips a UTF-8 BOM)
        """
        self.encoding = encoding

    def read_file(self, path: Union[str, Path]) -> TimesheetReadResult:
        """Read and parse a timesheet CSV file.

        The file handle is closed before parsing starts, so it is released
        whether or not parsing succeeds.

        Args:
            path: Path to the CSV file

        Returns:
            TimesheetReadResult with the parsed entries

        Raises:
            SourceUnavailableError: If the file cannot be opened or read
            MissingColumnError: If a row is too short for the duration column
            DurationParseError: If a duration cannot be parsed
        """
        source_name = str(path)
        try:
            with open(path, "rb") as handle:
                content = handle.read()
        except OSError as e:
            logger.error(f"Unable to read from file {source_name}: {e}")
            raise SourceUnavailableError(
                f"Unable to read from given file '{source_name}'",
                source=source_name,
                original_error=e,
            ) from e

        return self.read_source(content, source_name=source_name)

    def read_source(
        self, source: Union[bytes, str], source_name: Optional[str] = None
    ) -> TimesheetReadResult:
        """Parse CSV content into time entries.

        Args:
            source: Raw bytes or decoded text of the CSV export
            source_name: Identifier used in log lines and error messages

        Returns:
            TimesheetReadResult with the parsed entries and skipped rows

        Raises:
            SourceUnavailableError: If bytes cannot be decoded or the content
                is not readable as CSV
            MissingColumnError: If a row is too short for the duration column
            DurationParseError: If a duration cannot be parsed
        """
        text = self._decode(source, source_name)
        result = TimesheetReadResult(source=source_name)

        with LogContext(source=source_name or "<memory>"):
            reader = csv.reader(io.StringIO(text, newline=""))
            header: Optional[List[str]] = None

            try:
                for row in reader:
                    if not row:
                        continue
                    if header is None:
                        header = row
                        continue

                    line_number = reader.line_num
                    if len(row) != len(header):
                        skipped = RowStructureError(
                            f"Row has {len(row)} field(s), header has {len(header)}",
                            source=source_name,
                            line_number=line_number,
                            expected_fields=len(header),
                            found_fields=len(row),
                        )
                        logger.debug(f"Skipping line {line_number}: {skipped}")
                        result.skipped_rows.append(skipped)
                        continue

                    result.entries.append(
                        self._parse_row(row, line_number, source_name)
                    )
            except csv.Error as e:
                raise SourceUnavailableError(
                    f"Unable to read CSV content: {e}",
                    source=source_name,
                    original_error=e,
                ) from e

            logger.info(
                f"Parsed {len(result.entries)} time entries "
                f"({len(result.skipped_rows)} row(s) skipped)"
            )

        return result

    def _decode(self, source: Union[bytes, str], source_name: Optional[str]) -> str:
        if isinstance(source, str):
            return source.lstrip("\ufeff")
        try:
            return source.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise SourceUnavailableError(
                f"Unable to decode source as {self.encoding}",
                source=source_name,
                original_error=e,
            ) from e

    def _parse_row(
        self, row: List[str], line_number: int, source_name: Optional[str]
    ) -> TimeEntry:
        """Convert one data row into a TimeEntry.

        Args:
            row: CSV fields of the row
            line_number: Line the row ended on
            source_name: Source identifier for error context

        Returns:
            TimeEntry for the row

        Raises:
            MissingColumnError: If the row has no duration column
            DurationParseError: If the duration field is malformed
        """
        if len(row) <= DURATION_COLUMN:
            raise MissingColumnError(
                f"Line {line_number} has {len(row)} field(s); the duration "
                f"is expected in column {DURATION_COLUMN + 1}",
                source=source_name,
                line_number=line_number,
                column_index=DURATION_COLUMN,
            )

        raw_duration = row[DURATION_COLUMN]
        try:
            duration = parse_duration_str(raw_duration)
        except DurationParseError as e:
            logger.error(f"Unable to parse duration '{raw_duration}' on line {line_number}")
            raise e.with_location(source_name, line_number) from e

        return TimeEntry(project=row[PROJECT_COLUMN], duration=duration)
