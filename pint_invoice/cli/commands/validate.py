"""Validate CSV command."""

from decimal import Decimal
from pathlib import Path
from typing import Dict

import click

from pint_invoice.calculators.time_utils import add_project_hours
from pint_invoice.cli.error_handlers import with_error_handling
from pint_invoice.cli.utils.formatters import (
    format_info,
    format_success,
    format_table,
    format_warning,
)
from pint_invoice.config.logging_config import LoggingConfig, configure_logging
from pint_invoice.config.settings import get_config
from pint_invoice.readers.csv_timesheet_reader import CsvTimesheetReader


@click.command(name="validate-csv")
@click.option(
    "-f",
    "--file",
    "file_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="The CSV file to check",
)
@click.option("--debug", is_flag=True, help="Show debug logging and stack traces")
def validate_csv(file_path: Path, debug: bool):
    """Check that a time-tracking CSV export can be invoiced.

    Reads the file without pricing it and reports how many entries were
    read, which rows would be skipped and the hours logged per project.

    Example:
        pint-invoice validate-csv --file march.csv
    """
    with with_error_handling(debug):
        settings = get_config()
        configure_logging(LoggingConfig.from_settings(settings, debug=debug))

        reader = CsvTimesheetReader(encoding=settings.csv_encoding)
        result = reader.read_file(file_path)

        project_hours: Dict[str, Decimal] = {}
        for entry in result.entries:
            add_project_hours(project_hours, entry.project, entry.duration)

        click.echo(format_info(f"Entries read: {len(result.entries)}"))
        for skipped in result.skipped_rows:
            click.echo(
                format_warning(
                    f"Line {skipped.line_number} skipped: {skipped.found_fields} "
                    f"field(s), header has {skipped.expected_fields}"
                )
            )

        rows = [
            [project, f"{hours:.2f}"]
            for project, hours in sorted(project_hours.items())
        ]
        if rows:
            click.echo(format_table(["Project", "Hours"], rows))

        click.echo(format_success(f"{file_path} can be invoiced"))
