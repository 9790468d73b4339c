"""Generate invoice command."""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Optional

import click

from pint_invoice.aggregators.invoice_accumulator import InvoiceAccumulator
from pint_invoice.cli.error_handlers import ConfigurationError, with_error_handling
from pint_invoice.config.logging_config import LoggingConfig, configure_logging
from pint_invoice.config.settings import get_config
from pint_invoice.models.invoice import InvoiceConfig
from pint_invoice.readers.csv_timesheet_reader import CsvTimesheetReader
from pint_invoice.writers.invoice_renderer import render_invoice

logger = logging.getLogger(__name__)


def build_invoice_config(
    pay_rate: float, gst: Optional[float], default_gst_rate: Decimal
) -> InvoiceConfig:
    """Validate command-line rates and build an InvoiceConfig.

    Args:
        pay_rate: Pay rate from --pay-rate
        gst: GST rate from --gst, or None when omitted
        default_gst_rate: Rate used when --gst is omitted

    Returns:
        InvoiceConfig for the accumulator

    Raises:
        ConfigurationError: If the pay rate is not positive or the GST rate
            is negative
    """
    if pay_rate <= 0:
        raise ConfigurationError(
            f"Pay rate must be positive, got {pay_rate}",
            recovery_hint="Pass the hourly rate, e.g. --pay-rate 25",
        )
    if gst is not None and gst < 0:
        raise ConfigurationError(
            f"GST rate must not be negative, got {gst}",
            recovery_hint="Pass GST as a fraction, e.g. --gst 0.08",
        )

    return InvoiceConfig(
        pay_rate=pay_rate,
        tax_rate=gst if gst is not None else default_gst_rate,
    )


@click.command(name="generate-invoice")
@click.option(
    "-p",
    "--pay-rate",
    required=True,
    type=float,
    help="The pay rate for the invoice (currency per hour)",
)
@click.option(
    "-g",
    "--gst",
    type=float,
    default=None,
    help=(
        "The GST rate as a fraction, e.g. 0.08 for 8 percent "
        "(default: DEFAULT_GST_RATE setting, else 0)"
    ),
)
@click.option(
    "-f",
    "--file",
    "file_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="The CSV file to read from",
)
@click.option(
    "--sort-projects",
    is_flag=True,
    help="Sort project rows by name (also enabled by the SORT_PROJECTS setting)",
)
@click.option("--debug", is_flag=True, help="Show debug logging and stack traces")
def generate_invoice(
    pay_rate: float,
    gst: Optional[float],
    file_path: Path,
    sort_projects: bool,
    debug: bool,
):
    """Generate an invoice from a time-tracking CSV export.

    The project is read from the first column and the H:M:S duration from
    the fourth. Rows whose column count differs from the header are skipped;
    a malformed duration aborts the run.

    Example:
        pint-invoice generate-invoice --pay-rate 25 --gst 0.08 --file march.csv
    """
    with with_error_handling(debug):
        settings = get_config()
        configure_logging(LoggingConfig.from_settings(settings, debug=debug))

        config = build_invoice_config(pay_rate, gst, settings.default_gst_rate)
        sort_projects = sort_projects or settings.sort_projects

        accumulator = InvoiceAccumulator(
            config, reader=CsvTimesheetReader(encoding=settings.csv_encoding)
        )
        invoice = accumulator.import_csv(file_path).derive_invoice()
        logger.info(
            f"Invoice for {len(invoice.project_hours)} project(s), "
            f"total {invoice.total}"
        )

        click.echo(render_invoice(invoice, sort_projects=sort_projects))
