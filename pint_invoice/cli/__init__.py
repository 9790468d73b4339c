"""Invoice CLI.

This module provides a command-line interface for generating invoices from
time-tracking CSV exports.
"""

import click

from pint_invoice import __version__
from pint_invoice.cli.commands.generate import generate_invoice
from pint_invoice.cli.commands.validate import validate_csv


@click.group(help="Invoice CLI - Turn time-tracking CSV exports into invoices")
@click.version_option(version=__version__)
def cli():
    """Invoice CLI main entry point."""
    pass


# Register commands
cli.add_command(generate_invoice)
cli.add_command(validate_csv)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
