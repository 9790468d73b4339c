"""CLI commands."""

from pint_invoice.cli.commands.generate import generate_invoice
from pint_invoice.cli.commands.validate import validate_csv

__all__ = ["generate_invoice", "validate_csv"]
