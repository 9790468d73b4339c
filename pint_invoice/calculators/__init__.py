"""Calculator modules for the invoicing system."""

from pint_invoice.calculators.billing_calculator import (
    InvoiceTotals,
    calculate_invoice_totals,
)
from pint_invoice.calculators.duration_parser import parse_duration_str
from pint_invoice.calculators.time_utils import (
    add_project_hours,
    round_to_hundredth,
    timedelta_to_decimal_hours,
)

__all__ = [
    # billing_calculator
    "InvoiceTotals",
    "calculate_invoice_totals",
    # duration_parser
    "parse_duration_str",
    # time_utils
    "add_project_hours",
    "round_to_hundredth",
    "timedelta_to_decimal_hours",
]
