"""Billing calculator for invoice totals.

This module derives the invoice totals from the accumulated project hours:
- Total time (sum of project hours)
- Subtotal (total time × pay rate)
- Tax (subtotal × tax rate)
- Total (subtotal + tax)

Each step rounds to the hundredth except the total, which is the plain sum of
two already-rounded amounts.
"""

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Mapping

from pint_invoice.calculators.time_utils import round_to_hundredth


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def _multiply(a: Decimal, b: Decimal) -> Decimal:
    # An exact product has at most as many digits as both factors together
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits(a) + _digits(b))
        return a * b


def _add(a: Decimal, b: Decimal) -> Decimal:
    # Both operands are quantized to hundredths
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, max(a.adjusted(), b.adjusted()) + 4)
        return a + b


@dataclass(frozen=True)
class InvoiceTotals:
    """Totals derived from a set of project hours.

    Attributes:
        total_time: Sum of all project hours, rounded
        subtotal: total_time × pay_rate, rounded
        tax: subtotal × tax_rate, rounded
        total: subtotal + tax (not re-rounded)

    Example:
        >>> totals = calculate_invoice_totals(
        ...     {"P1": Decimal("13.00"), "P2": Decimal("6.00")},
        ...     pay_rate=Decimal("25"),
        ...     tax_rate=Decimal("0.08"),
        ... )
        >>> totals.total
        Decimal('513.00')
    """

    total_time: Decimal
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def calculate_invoice_totals(
    project_hours: Mapping[str, Decimal],
    pay_rate: Decimal,
    tax_rate: Decimal,
) -> InvoiceTotals:
    """Calculate invoice totals from hours per project.

    The project hours are expected to be rounded already; the error of
    summing rounded values is accepted rather than corrected.

    Args:
        project_hours: Mapping of project name to hours
        pay_rate: Currency per hour
        tax_rate: Tax as a fraction of the subtotal

    Returns:
        InvoiceTotals with all derived amounts
    """
    total_time = round_to_hundredth(sum(project_hours.values(), Decimal("0")))
    subtotal = round_to_hundredth(_multiply(total_time, pay_rate))
    tax = round_to_hundredth(_multiply(subtotal, tax_rate))

    return InvoiceTotals(
        total_time=total_time,
        subtotal=subtotal,
        tax=tax,
        total=_add(subtotal, tax),
    )
