"""Plain-text invoice renderer.

Renders an Invoice as a fixed-width table: labels left-aligned in 30
characters, amounts right-aligned in 10 characters with two decimals.
"""

from decimal import Decimal
from typing import Iterable, List, Tuple

from pint_invoice.models.invoice import Invoice

LABEL_WIDTH = 30
VALUE_WIDTH = 10
RULE = "-" * (LABEL_WIDTH + 1 + VALUE_WIDTH)


def format_rate(value: Decimal) -> str:
    """Format a rate with the shortest plain decimal representation.

    Example:
        >>> format_rate(Decimal("25.00"))
        '25'
        >>> format_rate(Decimal("0.08") * 100)
        '8'
        >>> format_rate(Decimal("12.50"))
        '12.5'
    """
    text = format(value.normalize(), "f")
    return "0" if text == "-0" else text


def _line(label: str, value: Decimal) -> str:
    return f"{label:<{LABEL_WIDTH}} {value:>{VALUE_WIDTH}.2f}"


def _project_rows(invoice: Invoice, sort_projects: bool) -> Iterable[Tuple[str, Decimal]]:
    rows = invoice.project_hours.items()
    if sort_projects:
        return sorted(rows)
    return rows


def render_invoice(invoice: Invoice, sort_projects: bool = False) -> str:
    """Render an invoice as fixed-width text.

    Project rows follow the invoice's mapping order (the order projects
    were first logged) unless ``sort_projects`` is set, in which case they
    are sorted by project name.

    Args:
        invoice: Invoice to render
        sort_projects: Sort project rows by name

    Returns:
        The rendered invoice, ending with a newline

    Example:
        >>> print(render_invoice(invoice))
        Project                             Hours
        -----------------------------------------
        Website                             13.00
        ...
    """
    lines: List[str] = [
        f"{'Project':<{LABEL_WIDTH}} {'Hours':>{VALUE_WIDTH}}",
        RULE,
    ]
    lines.extend(_line(project, hours) for project, hours in _project_rows(invoice, sort_projects))

    lines.append("")
    lines.append(_line("Total Time (h)", invoice.total_time))
    lines.append("")
    lines.append(_line(f"Subtotal at ${format_rate(invoice.pay_rate)}/hr", invoice.subtotal))
    lines.append(_line(f"GST at {format_rate(invoice.tax_rate * 100)}%", invoice.tax))
    lines.append(_line("TOTAL", invoice.total))

    return "\n".join(lines) + "\n"
