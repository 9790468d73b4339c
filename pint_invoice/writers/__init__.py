"""Writers for rendering invoices."""

from pint_invoice.writers.invoice_renderer import format_rate, render_invoice

__all__ = ["format_rate", "render_invoice"]
