"""Aggregator modules for the invoicing system."""

from pint_invoice.aggregators.invoice_accumulator import InvoiceAccumulator

__all__ = ["InvoiceAccumulator"]
