"""Data models for the invoicing system.

This package contains Pydantic models for:
- BaseDataModel: Base class with common configuration
- TimeEntry: A (project, duration) pair read from a timesheet
- InvoiceConfig: Pay rate and tax rate
- Invoice: The immutable invoice result
"""

from pint_invoice.models.base import BaseDataModel
from pint_invoice.models.invoice import Invoice, InvoiceConfig
from pint_invoice.models.timesheet import TimeEntry

__all__ = [
    "BaseDataModel",
    "Invoice",
    "InvoiceConfig",
    "TimeEntry",
]
