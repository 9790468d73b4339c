"""Invoice configuration and invoice result models.

``InvoiceConfig`` holds the rates an invoice is computed with and
``Invoice`` is the immutable result produced by
``InvoiceAccumulator.derive_invoice``.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Mapping

from pydantic import ConfigDict, Field, field_serializer, field_validator

from pint_invoice.models.base import BaseDataModel


def _to_decimal(value):
    # Floats go through str() so 0.08 becomes Decimal("0.08")
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class InvoiceConfig(BaseDataModel):
    """Rates used to price the logged hours.

    The pay rate must be finite. Zero and negative rates are accepted;
    rejecting them is left to the caller (the CLI does).

    Attributes:
        pay_rate: Currency per hour
        tax_rate: Tax (GST) as a fraction, e.g. 0.08 for 8%

    Example:
        >>> config = InvoiceConfig(pay_rate=25, tax_rate=0.08)
        >>> config.tax_rate
        Decimal('0.08')
    """

    model_config = ConfigDict(frozen=True)

    pay_rate: Decimal = Field(..., description="Pay rate per hour")
    tax_rate: Decimal = Field(Decimal("0"), description="Tax rate as a fraction")

    @field_validator("pay_rate", mode="before")
    @classmethod
    def coerce_pay_rate(cls, v):
        """Convert floats through their shortest string representation."""
        return _to_decimal(v)

    @field_validator("tax_rate", mode="before")
    @classmethod
    def coerce_tax_rate(cls, v):
        """Treat a missing tax rate as no tax."""
        if v is None:
            return Decimal("0")
        return _to_decimal(v)

    @field_validator("pay_rate", "tax_rate")
    @classmethod
    def validate_finite(cls, v: Decimal, info) -> Decimal:
        """Reject NaN and infinite rates.

        Raises:
            ValueError: If the value is not finite
        """
        if not v.is_finite():
            raise ValueError(f"{info.field_name} must be a finite number")
        return v


class Invoice(BaseDataModel):
    """Immutable invoice derived from accumulated project hours.

    Created once per derivation and never mutated afterwards.

    Invariants:
        - ``total == subtotal + tax`` (the sum is not re-rounded)
        - ``total_time == round_to_hundredth(sum(project_hours.values()))``

    Attributes:
        project_hours: Read-only snapshot of hours per project, each
            rounded to 0.01
        total_time: Sum of all project hours, rounded
        subtotal: total_time × pay_rate, rounded
        tax: subtotal × tax_rate, rounded
        total: subtotal + tax
        pay_rate: Pay rate the invoice was priced with
        tax_rate: Tax rate the invoice was priced with
    """

    model_config = ConfigDict(frozen=True)

    project_hours: Mapping[str, Decimal] = Field(
        default_factory=dict, validate_default=True
    )
    total_time: Decimal
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    pay_rate: Decimal
    tax_rate: Decimal

    @field_validator("project_hours")
    @classmethod
    def freeze_project_hours(cls, v: Mapping[str, Decimal]) -> Mapping[str, Decimal]:
        """Store a read-only copy so the hours cannot change after creation."""
        return MappingProxyType(dict(v))

    @field_serializer("project_hours")
    def serialize_project_hours(self, v: Mapping[str, Decimal]) -> Dict[str, Decimal]:
        return dict(v)
