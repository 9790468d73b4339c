"""Base model for all data models in the invoicing system.

This module provides a base Pydantic model with common configuration
shared by time entries, invoice configuration and invoices.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries
    - Arbitrary types support for timedeltas and decimals

    Subclasses that represent finished values (for example ``Invoice``)
    override ``frozen`` to become immutable.

    Example:
        >>> class Rate(BaseDataModel):
        ...     name: str
        ...     amount: Decimal
        >>> rate = Rate(name="standard", amount=Decimal("25"))
        >>> rate.model_dump()
        {'name': 'standard', 'amount': Decimal('25')}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Decimal and timedelta
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # Unknown fields are rejected
        extra="forbid",
        frozen=False,
    )
