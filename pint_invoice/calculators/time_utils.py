"""Rounding and time conversion utilities for the invoicing system.

This module provides the low-level helpers every invoice amount goes through:
- Rounding to the nearest hundredth (half away from zero)
- Converting a timedelta to decimal hours
- Adding a duration to a per-project hours tally
"""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Union

HUNDREDTH = Decimal("0.01")
SECONDS_PER_HOUR = Decimal("3600")

Number = Union[Decimal, int, float, str]


def round_to_hundredth(value: Number) -> Decimal:
    """Round a number to two decimal places, halves away from zero.

    Args:
        value: Number to round. Floats are converted through ``str()`` so
            that ``0.005`` is treated as the decimal 0.005.

    Returns:
        Decimal rounded to 2 decimal places

    Example:
        >>> round_to_hundredth(0.004)
        Decimal('0.00')
        >>> round_to_hundredth(0.005)
        Decimal('0.01')
        >>> round_to_hundredth(Decimal("-0.005"))
        Decimal('-0.01')

    Note:
        ``Decimal.quantize`` defaults to banker's rounding, so ROUND_HALF_UP
        is passed explicitly (it rounds halves away from zero).
        Precision is widened as needed, so large amounts are never
        truncated to the default 28 significant digits.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    with localcontext() as ctx:
        # Room for every digit down to the hundredths place, plus a rounding carry
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(HUNDREDTH, rounding=ROUND_HALF_UP)


def timedelta_to_decimal_hours(td: dt.timedelta) -> Decimal:
    """Convert a timedelta to decimal hours rounded to 2 decimal places.

    Args:
        td: Timedelta to convert

    Returns:
        Decimal hours (rounded half away from zero)

    Example:
        >>> timedelta_to_decimal_hours(dt.timedelta(hours=7, minutes=30))
        Decimal('7.50')
        >>> timedelta_to_decimal_hours(dt.timedelta(minutes=10))
        Decimal('0.17')
    """
    seconds = Decimal(td.days * 86400 + td.seconds) + Decimal(td.microseconds) / 1000000
    hours = seconds / SECONDS_PER_HOUR
    return round_to_hundredth(hours)


def add_project_hours(
    project_hours: Dict[str, Decimal], project: str, duration: dt.timedelta
) -> Decimal:
    """Add a duration to a project's entry in an hours tally.

    The duration is converted and rounded before it is added, so the tally
    holds the sum of rounded increments. The running total is never
    re-rounded.

    Args:
        project_hours: Tally of hours per project, updated in place
        project: Project name
        duration: Time logged against the project

    Returns:
        The rounded increment that was added
    """
    increment = timedelta_to_decimal_hours(duration)
    project_hours[project] = project_hours.get(project, Decimal("0.00")) + increment
    return increment
