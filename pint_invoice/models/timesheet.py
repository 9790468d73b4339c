"""Time entry model.

A ``TimeEntry`` is one row of a time-tracking export reduced to the two
fields the invoice needs: the project name and the logged duration.
"""

import datetime as dt

from pydantic import Field

from pint_invoice.models.base import BaseDataModel


class TimeEntry(BaseDataModel):
    """A single (project, duration) pair read from a timesheet.

    The duration is not range-checked: a component carrying a ``-`` sign
    in the export yields a negative duration, which is accumulated as is.

    Example:
        >>> entry = TimeEntry(project="Website", duration=dt.timedelta(hours=2))
        >>> entry.duration.total_seconds()
        7200.0
    """

    project: str = Field(..., description="Project name (first CSV column)")
    duration: dt.timedelta = Field(..., description="Logged duration")

    def as_pair(self) -> tuple:
        """Return the entry as a ``(project, duration)`` tuple."""
        return (self.project, self.duration)
