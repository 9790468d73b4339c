"""Parser for colon-delimited durations such as ``10:05:16``.

Time trackers export durations as ``H:M:S``; some append further
colon-delimited fields, which are ignored.
"""

import datetime as dt
import re

from pint_invoice.exceptions import DurationParseError

DURATION_SEPARATOR = ":"
COMPONENT_NAMES = ("hours", "minutes", "seconds")

# Optionally signed ASCII integer, nothing else (no spaces, no underscores)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_component(text: str, name: str, value: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        raise DurationParseError(
            f"Unable to parse {name} string '{text}' in duration '{value}'",
            value=value,
            component=name,
        )
    try:
        return int(text)
    except ValueError as e:
        # int() refuses strings longer than sys.get_int_max_str_digits()
        raise DurationParseError(
            f"The {name} field of the duration has too many digits",
            value=value,
            component=name,
        ) from e


def parse_duration_str(value: str) -> dt.timedelta:
    """Parse an ``H:M:S`` string into a timedelta.

    Each of the first three fields is an integer and may carry its own
    sign. Fields beyond the third are ignored and no range check is made,
    so ``"0:75:00"`` is 75 minutes.

    Args:
        value: Duration string

    Returns:
        Duration of ``hours*3600 + minutes*60 + seconds`` seconds

    Raises:
        DurationParseError: If fewer than three fields are present or one of
            the first three is not an integer
            or the total does not fit in a timedelta

    Example:
        >>> parse_duration_str("10:05:16")
        datetime.timedelta(seconds=36316)
        >>> parse_duration_str("10:05:16:18:342")
        datetime.timedelta(seconds=36316)
    """
    parts = value.split(DURATION_SEPARATOR)
    if len(parts) < len(COMPONENT_NAMES):
        raise DurationParseError(
            f"Duration '{value}' has {len(parts)} field(s), expected H:M:S",
            value=value,
        )

    hours, minutes, seconds = (
        _parse_component(text, name, value)
        for text, name in zip(parts, COMPONENT_NAMES)
    )
    try:
        return dt.timedelta(seconds=hours * 3600 + minutes * 60 + seconds)
    except OverflowError as e:
        raise DurationParseError(
            f"Duration '{value}' is outside the supported range",
            value=value,
        ) from e
