"""
Duration parsing and formatting for csv-normalize.

Input durations look like ``H:MM:SS.mmm`` (e.g. ``"1:02:03.500"``):

- hours, minutes and seconds are unsigned integers of one or more ASCII
  digits; minutes and seconds are not range-checked, so ``"0:90:00.000"``
  is ninety minutes;
- the part after ``.`` is an integer count of milliseconds with 1-3
  digits (``".500"`` is half a second, ``".5"`` is five milliseconds);
- the milliseconds part is required: ``"1:02:03"`` is rejected.

Durations are held as ``datetime.timedelta`` so two of them add up with
plain ``+``. For output they are rendered as a decimal count of seconds
with no trailing zeros (``3723.5``, ``10.75``, ``60``).
"""

from __future__ import annotations

import re
from datetime import timedelta

from csv_normalize.exceptions import InvalidDataFormat

_DURATION_PATTERN = re.compile(r"([0-9]+):([0-9]+):([0-9]+)\.([0-9]{1,3})")

_ONE_MILLISECOND = timedelta(milliseconds=1)


def parse_duration(value: str) -> timedelta:
    """Parse an ``H:MM:SS.mmm`` duration.

    Raises:
        InvalidDataFormat: If any component is missing or non-numeric,
            or the duration is too large to represent.
    """
    match = _DURATION_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidDataFormat(f"Invalid duration: {value!r}")

    hours, minutes, seconds, millis = match.groups()
    try:
        return timedelta(
            hours=int(hours),
            minutes=int(minutes),
            seconds=int(seconds),
            milliseconds=int(millis),
        )
    except (OverflowError, ValueError) as e:
        raise InvalidDataFormat(f"Duration out of range: {value!r}") from e


def sum_durations(first: timedelta, second: timedelta) -> timedelta:
    """Total elapsed time of two durations."""
    try:
        return first + second
    except OverflowError as e:
        raise InvalidDataFormat("Total duration out of range") from e


def duration_as_seconds(duration: timedelta) -> str:
    """Render *duration* as decimal seconds, e.g. ``"3723.5"``.

    Millisecond precision is exact (no float rounding); integral values
    have no fractional part.
    """
    millis = duration // _ONE_MILLISECOND
    seconds, ms = divmod(millis, 1000)
    if not ms:
        return str(seconds)
    return f"{seconds}.{ms:03d}".rstrip("0")
