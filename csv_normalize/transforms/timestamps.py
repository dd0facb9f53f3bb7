"""
Timestamp formatter for csv-normalize.

Input timestamps are US-style wall-clock times with a two-digit year and
a 12-hour clock, e.g. ``"3/14/23 2:05:09 PM"``. They are read in the
configured source zone (US/Pacific by default) and re-expressed in the
target zone (US/Eastern) as ISO-8601 with an explicit offset:

    "3/14/23 2:05:09 PM"  ->  "2023-03-14T17:05:09-04:00"

This is a real time zone conversion, not a relabel: the instant is
preserved, so the date can roll over and the offset difference follows
each zone's DST rules on that date.

Accepted shape (``M/d/yy h:mm:ss a``):
- month, day and hour: 1 or 2 digits;
- minutes, seconds and year: exactly 2 digits;
- meridiem: ``AM``/``PM`` in any case, separated by one space.

Two-digit years above the configured cutoff (60) land in the 1900s,
the rest in the 2000s.

Wall times that fall in a DST gap or fold are resolved with the
``fold=0`` rule of ``zoneinfo``.
"""

from __future__ import annotations

import re
from datetime import datetime
from zoneinfo import ZoneInfo

from csv_normalize.config import DEFAULT_CONFIG, NormalizerConfig
from csv_normalize.exceptions import InvalidDataFormat

_TIMESTAMP_PATTERN = re.compile(
    r"(?P<month>[0-9]{1,2})/(?P<day>[0-9]{1,2})/(?P<year>[0-9]{2}) "
    r"(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2}) "
    r"(?P<meridiem>[AaPp][Mm])"
)


def parse_timestamp(
    value: str,
    zone: ZoneInfo,
    two_digit_year_cutoff: int = 60,
) -> datetime:
    """Parse a ``M/d/yy h:mm:ss a`` string as an aware datetime in *zone*.

    Raises:
        InvalidDataFormat: If the string does not match the pattern or
            names an impossible date/time (``2/30/23``, hour 13, ...).
    """
    match = _TIMESTAMP_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidDataFormat(f"Invalid timestamp: {value!r}")

    parts = match.groupdict()
    hour12 = int(parts["hour"])
    if not 1 <= hour12 <= 12:
        raise InvalidDataFormat(f"Invalid timestamp: {value!r} (hour out of range)")
    hour = hour12 % 12
    if parts["meridiem"].upper() == "PM":
        hour += 12

    yy = int(parts["year"])
    year = 1900 + yy if yy > two_digit_year_cutoff else 2000 + yy

    try:
        return datetime(
            year,
            int(parts["month"]),
            int(parts["day"]),
            hour,
            int(parts["minute"]),
            int(parts["second"]),
            tzinfo=zone,
        )
    except ValueError as e:
        raise InvalidDataFormat(f"Invalid timestamp: {value!r} ({e})") from e


def format_timestamp(value: str, config: NormalizerConfig = DEFAULT_CONFIG) -> str:
    """Convert a source-zone timestamp string to target-zone ISO-8601.

    Args:
        value: Timestamp in ``M/d/yy h:mm:ss a`` form.
        config: Supplies the source/target zones and the year cutoff.

    Returns:
        ISO-8601 string with offset, e.g. ``"2023-03-14T17:05:09-04:00"``.

    Raises:
        InvalidDataFormat: See ``parse_timestamp()``.
    """
    local = parse_timestamp(value, config.source_tz, config.two_digit_year_cutoff)
    return local.astimezone(config.target_tz).isoformat()
