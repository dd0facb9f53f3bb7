"""
Zip code formatter for csv-normalize.

US zip codes sometimes lose their leading zeros on the way through
spreadsheets (``"02134"`` becomes ``"2134"``). This transform restores
them by left-padding with ``0`` and then requires exactly five ASCII
digits.
"""

from __future__ import annotations

import re

from csv_normalize.exceptions import InvalidDataFormat

_ZIP_PATTERN = re.compile(r"[0-9]+")


def format_zip(value: str, width: int = 5) -> str:
    """Left-pad *value* with zeros to *width* and validate it.

    An empty value pads to all zeros and is accepted.

    Raises:
        InvalidDataFormat: If the padded value is not exactly *width*
            ASCII digits (too long, or contains non-digits).
    """
    padded = value.rjust(width, "0")
    if len(padded) != width or not _ZIP_PATTERN.fullmatch(padded):
        raise InvalidDataFormat(f"Invalid zip code: {value!r}")
    return padded
