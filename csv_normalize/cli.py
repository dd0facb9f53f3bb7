"""
Command-line entry point for csv-normalize.

Usage:
    csv-normalize < input.csv > output.csv
    python -m csv_normalize < input.csv > output.csv

Reads UTF-8 CSV from stdin and writes the normalized CSV to stdout.
Dropped rows are reported as warnings on stderr. There are no options:
the time zones and formats are fixed (see ``csv_normalize.config``).
"""

from __future__ import annotations

import logging
import sys

from csv_normalize import normalize_stream
from csv_normalize.config import DEFAULT_CONFIG


def _configure_logging() -> None:
    """Send diagnostics to stderr, keeping stdout for data only."""
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
    )


def main() -> int:
    _configure_logging()

    # newline="" keeps "\r\n" and quoted embedded newlines intact for the
    # record reader, and stops stdout from translating "\n" on Windows.
    sys.stdin.reconfigure(encoding="utf-8", newline="")
    sys.stdout.reconfigure(encoding="utf-8", newline="")

    normalize_stream(sys.stdin, sys.stdout, DEFAULT_CONFIG)
    return 0


if __name__ == "__main__":
    sys.exit(main())
