"""
csv-normalize: normalize a fixed 8-column CSV stream.

Reads CSV text, reformats timestamps (US/Pacific -> US/Eastern ISO-8601),
zip codes (zero-padded to 5 digits), names (capitalized) and durations
(decimal seconds, with the total recomputed), and writes the result.
Rows that fail any step are dropped with a warning; the rest of the
stream carries on.

Public API surface:

- ``normalize_stream(source, sink, config=None)`` -- run the pipeline
  over two text streams. Returns a ``StreamResult``.
- ``normalize_text(text, config=None)`` -- convenience wrapper for
  in-memory strings. Returns the normalized CSV text.
- ``RowNormalizer`` -- per-row transform returning ``NormalizedRow`` /
  ``DroppedRow``.
- ``NormalizerConfig`` -- immutable run settings.

The command-line entry point lives in ``csv_normalize.cli``.
"""

from __future__ import annotations

import io
from typing import TextIO

from csv_normalize._pipeline import StreamResult, run_stream
from csv_normalize.config import DEFAULT_CONFIG, NormalizerConfig
from csv_normalize.exceptions import (
    ConfigValidationError,
    CsvNormalizeError,
    InvalidDataFormat,
)
from csv_normalize.transforms.pipeline import DroppedRow, NormalizedRow, RowNormalizer

__all__ = [
    "normalize_stream",
    "normalize_text",
    "RowNormalizer",
    "NormalizedRow",
    "DroppedRow",
    "StreamResult",
    "NormalizerConfig",
    "DEFAULT_CONFIG",
    "CsvNormalizeError",
    "InvalidDataFormat",
    "ConfigValidationError",
]


def normalize_stream(
    source: TextIO,
    sink: TextIO,
    config: NormalizerConfig | None = None,
) -> StreamResult:
    """Normalize CSV text from *source* into *sink*.

    The first record is copied through as the header. Every following
    record is normalized or dropped (with a ``WARNING`` log record).

    Args:
        source: Readable text stream.
        sink: Writable text stream.
        config: Run settings. Defaults to ``DEFAULT_CONFIG``.

    Returns:
        Row counts for the run.

    Raises:
        OSError / UnicodeDecodeError: Whatever the streams raise; I/O
            failures are not row-level errors and are not caught.
    """
    if config is None:
        config = DEFAULT_CONFIG
    return run_stream(source, sink, config)


def normalize_text(text: str, config: NormalizerConfig | None = None) -> str:
    """Normalize an in-memory CSV document and return the output text.

    Examples::

        >>> normalize_text(
        ...     "Timestamp,Address,ZIP,FullName,FooDuration,BarDuration,TotalDuration,Notes\\n"
        ...     "3/14/23 2:05:09 PM,1 Main St,123,jane doe,1:02:03.500,0:00:10.750,x,hi\\n"
        ... ).splitlines()[1]
        '2023-03-14T17:05:09-04:00,1 Main St,00123,Jane Doe,3723.5,10.75,3734.25,hi'
    """
    sink = io.StringIO(newline="")
    normalize_stream(io.StringIO(text, newline=""), sink, config)
    return sink.getvalue()
