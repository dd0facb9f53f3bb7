"""
Internal stream orchestration for csv-normalize.

Wires the stages together for one run:

  input stream -> read_chunks -> iter_records -> split_header
               -> RowNormalizer (per record) -> output stream

The header is written verbatim, then each record is normalized on its
own and either written or dropped with a warning. Nothing is buffered
beyond the record currently being processed.

This module is **not** part of the public API; use
``csv_normalize.normalize_stream()``.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import TextIO

from csv_normalize.config import DEFAULT_CONFIG, NormalizerConfig
from csv_normalize.reader import iter_records, read_chunks, split_header
from csv_normalize.transforms.pipeline import DroppedRow, RowNormalizer

logger = logging.getLogger(__name__)

DROP_WARNING = "Row dropped due to error - %s (line %d)"


@dataclass
class StreamResult:
    """Counts collected over one run.

    Attributes:
        header_written: ``False`` only when the input was empty.
        rows_read: Data records seen (header and blank lines excluded).
        rows_written: Records emitted to the output.
        rows_dropped: Records discarded because of ``InvalidDataFormat``.
    """

    header_written: bool = False
    rows_read: int = 0
    rows_written: int = 0
    rows_dropped: int = 0


def run_stream(
    source: TextIO,
    sink: TextIO,
    config: NormalizerConfig = DEFAULT_CONFIG,
) -> StreamResult:
    """Normalize every data row of *source* and write the result to *sink*.

    Steps:
      1. Split the input into quote-aware records.
      2. Write the header record unchanged.
      3. For each remaining record, write the normalized row or log a
         warning and drop it.

    Blank records are skipped without a warning.

    Args:
        source: Text stream to read (e.g. ``sys.stdin``).
        sink: Text stream to write (e.g. ``sys.stdout``).
        config: Run configuration.

    Returns:
        A ``StreamResult`` with row counts.
    """
    result = StreamResult()
    records = iter_records(read_chunks(source, config.chunk_size))
    header, rows = split_header(records)

    if header is None:
        logger.info("Empty input -- nothing to write")
        return result

    sink.write(header + "\n")
    result.header_written = True

    normalizer = RowNormalizer(config)
    writer = csv.writer(sink, lineterminator="\n")

    for line_number, line in enumerate(rows, start=2):
        if not line:
            logger.debug("Skipping blank line %d", line_number)
            continue

        result.rows_read += 1
        row = normalizer.normalize(line, line_number)

        if isinstance(row, DroppedRow):
            result.rows_dropped += 1
            logger.warning(DROP_WARNING, row.reason, row.line_number)
            continue

        writer.writerow(row.fields)
        result.rows_written += 1

    sink.flush()
    logger.info(
        "Done: %d rows read, %d written, %d dropped",
        result.rows_read,
        result.rows_written,
        result.rows_dropped,
    )
    return result
