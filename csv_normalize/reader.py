"""
Input reading for csv-normalize.

Turns a text stream into logical CSV records and separates the header:

- ``read_chunks()`` reads the stream in fixed-size chunks until EOF.
- ``iter_records()`` reassembles records from chunks. It splits only on
  a newline that is *not* inside an open quoted field, so records that
  straddle a chunk boundary, or quoted fields with embedded newlines,
  come out whole.
- ``split_header()`` peels off the first record (the header).

A quoted field only opens on a ``"`` at the start of a field (start of
record, or right after a comma). Inside it, ``""`` is an escaped quote
and a lone ``"`` closes it. A ``"`` in the middle of an unquoted field
is an ordinary character here, so a stray quote only breaks its own
record (which the tokenizer then rejects).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from typing import TextIO

logger = logging.getLogger(__name__)

_BREAK_PATTERN = re.compile(r'[",\n]')
_FIELD_STARTS = (None, ",", "\n")


def read_chunks(stream: TextIO, chunk_size: int = 64 * 1024) -> Iterator[str]:
    """Yield successive chunks of *stream* until it is exhausted."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


def iter_records(chunks: Iterable[str]) -> Iterator[str]:
    """Yield logical CSV records from an iterable of text chunks.

    Line terminators (``\\n`` or ``\\r\\n``) are removed. A trailing
    newline at end of input does not produce an extra empty record. If
    the input ends inside an open quoted field, the pending text is still
    yielded so the tokenizer can reject it.
    """
    pending: list[str] = []
    in_quotes = False
    just_closed = False
    # Last character of the previous chunk; None before any input.
    last_char: str | None = None

    for chunk in chunks:
        start = 0
        for match in _BREAK_PATTERN.finditer(chunk):
            pos = match.start()
            char = match.group()
            prev = chunk[pos - 1] if pos else last_char

            if char == '"':
                if in_quotes:
                    in_quotes = False
                    just_closed = True
                    continue
                # Opening quote, or the second half of an escaped "".
                if prev in _FIELD_STARTS or (just_closed and prev == '"'):
                    in_quotes = True
                just_closed = False
                continue

            just_closed = False
            if in_quotes or char == ",":
                continue
            pending.append(chunk[start:pos])
            start = match.end()
            yield _strip_cr("".join(pending))
            pending.clear()
        pending.append(chunk[start:])
        if chunk:
            last_char = chunk[-1]

    tail = "".join(pending)
    if tail:
        if in_quotes:
            logger.debug("Input ended inside a quoted field")
        yield _strip_cr(tail)


def split_header(records: Iterable[str]) -> tuple[str | None, Iterator[str]]:
    """Separate the first record from the rest.

    Returns:
        ``(header, rest)`` where *header* is ``None`` for empty input and
        *rest* iterates over the remaining records.
    """
    it = iter(records)
    header = next(it, None)
    return header, it


def _strip_cr(record: str) -> str:
    return record[:-1] if record.endswith("\r") else record
