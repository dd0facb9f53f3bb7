"""
CSV record tokenizer for csv-normalize.

Splits one logical CSV record into its fields, honoring RFC-4180 quoting:

- A field wrapped in double quotes may contain commas and newlines.
- Inside a quoted field, ``""`` stands for one literal ``"``.
- Enclosing quotes are stripped and ``""`` collapsed before returning.
- A trailing comma produces a trailing empty field.

The record is expected to come from ``reader.iter_records()``, which
only splits on newlines outside quoted fields, so a quoted field with an
embedded newline arrives here in one piece.
"""

from __future__ import annotations

import re

from csv_normalize.exceptions import InvalidDataFormat

# Either a quoted field (group 1, quotes excluded) or an unquoted run
# (group 2). The unquoted alternative can match the empty string, so a
# match at a valid field position never fails.
_FIELD_PATTERN = re.compile(r'"((?:[^"]|"")*)"|([^",\r\n]*)')


def parse_csv_line(line: str) -> list[str]:
    """Tokenize a single CSV record into unquoted field values.

    Args:
        line: One record without its line terminator.

    Returns:
        The field values, in order. An empty record yields ``[""]``.

    Raises:
        InvalidDataFormat: If the record is structurally broken, e.g. an
            unterminated quoted field, a quote in the middle of an
            unquoted field, or text following a closing quote.
    """
    fields: list[str] = []
    pos = 0
    end = len(line)

    while True:
        match = _FIELD_PATTERN.match(line, pos)
        quoted, bare = match.groups()
        fields.append(quoted.replace('""', '"') if quoted is not None else bare)
        pos = match.end()

        if pos == end:
            return fields
        if line[pos] != ",":
            raise InvalidDataFormat(
                f"Malformed CSV record: unexpected {line[pos]!r} at column {pos + 1}"
            )
        pos += 1
