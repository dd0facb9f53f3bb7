"""
Row normalizer for csv-normalize.

Runs the per-row sequence of transforms on one CSV record:

1. **Tokenize** the record into fields (``tokenizer.parse_csv_line``).
2. **Check width**: exactly ``FIELD_COUNT`` (8) fields.
3. **Timestamp**: Pacific wall clock -> Eastern ISO-8601.
4. **Zip**: zero-pad to 5 digits.
5. **Name**: capitalize each word.
6. **Durations**: parse foo and bar, sum them into the total.
7. **Render**: foo, bar and total as decimal seconds.

Column layout (positional, input and output):

    timestamp, address, zip, full name, foo, bar, total, notes

Address and notes pass through untouched; the input total is ignored
and recomputed from foo + bar.

Instead of letting exceptions escape, ``RowNormalizer.normalize()``
returns a ``RowResult``: either a ``NormalizedRow`` or a ``DroppedRow``
carrying the failure message. Callers dispatch on the type; no partial
row is ever produced.
"""

from __future__ import annotations

from dataclasses import dataclass

from csv_normalize.config import DEFAULT_CONFIG, NormalizerConfig
from csv_normalize.exceptions import InvalidDataFormat
from csv_normalize.tokenizer import parse_csv_line
from csv_normalize.transforms.durations import (
    duration_as_seconds,
    parse_duration,
    sum_durations,
)
from csv_normalize.transforms.names import capitalize_name
from csv_normalize.transforms.timestamps import format_timestamp
from csv_normalize.transforms.zipcodes import format_zip

FIELD_COUNT = 8


@dataclass(frozen=True)
class NormalizedRow:
    """A row that passed every step.

    Attributes:
        line_number: 1-based position of the record in the input
            (the header is line 1).
        fields: The output fields, in column order.
    """

    line_number: int
    fields: tuple[str, ...]


@dataclass(frozen=True)
class DroppedRow:
    """A row that failed a step and must not be emitted.

    Attributes:
        line_number: 1-based position of the record in the input.
        reason: The ``InvalidDataFormat`` message.
    """

    line_number: int
    reason: str


RowResult = NormalizedRow | DroppedRow


class RowNormalizer:
    """Normalizes one CSV record at a time.

    The normalizer is **stateless** -- each call processes its record
    independently, reading only the immutable ``NormalizerConfig``.
    """

    def __init__(self, config: NormalizerConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def normalize(self, line: str, line_number: int = 0) -> RowResult:
        """Tokenize and normalize one record.

        Args:
            line: The raw record, without its line terminator.
            line_number: Position of the record in the input, used only
                for diagnostics.

        Returns:
            ``NormalizedRow`` on success, ``DroppedRow`` if any step
            raised ``InvalidDataFormat``.
        """
        try:
            fields = parse_csv_line(line)
            formatted = self.format_fields(fields)
        except InvalidDataFormat as e:
            return DroppedRow(line_number=line_number, reason=str(e))
        return NormalizedRow(line_number=line_number, fields=tuple(formatted))

    def format_fields(self, fields: list[str]) -> list[str]:
        """Apply the field formatters to an already tokenized row.

        Raises:
            InvalidDataFormat: On the first field that fails, or if the
                row does not have exactly ``FIELD_COUNT`` fields.
        """
        if len(fields) != FIELD_COUNT:
            raise InvalidDataFormat(
                f"Expected {FIELD_COUNT} fields, got {len(fields)}"
            )

        (
            timestamp,
            address,
            zip_code,
            full_name,
            foo_duration,
            bar_duration,
            _total_duration,
            notes,
        ) = fields

        formatted_timestamp = format_timestamp(timestamp, self.config)
        formatted_zip = format_zip(zip_code, self.config.zip_width)
        formatted_name = capitalize_name(full_name)

        foo = parse_duration(foo_duration)
        bar = parse_duration(bar_duration)
        total = sum_durations(foo, bar)

        return [
            formatted_timestamp,
            address,
            formatted_zip,
            formatted_name,
            duration_as_seconds(foo),
            duration_as_seconds(bar),
            duration_as_seconds(total),
            notes,
        ]
