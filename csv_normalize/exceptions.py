"""
Custom exception hierarchy for csv-normalize.

Row-level problems are all reported as ``InvalidDataFormat`` so the row
normalizer has exactly one error type to catch at the row boundary.
Everything else (unreadable input, bad configuration) is allowed to
propagate to the caller.
"""


class CsvNormalizeError(Exception):
    """Base exception for all csv-normalize errors."""


class InvalidDataFormat(CsvNormalizeError):
    """Raised when a field (or a whole record) cannot be normalized.

    Raised by:
    - the CSV tokenizer, for structurally broken records;
    - the timestamp, zip and duration formatters;
    - the row normalizer, when a record does not have exactly 8 fields.

    The row containing the offending value is dropped and the message is
    reported on the diagnostic channel.
    """


class ConfigValidationError(CsvNormalizeError):
    """Raised when a ``NormalizerConfig`` fails validation.

    For example, when ``source_zone`` or ``target_zone`` is not a known
    IANA time zone name.
    """
