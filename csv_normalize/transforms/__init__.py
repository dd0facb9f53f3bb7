"""
Transforms sub-package for csv-normalize.

Contains the field-level formatters and the row normalizer that chains
them together.

Design: Pipeline Pattern
- pipeline.py runs the steps for one row and returns a ``RowResult``.
- Individual formatters live in separate modules for testability:
  - timestamps.py: Pacific wall-clock timestamps -> Eastern ISO-8601.
  - zipcodes.py: Zero-pad and validate US zip codes.
  - names.py: Capitalize the first letter of each word.
  - durations.py: Parse ``H:MM:SS.mmm`` durations, sum them, render seconds.

Every formatter is a pure function of its input value (plus the
immutable ``NormalizerConfig``) and raises ``InvalidDataFormat`` on bad
input; the name capitalizer never fails.
"""
