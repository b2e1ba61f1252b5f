"""
Domain converters for the exercise catalog.

Pure functions with no side effects:

- normalize_upstream_record: provider payload -> ExerciseRecord
- split_segments: list or delimited string -> trimmed segments
- record_to_db_row / db_row_to_record: ExerciseRecord <-> catalog row
- refresh_fields: update payload for an existing catalog row
- db_row_to_upstream_shape: catalog row -> provider-shaped payload
"""

from domain.converters.db_converters import (
    db_row_to_record,
    db_row_to_upstream_shape,
    record_to_db_row,
    refresh_fields,
)
from domain.converters.upstream_converters import (
    RawUpstreamRecord,
    normalize_upstream_record,
    split_segments,
)

__all__ = [
    "RawUpstreamRecord",
    "normalize_upstream_record",
    "split_segments",
    "record_to_db_row",
    "db_row_to_record",
    "refresh_fields",
    "db_row_to_upstream_shape",
]
