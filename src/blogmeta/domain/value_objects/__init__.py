"""Domain value objects."""

from blogmeta.domain.value_objects.field_kind import FieldKind
from blogmeta.domain.value_objects.timestamp import (
    TIMESTAMP_FORMAT,
    TIMESTAMP_PATTERN,
    parse_timestamp,
)

__all__ = [
    "FieldKind",
    "TIMESTAMP_FORMAT",
    "TIMESTAMP_PATTERN",
    "parse_timestamp",
]
