"""Value kinds accepted in front matter."""

from enum import StrEnum


class FieldKind(StrEnum):
    """Literal shape a known front-matter key must have."""

    STRING = "string"
    DATE = "date"
    STRING_ARRAY = "string_array"
