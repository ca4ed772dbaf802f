"""Known front-matter keys and the literal shape each must have."""

from blogmeta.domain.value_objects import FieldKind

KNOWN_FIELDS: dict[str, FieldKind] = {
    "title": FieldKind.STRING,
    "description": FieldKind.STRING,
    "date": FieldKind.DATE,
    "tags": FieldKind.STRING_ARRAY,
}

REQUIRED_FIELDS: tuple[str, ...] = ("title", "date")
