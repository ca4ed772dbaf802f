"""Parse a raw +++ front-matter document into a DocumentRecord."""

from typing import Any

from blogmeta.domain.entities import DocumentRecord
from blogmeta.domain.exceptions import (
    DuplicateField,
    InvalidEncoding,
    MissingRequiredField,
)
from blogmeta.infrastructure.front_matter.coercion import coerce, raw_extra_value
from blogmeta.infrastructure.front_matter.delimiters import split_front_matter
from blogmeta.infrastructure.front_matter.fields import KNOWN_FIELDS, REQUIRED_FIELDS
from blogmeta.infrastructure.front_matter.tokenizer import tokenize


def decode_document(data: bytes) -> str:
    """Decode raw bytes as UTF-8, dropping a leading BOM."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InvalidEncoding(f"Document is not valid UTF-8: {e}") from e


def parse_document(raw: str | bytes) -> DocumentRecord:
    """
    Parse one document. Pure: no I/O, no logging, no state between calls.
    Raises the first ParseError found, checked in the order
    delimiters -> tokenization -> coercion -> required fields.
    """
    text = decode_document(raw) if isinstance(raw, bytes) else raw
    metadata_lines, body = split_front_matter(text)
    assignments = tokenize(metadata_lines, first_line_no=2)

    fields: dict[str, Any] = {}
    extra: dict[str, str] = {}
    for assignment in assignments:
        kind = KNOWN_FIELDS.get(assignment.key)
        if kind is None:
            # Unknown keys never fail; a repeated one keeps the last value.
            extra[assignment.key] = raw_extra_value(assignment.value)
        else:
            if assignment.key in fields:
                raise DuplicateField(assignment.key)
            fields[assignment.key] = coerce(assignment.key, assignment.value, kind)

    for name in REQUIRED_FIELDS:
        value = fields.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingRequiredField(name)

    return DocumentRecord(
        title=fields["title"],
        date=fields["date"],
        description=fields.get("description"),
        tags=fields.get("tags", ()),
        body=body,
        extra=extra,
    )
