"""Coerce raw literal values to typed field values."""

import re
from datetime import datetime

from blogmeta.domain.exceptions import InvalidFieldType
from blogmeta.domain.value_objects import FieldKind, parse_timestamp

_QUOTED = re.compile(r'"([^"]*)"')


def unquote(raw: str) -> str | None:
    """Content of a double-quoted literal, or None if raw is not one."""
    match = _QUOTED.fullmatch(raw)
    return match.group(1) if match else None


def coerce_string(key: str, raw: str) -> str:
    """Quoted string literal -> str. No escape sequences are processed."""
    value = unquote(raw)
    if value is None:
        raise InvalidFieldType(key, f"Field {key!r} must be a quoted string, got {raw}")
    return value


def coerce_date(key: str, raw: str) -> datetime:
    """Quoted YYYY-MM-DDThh:mm:ss±hh:mm literal -> aware datetime."""
    return parse_timestamp(coerce_string(key, raw))


def coerce_string_array(key: str, raw: str) -> tuple[str, ...]:
    """Bracketed, comma-separated quoted strings; trailing comma allowed."""
    if not (raw.startswith("[") and raw.endswith("]")):
        raise InvalidFieldType(key, f"Field {key!r} must be a [...] array, got {raw}")
    inner = raw[1:-1]
    items: list[str] = []
    pos = 0
    while True:
        while pos < len(inner) and inner[pos].isspace():
            pos += 1
        if pos == len(inner):
            return tuple(items)
        match = _QUOTED.match(inner, pos)
        if not match:
            raise InvalidFieldType(key, f"Field {key!r} must contain only quoted strings, got {raw}")
        items.append(match.group(1))
        pos = match.end()
        while pos < len(inner) and inner[pos].isspace():
            pos += 1
        if pos == len(inner):
            return tuple(items)
        if inner[pos] != ",":
            raise InvalidFieldType(key, f"Field {key!r} elements must be comma-separated, got {raw}")
        pos += 1


_COERCERS = {
    FieldKind.STRING: coerce_string,
    FieldKind.DATE: coerce_date,
    FieldKind.STRING_ARRAY: coerce_string_array,
}


def coerce(key: str, raw: str, kind: FieldKind) -> str | datetime | tuple[str, ...]:
    """Dispatch on field kind."""
    return _COERCERS[kind](key, raw)


def raw_extra_value(raw: str) -> str:
    """Value kept for an unrecognized key: unquoted if quoted, else verbatim."""
    value = unquote(raw)
    return raw if value is None else value
