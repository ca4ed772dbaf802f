"""Tokenize a metadata block into key = value assignments."""

import re
from dataclasses import dataclass

from blogmeta.domain.exceptions import InvalidFieldType, MalformedLine

COMMENT_MARKER = "#"

_KEY = re.compile(r"[A-Za-z0-9_-]+")


@dataclass(frozen=True)
class Assignment:
    """One key = value pair; value is the raw literal text."""

    key: str
    value: str
    line_no: int


def _skip_spaces(line: str, pos: int) -> int:
    while pos < len(line) and line[pos].isspace():
        pos += 1
    return pos


def _literal_end(line: str, pos: int) -> int | None:
    """End offset of the literal starting at pos, or None if unterminated."""
    first = line[pos]
    if first == '"':
        close = line.find('"', pos + 1)
        return None if close == -1 else close + 1
    if first == "[":
        in_string = False
        for index in range(pos + 1, len(line)):
            char = line[index]
            if char == '"':
                in_string = not in_string
            elif char == "]" and not in_string:
                return index + 1
        return None
    end = pos
    while end < len(line) and not line[end].isspace():
        end += 1
    return end


def tokenize_line(line: str, line_no: int) -> list[Assignment]:
    """Split one metadata line into assignments.

    A literal that is unterminated, or followed by anything other than
    whitespace, a comment or another assignment, swallows the rest of the
    line as its raw value; coercion decides whether that is acceptable.
    """
    assignments: list[Assignment] = []
    pos = _skip_spaces(line, 0)
    while pos < len(line) and line[pos] != COMMENT_MARKER:
        match = _KEY.match(line, pos)
        if not match:
            raise MalformedLine(line_no, line)
        key = match.group()
        pos = _skip_spaces(line, match.end())
        if pos >= len(line) or line[pos] != "=":
            raise MalformedLine(line_no, line)
        pos = _skip_spaces(line, pos + 1)
        if pos >= len(line) or line[pos] == COMMENT_MARKER:
            raise InvalidFieldType(key, f"Field {key!r} has no value (line {line_no})")
        end = _literal_end(line, pos)
        if end is not None and (end == len(line) or line[end].isspace() or line[end] == COMMENT_MARKER):
            assignments.append(Assignment(key, line[pos:end], line_no))
            pos = _skip_spaces(line, end)
        else:
            assignments.append(Assignment(key, line[pos:].rstrip(), line_no))
            break
    return assignments


def tokenize(lines: list[str], first_line_no: int = 1) -> list[Assignment]:
    """Tokenize metadata lines; blank and # comment lines carry no data."""
    assignments: list[Assignment] = []
    for line_no, line in enumerate(lines, start=first_line_no):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_MARKER):
            continue
        assignments.extend(tokenize_line(line, line_no))
    return assignments
