"""Split a raw document into its +++ metadata block and body."""

import re

from blogmeta.domain.exceptions import MissingFrontMatter

DELIMITER = "+++"

# Physical lines end at \n only; U+2028, \x0c etc. are literal characters.
_LINE_END = re.compile(r"(?<=\n)")


def _is_delimiter(line: str) -> bool:
    """Line is exactly +++ (a CRLF ending is tolerated)."""
    return line.rstrip("\r\n") == DELIMITER


def _trim_blank_lines(lines: list[str]) -> str:
    """Drop blank lines at both ends and the final line break."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "".join(lines[start:end]).rstrip("\r\n")


def split_front_matter(text: str) -> tuple[list[str], str]:
    """Return (metadata lines, body).

    Only the first +++ after the opener closes the block; anything later,
    including further +++ lines, belongs to the body.
    """
    lines = [line for line in _LINE_END.split(text) if line]
    if not lines or not _is_delimiter(lines[0]):
        raise MissingFrontMatter("Document does not start with a +++ line")
    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            metadata = [line.rstrip("\r\n") for line in lines[1:index]]
            return metadata, _trim_blank_lines(lines[index + 1 :])
    raise MissingFrontMatter("Front matter has no closing +++ line")
