"""Raw document DTO."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RawDocument:
    """Unparsed bytes of one content file."""

    path: Path
    data: bytes
    read_error: str | None = None  # set when the file could not be read
