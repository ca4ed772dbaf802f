"""Document source for local folders (or a single file)."""

from collections.abc import Iterator
from pathlib import Path

from blogmeta.application.dto.raw_document import RawDocument

# Directory names never descended into
SKIP_DIRS = {
    "__pycache__",
    "node_modules",
    "venv",
    "dist",
    "build",
    "public",
    "resources",
}


class FolderSource:
    """Reads content files below a directory, matching a glob pattern."""

    source_type = "folder"

    def __init__(self, pattern: str = "*.md") -> None:
        self._pattern = pattern

    def can_handle(self, path: Path) -> bool:
        """Existing directory or regular file."""
        return path.is_dir() or path.is_file()

    def read(self, path: Path) -> Iterator[RawDocument]:
        """Yield documents sorted by path; a file path yields just that file."""
        if path.is_file():
            yield self._read_file(path)
            return
        for file_path in sorted(path.rglob(self._pattern)):
            if not file_path.is_file():
                continue
            if self._should_skip(file_path.relative_to(path)):
                continue
            yield self._read_file(file_path)

    def _read_file(self, path: Path) -> RawDocument:
        """Read bytes; an unreadable file is reported, not raised."""
        try:
            return RawDocument(path=path, data=path.read_bytes())
        except (PermissionError, OSError) as e:
            return RawDocument(path=path, data=b"", read_error=e.strerror or str(e))

    def _should_skip(self, relative: Path) -> bool:
        """Hidden files/folders and build or dependency directories."""
        parts = relative.parts
        if any(part.startswith(".") for part in parts):
            return True
        return any(part in SKIP_DIRS for part in parts[:-1])
