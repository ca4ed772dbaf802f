"""Content sources: discover raw documents to parse."""

from pathlib import Path

from blogmeta.application.ports import DocumentSource
from blogmeta.infrastructure.sources.folder_source import FolderSource


def get_source(path: Path | str, pattern: str = "*.md") -> DocumentSource | None:
    """Return a source that can read the given path, or None."""
    source = FolderSource(pattern)
    if source.can_handle(Path(path)):
        return source
    return None


__all__ = ["FolderSource", "get_source"]
