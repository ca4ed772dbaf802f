"""Document source port - where raw content files come from."""

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable

from blogmeta.application.dto.raw_document import RawDocument


@runtime_checkable
class DocumentSource(Protocol):
    """Port for discovering and reading raw documents."""

    source_type: str

    def can_handle(self, path: Path) -> bool: ...

    def read(self, path: Path) -> Iterator[RawDocument]:
        """Yield raw documents sorted by path."""
        ...
