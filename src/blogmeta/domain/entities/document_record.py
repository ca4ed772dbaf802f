"""Document record entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class DocumentRecord:
    """Parsed front matter and body of one document."""

    title: str
    date: datetime
    body: str
    description: str | None = None
    tags: tuple[str, ...] = ()
    extra: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Freeze caller-supplied containers.
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def __reduce__(self) -> tuple[Any, ...]:
        # mappingproxy cannot be pickled; rebuild through __init__ instead.
        return (
            type(self),
            (self.title, self.date, self.body, self.description, self.tags, dict(self.extra)),
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "title": self.title,
            "date": self.date.isoformat(),
            "description": self.description,
            "tags": list(self.tags),
            "extra": dict(self.extra),
            "body": self.body,
        }
