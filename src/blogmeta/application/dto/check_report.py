"""Check report DTOs."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from blogmeta.domain.entities import DocumentRecord
from blogmeta.domain.exceptions import ParseError


@dataclass(frozen=True)
class DocumentOutcome:
    """Result of parsing one document: a record or an error, never both."""

    path: Path
    record: DocumentRecord | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"path": str(self.path), "ok": self.ok}
        if self.record is not None:
            data["record"] = self.record.to_dict()
        if self.error is not None:
            data["error"] = {
                "type": type(self.error).__name__,
                "field": self.error.field,
                "message": self.error.message,
            }
        return data


@dataclass
class CheckReport:
    """Outcomes for every document of a source, in source order."""

    source: Path
    outcomes: list[DocumentOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def failed(self) -> list[DocumentOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def records(self) -> list[DocumentRecord]:
        return [o.record for o in self.outcomes if o.record is not None]

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": str(self.source),
            "total": len(self.outcomes),
            "failed": len(self.failed),
            "documents": [o.to_dict() for o in self.outcomes],
        }
