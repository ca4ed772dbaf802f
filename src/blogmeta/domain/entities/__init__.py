"""Domain entities."""

from blogmeta.domain.entities.document_record import DocumentRecord

__all__ = [
    "DocumentRecord",
]
