"""Application ports - interfaces for content adapters."""

from blogmeta.application.ports.document_source import DocumentSource

__all__ = ["DocumentSource"]
