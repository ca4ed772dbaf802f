"""Check content use case."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from blogmeta.application.dto.check_report import CheckReport, DocumentOutcome
from blogmeta.application.dto.raw_document import RawDocument
from blogmeta.application.ports import DocumentSource
from blogmeta.domain.entities import DocumentRecord
from blogmeta.domain.exceptions import NotFound, ParseError, UnreadableDocument

logger = logging.getLogger(__name__)


class CheckContentUseCase:
    """Parse every document of a source and collect per-document outcomes."""

    def __init__(
        self,
        source: DocumentSource,
        parser: Callable[[str | bytes], DocumentRecord],
    ) -> None:
        self._source = source
        self._parser = parser

    def execute(self, path: Path, workers: int = 1) -> CheckReport:
        """Check all documents below path. Outcomes keep source order."""
        if workers < 1:
            raise ValueError("workers must be >= 1")
        if not self._source.can_handle(path):
            raise NotFound(f"Cannot read content from {path}")

        documents = list(self._source.read(path))
        if workers == 1:
            outcomes = [self._check(doc) for doc in documents]
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                outcomes = list(pool.map(self._check, documents))

        report = CheckReport(source=path, outcomes=outcomes)
        logger.info(
            "Checked %d documents in %s: %d failed",
            len(report.outcomes),
            path,
            len(report.failed),
        )
        return report

    def _check(self, document: RawDocument) -> DocumentOutcome:
        if document.read_error is not None:
            error = UnreadableDocument(f"Cannot read file: {document.read_error}")
            logger.warning("%s: %s", document.path, error.message)
            return DocumentOutcome(path=document.path, error=error)
        try:
            record = self._parser(document.data)
        except ParseError as e:
            logger.warning("%s: %s", document.path, e.message)
            return DocumentOutcome(path=document.path, error=e)
        logger.debug("%s: ok (%s)", document.path, record.title)
        return DocumentOutcome(path=document.path, record=record)
