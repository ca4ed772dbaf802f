"""CLI entry point and composition root."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from blogmeta import __version__
from blogmeta.application.use_cases.check_content import CheckContentUseCase
from blogmeta.config import get_settings
from blogmeta.domain.exceptions import NotFound, ParseError
from blogmeta.infrastructure.front_matter import parse_document
from blogmeta.infrastructure.sources import get_source

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

LOG_FORMAT = "%(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blogmeta",
        description="Validate +++ front matter of blog articles",
    )
    parser.add_argument("--version", action="version", version=f"blogmeta {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Parse every document below a folder")
    check.add_argument("path", help="Content folder or single file")
    check.add_argument("--pattern", help="Glob for content files (default from settings)")
    check.add_argument("--workers", type=int, help="Parallel parse workers")
    check.add_argument("--json", action="store_true", help="Print the full report as JSON")

    show = sub.add_parser("show", help="Print one parsed document as JSON")
    show.add_argument("file", help="Document file")
    return parser


def check(path: str, pattern: str, workers: int, as_json: bool) -> int:
    """Check a content folder; exit code reflects whether all documents parsed."""
    source_path = Path(path)
    source = get_source(source_path, pattern)
    if source is None:
        logger.error("Cannot read content from %s", path)
        return EXIT_USAGE
    use_case = CheckContentUseCase(source=source, parser=parse_document)
    try:
        report = use_case.execute(source_path, workers=workers)
    except NotFound as e:
        logger.error("%s", e)
        return EXIT_USAGE

    if as_json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        for outcome in report.failed:
            error = outcome.error
            print(f"{outcome.path}: {type(error).__name__}: {error.message}")
        print(f"{len(report.outcomes)} documents, {len(report.failed)} failed")
    return EXIT_OK if report.ok else EXIT_INVALID


def show(file: str) -> int:
    """Print one parsed record as JSON."""
    file_path = Path(file)
    if not file_path.is_file():
        logger.error("Document not found: %s", file)
        return EXIT_USAGE
    try:
        record = parse_document(file_path.read_bytes())
    except ParseError as e:
        logger.error("%s: %s: %s", file, type(e).__name__, e.message)
        return EXIT_INVALID
    print(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
        logger.error("Invalid settings: %s", e)
        return EXIT_USAGE
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr)
    args = _build_parser().parse_args(argv)

    if args.command == "check":
        workers = args.workers if args.workers is not None else settings.workers
        if workers < 1:
            logger.error("--workers must be >= 1")
            return EXIT_USAGE
        return check(
            args.path,
            pattern=args.pattern or settings.content_pattern,
            workers=workers,
            as_json=args.json,
        )
    return show(args.file)


if __name__ == "__main__":
    sys.exit(main())
