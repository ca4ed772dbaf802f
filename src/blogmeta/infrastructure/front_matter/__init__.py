"""Front matter: split, tokenize and validate +++ metadata blocks."""

from blogmeta.infrastructure.front_matter.parser import decode_document, parse_document

__all__ = ["decode_document", "parse_document"]
