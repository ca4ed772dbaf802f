"""blogmeta: front-matter parser and validator for blog articles."""

__version__ = "0.1.0"
