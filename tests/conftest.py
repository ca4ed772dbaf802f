"""Pytest fixtures for blogmeta tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from blogmeta.config import get_settings

# A front-matter header in the corpus style, German body included.
ARTICLE = """+++
title = "HTTP-Clients richtig konfigurieren"
date = "2024-05-22T14:25:47+03:00"
description = "Timeouts, Retries und Connection-Pools"
tags = ["http","go","timeouts",]
#
# Entwurf, noch nicht veröffentlicht
#
draft = "true"
+++

Ein HTTP-Client ohne Timeout wartet im Zweifel ewig.

## Timeouts
"""


def make_document(*metadata: str, body: str = "Body") -> str:
    """Build a document from metadata lines and a body."""
    return "+++\n" + "".join(line + "\n" for line in metadata) + "+++\n" + body


@pytest.fixture
def article() -> str:
    """Complete, valid article."""
    return ARTICLE


@pytest.fixture
def minimal_metadata() -> tuple[str, str]:
    """Only the required fields."""
    return ('title = "Hello"', 'date = "2024-01-01T00:00:00+00:00"')


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Content folder with two valid articles, one invalid, and noise."""
    posts = tmp_path / "content" / "posts"
    posts.mkdir(parents=True)
    (posts / "a-http.md").write_text(ARTICLE, encoding="utf-8")
    (posts / "b-testing.md").write_text(
        make_document(
            'title = "Unit-Tests für Handler"',
            'date = "2024-06-01T09:00:00+02:00"',
            body="Text",
        ),
        encoding="utf-8",
    )
    (posts / "c-broken.md").write_text(
        make_document('title = "Kein Datum"'), encoding="utf-8"
    )
    (posts / "notes.txt").write_text("not content", encoding="utf-8")
    hidden = tmp_path / "content" / ".drafts"
    hidden.mkdir()
    (hidden / "secret.md").write_text(ARTICLE, encoding="utf-8")
    return tmp_path / "content"


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Settings are cached; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
