from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from quire.config import LoadOptions
from quire.content import DocumentBuilder

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0)
KNOWN_EXTENSIONS = frozenset({"md", "markdown", "j2"})


@pytest.fixture
def documents_root(tmp_path: Path) -> Path:
    root = tmp_path / "documents"
    root.mkdir()
    return root


@pytest.fixture
def write_document(documents_root: Path) -> Callable[[str, str], Path]:
    """Write a file below the documents root and return its path."""

    def _write(relative: str, text: str = "body\n") -> Path:
        path = documents_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def builder(documents_root: Path) -> DocumentBuilder:
    return DocumentBuilder(
        documents_root,
        known_extensions=KNOWN_EXTENSIONS,
        options=LoadOptions(),
        app_url="/",
        root_url="https://example.com",
        clock=lambda: FIXED_NOW,
    )
