"""Front matter parsing for content documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from quire.config.settings import DEFAULT_SUMMARY_MARKER
from quire.exceptions import FrontmatterParseError
from quire.utils.datetime_utils import DateTimeParsingError, to_datetime

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0", ""})


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """What the front matter parser hands to the document builder.

    ``metadata`` no longer contains the ``date`` and ``draft`` keys; their
    values are exposed as ``date`` and ``draft``.
    """

    metadata: dict[str, Any] = field(default_factory=dict)
    content: str = ""
    summary: str | None = None
    date: datetime | None = None
    draft: bool = False


def split_summary(content: str, marker: str) -> tuple[str | None, str]:
    """Split the body at the first line consisting solely of ``marker``.

    Returns the summary (text before the marker, or None when there is no
    marker) and the content with the marker line removed.
    """
    if not marker:
        return None, content

    lines = content.splitlines(keepends=True)
    for index, line in enumerate(lines):
        if line.strip() == marker:
            before = "".join(lines[:index])
            after = "".join(lines[index + 1 :])
            return before.strip(), before + after
    return None, content


def _coerce_draft(path: Path, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise FrontmatterParseError(path, f"'draft' must be a boolean, got {value!r}")


def parse_document(path: Path, text: str, summary_marker: str = DEFAULT_SUMMARY_MARKER) -> ParsedDocument:
    """Parse YAML front matter and summary out of a document's text.

    Raises:
        FrontmatterParseError: If the front matter is not valid YAML, is not a
            mapping, or holds an unparsable ``date`` or ``draft``.

    """
    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as exc:
        raise FrontmatterParseError(path, str(exc)) from exc

    if not isinstance(post.metadata, dict):
        raise FrontmatterParseError(path, f"front matter is not a mapping: {type(post.metadata).__name__}")

    metadata = {str(key): value for key, value in post.metadata.items() if key not in {"date", "draft"}}

    date: datetime | None = None
    raw_date = post.metadata.get("date")
    if raw_date is not None:
        try:
            date = to_datetime(raw_date)
        except DateTimeParsingError as exc:
            raise FrontmatterParseError(path, str(exc)) from exc

    draft = _coerce_draft(path, post.metadata.get("draft"))
    summary, content = split_summary(post.content, summary_marker)

    return ParsedDocument(metadata=metadata, content=content, summary=summary, date=date, draft=draft)


def parse_document_file(
    path: Path, summary_marker: str = DEFAULT_SUMMARY_MARKER, *, encoding: str = "utf-8"
) -> ParsedDocument:
    """Read a document from disk and parse it.

    Raises:
        OSError: If the file cannot be read.
        FrontmatterParseError: If the front matter is malformed.

    """
    logger.debug("Parsing %s", path)
    return parse_document(path, path.read_text(encoding=encoding), summary_marker)


__all__ = ["ParsedDocument", "parse_document", "parse_document_file", "split_summary"]
