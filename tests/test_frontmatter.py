from datetime import date, datetime
from pathlib import Path

import pytest

from quire.content.frontmatter import parse_document, parse_document_file, split_summary
from quire.exceptions import FrontmatterParseError

SOURCE = Path("post.md")


def test_parses_metadata_date_and_draft() -> None:
    text = "---\ntitle: Hello\ndate: 2024-02-03 10:20:30\ndraft: true\ntags: [a, b]\n---\nBody text\n"

    parsed = parse_document(SOURCE, text)

    assert parsed.metadata == {"title": "Hello", "tags": ["a", "b"]}
    assert parsed.date == datetime(2024, 2, 3, 10, 20, 30)
    assert parsed.draft is True
    assert parsed.content.strip() == "Body text"
    assert parsed.summary is None


def test_plain_dates_become_midnight() -> None:
    parsed = parse_document(SOURCE, "---\ndate: 2024-02-03\n---\nx")

    assert parsed.date == datetime.combine(date(2024, 2, 3), datetime.min.time())


def test_string_dates_are_parsed() -> None:
    parsed = parse_document(SOURCE, "---\ndate: 'March 5, 2021 8:15pm'\n---\nx")

    assert parsed.date == datetime(2021, 3, 5, 20, 15)


def test_document_without_front_matter() -> None:
    parsed = parse_document(SOURCE, "Just a body")

    assert parsed.metadata == {}
    assert parsed.date is None
    assert parsed.draft is False
    assert parsed.content == "Just a body"


@pytest.mark.parametrize(("raw", "expected"), [("'yes'", True), ("'no'", False), ("false", False)])
def test_draft_strings(raw: str, expected: bool) -> None:
    parsed = parse_document(SOURCE, f"---\ndraft: {raw}\n---\nx")

    assert parsed.draft is expected


def test_invalid_draft_fails() -> None:
    with pytest.raises(FrontmatterParseError, match="draft"):
        parse_document(SOURCE, "---\ndraft: maybe\n---\nx")


def test_invalid_date_fails() -> None:
    with pytest.raises(FrontmatterParseError, match="post.md"):
        parse_document(SOURCE, "---\ndate: not a date at all\n---\nx")


def test_invalid_yaml_fails() -> None:
    with pytest.raises(FrontmatterParseError):
        parse_document(SOURCE, "---\ntitle: [unclosed\n---\nx")


def test_summary_marker_splits_body() -> None:
    text = "---\ntitle: t\n---\nIntro paragraph.\n\n===\n\nRest of the post.\n"

    parsed = parse_document(SOURCE, text)

    assert parsed.summary == "Intro paragraph."
    assert "===" not in parsed.content
    assert "Intro paragraph." in parsed.content
    assert "Rest of the post." in parsed.content


def test_split_summary_without_marker() -> None:
    assert split_summary("a\nb\n", "===") == (None, "a\nb\n")
    assert split_summary("a\n===\nb", "") == (None, "a\n===\nb")


def test_parse_document_file_reads_from_disk(tmp_path: Path) -> None:
    path = tmp_path / "note.md"
    path.write_text("---\norder: 3\n---\nHi\n", encoding="utf-8")

    parsed = parse_document_file(path)

    assert parsed.metadata == {"order": 3}
    assert parsed.content.strip() == "Hi"
