from datetime import datetime

import pytest

from quire.config import LoadOptions
from quire.content.filename import (
    DatePrefix,
    decode_filename,
    match_date_prefix,
    match_order_prefix,
    strip_known_extensions,
)
from quire.exceptions import MalformedFilenameError

KNOWN = frozenset({"md", "j2"})
OPTIONS = LoadOptions()


def test_decodes_date_prefixed_markdown_post() -> None:
    decoded = decode_filename("2023-5-14-my-post.md", KNOWN, options=OPTIONS)

    assert decoded.extensions == ("md",)
    assert decoded.date == datetime(2023, 5, 14, 0, 0, 0)
    assert decoded.order == 0
    assert decoded.name == "my-post"


def test_decodes_order_prefix() -> None:
    decoded = decode_filename("03.intro.md", KNOWN, options=OPTIONS)

    assert decoded.order == 3
    assert decoded.name == "intro"
    assert decoded.date is None


def test_decodes_dash_order_prefix() -> None:
    decoded = decode_filename("12-chapter.html.md", KNOWN, options=OPTIONS)

    assert decoded.order == 12
    assert decoded.name == "chapter.html"


def test_date_then_order_prefix() -> None:
    decoded = decode_filename("2024-01-02-7.seventh.md", KNOWN, options=OPTIONS)

    assert decoded.date == datetime(2024, 1, 2)
    assert decoded.order == 7
    assert decoded.name == "seventh"


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("2024-3-9T8.05-post.md", datetime(2024, 3, 9, 8, 5, 0)),
        ("2024-03-09t08.05.30 post.md", datetime(2024, 3, 9, 8, 5, 30)),
        ("2024-03-09@23.59.59-post.md", datetime(2024, 3, 9, 23, 59, 59)),
    ],
)
def test_decodes_time_component(file_name: str, expected: datetime) -> None:
    decoded = decode_filename(file_name, KNOWN, options=OPTIONS)

    assert decoded.date == expected
    assert decoded.name == "post"


def test_explicit_date_wins_but_prefix_is_still_stripped() -> None:
    explicit = datetime(2020, 1, 1, 9, 30)

    decoded = decode_filename("2023-5-14-my-post.md", KNOWN, options=OPTIONS, explicit_date=explicit)

    assert decoded.date == explicit
    assert decoded.name == "my-post"


def test_explicit_date_skips_invalid_filename_date() -> None:
    explicit = datetime(2020, 1, 1)

    decoded = decode_filename("2023-13-40-odd.md", KNOWN, options=OPTIONS, explicit_date=explicit)

    assert decoded.date == explicit
    assert decoded.name == "odd"


def test_invalid_filename_date_fails() -> None:
    with pytest.raises(MalformedFilenameError, match="2023-13-40-odd.md"):
        decode_filename("2023-13-40-odd.md", KNOWN, options=OPTIONS)


def test_disabled_prefixes_are_left_alone() -> None:
    options = LoadOptions(date_from_filename=False, order_from_filename=False)

    decoded = decode_filename("2023-5-14-my-post.md", KNOWN, options=options)

    assert decoded.date is None
    assert decoded.order == 0
    assert decoded.name == "2023-5-14-my-post"


def test_date_requires_separator() -> None:
    assert match_date_prefix("2023-5-14post") is None
    assert match_date_prefix("2023-5-14") is None


def test_date_prefix_is_structured() -> None:
    assert match_date_prefix("2023-5-14-x") == DatePrefix(
        year=2023, month=5, day=14, hour=0, minute=0, second=0, length=10
    )


def test_order_prefix_requires_separator() -> None:
    assert match_order_prefix("42") is None
    assert match_order_prefix("v1.intro") is None
    prefix = match_order_prefix("  5. spaced")
    assert prefix is not None
    assert prefix.order == 5
    assert "  5. spaced"[prefix.length :] == "spaced"


def test_strips_extensions_in_strip_order() -> None:
    assert strip_known_extensions("page.html.md.j2", KNOWN) == ("page.html", ("j2", "md"))


def test_extension_matching_is_case_insensitive() -> None:
    assert strip_known_extensions("README.MD", KNOWN) == ("README", ("MD",))


def test_unknown_extension_stops_stripping() -> None:
    assert strip_known_extensions("photo.md.png", KNOWN) == ("photo.md.png", ())
    assert strip_known_extensions("noextension", KNOWN) == ("noextension", ())
