"""Decoding of render extensions, date prefixes and order prefixes from file names.

A content file name follows the convention::

    [YYYY-M-D[Th.m[.s]]-][N.|N-]name.ext1.ext2

Known render extensions are stripped from the right first, then the date
prefix, then the order prefix.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from quire.exceptions import MalformedFilenameError

if TYPE_CHECKING:
    from collections.abc import Collection

    from quire.config.settings import LoadOptions

logger = logging.getLogger(__name__)

DATE_PREFIX_PATTERN = re.compile(
    r"^\s*(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[Tt@](?P<hour>\d{1,2})\.(?P<minute>\d{1,2})(?:\.(?P<second>\d{1,2}))?)?"
    r"[-\s]\s*",
    re.ASCII,
)
ORDER_PREFIX_PATTERN = re.compile(r"^\s*(?P<order>\d+)[.-]\s*", re.ASCII)


@dataclass(frozen=True, slots=True)
class DatePrefix:
    """A date prefix matched at the start of a file name."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    length: int

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)


@dataclass(frozen=True, slots=True)
class OrderPrefix:
    """An order prefix matched at the start of a file name."""

    order: int
    length: int


@dataclass(frozen=True, slots=True)
class DecodedFilename:
    """Result of decoding a bare file name."""

    name: str
    date: datetime | None
    order: int
    extensions: tuple[str, ...]


def match_date_prefix(name: str) -> DatePrefix | None:
    """Match a ``YYYY-M-D`` prefix with an optional ``Th.m[.s]`` time part."""
    match = DATE_PREFIX_PATTERN.match(name)
    if match is None:
        return None

    def part(group: str) -> int:
        value = match.group(group)
        return int(value, 10) if value is not None else 0

    return DatePrefix(
        year=part("year"),
        month=part("month"),
        day=part("day"),
        hour=part("hour"),
        minute=part("minute"),
        second=part("second"),
        length=match.end(),
    )


def match_order_prefix(name: str) -> OrderPrefix | None:
    """Match a numeric ``N.`` or ``N-`` prefix."""
    match = ORDER_PREFIX_PATTERN.match(name)
    if match is None:
        return None
    return OrderPrefix(order=int(match.group("order"), 10), length=match.end())


def strip_known_extensions(name: str, known_extensions: Collection[str]) -> tuple[str, tuple[str, ...]]:
    """Strip trailing extensions while they are known render extensions.

    Extensions are compared case-insensitively against ``known_extensions``,
    which must already be lowercase without a leading dot. Stripped tokens are
    returned in the order they were removed, outermost first.

    Examples:
        >>> strip_known_extensions("about.html.md", {"md"})
        ('about.html', ('md',))
        >>> strip_known_extensions("page.md.j2", {"md", "j2"})
        ('page', ('j2', 'md'))

    """
    stripped: list[str] = []
    while True:
        stem, dot, extension = name.rpartition(".")
        if not dot or extension.lower() not in known_extensions:
            break
        stripped.append(extension)
        name = stem
    return name, tuple(stripped)


def decode_filename(
    file_name: str,
    known_extensions: Collection[str],
    *,
    options: LoadOptions,
    explicit_date: datetime | None = None,
) -> DecodedFilename:
    """Decode render extensions, date and order from a bare file name.

    Args:
        file_name: File name without any directory component.
        known_extensions: Lowercase render extension tokens without dots.
        options: Which prefixes to decode.
        explicit_date: Date supplied by the front matter. When present, a date
            prefix is still removed from the name but its value is ignored.

    Returns:
        The remaining name together with the decoded date, order and extensions.

    Raises:
        MalformedFilenameError: If a date prefix does not form a valid date.

    """
    name, extensions = strip_known_extensions(file_name, known_extensions)

    date = explicit_date
    if options.date_from_filename:
        prefix = match_date_prefix(name)
        if prefix is not None:
            if explicit_date is None:
                try:
                    date = prefix.to_datetime()
                except ValueError as exc:
                    raise MalformedFilenameError(file_name, str(exc)) from exc
            name = name[prefix.length :]

    order = 0
    if options.order_from_filename:
        order_prefix = match_order_prefix(name)
        if order_prefix is not None:
            order = order_prefix.order
            name = name[order_prefix.length :]

    logger.debug("Decoded %s as name=%r date=%s order=%d", file_name, name, date, order)
    return DecodedFilename(name=name, date=date, order=order, extensions=extensions)


__all__ = [
    "DATE_PREFIX_PATTERN",
    "ORDER_PREFIX_PATTERN",
    "DatePrefix",
    "DecodedFilename",
    "OrderPrefix",
    "decode_filename",
    "match_date_prefix",
    "match_order_prefix",
    "strip_known_extensions",
]
