"""Date and time utilities."""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Any

from dateutil import parser as dateutil_parser


class DateTimeParsingError(ValueError):
    """Raised when a value cannot be interpreted as a datetime."""

    def __init__(self, value: str, original_exception: Exception | None = None) -> None:
        self.value = value
        self.original_exception = original_exception
        detail = f": {original_exception}" if original_exception else ""
        super().__init__(f"Cannot parse datetime from '{value}'{detail}")


def to_datetime(value: datetime | date | str | Any) -> datetime:
    """Convert a datetime-like value without touching its timezone.

    ``date`` values become midnight of that day; strings are parsed with
    ``dateutil``. Naive inputs stay naive.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())

    raw = str(value).strip() if value is not None else ""
    if not raw:
        raise DateTimeParsingError(repr(value))

    try:
        return dateutil_parser.parse(raw)
    except (TypeError, ValueError, OverflowError) as e:
        raise DateTimeParsingError(raw, e) from e


def localize(dt: datetime, zone: tzinfo | None) -> datetime:
    """Attach ``zone`` to a naive datetime; aware datetimes are returned as-is."""
    if zone is None or dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=zone)


def is_future(dt: datetime, now: datetime | None = None) -> bool:
    """Return whether ``dt`` lies strictly after ``now``.

    ``now`` defaults to the current time in ``dt``'s timezone, so naive values
    are compared with local wall-clock time.
    """
    if now is None:
        now = datetime.now(dt.tzinfo)
    elif (dt.tzinfo is None) != (now.tzinfo is None):
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=now.tzinfo)
        else:
            now = now.replace(tzinfo=dt.tzinfo)
    return dt > now


__all__ = ["DateTimeParsingError", "is_future", "localize", "to_datetime"]
