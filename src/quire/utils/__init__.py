"""Utility modules for Quire."""

from quire.utils.async_utils import run_async_safely
from quire.utils.datetime_utils import DateTimeParsingError, is_future, localize, to_datetime

__all__ = [
    "DateTimeParsingError",
    "is_future",
    "localize",
    "run_async_safely",
    "to_datetime",
]
