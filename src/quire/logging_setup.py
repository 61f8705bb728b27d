"""Console logging for the Quire command line.

Only the ``quire`` logger hierarchy is configured, so applications that embed
the loader keep control of the root logger.
"""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["LOG_LEVEL_ENV", "configure_logging", "console", "parse_level"]

LOG_LEVEL_ENV: Final[str] = "QUIRE_LOG_LEVEL"

console = Console(stderr=True)

_package_logger = logging.getLogger("quire")


def parse_level(name: str | None) -> int:
    """Map a level name such as ``debug`` or ``WARNING`` to its number.

    Unknown or missing names give ``INFO``.
    """
    level = logging.getLevelName((name or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level_name: str | None = None) -> RichHandler:
    """Route ``quire.*`` records to stderr through rich.

    The level comes from ``level_name``, then ``$QUIRE_LOG_LEVEL``, then INFO.
    Repeated calls reuse the installed handler and only change the level.
    """
    handler = next((h for h in _package_logger.handlers if isinstance(h, RichHandler)), None)
    if handler is None:
        handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        _package_logger.addHandler(handler)

    _package_logger.setLevel(parse_level(level_name or os.getenv(LOG_LEVEL_ENV)))
    return handler
