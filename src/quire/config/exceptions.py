"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from quire.exceptions import QuireError


class ConfigError(QuireError):
    """Base exception for all configuration-related errors."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration fails validation."""

    def __init__(self, errors: Sequence[Any] | None = None) -> None:
        self.errors = list(errors or [])
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err.get('loc', ()))}: {err.get('msg', '')}" for err in self.errors
        )
        message = f"Configuration validation failed with {len(self.errors)} error(s)."
        super().__init__(f"{message} {details}" if details else message)
