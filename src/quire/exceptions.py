"""Centralized exceptions for the Quire application."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class QuireError(Exception):
    """Base exception for all Quire errors."""


class MalformedFilenameError(QuireError):
    """Raised when a date or order prefix in a file name cannot be decoded."""

    def __init__(self, file_name: str, detail: str) -> None:
        self.file_name = file_name
        self.detail = detail
        super().__init__(f"Malformed file name '{file_name}': {detail}")


class MalformedMetadataError(QuireError):
    """Raised when a recognized metadata key holds a value of the wrong type."""

    def __init__(self, key: str, value: Any, expected: str = "an integer") -> None:
        self.key = key
        self.value = value
        super().__init__(f"Metadata key '{key}' expects {expected}, got {value!r}")


class FrontmatterParseError(QuireError):
    """Raised when the front matter of a document cannot be parsed."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to parse front matter in {path}: {detail}")


class DocumentLoadError(QuireError):
    """Raised when a single document fails to load, aborting the whole batch.

    The original exception is always chained as ``__cause__``.
    """

    def __init__(self, source_path: Path, reason: str) -> None:
        self.source_path = source_path
        self.reason = reason
        super().__init__(f"Failed to load document {source_path}: {reason}")


class StaticFileCopyError(QuireError):
    """Raised when a static file cannot be copied to the output tree."""

    def __init__(self, source_path: Path, output_path: Path, reason: str) -> None:
        self.source_path = source_path
        self.output_path = output_path
        super().__init__(f"Failed to copy {source_path} to {output_path}: {reason}")
