"""Copying of static files (images, stylesheets, ...) into the output tree."""

from __future__ import annotations

import logging
import shutil
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from quire.config.settings import DEFAULT_STATIC_WORKERS
from quire.content.loader import discover_files
from quire.exceptions import StaticFileCopyError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from quire.config.settings import QuireConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StaticFile:
    source_path: Path
    output_path: Path


def discover_static_files(files_root: Path, output_root: Path) -> list[StaticFile]:
    """Map every file under ``files_root`` to the same relative path under ``output_root``."""
    return [
        StaticFile(source_path=path, output_path=output_root / path.relative_to(files_root))
        for path in discover_files(files_root)
    ]


def _copy_one(file: StaticFile) -> StaticFile:
    try:
        file.output_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(file.source_path, file.output_path)
    except OSError as exc:
        raise StaticFileCopyError(file.source_path, file.output_path, str(exc)) from exc
    return file


def copy_static_files(files: Sequence[StaticFile], *, max_workers: int = DEFAULT_STATIC_WORKERS) -> int:
    """Copy files in parallel and return how many were copied.

    Raises:
        StaticFileCopyError: For the first file that could not be copied.

    """
    if not files:
        return 0

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_copy_one, file) for file in files]
        copied = [future.result() for future in futures]

    logger.info("Copied %d static file(s)", len(copied))
    return len(copied)


def copy_site_files(config: QuireConfig) -> int:
    """Copy the configured files directory into the output directory."""
    files = discover_static_files(config.paths.abs_files_dir, config.paths.abs_output_dir)
    return copy_static_files(files, max_workers=config.loader.static_workers)


__all__ = ["StaticFile", "copy_site_files", "copy_static_files", "discover_static_files"]
