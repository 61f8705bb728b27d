"""Output path, URL and identity composition for decoded documents."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import TYPE_CHECKING

from quire.content.sanitize import sanitize_entry_id, sanitize_path

if TYPE_CHECKING:
    from datetime import datetime

    from quire.config.settings import LoadOptions

INDEX_FILE = "index.html"
_SEPARATORS = "/\\"


@dataclass(frozen=True, slots=True)
class Route:
    """Where a document lands in the output tree and how it is addressed.

    ``file_name`` is empty when clean-URL rewriting elided it, in which case
    ``output_path`` ends with ``index.html`` and ``url`` with ``/``.
    """

    folder: str
    file_name: str
    output_path: str
    url: str
    id: str
    parent_id: str


def ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


def _join(*parts: str) -> str:
    return posixpath.join(*(part for part in parts if part))


def _stem(file_name: str) -> str:
    stem, dot, _ = file_name.rpartition(".")
    return stem if dot and stem else file_name


def _extension(file_name: str) -> str:
    stem, dot, extension = file_name.rpartition(".")
    return f".{extension}" if dot and stem else ""


def normalize_relative(path: str) -> str:
    """Use forward slashes and drop leading/trailing separators."""
    return path.replace("\\", "/").strip(_SEPARATORS)


def _identity(folder: str, file_name: str) -> str:
    return normalize_relative(_join(sanitize_path(folder), _stem(sanitize_entry_id(file_name))))


def compose_route(
    folder: str,
    file_name: str,
    *,
    options: LoadOptions,
    app_url: str,
    date: datetime | None = None,
    output_override: str | None = None,
) -> Route:
    """Compose the output path, URL, id and parent id of a document.

    Args:
        folder: Folder of the source file relative to the documents root.
        file_name: File name with render extensions, date and order removed.
        options: Path sanitization, clean URL and date folder switches. The
            id and parent id are sanitized whatever ``sanitize_path`` says.
        app_url: Base URL of the application; a trailing slash is added.
        date: Publication date, used for date folders.
        output_override: Explicit output path from the ``output`` metadata key.
            It must name a file. It replaces the computed output path and URL
            outright, and the id and parent id are derived from it instead of
            from the source location.

    Returns:
        The composed route.

    """
    base_url = ensure_trailing_slash(app_url)

    if output_override is not None:
        output_path = normalize_relative(output_override)
        override_folder, override_name = posixpath.split(output_path)
        return Route(
            folder=override_folder,
            file_name=override_name,
            output_path=output_path,
            url=base_url + output_path,
            id=_identity(override_folder, override_name),
            parent_id=normalize_relative(sanitize_path(override_folder)),
        )

    folder = normalize_relative(folder)
    parent_id = normalize_relative(sanitize_path(folder))

    if options.insert_date_into_path and date is not None:
        folder = _join(folder, str(date.year), str(date.month), str(date.day))

    file_name = sanitize_entry_id(file_name)
    doc_id = _identity(folder, file_name)
    if options.sanitize_path:
        folder = normalize_relative(sanitize_path(folder))

    if (
        options.clean_urls
        and file_name.lower() != INDEX_FILE
        and _extension(file_name).lower() == ".html"
    ):
        folder = _join(folder, _stem(file_name))
        file_name = ""

    output_path = _join(folder, file_name or INDEX_FILE)
    if file_name:
        url_path = _join(folder, file_name)
    else:
        url_path = ensure_trailing_slash(folder) if folder else ""

    return Route(
        folder=folder,
        file_name=file_name,
        output_path=output_path,
        url=base_url + url_path,
        id=doc_id,
        parent_id=parent_id,
    )


__all__ = ["INDEX_FILE", "Route", "compose_route", "ensure_trailing_slash", "normalize_relative"]
