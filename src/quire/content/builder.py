"""Assembly of Document records from a source path and its parsed front matter."""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Callable, Mapping
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Any

from quire.config.settings import AuthorSettings, LoadOptions, QuireConfig
from quire.content.documents import Document
from quire.content.filename import decode_filename
from quire.content.frontmatter import ParsedDocument
from quire.content.routing import compose_route, normalize_relative
from quire.exceptions import MalformedMetadataError
from quire.utils.datetime_utils import is_future, localize

logger = logging.getLogger(__name__)

# Keys read into typed Document fields and dropped from the leftover metadata.
CONSUMED_KEYS = frozenset({"output", "id", "parent", "order", "paginate"})


def _int_value(metadata: Mapping[str, Any], key: str, default: int) -> int:
    value = metadata.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise MalformedMetadataError(key, value)
    try:
        return int(str(value).strip(), 10) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise MalformedMetadataError(key, value) from exc


def _str_value(metadata: Mapping[str, Any], key: str) -> str | None:
    value = metadata.get(key)
    return None if value is None else str(value)


def _override(metadata: Mapping[str, Any], key: str, default: str) -> str:
    value = _str_value(metadata, key)
    return default if value is None else value


def _output_value(metadata: Mapping[str, Any]) -> str | None:
    value = _str_value(metadata, "output")
    if value is not None and not normalize_relative(value).strip():
        raise MalformedMetadataError("output", value, expected="a file path")
    return value


def _title_from_name(name: str) -> str:
    stem, dot, _ = name.rpartition(".")
    return stem if dot and stem else name


class DocumentBuilder:
    """Builds one Document per source file.

    The builder holds only immutable settings, so a single instance can be
    shared by concurrent loads.
    """

    def __init__(
        self,
        documents_root: Path,
        *,
        known_extensions: frozenset[str],
        options: LoadOptions,
        app_url: str = "/",
        root_url: str = "",
        author: AuthorSettings | None = None,
        zone: tzinfo | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.documents_root = documents_root.absolute()
        self.known_extensions = known_extensions
        self.options = options
        self.app_url = app_url
        self.root_url = root_url.rstrip("/")
        self.author = author
        self.zone = zone
        self._clock = clock

    @classmethod
    def from_config(cls, config: QuireConfig, **kwargs: Any) -> DocumentBuilder:
        return cls(
            config.paths.abs_documents_dir,
            known_extensions=frozenset(config.site.rendered_extensions),
            options=config.options,
            app_url=config.site.url,
            root_url=config.site.root_url,
            author=config.site.author,
            zone=config.site.zone,
            **kwargs,
        )

    def relative_path(self, source_path: Path) -> str:
        return normalize_relative(source_path.relative_to(self.documents_root).as_posix())

    def build(self, source_path: Path, parsed: ParsedDocument) -> Document:
        """Decode ``source_path`` and merge it with the parsed front matter.

        Explicit metadata values win over values computed from the path.

        Raises:
            MalformedFilenameError: If a date prefix does not form a valid date.
            MalformedMetadataError: If ``order`` or ``paginate`` is not an integer,
                or ``output`` is present but names no file.

        """
        metadata = parsed.metadata
        relative_path = self.relative_path(source_path)
        folder, file_name = posixpath.split(relative_path)

        decoded = decode_filename(
            file_name,
            self.known_extensions,
            options=self.options,
            explicit_date=parsed.date,
        )
        date = localize(decoded.date, self.zone) if decoded.date is not None else None

        route = compose_route(
            folder,
            decoded.name,
            options=self.options,
            app_url=self.app_url,
            date=date,
            output_override=_output_value(metadata),
        )

        leftover = {key: value for key, value in metadata.items() if key not in CONSUMED_KEYS}
        if "title" not in leftover:
            leftover["title"] = _title_from_name(decoded.name)

        now = self._clock() if self._clock is not None else None
        draft = parsed.draft or (date is not None and is_future(date, now))

        return Document(
            source_path=source_path,
            relative_path=relative_path,
            id=_override(metadata, "id", route.id),
            parent_id=_override(metadata, "parent", route.parent_id),
            output_path=route.output_path,
            url=route.url,
            full_url=self.root_url + route.url,
            date=date,
            order=_int_value(metadata, "order", decoded.order),
            draft=draft,
            extensions_for_rendering=decoded.extensions,
            paginate=_int_value(metadata, "paginate", 0),
            metadata=leftover,
            source_content=parsed.content,
            summary=parsed.summary,
            author=self.author,
        )


__all__ = ["CONSUMED_KEYS", "DocumentBuilder"]
