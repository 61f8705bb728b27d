"""The document record produced for every content file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from quire.config.settings import AuthorSettings


class Document(BaseModel):
    """Identity, routing and metadata of one content file.

    Documents are immutable once built. ``metadata`` is a read-only view of the
    keys the loader did not consume, with ``title`` always present.
    """

    model_config = ConfigDict(frozen=True)

    source_path: Path
    relative_path: str
    id: str
    parent_id: str = ""
    output_path: str
    url: str
    full_url: str
    date: datetime | None = None
    order: int = 0
    draft: bool = False
    extensions_for_rendering: tuple[str, ...] = ()
    paginate: int = 0
    metadata: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    source_content: str = ""
    summary: str | None = None
    author: AuthorSettings | None = None

    @field_validator("metadata", mode="after")
    @classmethod
    def _freeze_metadata(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("metadata")
    def _dump_metadata(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    @property
    def title(self) -> str:
        return str(self.metadata.get("title", ""))

    @property
    def sort_key(self) -> tuple[int, float, str]:
        """Key for explicit ``(order, date, id)`` ordering; undated sorts first."""
        timestamp = self.date.timestamp() if self.date is not None else float("-inf")
        return (self.order, timestamp, self.id)


def order_documents(documents: Iterable[Document]) -> list[Document]:
    """Sort documents by ``(order, date, id)``.

    Loading yields documents in no particular order, so anything that needs a
    stable sequence must go through this function.
    """
    return sorted(documents, key=lambda doc: doc.sort_key)


__all__ = ["Document", "order_documents"]
