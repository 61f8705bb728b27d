"""Batch loading of every document under the documents root.

Each file is parsed and built independently; the parser runs in a worker
thread and the decode/build step runs synchronously on the event loop. The
first failing file aborts the whole batch.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from quire.config.settings import DEFAULT_CONCURRENCY, DEFAULT_SUMMARY_MARKER, QuireConfig
from quire.content.builder import DocumentBuilder
from quire.content.documents import Document
from quire.content.frontmatter import ParsedDocument, parse_document_file
from quire.exceptions import DocumentLoadError
from quire.utils.async_utils import run_async_safely

logger = logging.getLogger(__name__)

DocumentParser = Callable[[Path, str], ParsedDocument]


def discover_files(root: Path) -> list[Path]:
    """Return every file below ``root``; a missing root yields no files."""
    if not root.is_dir():
        logger.debug("Documents directory %s does not exist", root)
        return []
    return sorted(path for path in root.rglob("*") if path.is_file())


class DocumentLoader:
    """Loads all documents under a root directory into Document records."""

    def __init__(
        self,
        builder: DocumentBuilder,
        *,
        parser: DocumentParser = parse_document_file,
        summary_marker: str = DEFAULT_SUMMARY_MARKER,
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> None:
        self.builder = builder
        self.parser = parser
        self.summary_marker = summary_marker
        self.concurrency = concurrency

    @classmethod
    def from_config(cls, config: QuireConfig, **kwargs) -> DocumentLoader:
        return cls(
            DocumentBuilder.from_config(config),
            summary_marker=config.site.summary_marker,
            concurrency=config.loader.concurrency,
            **kwargs,
        )

    @property
    def root(self) -> Path:
        return self.builder.documents_root

    def load(self) -> list[Document]:
        """Load all documents synchronously. See :meth:`load_async`."""
        return run_async_safely(self.load_async())

    async def load_async(self) -> list[Document]:
        """Load all documents concurrently.

        Returns:
            One Document per file, in no particular order.

        Raises:
            DocumentLoadError: For the first file that fails to parse or decode.

        """
        paths = discover_files(self.root)
        logger.info("Loading %d document(s) from %s", len(paths), self.root)
        if not paths:
            return []

        semaphore = asyncio.Semaphore(self.concurrency)
        documents = await asyncio.gather(*(self._load_one(path, semaphore) for path in paths))
        return list(documents)

    async def _load_one(self, path: Path, semaphore: asyncio.Semaphore) -> Document:
        try:
            async with semaphore:
                parsed = await asyncio.to_thread(self.parser, path, self.summary_marker)
            return self.builder.build(path, parsed)
        except Exception as exc:
            logger.error("Failed to load %s: %s", path, exc)
            raise DocumentLoadError(path, str(exc)) from exc


def load_documents(config: QuireConfig) -> list[Document]:
    """Load every document of the configured site."""
    return DocumentLoader.from_config(config).load()


__all__ = ["DocumentLoader", "DocumentParser", "discover_files", "load_documents"]
