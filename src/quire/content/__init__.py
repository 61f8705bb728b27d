"""Content ingestion: from raw files to Document records."""

from quire.content.builder import DocumentBuilder
from quire.content.documents import Document, order_documents
from quire.content.filename import DecodedFilename, decode_filename
from quire.content.frontmatter import ParsedDocument, parse_document_file
from quire.content.loader import DocumentLoader, discover_files, load_documents
from quire.content.routing import Route, compose_route
from quire.content.sanitize import sanitize_entry_id, sanitize_path

__all__ = [
    "DecodedFilename",
    "Document",
    "DocumentBuilder",
    "DocumentLoader",
    "ParsedDocument",
    "Route",
    "compose_route",
    "decode_filename",
    "discover_files",
    "load_documents",
    "order_documents",
    "parse_document_file",
    "sanitize_entry_id",
    "sanitize_path",
]
