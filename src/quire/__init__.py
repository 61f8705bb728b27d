"""Quire: content ingestion for static sites."""

from quire.config import QuireConfig, load_quire_config
from quire.content import Document, DocumentLoader, load_documents, order_documents

__version__ = "0.1.0"
__all__ = [
    "Document",
    "DocumentLoader",
    "QuireConfig",
    "load_documents",
    "load_quire_config",
    "order_documents",
]
