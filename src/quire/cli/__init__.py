"""Command line interface for Quire."""

from quire.cli.main import app

__all__ = ["app"]
