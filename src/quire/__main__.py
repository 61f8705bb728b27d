"""Entry point for ``python -m quire``."""

from quire.cli.main import app

if __name__ == "__main__":
    app()
