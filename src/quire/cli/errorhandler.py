"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from quire.config.exceptions import ConfigError
from quire.exceptions import DocumentLoadError, QuireError, StaticFileCopyError

console = Console(stderr=True, soft_wrap=True)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise with the full traceback. If False, print a
            one-line error and exit with status 1.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except DocumentLoadError as e:
        if debug:
            raise
        console.print(f"[bold red]Document failed to load:[/bold red] {escape(str(e.source_path))}")
        console.print(f"  {e.reason}", markup=False)
        raise typer.Exit(1) from e
    except StaticFileCopyError as e:
        if debug:
            raise
        console.print(f"[bold red]Static file copy failed:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except QuireError as e:
        if debug:
            raise
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] {escape(str(e))}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
