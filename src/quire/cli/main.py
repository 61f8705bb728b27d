"""Main Typer application for Quire."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from quire.cli.errorhandler import handle_cli_errors
from quire.config import load_quire_config
from quire.content import Document, load_documents, order_documents
from quire.logging_setup import configure_logging
from quire.static import copy_site_files

app = typer.Typer(
    name="quire",
    help="Turn a tree of content files into addressable documents for a static site",
    add_completion=False,
)

console = Console()

SiteRootArgument = Annotated[
    Path,
    typer.Argument(help="Site root directory containing .quire/config.yml"),
]
DebugOption = Annotated[bool, typer.Option("--debug", help="Show full tracebacks on errors")]


@app.callback()
def main(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Logging level (defaults to $QUIRE_LOG_LEVEL or INFO)")
    ] = None,
) -> None:
    """Quire command line interface."""
    configure_logging(log_level)


def _documents_table(documents: list[Document]) -> Table:
    table = Table(title=f"{len(documents)} document(s)")
    table.add_column("Id", style="cyan")
    table.add_column("URL")
    table.add_column("Date")
    table.add_column("Order", justify="right")
    table.add_column("Draft")
    table.add_column("Render")
    for doc in documents:
        table.add_row(
            doc.id,
            doc.url,
            doc.date.isoformat() if doc.date else "",
            str(doc.order),
            "yes" if doc.draft else "",
            ", ".join(doc.extensions_for_rendering),
        )
    return table


@app.command()
def documents(
    site_root: SiteRootArgument = Path(),
    *,
    drafts: Annotated[bool, typer.Option("--drafts/--no-drafts", help="Include draft documents")] = True,
    as_json: Annotated[bool, typer.Option("--json", help="Print documents as JSON")] = False,
    debug: DebugOption = False,
) -> None:
    """Load every document of the site and list its identity and routing."""
    with handle_cli_errors(debug=debug):
        config = load_quire_config(site_root.resolve())
        loaded = order_documents(load_documents(config))
        if not drafts:
            loaded = [doc for doc in loaded if not doc.draft]

        if as_json:
            payload = [doc.model_dump(mode="json", exclude={"source_content"}) for doc in loaded]
            typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            console.print(_documents_table(loaded))


@app.command("copy-files")
def copy_files(site_root: SiteRootArgument = Path(), *, debug: DebugOption = False) -> None:
    """Copy static files into the output directory."""
    with handle_cli_errors(debug=debug):
        config = load_quire_config(site_root.resolve())
        copied = copy_site_files(config)
        console.print(f"[green]Copied {copied} file(s) to {config.paths.abs_output_dir}[/green]")


@app.command("config")
def show_config(site_root: SiteRootArgument = Path(), *, debug: DebugOption = False) -> None:
    """Print the effective configuration as JSON."""
    with handle_cli_errors(debug=debug):
        config = load_quire_config(site_root.resolve())
        typer.echo(config.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
