"""Typer CLI for browsing the research catalog."""

from __future__ import annotations

import logging
import sys
from typing import Annotated

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape

from research_catalog.config import CatalogConfig
from research_catalog.models import ALL
from research_catalog.render import EMPTY_MESSAGE, posts_table, render_reader
from research_catalog.session import CatalogSession, CatalogView

app = typer.Typer(
    name="research_catalog",
    help="Browse company breakdowns and valuations.",
    no_args_is_help=True,
)
console = Console()

_BROWSE_HELP = """\
Commands:
  query <text>    filter by free text (empty clears)
  sector <name>   filter by sector (empty or All clears)
  method <name>   filter by valuation method (empty or All clears)
  open <id>       open a post in the reader
  close           close the reader
  theme           toggle dark/light
  help            show this help
  quit            leave"""


@app.callback()
def main(
    ctx: typer.Context,
    source: Annotated[
        str | None, typer.Option("--source", "-s", help="Posts JSON URL or file path")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose logging")] = False,
) -> None:
    """Company breakdowns and valuations catalog."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s | %(name)s | %(message)s",
    )
    ctx.obj = {"source": source}


def _session(ctx: typer.Context) -> CatalogSession:
    config = CatalogConfig()
    source = (ctx.obj or {}).get("source") or config.posts_source
    return CatalogSession.from_source(
        source, timeout=config.http_timeout_seconds, dark=config.dark_theme
    )


def _print_posts(view: CatalogView) -> None:
    if view.is_empty:
        console.print(f"[dim]{EMPTY_MESSAGE}[/dim]")
        return
    console.print(posts_table(view.posts))


def _print_frame(view: CatalogView) -> None:
    if view.open_post is not None:
        console.print(Markdown(render_reader(view.open_post)))
        console.print("[dim]close: back to the list[/dim]")
        return
    f = view.filters
    theme = "dark" if view.dark else "light"
    console.print(
        escape(f"query={f.query!r} sector={f.sector} method={f.method} theme={theme}"),
        style="dim",
    )
    _print_posts(view)


@app.command("list")
def list_posts(
    ctx: typer.Context,
    query: Annotated[str, typer.Option("--query", "-q", help="Free-text search")] = "",
    sector: Annotated[str, typer.Option("--sector", help="Sector filter")] = ALL,
    method: Annotated[str, typer.Option("--method", "-m", help="Valuation method filter")] = ALL,
) -> None:
    """List posts matching the given filters."""
    session = _session(ctx)
    session.set_query(query)
    session.set_sector(sector)
    session.set_method(method)
    _print_posts(session.snapshot())


@app.command()
def sectors(ctx: typer.Context) -> None:
    """Show the available sector and method filter options."""
    view = _session(ctx).snapshot()
    console.print(escape("Sectors: " + ", ".join(view.sectors)))
    console.print(escape("Methods: " + ", ".join(view.methods)))


@app.command()
def show(
    ctx: typer.Context,
    post_id: Annotated[str, typer.Argument(help="Post ID to open")],
) -> None:
    """Open one post in the reader."""
    session = _session(ctx)
    post = session.open_post(post_id)
    if post is None:
        console.print(f"[red]Post '{escape(post_id)}' not found.[/red]")
        raise typer.Exit(1)
    console.print(Markdown(render_reader(post)))


@app.command()
def browse(ctx: typer.Context) -> None:
    """Interactive session reading commands from stdin."""
    session = _session(ctx)
    _print_frame(session.snapshot())

    for raw in sys.stdin:
        # Only the newline and the separating space are dropped; query text is kept verbatim.
        command, _, arg = raw.rstrip("\r\n").lstrip().partition(" ")
        if command != "query":
            arg = arg.strip()
        if not command:
            continue
        if command in ("quit", "exit"):
            break
        if command == "help":
            console.print(_BROWSE_HELP)
            continue

        if command == "query":
            session.set_query(arg)
        elif command == "sector":
            session.set_sector(arg or ALL)
        elif command == "method":
            session.set_method(arg or ALL)
        elif command == "open":
            if session.open_post(arg) is None:
                console.print(f"[red]Post '{escape(arg)}' not found.[/red]")
                continue
        elif command == "close":
            session.close_post()
        elif command == "theme":
            session.toggle_theme()
        else:
            console.print(f"[red]Unknown command: {escape(command)}[/red]")
            console.print(_BROWSE_HELP)
            continue

        _print_frame(session.snapshot())


if __name__ == "__main__":
    app()
