"""Entrypoint for the command line interface."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer

from favicon_discovery.config_logging import configure_logging
from favicon_discovery.exceptions import FaviconDiscoveryError
from favicon_discovery.finder import FaviconFinder
from favicon_discovery.models import Icon

# CLI Options
suffix_option = typer.Option(
    None,
    "--suffix",
    "-s",
    help="Only return icons with this file suffix (e.g. png). Can be given multiple times",
)

body_file_option = typer.Option(
    None,
    "--body-file",
    exists=True,
    dir_okay=False,
    readable=True,
    help="Read the page HTML from this file instead of fetching the URL",
)

json_option = typer.Option(
    False,
    "--json",
    help="Print the result as JSON",
)

cli = typer.Typer(
    name="favicon-discovery",
    help="Discover, verify and rank the favicons of a web page",
    no_args_is_help=True,
    add_completion=False,
)


@cli.callback()
def setup():
    """CLI Entrypoint"""
    configure_logging()


def _read_body(body_file: Optional[Path]) -> Optional[str]:
    return body_file.read_text(encoding="utf-8") if body_file is not None else None


def _run(coro):
    try:
        return asyncio.run(coro)
    except FaviconDiscoveryError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)


def _format_icon(icon: Icon) -> str:
    return f"{icon.url}\t{icon.width}x{icon.height}"


@cli.command("all")
def all_icons(
    url: str = typer.Argument(..., help="URL of the page to inspect"),
    suffixes: Optional[list[str]] = suffix_option,
    body_file: Optional[Path] = body_file_option,
    as_json: bool = json_option,
):
    """Print every verified favicon of a page, best first."""
    icons: list[Icon] = _run(
        FaviconFinder().get_all(url, body=_read_body(body_file), suffixes=suffixes or None)
    )

    if as_json:
        typer.echo(json.dumps([icon.model_dump() for icon in icons]))
        return

    for icon in icons:
        typer.echo(_format_icon(icon))


@cli.command("best")
def best_icon(
    url: str = typer.Argument(..., help="URL of the page to inspect"),
    suffixes: Optional[list[str]] = suffix_option,
    body_file: Optional[Path] = body_file_option,
    as_json: bool = json_option,
):
    """Print the best favicon of a page."""
    icon: Optional[Icon] = _run(
        FaviconFinder().get_best(url, body=_read_body(body_file), suffixes=suffixes or None)
    )

    if icon is None:
        typer.echo("No favicon found", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(icon.model_dump()))
    else:
        typer.echo(_format_icon(icon))


if __name__ == "__main__":
    cli()
