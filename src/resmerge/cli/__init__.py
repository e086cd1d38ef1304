"""Command-line entry point for resmerge."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from resmerge import __version__
from resmerge.cli.commands.apply import apply
from resmerge.cli.commands.copy_cmd import copy
from resmerge.cli.commands.merge_xml import merge_xml

console = Console()

app = typer.Typer(
    name="resmerge",
    help="Overlay bundled resources and XML fragments onto a decoded app tree",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"resmerge {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every copy and merge"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command("apply")(apply)
app.command("copy")(copy)
app.command("merge-xml")(merge_xml)


def main() -> None:
    app()


__all__ = ["app", "main"]
