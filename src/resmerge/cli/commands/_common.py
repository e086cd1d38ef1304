"""Shared option handling for resmerge commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from lxml import etree
from rich.console import Console
from rich.markup import escape

from resmerge.errors import ResMergeError
from resmerge.resources.context import ResourceContext
from resmerge.resources.embedded import EmbeddedResourceSource

console = Console()

# Failures reported to the user instead of a traceback
HANDLED_ERRORS = (ResMergeError, OSError, etree.XMLSyntaxError)


def build_context(target: Path, pretty: bool = False) -> ResourceContext:
    if not (target / "res").is_dir():
        console.print(f"[red]Error:[/red] {escape(str(target))} has no res/ directory")
        raise typer.Exit(1)
    return ResourceContext(target, pretty_print=pretty)


def build_source(package: Optional[str]) -> EmbeddedResourceSource:
    try:
        return EmbeddedResourceSource.from_package(package)
    except (FileNotFoundError, ModuleNotFoundError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def fail(exc: Exception) -> typer.Exit:
    """Print *exc* and return the Exit to raise."""
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return typer.Exit(1)
