"""``resmerge copy`` - overlay one resource group onto the target tree."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from resmerge.cli.commands._common import (
    HANDLED_ERRORS,
    build_context,
    build_source,
    console,
    fail,
)
from resmerge.resources.copy import copy_resources
from resmerge.resources.groups import ResourceGroup


def copy(
    source_directory: str = typer.Argument(..., help="Bundled directory holding the group"),
    group_directory: str = typer.Argument(..., help="Resource directory name, e.g. drawable"),
    resources: List[str] = typer.Argument(..., help="Resource file names"),
    target: Path = typer.Option(..., "--target", "-t", help="Decoded app directory containing res/"),
    package: Optional[str] = typer.Option(
        None, "--package", "-p", help="Package holding the bundled assets"
    ),
) -> None:
    """Copy RESOURCES from SOURCE_DIRECTORY/GROUP_DIRECTORY into res/GROUP_DIRECTORY."""
    context = build_context(target)
    source = build_source(package)

    try:
        written = copy_resources(
            context, source, source_directory, ResourceGroup(group_directory, *resources)
        )
    except HANDLED_ERRORS as e:
        raise fail(e)

    console.print(f"[green]Copied {len(written)} file(s) into res/{group_directory}[/green]")
