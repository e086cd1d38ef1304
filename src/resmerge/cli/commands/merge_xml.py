"""``resmerge merge-xml`` - splice a bundled XML fragment into a target file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from resmerge.cli.commands._common import (
    HANDLED_ERRORS,
    build_context,
    build_source,
    console,
    fail,
)
from resmerge.xmlmerge.merge import merge_xml_resource


def merge_xml(
    resource_directory: str = typer.Argument(..., help="Bundled directory holding the template"),
    target_file: str = typer.Argument(..., help="File path relative to res/, e.g. values/strings.xml"),
    tag: str = typer.Argument(..., help="Element whose children are merged"),
    target: Path = typer.Option(..., "--target", "-t", help="Decoded app directory containing res/"),
    package: Optional[str] = typer.Option(
        None, "--package", "-p", help="Package holding the bundled assets"
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Re-indent the merged file"),
) -> None:
    """Append the children of <TAG> from the bundled TARGET_FILE to res/TARGET_FILE."""
    context = build_context(target, pretty=pretty)
    source = build_source(package)

    try:
        merge_xml_resource(context, source, resource_directory, target_file, tag)
    except HANDLED_ERRORS as e:
        raise fail(e)

    console.print(f"[green]Merged <{tag}> into res/{target_file}[/green]")
