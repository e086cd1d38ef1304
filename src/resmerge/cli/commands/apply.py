"""``resmerge apply`` - run a YAML merge plan against a target tree.

Usage:
    resmerge apply plan.yaml --target build/app
    resmerge apply plan.yaml --target build/app --package my_patches
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from resmerge.cli.commands._common import (
    HANDLED_ERRORS,
    build_context,
    build_source,
    console,
    fail,
)
from resmerge.plan import apply_plan, load_plan


def apply(
    plan_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Merge plan (YAML)"),
    target: Path = typer.Option(..., "--target", "-t", help="Decoded app directory containing res/"),
    package: Optional[str] = typer.Option(
        None, "--package", "-p", help="Package holding the bundled assets"
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Re-indent merged XML files"),
) -> None:
    """Copy resource groups and merge XML files listed in PLAN_FILE."""
    try:
        plan = load_plan(plan_file)
    except HANDLED_ERRORS as e:
        raise fail(e)

    context = build_context(target, pretty=pretty)
    source = build_source(package)

    try:
        report = apply_plan(context, source, plan)
    except HANDLED_ERRORS as e:
        raise fail(e)

    table = Table(title="Applied merge plan")
    table.add_column("Action", style="cyan")
    table.add_column("Path")
    for path in report.copied:
        try:
            shown = str(path.relative_to(context.root))
        except ValueError:
            shown = str(path)
        table.add_row("copied", shown)
    for resource in report.merged:
        table.add_row("merged", f"res/{resource}")

    console.print(table)
