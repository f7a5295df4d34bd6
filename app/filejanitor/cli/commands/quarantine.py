"""Quarantine command implementation.

Moves selected files into the configured quarantine folder.
"""

from pathlib import Path
from typing import Annotated

import typer

from filejanitor.cli.display import (
    create_results_table,
    print_results_summary,
    settings_from_context,
)
from filejanitor.core import service
from filejanitor.models.result import FileActionResult
from filejanitor.utils.formatting import console, print_error, print_success


def quarantine_files(
    ctx: typer.Context,
    paths: Annotated[
        list[Path],
        typer.Argument(help="Files to move into quarantine."),
    ],
) -> None:
    """Move files into the quarantine folder, grouped by extension."""
    settings = settings_from_context(ctx)

    if len(paths) == 1:
        single = service.move_to_quarantine(settings, paths[0])
        if not single.ok:
            print_error(single.message)
            raise typer.Exit(code=1)
        print_success(single.message)
        return

    result = service.move_many_to_quarantine(settings, paths)
    results: list[FileActionResult] = result.data or []
    if not results:
        print_error(result.message)
        raise typer.Exit(code=1)

    console.print(create_results_table(results, "Quarantine Results"))
    print_results_summary(results, "moved")

    if any(r.failed for r in results):
        raise typer.Exit(code=1)
