"""Delete command implementation.

Permanently deletes selected files and drops them from the quarantine log.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from filejanitor.cli.display import (
    create_results_table,
    print_results_summary,
    settings_from_context,
)
from filejanitor.core import service
from filejanitor.utils.formatting import console, print_error, print_info, print_success


def delete_files(
    ctx: typer.Context,
    paths: Annotated[
        list[Path],
        typer.Argument(help="Files to delete permanently."),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete files permanently and reconcile the quarantine log."""
    settings = settings_from_context(ctx)

    if not yes:
        confirmed = typer.confirm(f"Delete {len(paths)} selected file(s)?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    targets = [os.path.abspath(p) for p in paths]
    if len(targets) == 1:
        single = service.delete_file(settings, targets[0])
        if not single.ok:
            print_error(single.message)
            raise typer.Exit(code=1)
        print_success(single.message)
        if single.data.reconciled_count:
            print_info("Removed 1 entry from the quarantine log.")
        return

    result = service.delete_files(settings, targets)
    if not result.ok:
        print_error(result.message)
        raise typer.Exit(code=1)

    outcome = result.data
    console.print(create_results_table(outcome.results, "Deletion Results"))
    print_results_summary(outcome.results, "deleted")
    if outcome.reconciled_count:
        print_info(f"Removed {outcome.reconciled_count} entr(ies) from the quarantine log.")

    if outcome.deleted_count < outcome.requested_count:
        raise typer.Exit(code=1)
