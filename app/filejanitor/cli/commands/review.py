"""Review command implementation.

Lists quarantined files that have aged past the retention threshold
and optionally purges them.
"""

import json
from typing import Annotated

import typer

from filejanitor.cli.display import (
    create_aged_table,
    create_results_table,
    print_results_summary,
    settings_from_context,
)
from filejanitor.cli.types import OutputFormat
from filejanitor.core import service
from filejanitor.core.review import DEFAULT_THRESHOLD_DAYS
from filejanitor.models.quarantine import AgedEntry
from filejanitor.utils.formatting import console, print_error, print_info, print_success


def review_quarantine(
    ctx: typer.Context,
    days: Annotated[
        int,
        typer.Option(
            "--days",
            "-d",
            min=0,
            help="Minimum age in days.",
        ),
    ] = DEFAULT_THRESHOLD_DAYS,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    purge: Annotated[
        bool,
        typer.Option("--delete", help="Delete all aged files after listing them."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """List quarantined files older than a number of days.

    Examples:
        filejanitor review                # Files older than 30 days
        filejanitor review -d 7           # Files older than a week
        filejanitor review --delete -y    # Purge aged files without asking
    """
    settings = settings_from_context(ctx)

    result = service.review_aged(settings, days)
    if not result.ok:
        print_error(result.message)
        raise typer.Exit(code=1)

    aged: list[AgedEntry] = result.data

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(result.to_dict()))
    elif not aged:
        print_success(result.message)
    else:
        console.print(create_aged_table(aged, days))
        console.print(f"\n[warning]{result.message}[/warning]")

    if purge and aged:
        _purge(ctx, aged, yes)


def _purge(ctx: typer.Context, aged: list[AgedEntry], yes: bool) -> None:
    """Delete all aged files after confirmation."""
    if not yes:
        confirmed = typer.confirm(f"\nDelete ALL {len(aged)} aged file(s)?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    settings = settings_from_context(ctx)
    result = service.delete_files(settings, [item.path for item in aged])
    if not result.ok:
        print_error(result.message)
        raise typer.Exit(code=1)

    console.print(create_results_table(result.data.results, "Deletion Results"))
    print_results_summary(result.data.results, "deleted")

    if result.data.deleted_count < result.data.requested_count:
        raise typer.Exit(code=1)
