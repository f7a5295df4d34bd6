"""Scan command implementation.

Scans the configured folders for files with configured extensions and
optionally moves every match into quarantine.
"""

import json
from typing import Annotated

import typer

from filejanitor.cli.display import (
    create_results_table,
    create_sample_table,
    print_results_summary,
    print_scan_summary,
    settings_from_context,
)
from filejanitor.cli.types import OutputFormat
from filejanitor.core import service
from filejanitor.core.errors import ConfigurationError
from filejanitor.core.settings import Settings
from filejanitor.models.result import FileActionResult
from filejanitor.utils.formatting import console, print_error, print_info, print_success


def scan_files(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    move: Annotated[
        bool,
        typer.Option(
            "--quarantine",
            "-Q",
            help="Move every matching file into the quarantine folder.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Scan configured folders for files with configured extensions."""
    settings = settings_from_context(ctx)

    result = service.run_scan(settings)
    if not result.ok:
        print_error(result.message)
        raise typer.Exit(code=1)

    scan_result = result.data

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(result.to_dict()))
    elif scan_result.files_matched == 0:
        print_success(f"No matching files found ({scan_result.folders_scanned} folder(s) scanned).")
    else:
        console.print(create_sample_table(scan_result.sample))
        print_scan_summary(scan_result)

    if move and scan_result.files_matched:
        _quarantine_all(settings, yes)


def _quarantine_all(settings: Settings, yes: bool) -> None:
    """Quarantine every match of a fresh scan after confirmation."""
    try:
        scanner = service.scanner_for(settings)
        paths = [
            record.path
            for record in scanner.iter_matches(settings.scan_roots(), settings.extensions)
        ]
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not yes:
        confirmed = typer.confirm(
            f"\nMove {len(paths)} file(s) to quarantine?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    moved = service.move_many_to_quarantine(settings, paths)
    results: list[FileActionResult] = moved.data or []
    if results:
        console.print(create_results_table(results, "Quarantine Results"))
        print_results_summary(results, "moved")
    else:
        print_error(moved.message)

    if not moved.ok or any(r.failed for r in results):
        raise typer.Exit(code=1)
