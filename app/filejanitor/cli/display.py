"""Shared Rich display functions for scan, review and file action results.

Provides reusable table builders and summary printers used by the
scan, quarantine, review and delete commands.
"""

from collections.abc import Sequence

import typer
from rich.table import Table

from filejanitor.core.settings import Settings, require_settings
from filejanitor.models.quarantine import AgedEntry
from filejanitor.models.result import FileActionResult
from filejanitor.models.scan import FileRecord, ScanResult
from filejanitor.utils.formatting import (
    console,
    create_table,
    format_datetime,
    format_size,
    print_success,
    print_warning,
)


def settings_from_context(ctx: typer.Context) -> Settings:
    """Load settings using the --settings path stored by the main callback."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return require_settings(obj.get("settings_path"))


def create_sample_table(records: Sequence[FileRecord]) -> Table:
    """Create a table listing sampled scan matches.

    Args:
        records: File records to display.

    Returns:
        Rich Table with Path, Size and Modified columns.
    """
    table = create_table("Matching Files (sample)")
    table.add_column("Path", overflow="fold")
    table.add_column("Size", style="info", justify="right")
    table.add_column("Modified", style="muted")

    for record in records:
        table.add_row(record.path, format_size(record.size), format_datetime(record.modified))

    return table


def print_scan_summary(result: ScanResult) -> None:
    """Print folder, match and size totals of a scan."""
    console.print(
        f"\nScanned [info]{result.folders_scanned}[/info] folder(s): "
        f"[info]{result.files_matched}[/info] matching file(s), "
        f"[info]{format_size(result.total_size_bytes)}[/info] total"
    )
    if result.files_matched > len(result.sample):
        console.print(f"[dim](showing {len(result.sample)} of {result.files_matched})[/dim]")


def create_aged_table(aged: list[AgedEntry], threshold_days: int) -> Table:
    """Create a table of quarantined files past the retention threshold.

    Args:
        aged: Aged entries in log order.
        threshold_days: Threshold used for the title.

    Returns:
        Rich Table with File, Path, Moved At, Age and Size columns.
    """
    table = create_table(f"Quarantined Files Older Than {threshold_days} Days")
    table.add_column("File", style="bold")
    table.add_column("Path", style="muted")
    table.add_column("Moved At")
    table.add_column("Age (days)", style="aged", justify="right")
    table.add_column("Size", style="info", justify="right")

    for item in aged:
        name = item.path.replace("\\", "/").rsplit("/", 1)[-1]
        table.add_row(
            name,
            item.path,
            format_datetime(item.entry.moved_at),
            str(item.age_days),
            format_size(item.entry.size),
        )

    return table


def create_results_table(results: Sequence[FileActionResult], title: str) -> Table:
    """Create a table of per-file move or delete results.

    Args:
        results: Per-file results.
        title: Table title.

    Returns:
        Rich Table with Status, Path and Details columns.
    """
    table = create_table(title)
    table.add_column("Status", width=10, justify="center", no_wrap=True)
    table.add_column("Path", overflow="fold")
    table.add_column("Details", style="muted", overflow="fold", min_width=12)

    for result in results:
        if result.success:
            status = "[success]OK[/success]"
            detail = result.destination or ""
        elif result.protected:
            status = "[protected]PROTECTED[/protected]"
            detail = result.error or ""
        else:
            status = "[error]FAIL[/error]"
            detail = result.error or "Unknown error"
        table.add_row(status, result.path, detail)

    return table


def print_results_summary(results: Sequence[FileActionResult], verb: str) -> None:
    """Print a success message or a succeeded/failed count.

    Args:
        results: Per-file results.
        verb: Past-tense action for the message (e.g. "deleted").
    """
    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if r.failed)

    if fail_count == 0:
        print_success(f"All {success_count} file(s) {verb} successfully.")
    else:
        print_warning(f"{success_count} {verb}, {fail_count} failed")
