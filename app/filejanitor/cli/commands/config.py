"""Settings commands.

Provides commands to show and change the scan folders, the quarantine
folder and the tracked extensions.
"""

import json
import os
from pathlib import Path
from typing import Annotated

import typer

from filejanitor.cli.display import settings_from_context
from filejanitor.cli.types import OutputFormat
from filejanitor.core.errors import SettingsError
from filejanitor.core.paths import get_settings_path
from filejanitor.core.settings import FOLDER_SLOTS, Settings, save_settings
from filejanitor.utils.formatting import console, create_table, print_error, print_success

app = typer.Typer(
    help="Show and change settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


def _settings_path(ctx: typer.Context) -> Path:
    """Settings path from --settings, or the default location."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return obj.get("settings_path") or get_settings_path()


def _print_settings(settings: Settings) -> None:
    """Display settings as a Rich table."""
    table = create_table("Settings")
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    for slot, folder in enumerate(settings.folders, start=1):
        table.add_row(f"Scan folder {slot}", folder or "[muted](unset)[/muted]")
    table.add_row("Quarantine folder", settings.quarantine_folder or "[muted](unset)[/muted]")
    table.add_row("Extensions", ", ".join(settings.extensions) or "[muted](none)[/muted]")

    console.print(table)


@app.command()
def show(
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
) -> None:
    """Show the current settings."""
    settings = settings_from_context(ctx)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(settings.model_dump()))
        return

    _print_settings(settings)


@app.command(name="set")
def set_settings(
    ctx: typer.Context,
    folders: Annotated[
        list[str] | None,
        typer.Option(
            "--folder",
            help=f"Scan folder (repeat up to {FOLDER_SLOTS} times; replaces all slots).",
        ),
    ] = None,
    quarantine_folder: Annotated[
        str | None,
        typer.Option("--quarantine", "-q", help="Quarantine folder."),
    ] = None,
    extensions: Annotated[
        str | None,
        typer.Option("--extensions", "-e", help="Comma-separated extensions, e.g. 'pdf,docx'."),
    ] = None,
) -> None:
    """Change settings; options that are not given keep their value."""
    settings = settings_from_context(ctx)

    if folders is not None and len(folders) > FOLDER_SLOTS:
        print_error(f"At most {FOLDER_SLOTS} scan folders are supported.")
        raise typer.Exit(code=1)

    updated = settings.with_changes(
        folders=None if folders is None else [_absolute(f) for f in folders],
        quarantine_folder=None if quarantine_folder is None else _absolute(quarantine_folder),
        extensions=extensions,
    )

    try:
        path = save_settings(updated, _settings_path(ctx))
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    _print_settings(updated)
    print_success(f"Settings saved to {path}")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the settings file location."""
    typer.echo(str(_settings_path(ctx)))


def _absolute(folder: str) -> str:
    """Resolve a folder against the working directory; blank stays blank."""
    return os.path.abspath(folder) if folder.strip() else ""
