"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from filejanitor import __version__
from filejanitor.cli.commands import config, delete, quarantine, review, scan
from filejanitor.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="filejanitor",
    help="Find files by extension, quarantine them, and purge aged ones.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filejanitor version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    settings_path: Annotated[
        Path | None,
        typer.Option(
            "--settings",
            help="Use an alternative settings file.",
        ),
    ] = None,
) -> None:
    """filejanitor - Scan, quarantine and purge files by extension.

    Configure scan folders, a quarantine folder and extensions with
    [bold]filejanitor config set[/bold], then scan and quarantine matches.
    Quarantined files can be reviewed and purged once they have aged.
    """
    _configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings_path"] = settings_path


# Register commands
app.command(name="scan")(scan.scan_files)
app.command(name="quarantine")(quarantine.quarantine_files)
app.command(name="review")(review.review_quarantine)
app.command(name="delete")(delete.delete_files)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
