"""CLI package for filejanitor.

This package contains the Typer application and all subcommands.
"""

from filejanitor.cli.main import app

__all__ = ["app"]
