"""CLI commands for filejanitor.

This package contains all subcommand implementations.
"""

from filejanitor.cli.commands import config, delete, quarantine, review, scan

__all__ = ["config", "delete", "quarantine", "review", "scan"]
