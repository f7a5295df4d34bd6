"""Shared types for CLI commands.

This module provides common enums used across multiple CLI command
modules to avoid code duplication.
"""

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
