"""Allow running filejanitor with ``python -m filejanitor``."""

from filejanitor.cli.main import app

app()
