"""Fixtures for CLI command tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from filejanitor.core.settings import Settings, save_settings

SettingsWriter = Callable[..., Path]


@pytest.fixture
def write_settings(tmp_path: Path) -> SettingsWriter:
    """Return a helper that writes a settings file and returns its path."""
    path = tmp_path / "settings.toml"

    def _write(
        folders: list[str] | None = None,
        quarantine: str = "",
        extensions: list[str] | None = None,
    ) -> Path:
        settings = Settings.model_validate(
            {
                "folders": folders or [],
                "quarantine_folder": quarantine,
                "extensions": extensions if extensions is not None else [".pdf"],
            }
        )
        return save_settings(settings, path)

    return _write
