"""Unit tests for config CLI commands.

Tests for the filejanitor config show, set and path commands.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from filejanitor.cli.main import app
from filejanitor.core.settings import load_settings
from typer.testing import CliRunner

runner = CliRunner()

SettingsWriter = Callable[..., Path]


class TestConfigShow:
    """Tests for filejanitor config show."""

    def test_show_defaults(self, tmp_path: Path) -> None:
        """A missing settings file shows defaults."""
        settings = tmp_path / "settings.toml"

        result = runner.invoke(app, ["--settings", str(settings), "config", "show"])

        assert result.exit_code == 0
        assert "Scan folder 1" in result.output
        assert ".docx, .pdf" in result.output

    def test_show_json(self, write_settings: SettingsWriter) -> None:
        """JSON output mirrors the stored settings."""
        settings = write_settings(folders=["/data"], quarantine="/q", extensions=["txt"])

        result = runner.invoke(
            app, ["--settings", str(settings), "config", "show", "--format", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "folders": ["/data", "", ""],
            "quarantine_folder": "/q",
            "extensions": [".txt"],
        }

    def test_show_broken_file(self, tmp_path: Path) -> None:
        """Unparseable settings exit with an error and a hint."""
        settings = tmp_path / "settings.toml"
        settings.write_text("folders = [")

        result = runner.invoke(app, ["--settings", str(settings), "config", "show"])

        assert result.exit_code == 1
        assert "Failed to load settings" in result.output


class TestConfigSet:
    """Tests for filejanitor config set."""

    def test_set_all(self, tmp_path: Path) -> None:
        """Folders, quarantine folder and extensions are saved."""
        settings = tmp_path / "settings.toml"

        result = runner.invoke(
            app,
            [
                "--settings",
                str(settings),
                "config",
                "set",
                "--folder",
                "/a",
                "--folder",
                "/b",
                "-q",
                "/q",
                "-e",
                "PDF, xlsx",
            ],
        )

        assert result.exit_code == 0
        assert "Settings saved to" in result.output
        saved = load_settings(settings)
        assert saved.folders == ["/a", "/b", ""]
        assert saved.quarantine_folder == "/q"
        assert saved.extensions == [".pdf", ".xlsx"]

    def test_set_relative_paths_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Relative folders are stored relative to the working directory."""
        settings = tmp_path / "settings.toml"
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(
            app,
            ["--settings", str(settings), "config", "set", "--folder", "docs", "-q", "q"],
        )

        assert result.exit_code == 0
        saved = load_settings(settings)
        assert saved.folders == [str(tmp_path / "docs"), "", ""]
        assert saved.quarantine_folder == str(tmp_path / "q")

    def test_set_blank_quarantine_clears_it(self, write_settings: SettingsWriter) -> None:
        """A blank quarantine folder is stored as unset, not as the working directory."""
        settings = write_settings(quarantine="/q")

        result = runner.invoke(app, ["--settings", str(settings), "config", "set", "-q", ""])

        assert result.exit_code == 0
        assert load_settings(settings).quarantine_folder == ""

    def test_set_keeps_other_values(self, write_settings: SettingsWriter) -> None:
        """Options that are not given keep their stored value."""
        settings = write_settings(folders=["/data"], quarantine="/q")

        result = runner.invoke(app, ["--settings", str(settings), "config", "set", "-e", "md"])

        assert result.exit_code == 0
        saved = load_settings(settings)
        assert saved.folders == ["/data", "", ""]
        assert saved.quarantine_folder == "/q"
        assert saved.extensions == [".md"]

    def test_too_many_folders(self, tmp_path: Path) -> None:
        """More than three folders are rejected."""
        settings = tmp_path / "settings.toml"
        args = ["--settings", str(settings), "config", "set"]
        for folder in ("/a", "/b", "/c", "/d"):
            args += ["--folder", folder]

        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "At most 3 scan folders" in result.output
        assert not settings.exists()

    def test_default_location(self, isolated_config_home: Path) -> None:
        """Without --settings the XDG config directory is used."""
        result = runner.invoke(app, ["config", "set", "-q", "/q"])

        assert result.exit_code == 0
        saved = isolated_config_home / "filejanitor" / "settings.toml"
        assert load_settings(saved).quarantine_folder == "/q"


class TestConfigPath:
    """Tests for filejanitor config path."""

    def test_prints_override(self, tmp_path: Path) -> None:
        """--settings is reflected in the printed path."""
        settings = tmp_path / "s.toml"
        result = runner.invoke(app, ["--settings", str(settings), "config", "path"])
        assert result.exit_code == 0
        assert result.output.strip() == str(settings)

    def test_prints_default(self, isolated_config_home: Path) -> None:
        """The default path lives in the XDG config directory."""
        result = runner.invoke(app, ["config", "path"])
        expected = isolated_config_home / "filejanitor" / "settings.toml"
        assert result.output.strip() == str(expected)
