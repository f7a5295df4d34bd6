"""Settings model and TOML file I/O.

Settings have a fixed shape: three scan folder slots, one quarantine
folder and a list of extensions. Unset values are empty strings.
Loading sanitizes whatever is on disk into that shape; saving is atomic.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from filejanitor.core.errors import SettingsError, SettingsParseError, SettingsValidationError
from filejanitor.core.extensions import normalize_extensions
from filejanitor.core.paths import get_settings_path

logger = logging.getLogger(__name__)

# Number of scan folder slots.
FOLDER_SLOTS = 3

DEFAULT_EXTENSIONS: tuple[str, ...] = (".pdf", ".docx")


class Settings(BaseModel):
    """User settings consumed by the scan and quarantine pipeline.

    Attributes:
        folders: Exactly FOLDER_SLOTS scan folder paths ("" = unset).
        quarantine_folder: Quarantine root ("" = unset).
        extensions: Normalized, sorted extension tokens.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    folders: Annotated[
        list[str],
        Field(
            default_factory=lambda: [""] * FOLDER_SLOTS,
            description="Scan folder slots",
        ),
    ]
    quarantine_folder: Annotated[
        str,
        Field(
            validation_alias=AliasChoices("quarantine_folder", "quarantineFolder"),
            description="Quarantine root directory",
        ),
    ] = ""
    extensions: Annotated[
        list[str],
        Field(
            default_factory=lambda: sorted(DEFAULT_EXTENSIONS),
            description="File extensions to match",
        ),
    ]

    @field_validator("folders", mode="before")
    @classmethod
    def sanitize_folders(cls, v: object) -> list[str]:
        """Coerce folders into exactly FOLDER_SLOTS trimmed strings."""
        if not isinstance(v, (list, tuple)):
            return [""] * FOLDER_SLOTS
        folders = [item.strip() if isinstance(item, str) else "" for item in v[:FOLDER_SLOTS]]
        folders.extend([""] * (FOLDER_SLOTS - len(folders)))
        return folders

    @field_validator("quarantine_folder", mode="before")
    @classmethod
    def sanitize_quarantine(cls, v: object) -> str:
        """Treat non-string quarantine folders as unset."""
        return v.strip() if isinstance(v, str) else ""

    @field_validator("extensions", mode="before")
    @classmethod
    def sanitize_extensions(cls, v: object) -> list[str]:
        """Normalize extensions; fall back to defaults for unusable input."""
        if isinstance(v, (str, list, tuple)):
            return sorted(normalize_extensions(v))
        return sorted(DEFAULT_EXTENSIONS)

    def scan_roots(self) -> list[str]:
        """Return the configured (non-empty) scan folders in slot order."""
        return [folder for folder in self.folders if folder]

    def with_changes(
        self,
        *,
        folders: list[str] | None = None,
        quarantine_folder: str | None = None,
        extensions: str | list[str] | None = None,
    ) -> Settings:
        """Return a sanitized copy with the given fields replaced."""
        data: dict[str, Any] = self.model_dump()
        if folders is not None:
            data["folders"] = folders
        if quarantine_folder is not None:
            data["quarantine_folder"] = quarantine_folder
        if extensions is not None:
            data["extensions"] = extensions
        return Settings.model_validate(data)


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing file yields default settings.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Sanitized Settings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsValidationError: If the content doesn't match the schema.
        SettingsError: If the file cannot be read.
    """
    settings_path = path or get_settings_path()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsValidationError(f"Invalid settings content: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace().

    Args:
        settings: The Settings object to save.
        path: Path to save to. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(settings.model_dump(), f)
        os.replace(tmp_path, settings_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def require_settings(settings_path: Path | None = None) -> Settings:
    """Load settings or exit with a helpful error message.

    This is a convenience wrapper around load_settings() for CLI commands.

    Args:
        settings_path: Optional custom settings path.

    Returns:
        Loaded and sanitized Settings.

    Raises:
        typer.Exit: If the settings cannot be loaded.
    """
    import typer

    from filejanitor.utils.formatting import print_error, print_info

    path = settings_path or get_settings_path()
    try:
        return load_settings(path)
    except SettingsError as e:
        print_error(f"Failed to load settings: {e}")
        print_info(f"Fix or remove {path}, or rewrite it with 'filejanitor config set'.")
        raise typer.Exit(code=1) from e
