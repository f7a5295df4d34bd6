"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock returning a fixed aware datetime."""
    return lambda: FIXED_NOW


@pytest.fixture
def quarantine_root(tmp_path: Path) -> Path:
    """Empty quarantine root directory."""
    root = tmp_path / "quarantine"
    root.mkdir()
    return root


@pytest.fixture
def scan_tree(tmp_path: Path) -> Path:
    """A small directory tree with matching, non-matching and skipped files.

    Layout::

        scan/
            a.pdf
            notes.txt
            docs/
                b.PDF
                deep/
                    c.docx
            .hidden/
                secret.pdf
            $RECYCLE.BIN/
                trashed.pdf
            .visible-file.pdf
    """
    root = tmp_path / "scan"
    (root / "docs" / "deep").mkdir(parents=True)
    (root / ".hidden").mkdir()
    (root / "$RECYCLE.BIN").mkdir()

    (root / "a.pdf").write_bytes(b"a" * 10)
    (root / "notes.txt").write_text("notes")
    (root / "docs" / "b.PDF").write_bytes(b"b" * 20)
    (root / "docs" / "deep" / "c.docx").write_bytes(b"c" * 30)
    (root / ".hidden" / "secret.pdf").write_bytes(b"s")
    (root / "$RECYCLE.BIN" / "trashed.pdf").write_bytes(b"t")
    (root / ".visible-file.pdf").write_bytes(b"v" * 5)
    return root
