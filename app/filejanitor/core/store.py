"""Quarantine log persistence.

The log is a single JSON array of QuarantineEntry objects stored inside
the quarantine root. It is the source of truth for what is in
quarantine and when it arrived. Reads favour availability: a missing or
corrupt log is treated as empty instead of failing the caller.
"""

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from tempfile import NamedTemporaryFile

from filejanitor.core.errors import StoreError
from filejanitor.models.quarantine import QuarantineEntry

logger = logging.getLogger(__name__)


class QuarantineStore:
    """Reads and writes the quarantine log for one quarantine root.

    Storage location: <quarantine root>/quarantine-log.json

    Writes replace the whole file atomically. There is no protocol for
    concurrent writers; the store is meant for a single process.

    Attributes:
        root: Quarantine root directory containing the log file.
    """

    LOG_FILENAME = "quarantine-log.json"

    def __init__(self, root: str | os.PathLike[str]) -> None:
        """Initialize QuarantineStore.

        Args:
            root: Quarantine root directory.
        """
        self._root = Path(root)

    @property
    def root(self) -> Path:
        """Quarantine root directory."""
        return self._root

    @property
    def log_path(self) -> Path:
        """Path to the quarantine log file."""
        return self._root / self.LOG_FILENAME

    def read(self) -> list[QuarantineEntry]:
        """Read all entries in log order.

        Returns an empty list when the file is absent, unreadable, not
        valid JSON, or not a JSON array. Malformed items inside a valid
        array are skipped individually.

        Returns:
            List of QuarantineEntry, oldest first.
        """
        try:
            raw = self.log_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning("Cannot read quarantine log %s: %s", self.log_path, e)
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt quarantine log %s, treating as empty: %s", self.log_path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Quarantine log %s is not a JSON array, treating as empty", self.log_path)
            return []

        entries: list[QuarantineEntry] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning("Skipping non-object quarantine log item %d", index)
                continue
            try:
                entries.append(QuarantineEntry.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping corrupt quarantine log item %d: %s", index, e)
                continue

        return entries

    def write(self, entries: Iterable[QuarantineEntry]) -> None:
        """Replace the log with the given entries.

        The file is written to a temporary file in the same directory and
        moved into place with os.replace().

        Args:
            entries: Entries to persist, in order.

        Raises:
            StoreError: If the log cannot be written.
        """
        payload = json.dumps([entry.to_dict() for entry in entries], indent=2)

        tmp_path: Path | None = None
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self._root,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                f.write(payload)
            os.replace(tmp_path, self.log_path)
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise StoreError(f"Failed to write quarantine log {self.log_path}: {e}") from e

    def append(self, entry: QuarantineEntry) -> None:
        """Append one entry to the log.

        Raises:
            StoreError: If the log cannot be written.
        """
        entries = self.read()
        entries.append(entry)
        self.write(entries)

    def remove_paths(self, paths: Iterable[str]) -> int:
        """Remove every entry whose path is in the given set.

        Args:
            paths: Destination paths to drop from the log.

        Returns:
            Number of entries removed. The file is left untouched when
            nothing matches.

        Raises:
            StoreError: If the log cannot be written.
        """
        targets = set(paths)
        entries = self.read()
        kept = [entry for entry in entries if entry.path not in targets]

        removed = len(entries) - len(kept)
        if removed:
            self.write(kept)
            logger.debug("Removed %d entr(ies) from %s", removed, self.log_path)
        return removed
