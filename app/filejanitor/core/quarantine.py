"""Quarantine mover.

Moves files into an extension-partitioned quarantine tree
(<root>/pdf/report.pdf, <root>/unknown/README) without ever overwriting
an existing file, and records each move in the quarantine log.
"""

import logging
import os
import shutil
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

from filejanitor.core.errors import (
    AlreadyQuarantinedError,
    ConfigurationError,
    JanitorError,
    ProtectedPathError,
    QuarantineError,
    SourceNotFoundError,
    StoreError,
)
from filejanitor.core.extensions import file_extension
from filejanitor.core.policy import is_protected_path
from filejanitor.core.store import QuarantineStore
from filejanitor.models.quarantine import QuarantineEntry
from filejanitor.models.result import FileActionResult
from filejanitor.models.timestamps import filename_safe_timestamp, utc_now

logger = logging.getLogger(__name__)

# Subfolder for files without an extension.
UNKNOWN_SUBFOLDER = "unknown"


class QuarantineManager:
    """Moves files into a quarantine root and logs each move.

    Args:
        quarantine_root: Configured quarantine directory ("" means unset).
        store: Log store to append to. Defaults to the store of the root.
        clock: Callable returning the current aware datetime.
    """

    def __init__(
        self,
        quarantine_root: str | os.PathLike[str] | None,
        *,
        store: QuarantineStore | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        root = os.fspath(quarantine_root) if quarantine_root is not None else ""
        self._root = Path(os.path.abspath(root)) if root.strip() else None
        self._store = store
        self._clock = clock

    @property
    def root(self) -> Path | None:
        """Quarantine root, or None when not configured."""
        return self._root

    @property
    def store(self) -> QuarantineStore:
        """Log store for the quarantine root.

        Raises:
            ConfigurationError: If no quarantine root is configured.
        """
        if self._store is None:
            self._store = QuarantineStore(self._require_root())
        return self._store

    def quarantine(self, source: str | os.PathLike[str]) -> Path:
        """Move a file into quarantine and log it.

        Checks, in order: the source is an existing regular file, it is
        not in a protected location, a quarantine root is configured, and
        the source is not already inside it (this covers the log file).

        Args:
            source: File to move.

        Returns:
            Destination path inside the quarantine tree.

        Raises:
            SourceNotFoundError: If the source is missing or not a regular file.
            ProtectedPathError: If the source is in a protected location.
            ConfigurationError: If no quarantine root is configured.
            AlreadyQuarantinedError: If the source lies inside the quarantine root.
            QuarantineError: If the move itself fails.
            StoreError: If the move succeeded but the log could not be written.
        """
        source_path = Path(os.path.abspath(source))

        if not source_path.is_file():
            raise SourceNotFoundError(f"File not found: {source_path}")
        if is_protected_path(source_path):
            raise ProtectedPathError(str(source_path))
        root = self._require_root()
        if self.contains(source_path):
            raise AlreadyQuarantinedError(str(source_path))

        try:
            size = source_path.stat().st_size
        except OSError as e:
            raise SourceNotFoundError(f"File not found: {source_path}") from e

        target_dir = root / self.subfolder_for(source_path)
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise QuarantineError(f"Cannot create quarantine folder {target_dir}: {e}") from e

        moved_at = self._clock()
        destination = self._resolve_destination(target_dir, source_path.name, moved_at)

        try:
            shutil.move(source_path, destination)
        except OSError as e:
            raise QuarantineError(f"Failed to move {source_path}: {e}") from e

        logger.info("Quarantined %s -> %s", source_path, destination)
        entry = QuarantineEntry(path=str(destination), moved_at=moved_at, size=size)
        try:
            self.store.append(entry)
        except StoreError as e:
            msg = (
                f"Moved {source_path} to {destination}, "
                f"but the quarantine log was not updated: {e}"
            )
            raise StoreError(msg) from e
        return destination

    def quarantine_many(self, sources: Iterable[str | os.PathLike[str]]) -> list[FileActionResult]:
        """Quarantine several files, isolating failures per file.

        Args:
            sources: Files to move.

        Returns:
            List of FileActionResult, one per source.
        """
        results: list[FileActionResult] = []
        for source in sources:
            path = os.fspath(source)
            try:
                destination = self.quarantine(path)
            except ProtectedPathError as e:
                results.append(
                    FileActionResult(path=path, success=False, error=str(e), protected=True)
                )
            except JanitorError as e:
                results.append(FileActionResult(path=path, success=False, error=str(e)))
            else:
                results.append(
                    FileActionResult(path=path, success=True, destination=str(destination))
                )
        return results

    def contains(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path is the quarantine root or lies below it."""
        if self._root is None:
            return False
        return Path(os.path.abspath(path)).is_relative_to(self._root)

    @staticmethod
    def subfolder_for(path: str | os.PathLike[str]) -> str:
        """Return the quarantine subfolder name for a file's extension."""
        ext = file_extension(path)
        return ext[1:] if ext else UNKNOWN_SUBFOLDER

    @staticmethod
    def _resolve_destination(target_dir: Path, name: str, moved_at: datetime) -> Path:
        """Pick a destination in target_dir that does not exist yet.

        Uses the original name when free, otherwise inserts a filesystem-safe
        timestamp before the extension, then a counter if still taken.
        """
        candidate = target_dir / name
        if not candidate.exists():
            return candidate

        stem, suffix = os.path.splitext(name)
        stamped = f"{stem}_{filename_safe_timestamp(moved_at)}"
        candidate = target_dir / f"{stamped}{suffix}"

        counter = 1
        while candidate.exists():
            candidate = target_dir / f"{stamped}-{counter}{suffix}"
            counter += 1
        return candidate

    def _require_root(self) -> Path:
        if self._root is None:
            msg = "No quarantine folder configured. Set it with 'filejanitor config set'."
            raise ConfigurationError(msg)
        return self._root
