"""Bulk file deletion with quarantine log reconciliation.

Deletes files one by one, isolating failures per path, then drops the
matching entries from the quarantine log in a single rewrite.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from filejanitor.core.policy import is_protected_path
from filejanitor.core.store import QuarantineStore
from filejanitor.models.result import DeleteResult, FileActionResult

logger = logging.getLogger(__name__)


class BulkDeleter:
    """Deletes quarantined or scanned files.

    Protected paths are never deleted. After a batch, log entries are
    removed for every requested path that no longer exists on disk:
    files deleted by this batch and files that were already gone. Entries
    for files that survived (permission denied, protected) stay logged so
    they are not orphaned in the quarantine tree.

    Args:
        store: Quarantine log to reconcile. None skips reconciliation.
    """

    def __init__(self, store: QuarantineStore | None = None) -> None:
        self._store = store

    def delete_many(self, paths: Iterable[str | os.PathLike[str]]) -> DeleteResult:
        """Delete each path and reconcile the log once.

        Args:
            paths: Files to delete.

        Returns:
            DeleteResult with the confirmed deletion count and per-file results.

        Raises:
            StoreError: If the reconciled log cannot be written.
        """
        requested = [os.fspath(p) for p in paths]
        results = [self._delete_single(path) for path in requested]
        deleted = sum(1 for r in results if r.success)

        reconciled = 0
        if self._store is not None and requested:
            gone = [path for path in requested if not os.path.lexists(path)]
            reconciled = self._store.remove_paths(gone)

        if deleted < len(requested):
            logger.info("Deleted %d of %d requested file(s)", deleted, len(requested))

        return DeleteResult(
            deleted_count=deleted,
            requested_count=len(requested),
            results=tuple(results),
            reconciled_count=reconciled,
        )

    def _delete_single(self, path: str) -> FileActionResult:
        """Delete one file, converting failures into a result."""
        if is_protected_path(path):
            return FileActionResult(
                path=path,
                success=False,
                error=f"Protected path cannot be deleted: {path}",
                protected=True,
            )

        target = Path(path)
        try:
            if target.is_dir() and not target.is_symlink():
                return FileActionResult(
                    path=path,
                    success=False,
                    error=f"Not a file: {path}",
                )
            target.unlink()
        except FileNotFoundError:
            return FileActionResult(
                path=path,
                success=False,
                error=f"Path does not exist: {path}",
            )
        except OSError as e:
            logger.debug("Cannot delete %s: %s", path, e)
            return FileActionResult(path=path, success=False, error=str(e))

        logger.info("Deleted %s", path)
        return FileActionResult(path=path, success=True)
