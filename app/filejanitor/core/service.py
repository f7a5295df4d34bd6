"""Command interface for the scan, quarantine, review and delete actions.

Each function maps one user action to the matching pipeline component
and returns an OperationResult. JanitorError failures become
ok=False results carrying a message that can be shown to the user
directly; nothing in this module raises for expected failures.
"""

import os
from collections.abc import Callable, Iterable
from datetime import datetime

from filejanitor.core.deleter import BulkDeleter
from filejanitor.core.errors import JanitorError
from filejanitor.core.quarantine import QuarantineManager
from filejanitor.core.review import DEFAULT_THRESHOLD_DAYS, AgingReviewer
from filejanitor.core.scanner import Scanner
from filejanitor.core.settings import Settings
from filejanitor.core.store import QuarantineStore
from filejanitor.models.result import OperationResult
from filejanitor.models.timestamps import utc_now


def _quarantine_store(settings: Settings) -> QuarantineStore | None:
    """Return the log store for the configured quarantine root, if any."""
    if not settings.quarantine_folder:
        return None
    return QuarantineStore(settings.quarantine_folder)


def scanner_for(settings: Settings) -> Scanner:
    """Return a Scanner that never descends into the quarantine folder."""
    return Scanner(exclude=[settings.quarantine_folder])


def run_scan(settings: Settings, scanner: Scanner | None = None) -> OperationResult:
    """Scan the configured folders for configured extensions."""
    scanner = scanner or scanner_for(settings)
    try:
        result = scanner.scan(settings.scan_roots(), settings.extensions)
    except JanitorError as e:
        return OperationResult.failure(str(e))

    message = (
        f"Scanned {result.folders_scanned} folder(s): "
        f"{result.files_matched} matching file(s)."
    )
    return OperationResult.success(result, message)


def move_to_quarantine(
    settings: Settings,
    path: str | os.PathLike[str],
    *,
    clock: Callable[[], datetime] = utc_now,
) -> OperationResult:
    """Move one file into the configured quarantine folder."""
    manager = QuarantineManager(settings.quarantine_folder, clock=clock)
    try:
        destination = manager.quarantine(path)
    except JanitorError as e:
        return OperationResult.failure(str(e))

    return OperationResult.success(str(destination), f"Moved to Quarantine: {destination}")


def move_many_to_quarantine(
    settings: Settings,
    paths: Iterable[str | os.PathLike[str]],
    *,
    clock: Callable[[], datetime] = utc_now,
) -> OperationResult:
    """Move several files into quarantine, tolerating per-file failures.

    The result is ok when at least one file was moved; data holds the
    per-file results either way.
    """
    manager = QuarantineManager(settings.quarantine_folder, clock=clock)
    if manager.root is None:
        return OperationResult.failure("No quarantine folder configured.")

    results = manager.quarantine_many(paths)
    if not results:
        return OperationResult.failure("No files selected.")

    moved = sum(1 for r in results if r.success)
    message = f"Moved {moved} of {len(results)} file(s) to quarantine."
    if moved == 0:
        return OperationResult(ok=False, message=message, data=results)
    return OperationResult.success(results, message)


def review_aged(
    settings: Settings,
    threshold_days: int = DEFAULT_THRESHOLD_DAYS,
    *,
    clock: Callable[[], datetime] = utc_now,
) -> OperationResult:
    """List quarantined files older than the threshold."""
    store = _quarantine_store(settings)
    if store is None:
        return OperationResult.failure("No quarantine folder configured.")

    try:
        aged = AgingReviewer(store, clock=clock).find_aged(threshold_days)
    except ValueError as e:
        return OperationResult.failure(str(e))

    if aged:
        message = f"Found {len(aged)} file(s) older than {threshold_days} days."
    else:
        message = f"No files older than {threshold_days} days."
    return OperationResult.success(aged, message)


def delete_files(settings: Settings, paths: Iterable[str | os.PathLike[str]]) -> OperationResult:
    """Delete files and reconcile the quarantine log.

    The result is ok whenever the batch ran; callers compare
    deleted_count against requested_count to report partial failures.
    """
    requested = [os.fspath(p) for p in paths]
    if not requested:
        return OperationResult.failure("No files selected.")

    deleter = BulkDeleter(_quarantine_store(settings))
    try:
        result = deleter.delete_many(requested)
    except JanitorError as e:
        return OperationResult.failure(str(e))

    message = f"Deleted {result.deleted_count} of {result.requested_count} file(s)."
    return OperationResult.success(result, message)



def delete_file(settings: Settings, path: str | os.PathLike[str]) -> OperationResult:
    """Delete one file and drop it from the quarantine log.

    Unlike delete_files, a failure is reported as a failed result carrying
    that file's error.
    """
    deleter = BulkDeleter(_quarantine_store(settings))
    try:
        outcome = deleter.delete_many([path])
    except JanitorError as e:
        return OperationResult.failure(str(e))

    (file_result,) = outcome.results
    if not file_result.success:
        return OperationResult.failure(file_result.error or f"Failed to delete {file_result.path}")
    return OperationResult.success(outcome, f"Deleted: {file_result.path}")
