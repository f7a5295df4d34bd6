"""Data models for filejanitor.

This module exports the scan, quarantine and result models.
"""

from filejanitor.models.quarantine import AgedEntry, QuarantineEntry
from filejanitor.models.result import DeleteResult, FileActionResult, OperationResult
from filejanitor.models.scan import SAMPLE_MAX, FileRecord, ScanResult

__all__ = [
    "SAMPLE_MAX",
    "AgedEntry",
    "DeleteResult",
    "FileActionResult",
    "FileRecord",
    "OperationResult",
    "QuarantineEntry",
    "ScanResult",
]
