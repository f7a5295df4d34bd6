"""Scan result models.

This module defines the data structures produced by a scan: one record
per sampled file and the aggregate result with counts and total size.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from filejanitor.models.timestamps import format_timestamp

# Maximum number of FileRecords kept for preview in a ScanResult.
SAMPLE_MAX = 10


@dataclass(frozen=True, slots=True)
class FileRecord:
    """A matching file discovered during a scan.

    Attributes:
        path: Absolute file path.
        size: Size in bytes.
        modified: Last modification time (timezone-aware, UTC).
    """

    path: str
    size: int
    modified: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "size": self.size,
            "modified": format_timestamp(self.modified),
        }


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Aggregate outcome of scanning all configured roots.

    The sample holds at most SAMPLE_MAX records in traversal order;
    files_matched and total_size_bytes count every match.

    Attributes:
        folders_scanned: Number of roots that existed and were walked.
        files_matched: Number of regular files with a matching extension.
        total_size_bytes: Combined size of all matched files.
        sample: Bounded preview of matched files.
    """

    folders_scanned: int = 0
    files_matched: int = 0
    total_size_bytes: int = 0
    sample: tuple[FileRecord, ...] = ()

    def __post_init__(self) -> None:
        """Validate counters after initialization."""
        if min(self.folders_scanned, self.files_matched, self.total_size_bytes) < 0:
            msg = "Scan counters cannot be negative"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "foldersScanned": self.folders_scanned,
            "filesMatched": self.files_matched,
            "totalSizeBytes": self.total_size_bytes,
            "sample": [record.to_dict() for record in self.sample],
        }
