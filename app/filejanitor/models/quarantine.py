"""Quarantine log entry models.

This module defines the persisted provenance record written for every
file moved into quarantine, and the pair returned by the aging review.
The JSON field names ("path", "movedAt", "size") are a compatibility
surface: logs written by earlier versions must stay readable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from filejanitor.models.timestamps import format_timestamp, parse_timestamp

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True, slots=True)
class QuarantineEntry:
    """Record of a single file moved into quarantine.

    Entries are never mutated; they are only removed from the log when
    the quarantined file is deleted.

    Attributes:
        path: Absolute destination path inside the quarantine tree.
        moved_at: When the file was moved (timezone-aware, UTC).
        size: Size of the file in bytes at move time.
    """

    path: str
    moved_at: datetime
    size: int = 0

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Quarantine entry path cannot be empty"
            raise ValueError(msg)

    def age_days(self, now: datetime) -> int:
        """Return whole days elapsed since the move, rounded down."""
        return math.floor((now - self.moved_at) / _ONE_DAY)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage.

        Returns:
            Dictionary representation of the entry.
        """
        return {
            "path": self.path,
            "movedAt": format_timestamp(self.moved_at),
            "size": self.size,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuarantineEntry:
        """Deserialize from dictionary.

        Unknown fields are ignored and a missing size is read as 0.

        Args:
            data: Dictionary containing entry data.

        Returns:
            QuarantineEntry instance.

        Raises:
            KeyError: If path or movedAt is missing.
            ValueError: If movedAt is not a valid timestamp or size is invalid.
            TypeError: If a field has the wrong type.
        """
        return cls(
            path=str(data["path"]),
            moved_at=parse_timestamp(data["movedAt"]),
            size=int(data.get("size") or 0),
        )


@dataclass(frozen=True, slots=True)
class AgedEntry:
    """A quarantine entry that has reached the retention threshold.

    Attributes:
        entry: The logged quarantine entry.
        age_days: Whole days since the entry's move time.
    """

    entry: QuarantineEntry
    age_days: int

    @property
    def path(self) -> str:
        """Destination path of the underlying entry."""
        return self.entry.path

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {**self.entry.to_dict(), "ageDays": self.age_days}
