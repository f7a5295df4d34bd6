"""Operation result models.

FileActionResult and DeleteResult describe per-file outcomes of bulk
operations. OperationResult is the uniform {ok, message, data} shape
returned by every command in the service layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class FileActionResult:
    """Result of a single file operation (move or delete).

    Attributes:
        path: Path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        protected: Whether the path was refused as a protected location.
        destination: New location for successful moves, None otherwise.
    """

    path: str
    success: bool
    error: str | None = None
    protected: bool = False
    destination: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the operation failed."""
        return not self.success

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"path": self.path, "success": self.success}
        if self.error is not None:
            result["error"] = self.error
        if self.protected:
            result["protected"] = True
        if self.destination is not None:
            result["destination"] = self.destination
        return result


@dataclass(frozen=True, slots=True)
class DeleteResult:
    """Outcome of a bulk delete.

    Attributes:
        deleted_count: Number of files confirmed deleted.
        requested_count: Number of paths passed in.
        results: Per-file results, in request order.
        reconciled_count: Number of log entries removed afterwards.
    """

    deleted_count: int
    requested_count: int
    results: tuple[FileActionResult, ...] = ()
    reconciled_count: int = 0

    @property
    def failures(self) -> list[FileActionResult]:
        """Results of paths that were not deleted."""
        return [r for r in self.results if r.failed]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "deletedCount": self.deleted_count,
            "requestedCount": self.requested_count,
            "reconciledCount": self.reconciled_count,
            "results": [r.to_dict() for r in self.results],
        }


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Uniform result returned to UI or CLI callers.

    The message is meant to be shown to the user as-is.

    Attributes:
        ok: Whether the operation succeeded.
        message: Human-readable summary (always set on failure).
        data: Operation payload on success.
    """

    ok: bool
    message: str = ""
    data: Any = field(default=None)

    @classmethod
    def success(cls, data: Any = None, message: str = "") -> OperationResult:
        """Create a successful result."""
        return cls(ok=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str) -> OperationResult:
        """Create a failed result."""
        return cls(ok=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Payloads exposing to_dict() (or lists of them) are serialized too.
        """
        return {"ok": self.ok, "message": self.message, "data": _serialize(self.data)}


def _serialize(value: Any) -> Any:
    """Recursively convert payload objects into JSON-compatible values."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value
