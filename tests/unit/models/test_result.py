"""Unit tests for operation result models."""

from datetime import UTC, datetime

from filejanitor.models.result import DeleteResult, FileActionResult, OperationResult
from filejanitor.models.scan import FileRecord, ScanResult


class TestFileActionResult:
    """Tests for FileActionResult."""

    def test_failed_property(self) -> None:
        """failed is the inverse of success."""
        assert FileActionResult(path="/a", success=False).failed is True
        assert FileActionResult(path="/a", success=True).failed is False

    def test_to_dict_omits_unset_fields(self) -> None:
        """Optional fields appear only when set."""
        assert FileActionResult(path="/a", success=True).to_dict() == {
            "path": "/a",
            "success": True,
        }

    def test_to_dict_protected(self) -> None:
        """Protected failures carry the flag and error."""
        result = FileActionResult(path="/etc/x", success=False, error="no", protected=True)
        assert result.to_dict() == {
            "path": "/etc/x",
            "success": False,
            "error": "no",
            "protected": True,
        }


class TestDeleteResult:
    """Tests for DeleteResult."""

    def test_failures(self) -> None:
        """failures lists the results that did not succeed."""
        bad = FileActionResult(path="/b", success=False, error="x")
        result = DeleteResult(
            deleted_count=1,
            requested_count=2,
            results=(FileActionResult(path="/a", success=True), bad),
        )
        assert result.failures == [bad]

    def test_to_dict(self) -> None:
        """Serialization uses camelCase counters."""
        data = DeleteResult(deleted_count=1, requested_count=1, reconciled_count=1).to_dict()
        assert data == {
            "deletedCount": 1,
            "requestedCount": 1,
            "reconciledCount": 1,
            "results": [],
        }


class TestOperationResult:
    """Tests for OperationResult."""

    def test_success(self) -> None:
        """success() sets ok and carries data."""
        result = OperationResult.success([1], "done")
        assert (result.ok, result.message, result.data) == (True, "done", [1])

    def test_failure(self) -> None:
        """failure() has a message and no data."""
        result = OperationResult.failure("broken")
        assert (result.ok, result.message, result.data) == (False, "broken", None)

    def test_to_dict_serializes_payload(self) -> None:
        """Nested models are converted to dictionaries."""
        record = FileRecord(path="/a.pdf", size=1, modified=datetime(2024, 1, 1, tzinfo=UTC))
        scan = ScanResult(folders_scanned=1, files_matched=1, total_size_bytes=1, sample=(record,))

        data = OperationResult.success(scan, "ok").to_dict()

        assert data["ok"] is True
        assert data["data"]["filesMatched"] == 1
        assert data["data"]["sample"][0]["modified"] == "2024-01-01T00:00:00.000Z"

    def test_to_dict_serializes_lists(self) -> None:
        """Lists of models are converted item by item."""
        results = [FileActionResult(path="/a", success=True)]
        data = OperationResult.success(results).to_dict()
        assert data["data"] == [{"path": "/a", "success": True}]
