"""Unit tests for formatting helpers."""

from datetime import UTC, datetime

import pytest
from filejanitor.utils.formatting import create_table, format_datetime, format_size


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (None, "0 B"),
            (0, "0 B"),
            (512, "512 B"),
            (1536, "1.5 KB"),
            (5 * 1024 * 1024, "5.0 MB"),
            (3 * 1024**4, "3.0 TB"),
        ],
    )
    def test_units(self, size: int | None, expected: str) -> None:
        """Sizes are scaled to the largest fitting unit."""
        assert format_size(size) == expected


class TestFormatDatetime:
    """Tests for format_datetime."""

    def test_minute_precision(self) -> None:
        """Timestamps are shown to the minute in local time."""
        value = datetime(2024, 1, 15, 10, 30, 45, tzinfo=UTC)
        assert format_datetime(value) == value.astimezone().strftime("%Y-%m-%d %H:%M")


class TestCreateTable:
    """Tests for create_table."""

    def test_title(self) -> None:
        """Tables carry the given title."""
        assert create_table("Results").title == "Results"
