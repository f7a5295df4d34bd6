"""Tests for the extension-based scanner."""

from pathlib import Path

import pytest
from filejanitor.core.errors import ConfigurationError
from filejanitor.core.scanner import Scanner
from filejanitor.models.scan import SAMPLE_MAX


class TestScannerScan:
    """Tests for Scanner.scan."""

    def test_counts_and_size(self, scan_tree: Path) -> None:
        """Matches are counted and their sizes summed."""
        result = Scanner().scan([str(scan_tree)], [".pdf"])

        # a.pdf (10) + docs/b.PDF (20) + .visible-file.pdf (5)
        assert result.folders_scanned == 1
        assert result.files_matched == 3
        assert result.total_size_bytes == 35
        assert len(result.sample) == 3

    def test_skipped_directories_not_counted(self, scan_tree: Path) -> None:
        """Files under hidden or OS-reserved directories never match."""
        result = Scanner().scan([str(scan_tree)], [".pdf"])

        sampled = {Path(record.path).name for record in result.sample}
        assert "secret.pdf" not in sampled
        assert "trashed.pdf" not in sampled

    def test_multiple_extensions(self, scan_tree: Path) -> None:
        """Every configured extension is matched."""
        result = Scanner().scan([str(scan_tree)], "pdf, docx")

        assert result.files_matched == 4
        assert result.total_size_bytes == 65

    def test_sample_records_are_absolute(self, scan_tree: Path) -> None:
        """Sampled records hold absolute paths with UTC mtimes."""
        result = Scanner().scan([str(scan_tree)], [".docx"])

        (record,) = result.sample
        assert Path(record.path).is_absolute()
        assert record.size == 30
        assert record.modified.tzinfo is not None

    def test_sample_bounded(self, tmp_path: Path) -> None:
        """The sample never exceeds the limit while counts include everything."""
        for i in range(SAMPLE_MAX + 5):
            (tmp_path / f"f{i}.pdf").write_bytes(b"x")

        result = Scanner().scan([str(tmp_path)], [".pdf"])

        assert result.files_matched == SAMPLE_MAX + 5
        assert len(result.sample) == SAMPLE_MAX

    def test_custom_sample_size(self, scan_tree: Path) -> None:
        """The sample size can be configured."""
        result = Scanner(sample_max=1).scan([str(scan_tree)], [".pdf"])

        assert len(result.sample) == 1
        assert result.files_matched == 3

    def test_negative_sample_size_rejected(self) -> None:
        """A negative sample size is rejected."""
        with pytest.raises(ValueError):
            Scanner(sample_max=-1)

    def test_missing_roots_skipped(self, scan_tree: Path, tmp_path: Path) -> None:
        """Roots that do not exist are skipped and not counted."""
        result = Scanner().scan([str(tmp_path / "nope"), str(scan_tree)], [".docx"])

        assert result.folders_scanned == 1
        assert result.files_matched == 1

    def test_file_root_skipped(self, scan_tree: Path) -> None:
        """A root that is a file is not a scannable folder."""
        result = Scanner().scan([str(scan_tree / "a.pdf")], [".pdf"])

        assert result.folders_scanned == 0
        assert result.files_matched == 0

    def test_blank_roots_ignored(self, scan_tree: Path) -> None:
        """Blank root slots are ignored."""
        result = Scanner().scan(["", str(scan_tree), "  "], [".pdf"])

        assert result.folders_scanned == 1

    def test_no_roots_raises(self) -> None:
        """Scanning without any configured roots is a configuration error."""
        with pytest.raises(ConfigurationError, match="No scan folders configured"):
            Scanner().scan(["", ""], [".pdf"])

    def test_no_extensions_raises(self, scan_tree: Path) -> None:
        """Scanning without extensions is a configuration error."""
        with pytest.raises(ConfigurationError, match="No file extensions configured"):
            Scanner().scan([str(scan_tree)], [" ", ""])

    def test_scan_is_read_only(self, scan_tree: Path) -> None:
        """Scanning leaves the tree untouched."""
        before = sorted(p for p in scan_tree.rglob("*"))
        Scanner().scan([str(scan_tree)], [".pdf", ".docx"])
        assert sorted(p for p in scan_tree.rglob("*")) == before


class TestScannerIterMatches:
    """Tests for Scanner.iter_matches."""

    def test_yields_every_match(self, tmp_path: Path) -> None:
        """iter_matches is not bounded by the sample size."""
        for i in range(SAMPLE_MAX + 2):
            (tmp_path / f"f{i}.pdf").write_bytes(b"x")

        records = list(Scanner().iter_matches([str(tmp_path)], [".pdf"]))

        assert len(records) == SAMPLE_MAX + 2

    def test_validates_eagerly(self) -> None:
        """Configuration errors are raised before iteration starts."""
        with pytest.raises(ConfigurationError):
            Scanner().iter_matches([], [".pdf"])


class TestScannerExclude:
    """Tests for excluding directories such as the quarantine root."""

    def test_nested_quarantine_root_not_scanned(self, tmp_path: Path) -> None:
        """Files already in a quarantine root inside a scan root never match."""
        scan = tmp_path / "scan"
        quarantine = scan / "quarantine"
        (quarantine / "pdf").mkdir(parents=True)
        (quarantine / "pdf" / "old.pdf").write_bytes(b"old")
        (quarantine / "quarantine-log.json").write_text("[]")
        (scan / "new.pdf").write_bytes(b"new")

        result = Scanner(exclude=[quarantine]).scan([str(scan)], "pdf, json")

        assert result.files_matched == 1
        assert [r.path for r in result.sample] == [str(scan / "new.pdf")]

    def test_root_inside_excluded_directory_skipped(self, tmp_path: Path) -> None:
        """A scan root at or below an excluded directory is not scanned."""
        quarantine = tmp_path / "quarantine"
        (quarantine / "pdf").mkdir(parents=True)
        (quarantine / "pdf" / "old.pdf").write_bytes(b"old")

        result = Scanner(exclude=[quarantine]).scan(
            [str(quarantine), str(quarantine / "pdf")], [".pdf"]
        )

        assert result.folders_scanned == 0
        assert result.files_matched == 0

    def test_iter_matches_honours_exclusion(self, tmp_path: Path) -> None:
        """The unbounded iterator skips excluded directories too."""
        (tmp_path / "quarantine").mkdir()
        (tmp_path / "quarantine" / "old.pdf").write_bytes(b"old")
        (tmp_path / "new.pdf").write_bytes(b"new")

        records = list(
            Scanner(exclude=[tmp_path / "quarantine"]).iter_matches([str(tmp_path)], [".pdf"])
        )

        assert [r.path for r in records] == [str(tmp_path / "new.pdf")]

    def test_blank_exclusion_ignored(self, scan_tree: Path) -> None:
        """An unset quarantine folder excludes nothing."""
        result = Scanner(exclude=[""]).scan([str(scan_tree)], [".pdf"])
        assert result.files_matched == 3
