"""Extension-based file scanner.

Walks every configured scan root and collects files whose extension is
in the configured set. The scan is read-only: it reports counts, the
combined size, and a bounded sample of matches for preview.
"""

import logging
import os
import stat
from collections.abc import Iterable, Iterator
from datetime import UTC, datetime
from pathlib import Path

from filejanitor.core.errors import ConfigurationError
from filejanitor.core.extensions import matches_extension, normalize_extensions
from filejanitor.core.walker import directory_key, exclusion_set, walk
from filejanitor.models.scan import SAMPLE_MAX, FileRecord, ScanResult

logger = logging.getLogger(__name__)

RootLike = str | os.PathLike[str]


class Scanner:
    """Scans root directories for files with configured extensions.

    Roots that do not exist or are not directories are skipped without
    error. Files that vanish between listing and stat are skipped too.
    Excluded directories (typically the quarantine root) are never
    descended into, and a root lying inside one is skipped entirely.

    Args:
        sample_max: Maximum number of FileRecords kept in the result sample.
        exclude: Directories left out of every scan. Blank entries are ignored.
    """

    def __init__(
        self,
        sample_max: int = SAMPLE_MAX,
        exclude: Iterable[RootLike] = (),
    ) -> None:
        if sample_max < 0:
            msg = f"sample_max cannot be negative, got {sample_max}"
            raise ValueError(msg)
        self._sample_max = sample_max
        self._exclude = exclusion_set(exclude)

    def scan(self, roots: Iterable[RootLike], extensions: Iterable[str] | str) -> ScanResult:
        """Scan all roots and aggregate matching files.

        Args:
            roots: Scan root directories, in traversal order. Blank entries
                are treated as unset.
            extensions: Extension tokens; always re-normalized.

        Returns:
            ScanResult with counts, total size and a bounded sample.

        Raises:
            ConfigurationError: If no roots or no extensions are configured.
        """
        root_list, ext_set = self._validate(roots, extensions)

        folders_scanned = 0
        files_matched = 0
        total_size = 0
        sample: list[FileRecord] = []

        for root in root_list:
            if not self._is_scannable(root):
                continue
            folders_scanned += 1

            for record in self._scan_root(root, ext_set):
                files_matched += 1
                total_size += record.size
                if len(sample) < self._sample_max:
                    sample.append(record)

        logger.debug(
            "Scan finished: %d folder(s), %d match(es), %d bytes",
            folders_scanned,
            files_matched,
            total_size,
        )
        return ScanResult(
            folders_scanned=folders_scanned,
            files_matched=files_matched,
            total_size_bytes=total_size,
            sample=tuple(sample),
        )

    def iter_matches(
        self, roots: Iterable[RootLike], extensions: Iterable[str] | str
    ) -> Iterator[FileRecord]:
        """Yield a FileRecord for every match, without a sample bound.

        Raises:
            ConfigurationError: If no roots or no extensions are configured.
        """
        root_list, ext_set = self._validate(roots, extensions)
        return self._iter_roots(root_list, ext_set)

    def _iter_roots(self, roots: list[str], extensions: frozenset[str]) -> Iterator[FileRecord]:
        for root in roots:
            if self._is_scannable(root):
                yield from self._scan_root(root, extensions)

    def _is_scannable(self, root: str) -> bool:
        if not os.path.isdir(root):
            logger.debug("Skipping scan root (not a directory): %s", root)
            return False
        key = Path(directory_key(root))
        if any(key.is_relative_to(excluded) for excluded in self._exclude):
            logger.debug("Skipping scan root (excluded): %s", root)
            return False
        return True

    def _scan_root(self, root: str, extensions: frozenset[str]) -> Iterator[FileRecord]:
        """Walk one root and yield records for matching regular files."""
        for path in walk(root, exclude=self._exclude):
            if not matches_extension(path, extensions):
                continue
            record = self._stat_record(path)
            if record is not None:
                yield record

    @staticmethod
    def _stat_record(path: str) -> FileRecord | None:
        """Stat a file, returning None if it vanished or is not a regular file."""
        try:
            st = os.stat(path)
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return None

        if not stat.S_ISREG(st.st_mode):
            return None

        return FileRecord(
            path=os.path.abspath(path),
            size=st.st_size,
            modified=datetime.fromtimestamp(st.st_mtime, tz=UTC),
        )

    @staticmethod
    def _validate(
        roots: Iterable[RootLike], extensions: Iterable[str] | str
    ) -> tuple[list[str], frozenset[str]]:
        """Check that at least one root and one extension are configured."""
        root_list = [os.fspath(r) for r in roots if os.fspath(r).strip()]
        if not root_list:
            msg = "No scan folders configured. Set them with 'filejanitor config set'."
            raise ConfigurationError(msg)

        ext_set = normalize_extensions(extensions)
        if not ext_set:
            msg = "No file extensions configured. Add them with 'filejanitor config set'."
            raise ConfigurationError(msg)

        return root_list, ext_set
