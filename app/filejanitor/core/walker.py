"""Lazy recursive directory traversal.

Yields regular-file paths depth-first, skipping hidden and OS-reserved
directories. Unreadable directories are treated as empty so a single
permission error never aborts a scan.
"""

import logging
import os
from collections.abc import Iterable, Iterator

from filejanitor.core.policy import should_skip_directory

logger = logging.getLogger(__name__)


def directory_key(path: str | os.PathLike[str]) -> str:
    """Return the comparison key used for excluded directories."""
    return os.path.normcase(os.path.abspath(path))


def exclusion_set(paths: Iterable[str | os.PathLike[str]]) -> frozenset[str]:
    """Build an exclusion set from directory paths, ignoring blank entries."""
    return frozenset(directory_key(p) for p in paths if os.fspath(p).strip())


def walk(
    root: str | os.PathLike[str],
    *,
    exclude: frozenset[str] = frozenset(),
) -> Iterator[str]:
    """Walk a directory tree and yield every regular file path.

    Each call starts a fresh traversal. Symbolic links are neither
    followed nor yielded, so link cycles cannot cause infinite recursion.

    Args:
        root: Directory to walk.
        exclude: Directory keys (see exclusion_set) never descended into.

    Yields:
        Full paths of regular files, in directory listing order.
    """
    try:
        with os.scandir(root) as it:
            entries = list(it)
    except OSError as e:
        logger.debug("Cannot list directory %s: %s", root, e)
        return

    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                if should_skip_directory(entry.name):
                    continue
                if exclude and directory_key(entry.path) in exclude:
                    logger.debug("Skipping excluded directory %s", entry.path)
                    continue
                yield from walk(entry.path, exclude=exclude)
            elif entry.is_file(follow_symlinks=False):
                yield entry.path
        except OSError as e:
            logger.debug("Cannot inspect %s: %s", entry.path, e)
            continue
