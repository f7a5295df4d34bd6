"""Path classification rules for traversal and destructive operations.

This module decides which directories the walker descends into and which
locations are off-limits for moving or deleting files. The protected
prefix list is a best-effort safety net, not a security boundary.
"""

import os

# Directory names (lowercase) never descended into during a scan.
SYSTEM_SKIP_DIRS: frozenset[str] = frozenset(
    {
        # Windows
        "$recycle.bin",
        "system volume information",
        "windows",
        "program files",
        "program files (x86)",
        # POSIX
        "lost+found",
        "proc",
        "sys",
        "dev",
    }
)

# Name prefixes marking hidden entries and Office lock/backup files.
HIDDEN_PREFIXES: tuple[str, ...] = (".", "~$")

# Protected location prefixes, matched case-insensitively.
# Backslashes are treated as path separators on every platform.
PROTECTED_PATH_PREFIXES: list[str] = [
    # Windows OS, x86 programs and the shared public profile
    "C:\\Windows",
    "C:\\Program Files (x86)",
    "C:\\Users\\Public",
    # POSIX system directories
    "/bin",
    "/boot",
    "/etc",
    "/lib",
    "/sbin",
    "/usr",
    # macOS
    "/System",
    "/Users/Shared",
]


def is_hidden(name: str) -> bool:
    """Check if an entry name is hidden or a transient lock file.

    Args:
        name: Base name of a file or directory.

    Returns:
        True if the name starts with "." or "~$".
    """
    return name.startswith(HIDDEN_PREFIXES)


def is_system_skip(name: str) -> bool:
    """Check if a directory name is an OS-reserved directory.

    Args:
        name: Base name of a directory.

    Returns:
        True if the lowercased name is in SYSTEM_SKIP_DIRS.
    """
    return name.lower() in SYSTEM_SKIP_DIRS


def should_skip_directory(name: str) -> bool:
    """Check if the walker should not descend into a directory.

    Applies to directories only; hidden files are still scan candidates.
    """
    return is_hidden(name) or is_system_skip(name)


def _canonical(path: str) -> str:
    """Lowercase a path and unify separators for prefix comparison."""
    unified = path.replace("\\", "/").lower()
    return unified.rstrip("/") or "/"


def is_protected_path(path: str | os.PathLike[str]) -> bool:
    """Check if a path lies in a protected location.

    A prefix protects itself and everything below it. Sibling names that
    merely share leading characters (e.g. "/etcetera") are not protected.

    Args:
        path: Absolute filesystem path to check.

    Returns:
        True if the path is equal to or below any protected prefix.
    """
    candidate = _canonical(os.fspath(path))

    for prefix in PROTECTED_PATH_PREFIXES:
        root = _canonical(prefix)
        if candidate == root or candidate.startswith(root + "/"):
            return True

    return False
