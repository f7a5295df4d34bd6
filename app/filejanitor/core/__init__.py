"""Scan, quarantine, review and delete pipeline.

This package provides the path policy, extension matching, directory
walker, scanner, quarantine log store, quarantine mover, aging reviewer
and bulk deleter.
"""

from filejanitor.core.deleter import BulkDeleter
from filejanitor.core.errors import (
    ConfigurationError,
    JanitorError,
    ProtectedPathError,
    QuarantineError,
    SourceNotFoundError,
    StoreError,
)
from filejanitor.core.extensions import matches_extension, normalize_extensions
from filejanitor.core.policy import is_protected_path, should_skip_directory
from filejanitor.core.quarantine import QuarantineManager
from filejanitor.core.review import AgingReviewer
from filejanitor.core.scanner import Scanner
from filejanitor.core.store import QuarantineStore
from filejanitor.core.walker import walk

__all__ = [
    "AgingReviewer",
    "BulkDeleter",
    "ConfigurationError",
    "JanitorError",
    "ProtectedPathError",
    "QuarantineError",
    "QuarantineManager",
    "QuarantineStore",
    "Scanner",
    "SourceNotFoundError",
    "StoreError",
    "is_protected_path",
    "matches_extension",
    "normalize_extensions",
    "should_skip_directory",
    "walk",
]
