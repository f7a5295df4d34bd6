"""Exception hierarchy for filejanitor operations.

Every failure that should reach the user derives from JanitorError so
the service layer can turn it into a result message. Transient
filesystem errors during traversal are handled locally and never raised.
"""


class JanitorError(Exception):
    """Base exception for filejanitor errors."""


class ConfigurationError(JanitorError):
    """Raised when required settings (folders, extensions, quarantine) are missing."""


class SourceNotFoundError(JanitorError):
    """Raised when a file to quarantine does not exist or is not a regular file."""


class ProtectedPathError(JanitorError):
    """Raised when an operation targets a protected system location."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Protected path cannot be modified: {path}")
        self.path = path


class QuarantineError(JanitorError):
    """Raised when moving a file into quarantine fails."""


class AlreadyQuarantinedError(QuarantineError):
    """Raised when a source already lies inside the quarantine root."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Already in quarantine: {path}")
        self.path = path


class StoreError(JanitorError):
    """Raised when the quarantine log cannot be written."""


class SettingsError(JanitorError):
    """Base exception for settings-related errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


class SettingsValidationError(SettingsError):
    """Raised when settings content is invalid."""
