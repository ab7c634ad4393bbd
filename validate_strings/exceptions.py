"""Package-specific exception types."""

from __future__ import annotations


class ValidateStringsError(Exception):
    """Base class for fatal validate-strings errors.

    Syntax problems in the validated file are reported as diagnostics, never
    raised.
    """


class UsageError(ValidateStringsError):
    """Raised when the command line does not name a file to validate."""


class FileUnreadableError(ValidateStringsError):
    """Raised when a resource file cannot be opened, read, or decoded.

    Args:
        path: Path that was being loaded.
        reason: Short description of the underlying failure.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to parse strings file: {self.path}")
