"""
dailylog exception hierarchy.

All dailylog exceptions inherit from DailylogError, so the CLI can catch
every expected failure in one place while code still distinguishes the
specific failure modes.

An empty editor session is not an error: the entry codec returns None.
"""

from __future__ import annotations

from pathlib import Path


class DailylogError(Exception):
    """Base exception class for all dailylog errors."""


class ConfigurationError(DailylogError):
    """Raised for configuration errors (malformed file, invalid values, unknown weekdays)."""


class EditorError(DailylogError):
    """Raised when the external editor cannot be launched or exits abnormally."""


class FileIOError(DailylogError):
    """Raised when a log file or directory cannot be read or written."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message}: {self.path}"
        super().__init__(message)


class SyncError(DailylogError):
    """Raised when a git operation fails (remote unreachable, auth, conflicts)."""
