"""Categorized error handling with actionable messages.

Provides structured error types with exit codes and recovery suggestions
for better user experience and scripting integration.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import ClassVar


class ExitCode(IntEnum):
    """Exit codes for scripting integration.

    Standard categories:
    - 0: Success
    - 1-9: Usage/config errors (user can fix)
    - 10-19: Tracked object errors
    - 40-49: Storage/system errors
    - 50-59: Data errors
    """

    SUCCESS = 0

    # Usage/config errors (1-9)
    USAGE_ERROR = 1
    CONFIG_ERROR = 2
    INVALID_ARGUMENT = 4

    # Tracked object errors (10-19)
    ALREADY_TRACKED = 10
    NOT_TRACKED = 11
    NEVER_USED = 12

    # Storage/system errors (40-49)
    PATH_NOT_FILE = 40
    FILE_PERMISSION = 41
    STORAGE_IO = 42
    SYSTEM_ERROR = 49

    # Data errors (50-59)
    DATA_CORRUPT = 50


class UsageTrackerError(Exception):
    """Base exception for usage-tracker with structured error info.

    Attributes:
        message: Human-readable error message.
        code: Exit code for scripting.
        suggestion: Actionable recovery suggestion.
        details: Optional additional context.
    """

    code: ClassVar[ExitCode] = ExitCode.USAGE_ERROR
    suggestion: ClassVar[str] = ""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: str | None = None,
    ):
        self.message = message
        self._suggestion = suggestion
        self.details = details
        super().__init__(message)

    def get_suggestion(self) -> str:
        """Get the recovery suggestion."""
        return self._suggestion or self.suggestion

    def format_full(self) -> str:
        """Format the complete error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        suggestion = self.get_suggestion()
        if suggestion:
            parts.append(f"Suggestion: {suggestion}")
        return "\n".join(parts)


# Tracked Object Errors


class AlreadyTrackedError(UsageTrackerError):
    """An object with this name is already tracked."""

    code = ExitCode.ALREADY_TRACKED
    suggestion = "Pick another name, or 'remove' the existing object first."

    def __init__(self, name: str, **kwargs):
        self.name = name
        super().__init__(f'An object named "{name}" is already tracked.', **kwargs)


class NotTrackedError(UsageTrackerError):
    """No object with this name is tracked."""

    code = ExitCode.NOT_TRACKED
    suggestion = "Run 'usage-tracker list' to see tracked objects, or 'add' it first."

    def __init__(self, name: str, **kwargs):
        self.name = name
        super().__init__(f'No object named "{name}" is tracked.', **kwargs)


class NeverUsedError(UsageTrackerError):
    """The object has no usable history for a prediction."""

    code = ExitCode.NEVER_USED
    suggestion = "Record some usages with 'usage-tracker use' before asking for a prediction."

    def __init__(self, name: str, **kwargs):
        self.name = name
        super().__init__(f'"{name}" has never been used.', **kwargs)


# Storage Errors


class PathIsNotFileError(UsageTrackerError):
    """A data file candidate exists but is not a regular file."""

    code = ExitCode.PATH_NOT_FILE
    suggestion = "Move the directory or special file out of the data directory."

    def __init__(self, path: Path | str, **kwargs):
        self.path = Path(path)
        super().__init__(f'The provided path isn\'t a file: "{self.path}"', **kwargs)


class StoreParseError(UsageTrackerError):
    """A data file could not be decoded in its expected format."""

    code = ExitCode.DATA_CORRUPT
    suggestion = (
        "The data file appears corrupted. "
        "Restore it from the '.bak' backup next to it, or delete it to start over."
    )

    def __init__(self, path: Path | str, format_name: str, cause: Exception, **kwargs):
        self.path = Path(path)
        self.format = format_name
        self.cause = cause
        kwargs.setdefault("details", str(cause))
        super().__init__(f'Failed to parse "{self.path}" as a {format_name} file', **kwargs)


class StorageIOError(UsageTrackerError):
    """A filesystem operation on the data directory failed."""

    code = ExitCode.STORAGE_IO
    suggestion = "Check that the data directory exists and is writable."

    def __init__(self, message: str, cause: OSError, **kwargs):
        self.cause = cause
        kwargs.setdefault("details", str(cause))
        super().__init__(message, **kwargs)


# Config Errors


class ConfigError(UsageTrackerError):
    """Configuration file error."""

    code = ExitCode.CONFIG_ERROR
    suggestion = "Run 'usage-tracker config reset' to reset configuration to defaults."


def format_error_for_user(error: Exception, verbose: bool = False) -> str:
    """Format any exception for user display.

    Args:
        error: Exception to format.
        verbose: If True, include details and suggestions.

    Returns:
        Formatted error message string.
    """
    if isinstance(error, UsageTrackerError):
        if verbose:
            return error.format_full()
        return f"Error: {error.message}"
    else:
        return f"Error: {error}"


def get_exit_code(error: Exception) -> int:
    """Get the exit code for an exception.

    Args:
        error: Exception to get code for.

    Returns:
        Integer exit code.
    """
    if isinstance(error, UsageTrackerError):
        if isinstance(error, StorageIOError) and isinstance(error.cause, PermissionError):
            return ExitCode.FILE_PERMISSION
        return error.code
    elif isinstance(error, PermissionError):
        return ExitCode.FILE_PERMISSION
    elif isinstance(error, OSError):
        return ExitCode.STORAGE_IO
    elif isinstance(error, ValueError):
        return ExitCode.INVALID_ARGUMENT
    else:
        return ExitCode.SYSTEM_ERROR


__all__ = [
    # Exit codes
    "ExitCode",
    # Base error
    "UsageTrackerError",
    # Tracked object errors
    "AlreadyTrackedError",
    "NotTrackedError",
    "NeverUsedError",
    # Storage errors
    "PathIsNotFileError",
    "StoreParseError",
    "StorageIOError",
    # Config errors
    "ConfigError",
    # Utilities
    "format_error_for_user",
    "get_exit_code",
]
