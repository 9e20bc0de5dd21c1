"""
Tests for error types, formatting and exit codes.
"""

import pytest

from usage_tracker.errors import (
    AlreadyTrackedError,
    ConfigError,
    ExitCode,
    NeverUsedError,
    NotTrackedError,
    PathIsNotFileError,
    StorageIOError,
    StoreParseError,
    UsageTrackerError,
    format_error_for_user,
    get_exit_code,
)


class TestErrorMessages:
    """Tests for messages and suggestions of each error type."""

    def test_not_tracked(self):
        """Test the message names the object."""
        error = NotTrackedError("kettle")
        assert error.message == 'No object named "kettle" is tracked.'
        assert "list" in error.get_suggestion()

    def test_custom_suggestion_wins(self):
        """Test a per-instance suggestion replaces the class default."""
        error = AlreadyTrackedError("kettle", suggestion="Try 'kettle2'.")
        assert error.get_suggestion() == "Try 'kettle2'."

    def test_store_parse_error(self, tmp_path):
        """Test parse errors carry path, format and cause."""
        cause = ValueError("Expecting value")
        error = StoreParseError(tmp_path / "usages.json", "JSON", cause)

        assert error.path == tmp_path / "usages.json"
        assert error.format == "JSON"
        assert error.cause is cause
        assert error.details == "Expecting value"
        assert "as a JSON file" in error.message

    def test_format_full(self):
        """Test the full format includes details and suggestion."""
        error = NeverUsedError("kettle", details="No time has passed.")
        full = error.format_full()

        assert full.splitlines() == [
            'Error: "kettle" has never been used.',
            "Details: No time has passed.",
            f"Suggestion: {NeverUsedError.suggestion}",
        ]


class TestFormatErrorForUser:
    """Tests for format_error_for_user()."""

    def test_short(self):
        """Test the short form is only the message."""
        error = PathIsNotFileError("/tmp/usages.json")
        expected = 'Error: The provided path isn\'t a file: "/tmp/usages.json"'
        assert format_error_for_user(error) == expected

    def test_verbose(self):
        """Test verbose output is the full format."""
        error = ConfigError("bad config", details="line 1")
        assert format_error_for_user(error, verbose=True) == error.format_full()

    def test_plain_exception(self):
        """Test non-tracker exceptions are formatted by str()."""
        assert format_error_for_user(RuntimeError("boom")) == "Error: boom"


class TestGetExitCode:
    """Tests for get_exit_code()."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (AlreadyTrackedError("a"), ExitCode.ALREADY_TRACKED),
            (NotTrackedError("a"), ExitCode.NOT_TRACKED),
            (NeverUsedError("a"), ExitCode.NEVER_USED),
            (PathIsNotFileError("a"), ExitCode.PATH_NOT_FILE),
            (StoreParseError("a", "JSON", ValueError("x")), ExitCode.DATA_CORRUPT),
            (StorageIOError("write failed", OSError("disk full")), ExitCode.STORAGE_IO),
            (ConfigError("bad"), ExitCode.CONFIG_ERROR),
            (UsageTrackerError("generic"), ExitCode.USAGE_ERROR),
        ],
    )
    def test_tracker_errors(self, error, expected):
        """Test each error maps to its exit code."""
        assert get_exit_code(error) == expected

    def test_permission_cause(self):
        """Test storage errors caused by permissions map to FILE_PERMISSION."""
        error = StorageIOError("write failed", PermissionError("denied"))
        assert get_exit_code(error) == ExitCode.FILE_PERMISSION

    @pytest.mark.parametrize(
        "error,expected",
        [
            (PermissionError("denied"), ExitCode.FILE_PERMISSION),
            (OSError("io"), ExitCode.STORAGE_IO),
            (ValueError("bad"), ExitCode.INVALID_ARGUMENT),
            (RuntimeError("boom"), ExitCode.SYSTEM_ERROR),
        ],
    )
    def test_builtin_errors(self, error, expected):
        """Test built-in exceptions map to sensible codes."""
        assert get_exit_code(error) == expected
