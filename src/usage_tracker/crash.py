"""Crash reports for unexpected errors.

Replaces the default traceback dump with a short message and writes the
full report to a file the user can attach to a bug report.
"""

import platform
import sys
import tempfile
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from usage_tracker._version import __version__


def build_report(exc_type, exc_value, exc_tb) -> str:
    """Render a crash report with version, platform and traceback."""
    lines = [
        "name = usage-tracker",
        f"version = {__version__}",
        f"python = {platform.python_version()}",
        f"operating_system = {platform.system()} {platform.release()} {platform.machine()}",
        f"timestamp = {datetime.now(timezone.utc).isoformat()}",
        f"argv = {sys.argv!r}",
        "",
    ]
    lines.extend(traceback.format_exception(exc_type, exc_value, exc_tb))
    return "\n".join(line.rstrip("\n") for line in lines) + "\n"


def write_report(report: str, directory: Optional[Path] = None) -> Optional[Path]:
    """Write a crash report to a new file.

    Returns:
        Path of the report, or None if it couldn't be written.
    """
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            prefix="usage-tracker-report-",
            suffix=".txt",
            dir=directory,
            delete=False,
            encoding="utf-8",
        ) as f:
            f.write(report)
            return Path(f.name)
    except OSError:
        return None


def handle_crash(exc_type, exc_value, exc_tb) -> None:
    """sys.excepthook replacement that writes a crash report."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return

    report = build_report(exc_type, exc_value, exc_tb)
    path = write_report(report)

    print("Well, this is embarrassing.", file=sys.stderr)
    print(
        "usage-tracker had a problem and crashed. "
        "To help us diagnose the problem you can send us a crash report.",
        file=sys.stderr,
    )
    if path is not None:
        print(f"\nWe have generated a report file at \"{path}\".", file=sys.stderr)
    else:
        print(f"\n{report}", file=sys.stderr)
    print("Please open an issue and attach the report.", file=sys.stderr)


def install_crash_handler() -> None:
    sys.excepthook = handle_crash


__all__ = ["build_report", "write_report", "handle_crash", "install_crash_handler"]
