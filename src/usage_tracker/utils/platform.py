"""Platform detection and compatibility utilities.

Provides the lookup of the per-user application data directory.
"""

import os
import platform
from pathlib import Path
from typing import Optional

APP_NAME = "usage-tracker"
DATA_DIR_ENV = "USAGE_TRACKER_DATA_DIR"


def get_app_data_dir(app_name: str = APP_NAME) -> Path:
    """Get the OS-specific application data directory.

    Returns:
        ``%APPDATA%/<app>`` on Windows, ``~/Library/Application Support/<app>``
        on macOS and ``$XDG_DATA_HOME/<app>`` (default ``~/.local/share``)
        elsewhere.
    """
    system = platform.system()
    if system == "Windows":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / app_name
        return Path.home() / "AppData" / "Roaming" / app_name
    elif system == "Darwin":
        return Path.home() / "Library" / "Application Support" / app_name

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / app_name
    return Path.home() / ".local" / "share" / app_name


def get_data_dir(override: Optional[str] = None) -> Path:
    """Resolve the data directory.

    Checks, in order: an explicit override (``--data-dir``), the
    USAGE_TRACKER_DATA_DIR environment variable, then the application
    data directory.
    """
    if override:
        return Path(override).expanduser()
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return get_app_data_dir()


__all__ = ["APP_NAME", "DATA_DIR_ENV", "get_app_data_dir", "get_data_dir"]
