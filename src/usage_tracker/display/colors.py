"""ANSI styling for command output.

Styles are blanked when stdout isn't a terminal, when ``NO_COLOR`` or
``USAGE_TRACKER_NO_COLOR`` is set, and on ``--no-color`` or ``color = false``.
"""

import os
import platform
import sys

NO_COLOR_ENVS = ("USAGE_TRACKER_NO_COLOR", "NO_COLOR")


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"


def supports_color() -> bool:
    """Whether styled output should be written to stdout."""
    if any(os.environ.get(name) for name in NO_COLOR_ENVS):
        return False
    if not getattr(sys.stdout, "isatty", None) or not sys.stdout.isatty():
        return False
    # Older Windows consoles print escape codes literally
    if platform.system() == "Windows":
        return bool(os.environ.get("WT_SESSION") or os.environ.get("TERM"))
    return True


def disable_colors() -> None:
    for attr in vars(Colors).copy():
        if attr.isupper():
            setattr(Colors, attr, "")


def init_colors() -> None:
    if not supports_color():
        disable_colors()


init_colors()

__all__ = ["Colors", "NO_COLOR_ENVS", "supports_color", "disable_colors", "init_colors"]
