"""Output formatting for command results.

Every printer takes ``as_json`` and either prints a human-readable view or
a single JSON document for scripting.
"""

import json
import sys
from datetime import datetime
from typing import Mapping, Sequence

from usage_tracker.display.colors import Colors
from usage_tracker.models.usages import Usages
from usage_tracker.utils.time import format_timestamp, to_rfc3339


def print_json(data) -> None:
    print(json.dumps(data, indent=2))


def print_info(message: str) -> None:
    """Print an informational note that is not an error."""
    print(f"{Colors.DIM}{message}{Colors.RESET}")


def print_error(message: str, suggestion: str = "") -> None:
    """Print an error (and optional suggestion) to stderr."""
    print(f"{Colors.RED}{message}{Colors.RESET}", file=sys.stderr)
    if suggestion:
        print(f"{Colors.YELLOW}Suggestion: {suggestion}{Colors.RESET}", file=sys.stderr)


def print_success(message: str) -> None:
    print(f"{Colors.GREEN}{message}{Colors.RESET}")


def display_names(names: Sequence[str], as_json: bool = False) -> None:
    """Print tracked object names, one per line, numbered."""
    if as_json:
        print_json(list(names))
        return

    if not names:
        print_info("No objects are tracked.")
        return

    for pos, name in enumerate(names):
        print(f"{Colors.DIM}{pos}:{Colors.RESET} {Colors.BOLD}{name}{Colors.RESET}")


def display_verbose_listing(
    entries: Mapping[str, Usages], utc: bool = False, as_json: bool = False
) -> None:
    """Print every tracked object with all of its usages.

    Args:
        entries: Mapping of name to usage history, in display order.
        utc: Show timestamps in UTC instead of local time.
        as_json: Print JSON instead.
    """
    if as_json:
        print_json(
            {name: [to_rfc3339(u) for u in usages.list()] for name, usages in entries.items()}
        )
        return

    if not entries:
        print_info("No objects are tracked.")
        return

    for pos, (name, usages) in enumerate(entries.items()):
        print(f"{Colors.DIM}{pos}:{Colors.RESET} {Colors.BOLD}{name}{Colors.RESET}")
        for u in usages.list():
            print(f"   used at: {format_timestamp(u, utc=utc)}")


def display_usages(
    name: str, usages: Sequence[datetime], utc: bool = False, as_json: bool = False
) -> None:
    """Print the usages of one object in recording order."""
    if as_json:
        print_json({"name": name, "usages": [to_rfc3339(u) for u in usages]})
        return

    for u in usages:
        print(format_timestamp(u, utc=utc))


def display_estimate(
    name: str,
    estimate: float,
    length: float,
    unit: str,
    window: float,
    as_json: bool = False,
) -> None:
    """Print a usage prediction for a window of ``window`` seconds."""
    if as_json:
        print_json(
            {
                "name": name,
                "window": {
                    "length": length,
                    "unit": unit,
                    "seconds": window,
                },
                "estimate": estimate,
            }
        )
        return

    plural = "" if length == 1 else "s"
    print(
        f"{Colors.BOLD}{name}{Colors.RESET} is expected to be used "
        f"{Colors.CYAN}{estimate:.2f}{Colors.RESET} times "
        f"per {length:g} {unit}{plural}"
    )


__all__ = [
    "print_json",
    "print_info",
    "print_error",
    "print_success",
    "display_names",
    "display_verbose_listing",
    "display_usages",
    "display_estimate",
]
