"""Display and formatting utilities.

Modules:
    colors: ANSI color handling
    output: Human-readable and JSON rendering of command results
"""

from usage_tracker.display.colors import Colors, disable_colors, init_colors, supports_color
from usage_tracker.display.output import (
    display_estimate,
    display_names,
    display_usages,
    display_verbose_listing,
    print_error,
    print_info,
    print_json,
    print_success,
)

__all__ = [
    "Colors",
    "supports_color",
    "disable_colors",
    "init_colors",
    "print_json",
    "print_info",
    "print_error",
    "print_success",
    "display_names",
    "display_verbose_listing",
    "display_usages",
    "display_estimate",
]
