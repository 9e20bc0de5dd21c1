"""Utility functions.

Modules:
    time: Time formatting and parsing utilities
    platform: Platform detection and data directory lookup
"""

from usage_tracker.utils.platform import get_app_data_dir, get_data_dir
from usage_tracker.utils.time import (
    format_timestamp,
    parse_cutoff,
    parse_timestamp,
    to_rfc3339,
    window_from_unit,
)

__all__ = [
    "parse_timestamp",
    "format_timestamp",
    "to_rfc3339",
    "parse_cutoff",
    "window_from_unit",
    "get_app_data_dir",
    "get_data_dir",
]
