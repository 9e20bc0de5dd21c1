"""One-way conversion of the legacy data file.

The legacy layout is a flat JSON object mapping each name straight to its
list of usages, where a usage is either an RFC 3339 string or a POSIX
timestamp:

    {"lamp": ["2021-03-01T08:00:00Z", 1614589200]}

It is only ever read. Saving always writes the current layout.
"""

from datetime import datetime, timezone
from typing import Any

from usage_tracker.models.registry import UsageRegistry
from usage_tracker.utils.time import parse_timestamp


def decode_legacy_timestamp(value: Any) -> datetime:
    """Decode one legacy usage entry to a UTC datetime.

    Raises:
        TypeError: If the entry is neither a string nor a number.
        ValueError: If a string entry isn't a valid timestamp, or a number is
            outside the range the platform can convert.
    """
    # bool is an int subclass and never a valid timestamp
    if isinstance(value, bool):
        raise TypeError(f"invalid usage entry: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"timestamp out of range: {value!r}") from e
    if isinstance(value, str):
        return parse_timestamp(value)
    raise TypeError(f"invalid usage entry: {value!r}")


def convert_legacy(raw: Any) -> UsageRegistry:
    """Build a registry from a decoded legacy data file.

    Args:
        raw: The parsed JSON document.

    Returns:
        Registry holding every legacy entry, usages in file order.

    Raises:
        TypeError: If the document doesn't have the legacy shape.
        ValueError: If a name is empty or a timestamp is malformed.
    """
    if not isinstance(raw, dict):
        raise TypeError("expected an object mapping names to lists of usages")

    registry = UsageRegistry()
    for name, stamps in raw.items():
        if not isinstance(stamps, list):
            raise TypeError(f'usages of "{name}" must be a list')
        usages = registry.add(name)
        for stamp in stamps:
            usages.record(decode_legacy_timestamp(stamp))
    return registry


__all__ = ["convert_legacy", "decode_legacy_timestamp"]
