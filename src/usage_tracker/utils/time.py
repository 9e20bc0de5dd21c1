"""Time formatting and parsing utilities.

Provides functions for handling RFC 3339 timestamps, parsing user-supplied
cutoffs and converting window lengths to durations.
"""

from datetime import datetime, time, timedelta, timezone

# Month and year are fixed 30 and 365 day spans, not calendar-aware.
WINDOW_UNITS = {
    "year": timedelta(days=365),
    "month": timedelta(days=30),
    "week": timedelta(weeks=1),
    "day": timedelta(days=1),
    "hour": timedelta(hours=1),
    "minute": timedelta(minutes=1),
    "second": timedelta(seconds=1),
}

LOCAL_DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y")
LOCAL_DATETIME_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
)


def parse_timestamp(iso_str: str) -> datetime:
    """Parse an RFC 3339 timestamp string to a UTC datetime.

    Handles a trailing Z. Naive timestamps are taken as UTC.

    Args:
        iso_str: Timestamp string (e.g., "2024-01-15T10:30:00Z").

    Returns:
        Timezone-aware datetime in UTC.
    """
    if iso_str.endswith(("Z", "z")):
        iso_str = iso_str[:-1] + "+00:00"
    parsed = datetime.fromisoformat(iso_str)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(dt: datetime, utc: bool = False) -> str:
    """Format a timestamp for display.

    Args:
        dt: Timezone-aware datetime.
        utc: Show in UTC instead of the local timezone.

    Returns:
        String like "2024-12-19 15:30:00 +01:00".
    """
    shown = dt.astimezone(timezone.utc) if utc else dt.astimezone()
    return shown.isoformat(sep=" ", timespec="seconds")


def to_rfc3339(dt: datetime) -> str:
    """Serialize a timestamp as RFC 3339 in UTC with a Z suffix."""
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _local_to_utc(naive: datetime) -> datetime:
    return naive.astimezone().astimezone(timezone.utc)


def parse_cutoff(text: str) -> datetime:
    """Parse a user-supplied cutoff into a UTC datetime.

    Accepted forms:
        - local date: "2024-12-19" or "19.12.2024" (midnight local time)
        - local date and time: "2024-12-19 14:30[:00]" (also with "T")
        - date and time with offset: "2024-12-19T14:30:00+02:00" or "...Z"

    Raises:
        ValueError: If ``text`` matches none of the forms.
    """
    text = text.strip()

    for fmt in LOCAL_DATE_FORMATS:
        try:
            day = datetime.strptime(text, fmt).date()
        except ValueError:
            continue
        return _local_to_utc(datetime.combine(day, time.min))

    for fmt in LOCAL_DATETIME_FORMATS:
        try:
            return _local_to_utc(datetime.strptime(text, fmt))
        except ValueError:
            continue

    try:
        parsed = datetime.fromisoformat(text[:-1] + "+00:00" if text.endswith("Z") else text)
    except ValueError:
        raise ValueError(
            f"invalid date '{text}': expected YYYY-MM-DD, DD.MM.YYYY, "
            "YYYY-MM-DD HH:MM[:SS] or an ISO 8601 timestamp with offset"
        ) from None
    if parsed.tzinfo is None:
        return _local_to_utc(parsed)
    return parsed.astimezone(timezone.utc)


def window_from_unit(length: float, unit: str) -> float:
    """Convert a window length in the given unit to seconds.

    The result is a float rather than a timedelta so windows beyond
    timedelta's range still work.

    Args:
        length: Number of units; may be negative or fractional.
        unit: One of year, month, week, day, hour, minute, second
            (a trailing "s" is accepted).

    Raises:
        ValueError: If the unit is unknown.
    """
    key = unit.lower()
    if key not in WINDOW_UNITS and key.endswith("s"):
        key = key[:-1]
    if key not in WINDOW_UNITS:
        raise ValueError(
            f"unknown time unit '{unit}': expected one of {', '.join(WINDOW_UNITS)}"
        )
    return length * WINDOW_UNITS[key].total_seconds()


__all__ = [
    "WINDOW_UNITS",
    "parse_timestamp",
    "format_timestamp",
    "to_rfc3339",
    "parse_cutoff",
    "window_from_unit",
]
