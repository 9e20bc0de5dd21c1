"""Usage-rate prediction from the historical density of usages."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Optional, Union

from usage_tracker.errors import NeverUsedError

if TYPE_CHECKING:
    from usage_tracker.models.usages import Usages


def window_seconds(window: Union[timedelta, float]) -> float:
    """Length of a window in seconds. Plain numbers are taken as seconds."""
    if isinstance(window, timedelta):
        return window.total_seconds()
    return float(window)


def calculate_rate(usages: Usages, now: Optional[datetime] = None) -> Optional[float]:
    """Average number of usages per second since the first usage.

    Args:
        usages: Usage history to analyze.
        now: Reference instant (default: current UTC time).

    Returns:
        Usages per second, or None if the history is empty or no time has
        passed since the first usage.
    """
    first = usages.first()
    if first is None:
        return None

    if now is None:
        now = datetime.now(timezone.utc)
    elapsed = (now - first).total_seconds()
    if elapsed <= 0:
        return None

    return len(usages) / elapsed


def estimate_usage(
    name: str,
    usages: Usages,
    window: Union[timedelta, float],
    now: Optional[datetime] = None,
) -> float:
    """Extrapolate how many times an object is used within ``window``.

    Assumes usages are spread uniformly between the first recorded usage
    and ``now``, so the estimate is ``window / elapsed * count``. Negative
    windows give negative estimates.

    Args:
        name: Name of the object (used in error messages).
        usages: Its usage history.
        window: Window length as a timedelta or in seconds.
        now: Reference instant (default: current UTC time).

    Returns:
        Estimated number of usages in the window.

    Raises:
        NeverUsedError: If the history is empty, or the only usages happened
            at (or after) ``now`` so there is no elapsed time to spread them over.
    """
    if usages.is_empty():
        raise NeverUsedError(name)

    rate = calculate_rate(usages, now=now)
    if rate is None:
        raise NeverUsedError(
            name,
            details="No time has passed since the first recorded usage.",
        )

    return window_seconds(window) * rate


__all__ = ["window_seconds", "calculate_rate", "estimate_usage"]
