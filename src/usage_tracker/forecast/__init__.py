"""Usage forecasting functionality for usage-tracker."""

from usage_tracker.forecast.forecaster import (
    calculate_rate,
    estimate_usage,
    window_seconds,
)

__all__ = [
    "calculate_rate",
    "estimate_usage",
    "window_seconds",
]
