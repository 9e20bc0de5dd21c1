"""Usage Tracker - CLI tool to keep track of how often you use things.

This package records every time a named object is used, persists the
record between runs and extrapolates how often an object is likely to be
used within a time window.
"""

from usage_tracker._version import __version__
from usage_tracker.models import UsageRegistry, Usages
from usage_tracker.storage import load_registry, save_registry

__all__ = [
    "__version__",
    "Usages",
    "UsageRegistry",
    "load_registry",
    "save_registry",
]
