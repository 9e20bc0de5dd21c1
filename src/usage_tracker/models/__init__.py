"""Tracked objects and their usage histories.

Modules:
    usages: Ordered usage history of a single object
    registry: Name-keyed collection of usage histories
"""

from usage_tracker.models.registry import UsageRegistry
from usage_tracker.models.usages import Usages

__all__ = ["Usages", "UsageRegistry"]
