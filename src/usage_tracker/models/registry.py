"""Name-keyed registry of tracked objects and their usage histories."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Union

from usage_tracker.errors import AlreadyTrackedError, NotTrackedError
from usage_tracker.forecast.forecaster import estimate_usage
from usage_tracker.models.usages import Usages


@dataclass
class UsageRegistry:
    """Every tracked object, keyed by name.

    Equality is structural over all names and every ordered usage list,
    so a registry can be compared against a snapshot taken at load time
    to decide whether it needs saving.
    """

    entries: dict[str, Usages] = field(default_factory=dict)

    def _get(self, name: str) -> Usages:
        try:
            return self.entries[name]
        except KeyError:
            raise NotTrackedError(name) from None

    def add(self, name: str) -> Usages:
        """Start tracking ``name`` with an empty history.

        Raises:
            AlreadyTrackedError: If ``name`` is already tracked.
            ValueError: If ``name`` is empty.
        """
        if not name:
            raise ValueError("object name must not be empty")
        if name in self.entries:
            raise AlreadyTrackedError(name)
        usages = self.entries[name] = Usages()
        return usages

    def remove(self, name: str) -> None:
        """Stop tracking ``name``. Removing an unknown name does nothing."""
        self.entries.pop(name, None)

    def record_use(self, name: str, add_if_missing: bool = False) -> datetime:
        """Record a usage of ``name`` at the current time.

        Args:
            name: Object to record the usage for.
            add_if_missing: Start tracking ``name`` if it isn't already.

        Returns:
            The recorded UTC timestamp.

        Raises:
            NotTrackedError: If ``name`` is unknown and ``add_if_missing`` is False.
        """
        if name not in self.entries and add_if_missing:
            self.add(name)
        return self._get(name).record()

    def prune(self, name: str, before: Optional[datetime] = None) -> int:
        """Drop usages of ``name`` earlier than ``before``, or all of them.

        Returns:
            Number of usages removed.

        Raises:
            NotTrackedError: If ``name`` is unknown.
        """
        usages = self._get(name)
        if before is None:
            removed = len(usages)
            usages.clear()
            return removed
        return usages.prune_before(before)

    def list(self) -> list[str]:
        return sorted(self.entries)

    def list_verbose(self) -> dict[str, Usages]:
        return {name: self.entries[name].copy() for name in sorted(self.entries)}

    def show(self, name: str) -> list[datetime]:
        """Return the recorded usages of ``name`` in recording order.

        Raises:
            NotTrackedError: If ``name`` is unknown.
        """
        return self._get(name).list()

    usages = show

    def clear(self) -> None:
        self.entries.clear()

    def usage(
        self,
        name: str,
        window: Union[timedelta, float],
        now: Optional[datetime] = None,
    ) -> float:
        """Estimate how often ``name`` is used within a window of time.

        See :func:`usage_tracker.forecast.forecaster.estimate_usage`.

        Raises:
            NotTrackedError: If ``name`` is unknown.
            NeverUsedError: If ``name`` has no history to extrapolate from.
        """
        return estimate_usage(name, self._get(name), window, now=now)

    def copy(self) -> UsageRegistry:
        return UsageRegistry({name: u.copy() for name, u in self.entries.items()})

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["UsageRegistry"]
