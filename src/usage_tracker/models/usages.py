"""Usage history of a single tracked object."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _as_utc(when: datetime) -> datetime:
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


@dataclass
class Usages:
    """All recorded usages of an object, in UTC and in recording order.

    Timestamps are only ever appended; ``clear`` and ``prune_before``
    are the only operations that drop them.
    """

    usages: list[datetime] = field(default_factory=list)

    def record(self, when: Optional[datetime] = None) -> datetime:
        """Append a usage at ``when`` (defaults to now).

        Args:
            when: Instant of the usage. Naive values are taken as UTC.

        Returns:
            The recorded UTC timestamp.
        """
        when = datetime.now(timezone.utc) if when is None else _as_utc(when)
        self.usages.append(when)
        return when

    def clear(self) -> None:
        """Forget every recorded usage."""
        self.usages.clear()

    def prune_before(self, cutoff: datetime) -> int:
        """Remove all usages strictly earlier than ``cutoff``.

        Usages at or after the cutoff are kept. A naive cutoff is taken as UTC.

        Returns:
            Number of usages removed.
        """
        cutoff = _as_utc(cutoff)
        kept = [u for u in self.usages if u >= cutoff]
        removed = len(self.usages) - len(kept)
        self.usages[:] = kept
        return removed

    def list(self) -> list[datetime]:
        return list(self.usages)

    def is_empty(self) -> bool:
        return not self.usages

    def first(self) -> Optional[datetime]:
        return self.usages[0] if self.usages else None

    def copy(self) -> Usages:
        return Usages(list(self.usages))

    def __len__(self) -> int:
        return len(self.usages)


__all__ = ["Usages"]
