"""
Tests for the usage history of a single object.
"""

from datetime import datetime, timedelta, timezone

from usage_tracker.models.usages import Usages


class TestRecord:
    """Tests for Usages.record()."""

    def test_record_appends_now(self, mock_now, fixed_now):
        """Test recording without an instant uses the current time."""
        usages = Usages()
        recorded = usages.record()

        assert recorded == fixed_now
        assert usages.list() == [fixed_now]

    def test_record_keeps_insertion_order(self, fixed_now):
        """Test usages are kept in recording order, not sorted."""
        later = fixed_now + timedelta(hours=1)
        usages = Usages()
        usages.record(later)
        usages.record(fixed_now)

        assert usages.list() == [later, fixed_now]

    def test_record_naive_is_utc(self):
        """Test naive instants are taken as UTC."""
        usages = Usages()
        recorded = usages.record(datetime(2024, 1, 1, 12, 0))

        assert recorded.tzinfo == timezone.utc
        assert recorded.hour == 12

    def test_record_converts_to_utc(self):
        """Test aware instants are normalized to UTC."""
        plus_two = timezone(timedelta(hours=2))
        usages = Usages()
        recorded = usages.record(datetime(2024, 1, 1, 12, 0, tzinfo=plus_two))

        assert recorded == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert recorded.utcoffset() == timedelta(0)


class TestClearAndPrune:
    """Tests for Usages.clear() and Usages.prune_before()."""

    def test_clear(self, fixed_now):
        """Test clear empties the history."""
        usages = Usages([fixed_now, fixed_now])
        usages.clear()

        assert usages.is_empty()
        assert usages.list() == []

    def test_prune_before_keeps_cutoff(self, fixed_now):
        """Test usages at the cutoff survive, earlier ones are dropped."""
        before = fixed_now - timedelta(seconds=1)
        after = fixed_now + timedelta(seconds=1)
        usages = Usages([before, fixed_now, after])

        removed = usages.prune_before(fixed_now)

        assert removed == 1
        assert usages.list() == [fixed_now, after]

    def test_prune_before_is_idempotent(self, fixed_now):
        """Test pruning twice with the same cutoff equals pruning once."""
        stamps = [fixed_now - timedelta(days=d) for d in (5, 3, 1, 0)]
        once = Usages(list(stamps))
        twice = Usages(list(stamps))
        cutoff = fixed_now - timedelta(days=2)

        once.prune_before(cutoff)
        twice.prune_before(cutoff)
        removed_again = twice.prune_before(cutoff)

        assert once == twice
        assert removed_again == 0

    def test_prune_before_naive_cutoff_is_utc(self, fixed_now):
        """Test a naive cutoff is compared as UTC, like a naive usage."""
        usages = Usages([fixed_now - timedelta(hours=1), fixed_now])

        removed = usages.prune_before(datetime(2024, 12, 19, 14, 0))

        assert removed == 1
        assert usages.list() == [fixed_now]

    def test_prune_before_offset_cutoff(self, fixed_now):
        """Test a cutoff with another offset is converted to UTC."""
        usages = Usages([fixed_now - timedelta(hours=1), fixed_now])
        cutoff = datetime(2024, 12, 19, 16, 30, tzinfo=timezone(timedelta(hours=2)))

        assert usages.prune_before(cutoff) == 1

    def test_prune_empty_is_noop(self, fixed_now):
        """Test pruning an empty history does nothing."""
        usages = Usages()

        assert usages.prune_before(fixed_now) == 0
        assert usages.is_empty()


class TestReading:
    """Tests for read-only accessors."""

    def test_list_returns_copy(self, fixed_now):
        """Test mutating the returned list doesn't touch the history."""
        usages = Usages([fixed_now])
        listed = usages.list()
        listed.clear()

        assert len(usages) == 1

    def test_first(self, fixed_now):
        """Test first() is the first recorded usage."""
        later = fixed_now + timedelta(hours=1)
        assert Usages([later, fixed_now]).first() == later
        assert Usages().first() is None

    def test_equality_is_structural(self, fixed_now):
        """Test histories compare by their ordered contents."""
        later = fixed_now + timedelta(hours=1)

        assert Usages([fixed_now, later]) == Usages([fixed_now, later])
        assert Usages([fixed_now, later]) != Usages([later, fixed_now])

    def test_copy_is_independent(self, fixed_now):
        """Test copies don't share the underlying list."""
        usages = Usages([fixed_now])
        copied = usages.copy()
        copied.record(fixed_now)

        assert len(usages) == 1
        assert len(copied) == 2
