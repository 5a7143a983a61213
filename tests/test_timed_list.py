import copy
import logging
import time

import pytest

from eggtimer import Duration, EggTimer, TimedEntry, TimedList


@pytest.fixture
def mixed(clock):
    lst = TimedList()
    lst.insert("short", 1)
    lst.insert("long", 10)
    lst.insert("medium", 5)
    return lst


class TestTimedList:
    def test_insert_then_iterate(self, clock):
        lst = TimedList()
        lst.insert("a", 1.0)
        assert list(lst) == ["a"]
        assert len(lst) == 1
        assert not lst.is_empty()
        assert lst

    def test_empty(self):
        lst = TimedList()
        assert len(lst) == 0
        assert lst.is_empty()
        assert not lst
        assert list(lst) == []

    def test_from_pairs(self, clock):
        lst = TimedList.from_pairs([("x", 1), ("y", 2.5), ("z", Duration(3, 0))])
        assert len(lst) == 3
        assert list(lst) == ["x", "y", "z"]
        assert list(TimedList([(1, 1), (2, 1)])) == [1, 2]

    def test_expired_entries_are_hidden_from_reads(self, mixed, clock):
        clock.advance(2)
        assert list(mixed) == ["long", "medium"]
        assert len(mixed) == 2

    def test_reads_do_not_compact(self, mixed, clock):
        clock.advance(2)
        list(mixed.iter())
        list(mixed.timer_iter())
        len(mixed)
        assert len(mixed._entries) == 3
        mixed.clean()
        assert len(mixed._entries) == 2

    def test_clean(self, clock):
        lst = TimedList()
        lst.insert("a", 0.05)
        lst.insert("b", 5.0)
        clock.advance(0.1)
        lst.clean()
        assert list(lst.iter()) == ["b"]

    def test_clear(self, mixed):
        mixed.clear()
        assert mixed.is_empty()
        assert mixed._entries == []

    def test_retain_filters_by_value(self, mixed, clock):
        clock.advance(2)
        mixed.retain(lambda value: value != "medium")
        assert list(mixed) == ["long"]
        # retain keeps expired entries that pass the predicate
        assert [entry.value for entry in mixed._entries] == ["short", "long"]

    def test_reverse_iteration(self, mixed, clock):
        assert list(reversed(mixed)) == ["medium", "long", "short"]
        clock.advance(6)
        assert list(mixed.iter(reverse=True)) == ["long"]

    def test_iter_is_lazy(self, mixed, clock):
        it = mixed.iter()
        assert next(it) == "short"
        clock.advance(6)
        # "medium" expired after iteration began and is skipped
        assert list(it) == ["long"]

    def test_timer_iter_exposes_countdown_copies(self, mixed, clock):
        clock.advance(0.5)
        pairs = list(mixed.timer_iter())
        assert [value for _, value in pairs] == ["short", "long", "medium"]
        timer, _ = pairs[0]
        assert isinstance(timer, EggTimer)
        assert timer.duration_left() == Duration(0, 500_000_000)
        timer.reset()
        assert mixed._entries[0].timer.duration_left() == Duration(0, 500_000_000)

    def test_iter_mut_compacts_and_allows_replacement(self, mixed, clock):
        clock.advance(2)
        it = mixed.iter_mut()
        # compaction happens when iter_mut is called
        assert len(mixed._entries) == 2
        for entry in it:
            assert isinstance(entry, TimedEntry)
            entry.value = entry.value.upper()
        assert list(mixed) == ["LONG", "MEDIUM"]

    def test_iter_mut_reverse(self, mixed):
        assert [entry.value for entry in mixed.iter_mut(reverse=True)] == [
            "medium",
            "long",
            "short",
        ]

    def test_timer_iter_mut(self, mixed, clock):
        clock.advance(6)
        pairs = list(mixed.timer_iter_mut())
        assert len(mixed._entries) == 1
        timer, entry = pairs[0]
        assert timer.duration_left() == Duration(4, 0)
        entry.value = "longer"
        assert list(mixed) == ["longer"]

    def test_drain_consumes(self, mixed, clock):
        clock.advance(2)
        values = mixed.drain()
        assert mixed.is_empty()
        assert list(values) == ["long", "medium"]
        assert mixed._entries == []

    def test_drain_skips_entries_expiring_midway(self, mixed, clock):
        values = mixed.drain()
        assert next(values) == "short"
        clock.advance(6)
        assert list(values) == ["long"]

    def test_clean_logs_dropped_count(self, mixed, clock, caplog):
        clock.advance(6)
        with caplog.at_level(logging.DEBUG, logger="eggtimer"):
            mixed.clean()
        assert "dropped 2 expired" in caplog.text

    def test_zero_duration_entry_is_never_visible(self):
        lst = TimedList()
        lst.insert("gone", 0)
        assert list(lst) == []
        assert len(lst) == 0

    def test_copy_is_independent(self, clock):
        original = TimedList([("x", 1)])
        clone = copy.copy(original)
        assert clone == original

        clone.insert("y", 10)
        for entry in clone.iter_mut():
            entry.value = entry.value.upper()
        assert list(original) == ["x"]
        assert list(clone) == ["X", "Y"]
        assert clone != original

    def test_equality_compares_entries(self, clock):
        first = TimedList([("a", 1), ("b", 2)])
        second = TimedList([("a", 1), ("b", 2)])
        assert first == second
        clock.advance(0.5)
        assert first != TimedList([("a", 1), ("b", 2)])
        assert first != ["a", "b"]

    def test_repr(self, clock):
        lst = TimedList([("a", 1)])
        assert repr(lst) == "TimedList(['a'])"

    def test_real_expiry(self):
        lst = TimedList()
        lst.insert("a", 0.05)
        lst.insert("b", 5.0)
        time.sleep(0.1)
        lst.clean()
        assert list(lst.iter()) == ["b"]
