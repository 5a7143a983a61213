"""A list whose elements disappear once their own countdown is over."""

import copy
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .config import logger
from .duration import Seconds
from .timers import EggTimer

T = TypeVar("T")


@dataclass
class TimedEntry(Generic[T]):
    """A stored value and the countdown that decides how long it lives"""

    timer: EggTimer
    value: T

    def is_expired(self) -> bool:
        return self.timer.is_ready()


class TimedList(Generic[T]):
    """
    Insertion-ordered list where each element has an associated duration.

    Once an element's duration has elapsed it is never returned by any
    read, but it is only physically dropped by the next mutating call
    (clean, retain, iter_mut, timer_iter_mut, drain).

    Iteration checks expiry at each step. If iteration takes long enough,
    elements that were alive when it began may be skipped by the time
    they are reached.

    Usage:
        lst = TimedList()
        lst.insert("a", 0.05)
        lst.insert("b", 5.0)
        time.sleep(0.1)
        list(lst)  # ["b"]
    """

    def __init__(self, pairs: Optional[Iterable[tuple[T, Seconds]]] = None):
        self._entries: list[TimedEntry[T]] = []
        if pairs is not None:
            self.extend(pairs)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[T, Seconds]]) -> "TimedList[T]":
        return cls(pairs)

    def insert(self, value: T, seconds: Seconds) -> None:
        """Append `value`, alive for `seconds` from now"""
        self._entries.append(TimedEntry(EggTimer.set(seconds), value))

    def extend(self, pairs: Iterable[tuple[T, Seconds]]) -> None:
        for value, seconds in pairs:
            self.insert(value, seconds)

    def clean(self) -> None:
        """
        Drop every element whose duration has elapsed.
        Other mutating methods call this as needed.
        """
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if not entry.is_expired()]
        dropped = before - len(self._entries)
        if dropped:
            logger.debug(f"TimedList dropped {dropped} expired element(s)")

    def clear(self) -> None:
        self._entries.clear()

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Keep only elements whose value satisfies `predicate`, expired or not"""
        self._entries = [entry for entry in self._entries if predicate(entry.value)]

    def __len__(self) -> int:
        return sum(1 for entry in self._entries if not entry.is_expired())

    def is_empty(self) -> bool:
        return not any(not entry.is_expired() for entry in self._entries)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"TimedList({list(self.iter())!r})"

    def __eq__(self, other: object) -> bool:
        """Equal when the stored entries, expired or not, and their countdowns match"""
        if not isinstance(other, TimedList):
            return NotImplemented
        return self._entries == other._entries

    def __copy__(self) -> "TimedList[T]":
        """New list with its own entries and countdowns; values are shared"""
        clone: TimedList[T] = TimedList()
        clone._entries = [
            TimedEntry(copy.deepcopy(entry.timer), entry.value) for entry in self._entries
        ]
        return clone

    def _live(self, entries: list[TimedEntry[T]], reverse: bool) -> Iterator[TimedEntry[T]]:
        ordered = reversed(entries) if reverse else iter(entries)
        for entry in ordered:
            if not entry.is_expired():
                yield entry

    def iter(self, reverse: bool = False) -> Iterator[T]:
        """Lazily yield live values. Never drops expired elements."""
        for entry in self._live(self._entries, reverse):
            yield entry.value

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __reversed__(self) -> Iterator[T]:
        return self.iter(reverse=True)

    def timer_iter(self, reverse: bool = False) -> Iterator[tuple[EggTimer, T]]:
        """Like iter(), also yielding a copy of each element's countdown"""
        for entry in self._live(self._entries, reverse):
            yield copy.deepcopy(entry.timer), entry.value

    def iter_mut(self, reverse: bool = False) -> Iterator[TimedEntry[T]]:
        """
        Drop expired elements, then yield the live entries themselves.
        Assigning to `entry.value` replaces the stored value.
        """
        self.clean()
        return self._live(self._entries, reverse)

    def timer_iter_mut(self, reverse: bool = False) -> Iterator[tuple[EggTimer, TimedEntry[T]]]:
        self.clean()
        return ((copy.deepcopy(entry.timer), entry) for entry in self._live(self._entries, reverse))

    def drain(self) -> Iterator[T]:
        """
        Consume the list: drop expired elements, empty the list and
        yield the remaining values in order.
        """
        self.clean()
        entries, self._entries = self._entries, []
        return (entry.value for entry in self._live(entries, reverse=False))
