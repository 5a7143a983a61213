"""Duration and Instant values plus conversion from plain numbers of seconds."""

import math
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from typing import Any, ClassVar, Protocol, TypeVar, Union

from .config import get_config

NANOS_PER_SEC = 1_000_000_000

N = TypeVar("N")


@dataclass(frozen=True, order=True)
class Duration:
    """A non-negative span of time: whole seconds plus sub-second nanoseconds."""

    secs: int = 0
    nanos: int = 0

    ZERO: ClassVar["Duration"]

    def __post_init__(self) -> None:
        if self.secs < 0:
            raise ValueError(f"Duration seconds must be non-negative, got {self.secs}")
        if not 0 <= self.nanos < NANOS_PER_SEC:
            raise ValueError(f"Duration nanos must be in [0, {NANOS_PER_SEC}), got {self.nanos}")

    @classmethod
    def from_nanos(cls, nanos: int) -> "Duration":
        secs, rem = divmod(nanos, NANOS_PER_SEC)
        return cls(secs, rem)

    @classmethod
    def from_secs(cls, secs: int) -> "Duration":
        return cls(secs, 0)

    def as_nanos(self) -> int:
        return self.secs * NANOS_PER_SEC + self.nanos

    def as_secs(self) -> int:
        """Whole seconds, sub-second part truncated"""
        return self.secs

    def subsec_nanos(self) -> int:
        return self.nanos

    def as_seconds(self) -> float:
        return self.secs + self.nanos / 1e9

    def is_zero(self) -> bool:
        return self.secs == 0 and self.nanos == 0

    def checked_sub(self, other: "Duration") -> Union["Duration", None]:
        """
        Subtract `other` from this duration.

        Returns:
            The difference, or None if it would be negative.
        """
        diff = self.as_nanos() - other.as_nanos()
        if diff < 0:
            return None
        return Duration.from_nanos(diff)

    def saturating_sub(self, other: "Duration") -> "Duration":
        """Subtract `other`, clamping at zero"""
        return self.checked_sub(other) or Duration.ZERO

    def __add__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_nanos(self.as_nanos() + other.as_nanos())

    def __str__(self) -> str:
        return f"{self.as_seconds():.9f}s"


Duration.ZERO = Duration()


@dataclass(frozen=True, order=True)
class Instant:
    """An opaque point on the monotonic clock. Only differences are meaningful."""

    ns: int

    @classmethod
    def now(cls) -> "Instant":
        return cls(get_config().clock())

    def duration_since(self, earlier: "Instant") -> Duration:
        """Time elapsed from `earlier` to this instant, zero if `earlier` is later"""
        return Duration.from_nanos(max(0, self.ns - earlier.ns))

    def elapsed(self) -> Duration:
        return Instant.now().duration_since(self)

    def __sub__(self, other: Any) -> Duration:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.duration_since(other)

    def __add__(self, other: Any) -> "Instant":
        if not isinstance(other, Duration):
            return NotImplemented
        return Instant(self.ns + other.as_nanos())


class SecondsConverter(Protocol[N]):
    """Protocol for converting one numeric representation of seconds"""

    def to_duration(self, seconds: N) -> Duration: ...
    def from_duration(self, duration: Duration) -> N: ...


class FloatSeconds:
    def to_duration(self, seconds: float) -> Duration:
        if math.isnan(seconds) or math.isinf(seconds):
            raise ValueError(f"Seconds must be finite, got {seconds}")
        if seconds < 0:
            raise ValueError(f"Seconds must be non-negative, got {seconds}")
        fract, whole = math.modf(seconds)
        # truncate toward zero, matching the whole-second split
        return Duration(int(whole), min(int(fract * 1e9), NANOS_PER_SEC - 1))

    def from_duration(self, duration: Duration) -> float:
        return duration.as_seconds()


class IntSeconds:
    def to_duration(self, seconds: int) -> Duration:
        if seconds < 0:
            raise ValueError(f"Seconds must be non-negative, got {seconds}")
        return Duration.from_secs(seconds)

    def from_duration(self, duration: Duration) -> int:
        return duration.as_secs()


class DecimalSeconds:
    def to_duration(self, seconds: Decimal) -> Duration:
        if not seconds.is_finite():
            raise ValueError(f"Seconds must be finite, got {seconds}")
        if seconds < 0:
            raise ValueError(f"Seconds must be non-negative, got {seconds}")
        return Duration.from_nanos(int(seconds * NANOS_PER_SEC))

    def from_duration(self, duration: Duration) -> Decimal:
        return Decimal(duration.secs) + Decimal(duration.nanos) / NANOS_PER_SEC


class TimedeltaSeconds:
    def to_duration(self, seconds: timedelta) -> Duration:
        if seconds < timedelta(0):
            raise ValueError(f"Seconds must be non-negative, got {seconds}")
        whole = seconds.days * 86400 + seconds.seconds
        return Duration(whole, seconds.microseconds * 1000)

    def from_duration(self, duration: Duration) -> timedelta:
        return timedelta(seconds=duration.secs, microseconds=duration.nanos // 1000)


class _DurationPassthrough:
    def to_duration(self, seconds: Duration) -> Duration:
        return seconds

    def from_duration(self, duration: Duration) -> Duration:
        return duration


# bool is an int subclass, it is rejected before this lookup
_CONVERTERS: list[tuple[type, SecondsConverter]] = [
    (Duration, _DurationPassthrough()),
    (float, FloatSeconds()),
    (int, IntSeconds()),
    (Decimal, DecimalSeconds()),
    (timedelta, TimedeltaSeconds()),
]

Seconds = Union[float, int, Decimal, timedelta, Duration]


def get_converter(kind: type) -> SecondsConverter:
    """Find the converter registered for a numeric type"""
    if issubclass(kind, bool):
        raise TypeError("bool is not a valid number of seconds")
    for registered, converter in _CONVERTERS:
        if issubclass(kind, registered):
            return converter
    raise TypeError(f"Cannot convert {kind.__name__} to a Duration")


def seconds_to_duration(seconds: Seconds) -> Duration:
    """
    Convert a number of seconds to a Duration.

    Floats are split into whole seconds and nanoseconds, both truncated
    toward zero. Integers are whole seconds.

    Raises:
        ValueError: if `seconds` is negative, NaN or infinite
        TypeError: if `seconds` is not a supported representation
    """
    return get_converter(type(seconds)).to_duration(seconds)


def duration_to_seconds(duration: Duration) -> float:
    """Convert a Duration to floating-point seconds"""
    return FloatSeconds().from_duration(duration)


def duration_to_whole_seconds(duration: Duration) -> int:
    """Convert a Duration to integer seconds, dropping the sub-second part"""
    return IntSeconds().from_duration(duration)
