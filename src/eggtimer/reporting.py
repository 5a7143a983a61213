"""Reporting abstractions and implementations for measured calls."""

from enum import Enum
from typing import TYPE_CHECKING, Protocol

from .config import logger
from .duration import Duration

if TYPE_CHECKING:
    from .config import TimerConfig


class TimeUnit(Enum):
    """Supported time units for reporting"""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"


class TimeConverter(Protocol):
    """Protocol for time unit conversion"""

    def convert(self, duration: Duration, unit: TimeUnit) -> float: ...
    def get_unit_suffix(self, unit: TimeUnit) -> str: ...
    def format(self, duration: Duration, unit: TimeUnit, precision: int) -> str: ...


class ElapsedReporter(Protocol):
    """Protocol for reporting how long a measured call took"""

    def report(self, name: str, elapsed: Duration, config: "TimerConfig") -> None: ...


class DefaultTimeConverter:
    """Default implementation of time unit conversion"""

    def convert(self, duration: Duration, unit: TimeUnit) -> float:
        """Convert duration to specified time unit"""
        if unit == TimeUnit.SECONDS:
            return duration.as_seconds()
        elif unit == TimeUnit.MILLISECONDS:
            return duration.as_nanos() / 1e6
        elif unit == TimeUnit.MICROSECONDS:
            return duration.as_nanos() / 1e3
        else:
            return duration.as_nanos() / 1e6  # default to milliseconds

    def get_unit_suffix(self, unit: TimeUnit) -> str:
        """Get the suffix string for the time unit"""
        if unit == TimeUnit.SECONDS:
            return "s"
        elif unit == TimeUnit.MILLISECONDS:
            return "ms"
        elif unit == TimeUnit.MICROSECONDS:
            return "μs"
        else:
            return "ms"

    def format(self, duration: Duration, unit: TimeUnit, precision: int) -> str:
        return f"{self.convert(duration, unit):.{precision}f}{self.get_unit_suffix(unit)}"


class LoggingReporter:
    """Default reporter, writes one INFO record per measured call"""

    def __init__(self, time_converter: TimeConverter | None = None):
        self.time_converter = time_converter or DefaultTimeConverter()

    def report(self, name: str, elapsed: Duration, config: "TimerConfig") -> None:
        text = self.time_converter.format(elapsed, TimeUnit(config.time_unit), config.precision)
        logger.info(f"{name} took {text}")


class ConsoleReporter:
    """Console-based reporter"""

    def __init__(self, time_converter: TimeConverter | None = None):
        self.time_converter = time_converter or DefaultTimeConverter()

    def report(self, name: str, elapsed: Duration, config: "TimerConfig") -> None:
        text = self.time_converter.format(elapsed, TimeUnit(config.time_unit), config.precision)
        print(f"{name:<20} {text:>12}")
