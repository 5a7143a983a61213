from .alarm import Alarm, AlarmError
from .config import ErrorHandling, TimerConfig, configure, get_config
from .duration import (
    Duration,
    Instant,
    duration_to_seconds,
    duration_to_whole_seconds,
    seconds_to_duration,
)
from .measure import measure, time_call
from .reporting import (
    ConsoleReporter,
    DefaultTimeConverter,
    ElapsedReporter,
    LoggingReporter,
    TimeUnit,
)
from .timed_list import TimedEntry, TimedList
from .timers import EggTimer, Stopwatch, Timer

__all__ = [
    "Alarm",
    "AlarmError",
    "Duration",
    "EggTimer",
    "ErrorHandling",
    "Instant",
    "Stopwatch",
    "TimedEntry",
    "TimedList",
    "Timer",
    "TimerConfig",
    "TimeUnit",
    "ElapsedReporter",
    "ConsoleReporter",
    "DefaultTimeConverter",
    "LoggingReporter",
    "configure",
    "get_config",
    "measure",
    "time_call",
    "duration_to_seconds",
    "duration_to_whole_seconds",
    "seconds_to_duration",
]
