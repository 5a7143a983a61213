import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .reporting import ElapsedReporter

logger = logging.getLogger("eggtimer")

_UNSET = object()


class ErrorHandling(Enum):
    WARN = "warn"
    IGNORE = "ignore"
    RAISE = "raise"


@dataclass
class TimerConfig:
    """Global settings for all timers"""

    on_redundant_transition: ErrorHandling = ErrorHandling.IGNORE
    alarm_margin: float = 0.1
    alarm_short_threshold: float = 0.12
    alarm_short_ratio: float = 0.9
    spin_interval: float = 0.0
    time_unit: str = "milliseconds"
    precision: int = 2
    clock: Callable[[], int] = time.monotonic_ns
    reporter: Optional["ElapsedReporter"] = None


_config: TimerConfig | None = None
_config_lock = threading.RLock()


def get_config() -> TimerConfig:
    """
    Get the global timer configuration.

    Returns:
        TimerConfig: The current global configuration
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                from .reporting import LoggingReporter

                _config = TimerConfig(reporter=LoggingReporter())
    return _config


def configure(**kwargs) -> None:
    """
    Configure the global timer settings.

    Args:
        **kwargs: Configuration options to update. Valid keys are:
            - on_redundant_transition: ErrorHandling enum value
            - alarm_margin: float (seconds an alarm wakes before its deadline)
            - alarm_short_threshold: float (alarms shorter than this sleep
              for a fraction of their duration instead)
            - alarm_short_ratio: float
            - spin_interval: float (0 busy-polls the final margin)
            - time_unit: str ("seconds", "milliseconds", "microseconds")
            - precision: int
            - clock: callable returning monotonic nanoseconds
            - reporter: ElapsedReporter implementation (set to None to disable reporting)
    """
    global _config
    unknown = set(kwargs) - set(TimerConfig.__dataclass_fields__)
    if unknown:
        raise TypeError(f"Unknown configuration option(s): {sorted(unknown)}")

    with _config_lock:
        current_config = get_config()

        reporter = kwargs.get("reporter", _UNSET)
        if reporter is _UNSET:
            reporter = current_config.reporter

        _config = TimerConfig(
            on_redundant_transition=kwargs.get(
                "on_redundant_transition", current_config.on_redundant_transition
            ),
            alarm_margin=kwargs.get("alarm_margin", current_config.alarm_margin),
            alarm_short_threshold=kwargs.get(
                "alarm_short_threshold", current_config.alarm_short_threshold
            ),
            alarm_short_ratio=kwargs.get("alarm_short_ratio", current_config.alarm_short_ratio),
            spin_interval=kwargs.get("spin_interval", current_config.spin_interval),
            time_unit=kwargs.get("time_unit", current_config.time_unit),
            precision=kwargs.get("precision", current_config.precision),
            clock=kwargs.get("clock", current_config.clock),
            reporter=reporter,
        )


def _handle_error(message: str) -> None:
    policy = get_config().on_redundant_transition
    if policy == ErrorHandling.WARN:
        logger.warning(message)
    elif policy == ErrorHandling.RAISE:
        raise RuntimeError(message)
    # else: pass
