"""Run a callback on a background thread once a countdown is over."""

import asyncio
import copy
import threading
import time
from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

from .config import get_config, logger
from .duration import Duration, Seconds, duration_to_seconds
from .timers import EggTimer

T = TypeVar("T")


class AlarmError(RuntimeError):
    """The alarm callback raised; the original exception is the __cause__."""


class Alarm(Generic[T]):
    """
    Calls a function on a background thread when its countdown is ready

    The worker sleeps through most of the countdown, then polls the
    countdown until it is ready, so the callback never runs early.

    Usage:
        alarm = Alarm.set(0.5, lambda: 42)
        result = alarm.join()

        # From a coroutine
        result = await alarm.wait()
    """

    def __init__(self, seconds: Seconds, callback: Callable[..., T], *args: Any, **kwargs: Any):
        self._timer = EggTimer.set(seconds)
        self._result: Optional[T] = None
        self._error: Optional[BaseException] = None
        name = getattr(callback, "__name__", "alarm")
        self._thread = threading.Thread(
            target=self._run,
            args=(copy.deepcopy(self._timer), callback, args, kwargs),
            name=f"alarm-{name}",
            daemon=True,
        )
        self._thread.start()

    @classmethod
    def set(cls, seconds: Seconds, callback: Callable[..., T], *args: Any, **kwargs: Any) -> "Alarm[T]":
        return cls(seconds, callback, *args, **kwargs)

    def _run(self, timer: EggTimer, callback: Callable[..., T], args: tuple, kwargs: dict) -> None:
        config = get_config()
        time.sleep(_coarse_sleep(timer.max_seconds()))

        while not timer.is_ready():
            if config.spin_interval > 0:
                left = timer.duration_left()
                if left is not None:
                    time.sleep(min(config.spin_interval, duration_to_seconds(left)))

        logger.debug(f"Alarm '{self._thread.name}' firing after {timer.elapsed()}")
        try:
            self._result = callback(*args, **kwargs)
        except BaseException as exc:
            logger.warning(f"Alarm '{self._thread.name}' callback raised {exc!r}")
            self._error = exc

    def time_left(self) -> float:
        return self._timer.seconds_left()

    def duration_left(self) -> Optional[Duration]:
        return self._timer.duration_left()

    def is_ready(self) -> bool:
        return self._timer.is_ready()

    def is_finished(self) -> bool:
        """Check if the callback has run"""
        return not self._thread.is_alive()

    def join(self) -> T:
        """
        Block until the alarm goes off and its callback returns.

        Returns:
            The callback's return value

        Raises:
            AlarmError: if the callback raised
        """
        self._thread.join()
        if self._error is not None:
            raise AlarmError(f"Alarm callback failed: {self._error!r}") from self._error
        return self._result  # type: ignore[return-value]

    async def wait(self) -> T:
        """Await the alarm without blocking the event loop"""
        return await asyncio.to_thread(self.join)


def _coarse_sleep(seconds: float) -> float:
    config = get_config()
    if seconds < config.alarm_short_threshold:
        return seconds * config.alarm_short_ratio
    return max(0.0, seconds - config.alarm_margin)
