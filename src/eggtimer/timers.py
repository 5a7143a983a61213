from dataclasses import dataclass, field
from typing import Any, Optional

from .config import _handle_error, logger
from .duration import Duration, Instant, Seconds, duration_to_seconds, seconds_to_duration


@dataclass
class Timer:
    """
    Count-up timer that knows how long since it started

    Usage:
        timer = Timer.start()
        work()
        print(timer.elapsed_seconds())
    """

    start_instant: Instant = field(default_factory=Instant.now)

    @classmethod
    def start(cls) -> "Timer":
        return cls()

    def reset(self) -> None:
        """Restart the timer from the current instant"""
        self.start_instant = Instant.now()

    def started_at(self) -> Instant:
        return self.start_instant

    def elapsed(self) -> Duration:
        return Instant.now().duration_since(self.start_instant)

    def elapsed_seconds(self) -> float:
        return duration_to_seconds(self.elapsed())


@dataclass
class EggTimer:
    """
    Timer that counts down from a fixed target duration

    Usage:
        egg = EggTimer.set(3.5)
        while not egg.is_ready():
            ...
    """

    timer: Timer
    target: Duration

    @classmethod
    def set(cls, seconds: Seconds) -> "EggTimer":
        """
        Start a countdown.

        Args:
            seconds: Target duration, as a number of seconds or a Duration

        Raises:
            ValueError: if `seconds` is negative
        """
        return cls(timer=Timer.start(), target=seconds_to_duration(seconds))

    def reset(self) -> None:
        """Restart the countdown, keeping the target"""
        self.timer.reset()

    def elapsed(self) -> Duration:
        return self.timer.elapsed()

    def started_at(self) -> Instant:
        return self.timer.started_at()

    def duration_left(self) -> Optional[Duration]:
        """
        Time remaining until the target is reached.

        Returns:
            The remaining Duration, or None once the timer is ready. Never negative.
        """
        elapsed = self.timer.elapsed()
        if elapsed >= self.target:
            return None
        return self.target.checked_sub(elapsed)

    def seconds_left(self) -> float:
        """Remaining seconds; zero or negative once ready"""
        return duration_to_seconds(self.target) - self.timer.elapsed_seconds()

    def is_ready(self) -> bool:
        return self.duration_left() is None

    def max_duration(self) -> Duration:
        return self.target

    def max_seconds(self) -> float:
        return duration_to_seconds(self.target)

    def ends_at(self) -> Instant:
        """Predicted instant at which the timer becomes ready"""
        return self.timer.started_at() + self.target


class Stopwatch:
    """
    Pausable timer accumulating time spent running

    Usage:
        watch = Stopwatch.start()
        watch.pause()
        ...
        watch.resume()

        # As context manager, runs only inside the block
        watch = Stopwatch.start_paused()
        with watch:
            code()
    """

    def __init__(self, paused: bool = False):
        self._last_resume = Instant.now()
        self._accumulated = Duration.ZERO
        self._paused = paused

    @classmethod
    def start(cls) -> "Stopwatch":
        return cls()

    @classmethod
    def start_paused(cls) -> "Stopwatch":
        return cls(paused=True)

    def __enter__(self) -> "Stopwatch":
        self.resume()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        self.pause()
        return False

    def __repr__(self) -> str:
        state = "paused" if self._paused else "running"
        return f"Stopwatch({state}, elapsed={self.elapsed()})"

    def is_paused(self) -> bool:
        return self._paused

    def is_running(self) -> bool:
        return not self._paused

    def pause(self) -> None:
        """Stop accumulating time. Pausing a paused stopwatch changes nothing."""
        if self._paused:
            _handle_error("Stopwatch.pause() called but the stopwatch is already paused.")
            return
        self._accumulated = self._accumulated + self._last_resume.elapsed()
        self._paused = True
        logger.debug(f"Stopwatch paused at {self._accumulated}")

    def resume(self) -> None:
        """Start accumulating time again. Resuming a running stopwatch changes nothing."""
        if not self._paused:
            _handle_error("Stopwatch.resume() called but the stopwatch is already running.")
            return
        self._last_resume = Instant.now()
        self._paused = False

    def toggle(self) -> None:
        if self._paused:
            self.resume()
        else:
            self.pause()

    def reset(self) -> None:
        """Zero the accumulated time, keeping the paused/running state"""
        self._accumulated = Duration.ZERO
        self._last_resume = Instant.now()

    def elapsed(self) -> Duration:
        if self._paused:
            return self._accumulated
        return self._accumulated + self._last_resume.elapsed()

    def duration(self) -> Duration:
        return self.elapsed()

    def elapsed_seconds(self) -> float:
        return duration_to_seconds(self.elapsed())
