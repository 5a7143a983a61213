import logging
import sys
import threading
import time

import pytest

from eggtimer import Alarm, AlarmError, configure
from eggtimer.alarm import _coarse_sleep


class TestAlarm:
    def test_join_returns_callback_value_no_earlier_than_deadline(self):
        start = time.monotonic()
        alarm = Alarm.set(0.2, lambda: 42)
        assert alarm.join() == 42
        assert time.monotonic() - start >= 0.2
        assert alarm.is_ready()
        assert alarm.is_finished()

    def test_callback_arguments(self):
        alarm = Alarm.set(0.01, lambda a, b=0: a + b, 1, b=2)
        assert alarm.join() == 3

    def test_callback_failure_is_distinguishable(self, caplog):
        def boom():
            raise KeyError("boom")

        with caplog.at_level(logging.WARNING, logger="eggtimer"):
            alarm = Alarm.set(0.01, boom)
            with pytest.raises(AlarmError) as excinfo:
                alarm.join()

        assert isinstance(excinfo.value.__cause__, KeyError)
        assert "callback raised" in caplog.text

    def test_exiting_callback_is_distinguishable(self):
        alarm = Alarm.set(0.01, sys.exit, 3)
        with pytest.raises(AlarmError) as excinfo:
            alarm.join()
        assert isinstance(excinfo.value.__cause__, SystemExit)
        assert excinfo.value.__cause__.code == 3

    def test_base_exception_callback_is_distinguishable(self):
        class Abort(BaseException):
            pass

        def abort():
            raise Abort()

        with pytest.raises(AlarmError) as excinfo:
            Alarm.set(0.01, abort).join()
        assert isinstance(excinfo.value.__cause__, Abort)

    def test_join_twice_gives_same_outcome(self):
        alarm = Alarm.set(0.01, lambda: "done")
        assert alarm.join() == "done"
        assert alarm.join() == "done"

    def test_time_left_before_firing(self):
        event = threading.Event()
        alarm = Alarm.set(0.3, event.set)
        assert not alarm.is_ready()
        assert 0 < alarm.time_left() <= 0.3
        assert alarm.duration_left() is not None
        alarm.join()
        assert event.is_set()
        assert alarm.duration_left() is None

    def test_zero_seconds_fires_immediately(self):
        assert Alarm.set(0, lambda: "now").join() == "now"

    def test_sleep_with_retry_never_fires_early(self):
        configure(spin_interval=0.005)
        start = time.monotonic()
        assert Alarm.set(0.15, lambda: 1).join() == 1
        assert time.monotonic() - start >= 0.15

    def test_coarse_sleep_phases(self):
        assert _coarse_sleep(1.0) == pytest.approx(0.9)
        assert _coarse_sleep(0.1) == pytest.approx(0.09)
        configure(alarm_margin=0.25)
        assert _coarse_sleep(1.0) == pytest.approx(0.75)

    def test_negative_seconds_raise(self):
        with pytest.raises(ValueError):
            Alarm.set(-0.5, lambda: None)

    @pytest.mark.asyncio
    async def test_wait_from_coroutine(self):
        alarm = Alarm.set(0.05, lambda: "async")
        assert await alarm.wait() == "async"

    @pytest.mark.asyncio
    async def test_wait_failure(self):
        def boom():
            raise ValueError("bad")

        alarm = Alarm.set(0.01, boom)
        with pytest.raises(AlarmError):
            await alarm.wait()
