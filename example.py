"""
Examples demonstrating the eggtimer library features.
"""

import asyncio
import logging
import os
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from eggtimer import (
    Alarm,
    AlarmError,
    ConsoleReporter,
    EggTimer,
    Stopwatch,
    TimedList,
    Timer,
    configure,
    measure,
)


def example_1_timers():
    """Example 1: Count-up and countdown timers"""
    print("=" * 60)
    print("Example 1: Timer and EggTimer")
    print("=" * 60)

    timer = Timer.start()
    time.sleep(0.05)
    print(f"Elapsed: {timer.elapsed_seconds():.3f}s")

    egg = EggTimer.set(0.1)
    print(f"Ready right away? {egg.is_ready()}")
    print(f"Time left: {egg.duration_left()}")
    time.sleep(0.12)
    print(f"Ready now? {egg.is_ready()} (time left: {egg.duration_left()})")


def example_2_stopwatch():
    """Example 2: Pausable stopwatch"""
    print("\n" + "=" * 60)
    print("Example 2: Stopwatch")
    print("=" * 60)

    watch = Stopwatch.start_paused()
    for _ in range(3):
        with watch:
            time.sleep(0.02)
        # not counted
        time.sleep(0.02)
    print(f"Time spent inside the blocks: {watch.elapsed_seconds():.3f}s")

    watch.toggle()
    time.sleep(0.01)
    watch.toggle()
    print(f"After one more toggled segment: {watch.elapsed_seconds():.3f}s")


def example_3_timed_list():
    """Example 3: Elements that expire"""
    print("\n" + "=" * 60)
    print("Example 3: TimedList")
    print("=" * 60)

    sessions = TimedList.from_pairs([("alice", 0.05), ("bob", 5.0)])
    sessions.insert("carol", 0.2)
    print(f"Live sessions: {list(sessions)}")

    time.sleep(0.1)
    print(f"After 0.1s: {list(sessions)}")

    for timer, name in sessions.timer_iter():
        print(f"  {name}: {timer.seconds_left():.2f}s left")

    for entry in sessions.iter_mut():
        entry.value = entry.value.title()
    print(f"Renamed: {list(sessions)}")


def example_4_alarm():
    """Example 4: Background alarms"""
    print("\n" + "=" * 60)
    print("Example 4: Alarm")
    print("=" * 60)

    alarm = Alarm.set(0.2, lambda: 42)
    print(f"Alarm set, {alarm.time_left():.2f}s left")
    print(f"Alarm returned {alarm.join()}")

    def fails():
        raise RuntimeError("no coffee")

    try:
        Alarm.set(0.05, fails).join()
    except AlarmError as e:
        print(f"Alarm failed: {e.__cause__!r}")

    async def main():
        return await Alarm.set(0.05, lambda: "from asyncio").wait()

    print(asyncio.run(main()))


def example_5_measure():
    """Example 5: Reporting how long calls take"""
    print("\n" + "=" * 60)
    print("Example 5: measure")
    print("=" * 60)

    configure(reporter=ConsoleReporter(), time_unit="milliseconds", precision=1)

    @measure
    def load_data():
        time.sleep(0.03)

    @measure("render")
    async def render_page():
        await asyncio.sleep(0.02)

    load_data()
    asyncio.run(render_page())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    example_1_timers()
    example_2_stopwatch()
    example_3_timed_list()
    example_4_alarm()
    example_5_measure()
