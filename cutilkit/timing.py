"""Wall-clock timing of a section of code."""

from __future__ import annotations

import time

TIMING_VERSION = "1.0.4"


def _now_us() -> int:
    return time.time_ns() // 1000


class Timing:
    """Measure elapsed wall-clock time with microsecond resolution.

    ``start_time`` and ``end_time`` are microseconds since the epoch.
    Usable as a context manager.
    """

    def __init__(self) -> None:
        self.start_time = 0
        self.end_time = 0
        self.timing_double = 0.0
        self.hours = 0
        self.minutes = 0
        self.seconds = 0
        self.milliseconds = 0
        self.microseconds = 0

    def __enter__(self) -> "Timing":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end()

    def start(self) -> None:
        """Begin timing."""
        self.start_time = _now_us()
        self.end_time = 0
        self.timing_double = 0.0

    def end(self) -> None:
        """Stop timing and compute the difference."""
        self.end_time = _now_us()
        self.calc_difference()

    def calc_difference(self) -> None:
        """Recompute the elapsed time from the start and end times."""
        secs, usecs = divmod(self.end_time - self.start_time, 1_000_000)
        self.timing_double = secs + usecs / 1_000_000.0
        self.hours = int(secs / 3600)
        rest = secs - self.hours * 3600
        self.minutes = int(rest / 60)
        self.seconds = rest - self.minutes * 60
        self.milliseconds = usecs // 1000
        self.microseconds = usecs % 1000

    def format_time_diff(self) -> str:
        """The elapsed time as ``HH:MM:SS:mmm.uuu``."""
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}:"
            f"{self.milliseconds:03d}.{self.microseconds:03d}"
        )