"""A monotonic stopwatch."""

from __future__ import annotations

import time
from datetime import timedelta


class ElapsedTimer:
    """Measures time since it was created or last (re)started."""

    __slots__ = ("_start_ns",)

    def __init__(self) -> None:
        self._start_ns = time.perf_counter_ns()

    def start(self) -> None:
        """Reset the reference point to now."""
        self._start_ns = time.perf_counter_ns()

    def restart(self) -> timedelta:
        """Return the time elapsed so far and start again from now."""
        last = self.elapsed()
        self.start()
        return last

    def elapsed(self) -> timedelta:
        return timedelta(microseconds=self.nsec_elapsed() / 1000)

    def nsec_elapsed(self) -> int:
        return time.perf_counter_ns() - self._start_ns

    def msec_elapsed(self) -> int:
        nsec = self.nsec_elapsed()
        return int(nsec / 1_000_000) if nsec < 0 else nsec // 1_000_000