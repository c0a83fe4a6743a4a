from datetime import timedelta
from unittest import mock

import pytest

from kdutils.elapsed_timer import ElapsedTimer


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    fake = FakeClock()
    with mock.patch("time.perf_counter_ns", fake):
        yield fake


def test_nsec_elapsed(clock):
    clock.now = 1_000
    timer = ElapsedTimer()
    clock.now = 1_000 + 2_500_000
    assert timer.nsec_elapsed() == 2_500_000


def test_msec_elapsed_truncates(clock):
    timer = ElapsedTimer()
    clock.now = 2_999_999
    assert timer.msec_elapsed() == 2


def test_elapsed_returns_timedelta(clock):
    timer = ElapsedTimer()
    clock.now = 3_000_000
    assert timer.elapsed() == timedelta(milliseconds=3)


def test_restart_returns_previous_and_resets(clock):
    timer = ElapsedTimer()
    clock.now = 5_000_000
    assert timer.restart() == timedelta(milliseconds=5)
    assert timer.nsec_elapsed() == 0
    clock.now = 6_000_000
    assert timer.nsec_elapsed() == 1_000_000


def test_start_resets(clock):
    timer = ElapsedTimer()
    clock.now = 10_000
    timer.start()
    assert timer.nsec_elapsed() == 0


def test_real_clock_is_monotonic():
    timer = ElapsedTimer()
    first = timer.nsec_elapsed()
    second = timer.nsec_elapsed()
    assert 0 <= first <= second
    assert timer.msec_elapsed() >= 0