import pytest

from tradedesk.timer import (
    NanoTimer,
    microsecond_delay,
    millisecond_delay,
    nanosecond_delay,
)


def test_unstarted_timer_raises():
    timer = NanoTimer()
    with pytest.raises(RuntimeError):
        timer.elapsed_ns()
    with pytest.raises(RuntimeError):
        timer.elapsed_ms()


def test_elapsed_is_non_negative_and_increasing():
    timer = NanoTimer()
    timer.start()
    first = timer.elapsed_ns()
    second = timer.elapsed_ns()
    assert 0 <= first <= second


def test_units_are_consistent():
    timer = NanoTimer()
    timer.start()
    ns = timer.elapsed_ns()
    us = timer.elapsed_us()
    ms = timer.elapsed_ms()
    assert us * 1000.0 >= ns
    assert ms * 1000.0 >= us - 1e-9 or ms * 1_000_000.0 >= ns


def test_restart_resets_origin():
    timer = NanoTimer()
    timer.start()
    millisecond_delay(2)
    before = timer.elapsed_ms()
    timer.start()
    after = timer.elapsed_ms()
    assert before >= 2.0
    assert after < before


def test_millisecond_delay_waits_at_least():
    timer = NanoTimer()
    timer.start()
    millisecond_delay(3)
    assert timer.elapsed_ms() >= 3.0


def test_microsecond_delay_waits_at_least():
    timer = NanoTimer()
    timer.start()
    microsecond_delay(500)
    assert timer.elapsed_us() >= 500.0


def test_nanosecond_delay_waits_at_least():
    timer = NanoTimer()
    timer.start()
    nanosecond_delay(200_000)
    assert timer.elapsed_ns() >= 200_000


def test_timer_measures_delay():
    timer = NanoTimer()
    timer.start()
    microsecond_delay(1000)
    assert timer.elapsed_us() >= 1000.0