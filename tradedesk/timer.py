"""A monotonic nanosecond timer and busy-wait delays."""

from __future__ import annotations

import time


class NanoTimer:
    """Measures elapsed time from :meth:`start` on a monotonic clock."""

    def __init__(self) -> None:
        self._start: int | None = None

    def start(self) -> None:
        """Record the starting instant."""
        self._start = time.perf_counter_ns()

    def elapsed_ns(self) -> float:
        """Nanoseconds since :meth:`start`."""
        if self._start is None:
            raise RuntimeError("timer has not been started")
        return float(time.perf_counter_ns() - self._start)

    def elapsed_us(self) -> float:
        """Microseconds since :meth:`start`."""
        return self.elapsed_ns() / 1000.0

    def elapsed_ms(self) -> float:
        """Milliseconds since :meth:`start`."""
        return self.elapsed_ns() / 1_000_000.0


def nanosecond_delay(delay_ns: float) -> None:
    """Spin until at least ``delay_ns`` nanoseconds have passed."""
    timer = NanoTimer()
    timer.start()
    while timer.elapsed_ns() < delay_ns:
        pass


def microsecond_delay(delay_us: float) -> None:
    """Spin until at least ``delay_us`` microseconds have passed."""
    nanosecond_delay(delay_us * 1000.0)


def millisecond_delay(delay_ms: float) -> None:
    """Spin until at least ``delay_ms`` milliseconds have passed."""
    nanosecond_delay(delay_ms * 1_000_000.0)