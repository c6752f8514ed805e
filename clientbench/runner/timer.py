"""Monotonic nanosecond timer.

Durations come from ``time.monotonic_ns`` so they are not affected by
wall-clock adjustments made while a benchmark is running. Start timestamps of
samples come from the separate wall clock.
"""

import time
from collections.abc import Callable
from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current wall-clock time in UTC."""
    return datetime.now(UTC)


class Timer:
    """Measures elapsed nanoseconds on a monotonic clock.

    Example:
        >>> timer = Timer()
        >>> timer.start()
        >>> do_work()
        >>> elapsed = timer.elapsed_ns()
    """

    def __init__(
        self,
        clock: Callable[[], int] = time.monotonic_ns,
        wall_clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the timer.

        Args:
            clock: Monotonic clock returning integer nanoseconds.
            wall_clock: Clock returning timezone-aware UTC datetimes.
        """
        self._clock = clock
        self._wall_clock = wall_clock
        self._started_at: int | None = None

    def now(self) -> datetime:
        """Return the current wall-clock time."""
        return self._wall_clock()

    def start(self) -> None:
        """Record the monotonic starting point."""
        self._started_at = self._clock()

    def elapsed_ns(self) -> int:
        """Return nanoseconds since start(), never negative.

        Raises:
            RuntimeError: If start() hasn't been called.
        """
        if self._started_at is None:
            raise RuntimeError("Timer.elapsed_ns() called before Timer.start()")
        return max(0, self._clock() - self._started_at)
