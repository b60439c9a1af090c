"""Millisecond clock and a sleep that wakes close to its deadline."""

import time

__all__ = ["current_time_ms", "precise_sleep"]


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def precise_sleep(milliseconds: int) -> None:
    """Sleep for at least ``milliseconds``, polling in shrinking steps.

    Each step sleeps for half of the time still left, and for a few
    microseconds once less than two milliseconds remain, so the call
    returns shortly after the deadline instead of oversleeping it.
    """
    start = current_time_ms()
    while True:
        elapsed = current_time_ms() - start
        if elapsed >= milliseconds:
            return
        remaining = milliseconds - elapsed
        if remaining > 1:
            time.sleep(remaining * 0.0005)
        else:
            time.sleep(0.00005)