"""A tick/tock stopwatch reporting whole milliseconds."""

from __future__ import annotations

import time


class Timer:
    """Stopwatch started on creation; ``clock`` returns nanoseconds."""

    def __init__(self, clock=None):
        self._clock = time.monotonic_ns if clock is None else clock
        self._start = self._clock()
        self._end = None

    def tick(self):
        """Restart the stopwatch."""
        self._end = None
        self._start = self._clock()

    def tock(self):
        """Stop the stopwatch."""
        self._end = self._clock()

    def duration(self):
        """Elapsed whole milliseconds between the last tick and tock."""
        if self._end is None:
            raise RuntimeError("Timer must tock before reading the time")
        return int((self._end - self._start) // 1_000_000)