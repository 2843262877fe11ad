"""Clock adapters implementing the Clock port."""

import time


class SystemClock:
    """Wall clock backed by time.time_ns()."""

    def now_ns(self) -> int:
        return time.time_ns()


class FixedClock:
    """Clock that returns preset times, for deterministic output.

    Returns ``start`` on the first read and advances by ``step`` nanoseconds
    on every read after that.
    """

    def __init__(self, start: int, step: int = 0) -> None:
        self._next = start
        self._step = step

    def now_ns(self) -> int:
        now = self._next
        self._next += self._step
        return now
