"""
Clocks and one-shot delayed callbacks.

The desktop app uses a monotonic wall clock and QTimer-backed scheduling
(see app/desktop/qt_timing.py). Tests drive everything with VirtualClock,
which is both a clock and a scheduler.
"""
import heapq
import itertools
import time


class MonotonicClock:
    """Wall clock in seconds, unaffected by system time changes."""

    def now(self):
        return time.monotonic()


class TimerHandle:
    """Cancellable handle for a pending callback."""

    def __init__(self, when, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class VirtualClock:
    """
    Manually advanced clock with a callback queue.

    Callbacks scheduled for the same instant fire in scheduling order.
    A callback may schedule further callbacks; those fire within the same
    advance() if they fall inside the advanced window.
    """

    def __init__(self, start=0.0):
        self._now = float(start)
        self._queue = []
        self._counter = itertools.count()

    def now(self):
        return self._now

    def call_later(self, delay, callback):
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        handle = TimerHandle(self._now + delay, callback)
        heapq.heappush(self._queue, (handle.when, next(self._counter), handle))
        return handle

    def pending(self):
        """Number of callbacks still waiting to fire."""
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def advance(self, seconds):
        """Move time forward, firing every callback that comes due on the way."""
        if seconds < 0:
            raise ValueError("cannot move a clock backwards")
        target = self._now + seconds
        while self._queue and self._queue[0][0] <= target:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = when
            handle.callback()
        self._now = target
