"""
Explicit progress animation.

A Tween knows when it started, how long it waits before moving and how long
it runs. Its value is computed on demand from a timestamp, so rendering only
needs to ask for the value at the current clock time.
"""
import math


def linear(t):
    return t


def ease_in_out(t):
    """Symmetric ease-in-out: slow start, slow finish, 0.5 at the midpoint."""
    return 0.5 - 0.5 * math.cos(math.pi * t)


class Tween:
    """
    Progress from 0 to 1 over `duration` seconds after an optional `delay`.

    Args:
        start_time: Clock time at which the tween was scheduled.
        duration: Seconds spent moving from 0 to 1.
        delay: Seconds to hold at 0 before moving.
        easing: Function mapping linear fraction [0, 1] to progress.
    """

    def __init__(self, start_time, duration, delay=0.0, easing=ease_in_out):
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        self.start_time = start_time
        self.duration = duration
        self.delay = delay
        self.easing = easing

    @property
    def begin(self):
        """Clock time at which the value starts to move."""
        return self.start_time + self.delay

    @property
    def end(self):
        return self.begin + self.duration

    def fraction(self, now):
        """Linear time fraction, clamped to [0, 1]."""
        t = (now - self.begin) / self.duration
        return min(1.0, max(0.0, t))

    def value(self, now):
        return self.easing(self.fraction(now))

    def is_running(self, now):
        return now < self.end

    def is_finished(self, now):
        return now >= self.end
