"""Elapsed-time measurement."""

import time
from dataclasses import dataclass

_NS_PER_MICRO = 1e3
_NS_PER_MILLI = 1e6
_NS_PER_SECOND = 1e9
_NS_PER_MINUTE = 60 * _NS_PER_SECOND
_NS_PER_HOUR = 60 * _NS_PER_MINUTE
_NS_PER_DAY = 24 * _NS_PER_HOUR
_NS_PER_WEEK = 7 * _NS_PER_DAY


@dataclass(frozen=True)
class Duration:
    """A span of time held in nanoseconds, readable in any unit."""

    nanoseconds: int = 0

    def nanos(self):
        return float(self.nanoseconds)

    def micros(self):
        return self.nanoseconds / _NS_PER_MICRO

    def millis(self):
        return self.nanoseconds / _NS_PER_MILLI

    def seconds(self):
        return self.nanoseconds / _NS_PER_SECOND

    def minutes(self):
        return self.nanoseconds / _NS_PER_MINUTE

    def hours(self):
        return self.nanoseconds / _NS_PER_HOUR

    def days(self):
        return self.nanoseconds / _NS_PER_DAY

    def weeks(self):
        return self.nanoseconds / _NS_PER_WEEK


class Timer:
    """Measures the time since it was last reset.

    The clock returns nanoseconds; until the first reset the start is the
    clock's zero.
    """

    def __init__(self, run=False, clock=time.perf_counter_ns):
        self._clock = clock
        self._start = 0
        if run:
            self.reset()

    def reset(self):
        self._start = self._clock()

    def elapsed(self):
        return Duration(self._clock() - self._start)