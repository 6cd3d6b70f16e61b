"""Accumulating stopwatch over a pluggable clock."""

from __future__ import annotations

import time
from collections.abc import Callable


def seconds() -> float:
    """Return the current time of the default clock, in seconds."""
    return time.perf_counter()


class Stopwatch:
    """Stopwatch that sums the time spent between start or resume and stop."""

    def __init__(self, clock: Callable[[], float] = seconds) -> None:
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        """Stop and clear the accumulated time."""
        self.running = False
        self.last_time = 0.0
        self.total = 0.0

    def start(self) -> None:
        """Start from zero, unless already running."""
        if not self.running:
            self.running = True
            self.total = 0.0
            self.last_time = self._clock()

    def resume(self) -> None:
        """Continue timing without clearing the total."""
        if not self.running:
            self.last_time = self._clock()
            self.running = True

    def stop(self) -> None:
        """Stop timing and add the elapsed interval to the total."""
        if self.running:
            self.total += self._clock() - self.last_time
            self.running = False

    def read(self) -> float:
        """Return the total, bringing it up to date when running."""
        if self.running:
            t = self._clock()
            self.total += t - self.last_time
            self.last_time = t
        return self.total