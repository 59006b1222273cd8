"""
Phase clock.

Measures elapsed time since the start of a trial. Every phase timestamps its
events through the clock so that recorded times are relative to the trial
start rather than wall-clock values.
"""

import time
from typing import Callable, Optional


def wall_clock_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return int(round(time.time() * 1000))


class PhaseClock:
    """
    Elapsed-time clock anchored at the trial start.

    Args:
        time_source: Zero-argument callable returning the current time in ms.
                     Defaults to the wall clock.
    """

    def __init__(self, time_source: Optional[Callable[[], float]] = None):
        self._time_source = time_source or wall_clock_ms
        self.start_time: Optional[float] = None

    def now(self) -> float:
        """Current time in the clock's time base (ms)."""
        return self._time_source()

    @property
    def started(self) -> bool:
        return self.start_time is not None

    def start(self) -> float:
        """
        Anchor the clock at the current time.

        Returns:
            The absolute start time in ms

        Raises:
            RuntimeError: If the clock was already started
        """
        if self.started:
            raise RuntimeError("PhaseClock already started")
        self.start_time = self.now()
        return self.start_time

    def elapsed(self) -> float:
        """Milliseconds elapsed since start()."""
        return self.relative(self.now())

    def relative(self, timestamp: float) -> float:
        """Convert an absolute timestamp (ms, same time base) to ms since start()."""
        if not self.started:
            raise RuntimeError("PhaseClock has not been started")
        return timestamp - self.start_time

    def __repr__(self):
        return f"PhaseClock(start_time={self.start_time})"
