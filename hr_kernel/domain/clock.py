"""
Time source for hire dates, review dates, salary change stamps and report
headers.

Services receive a Clock instead of reading the wall clock, so tests can
pin every timestamp the kernel writes.  SystemClock is the only place the
kernel asks the operating system for the time.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

# Default start of a DeterministicClock: noon UTC on Monday 2024-01-01
DEFAULT_START = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class Clock(ABC):
    """Returns timezone-aware UTC datetimes."""

    @abstractmethod
    def now(self) -> datetime:
        ...


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class DeterministicClock(Clock):
    """
    Clock that only moves when told to.

    Hires made within one test get distinct ``hire_date`` values by calling
    ``tick()`` between them; salary history rows are ordered the same way.
    """

    def __init__(
        self,
        start: datetime = DEFAULT_START,
        step: timedelta = timedelta(seconds=1),
    ):
        if start.tzinfo is None:
            raise ValueError("DeterministicClock requires a timezone-aware start")
        if step <= timedelta(0):
            raise ValueError("DeterministicClock step must be positive")
        self._current = start
        self._step = step

    def now(self) -> datetime:
        return self._current

    def tick(self) -> datetime:
        """Move forward one step and return the new time."""
        self._current += self._step
        return self._current
