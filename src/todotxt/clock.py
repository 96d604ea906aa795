"""
Sources of "today".

A clock is any zero-argument callable returning a ``datetime.date``. Tasks
take one so completion dates and overdue checks can be pinned in tests.
"""

from datetime import date, timedelta
from typing import Callable

Clock = Callable[[], date]


def system_clock() -> date:
    """Return the current local date."""
    return date.today()


class FixedClock:
    """
    A clock frozen on one day.

    Usage:
        clock = FixedClock(date(2013, 12, 8))
        task = Task("2012-12-08 Task", clock=clock)
        task.complete()          # task.date == date(2013, 12, 8)
        clock.advance(days=1)
    """

    def __init__(self, day: date):
        self._day = day

    def __call__(self) -> date:
        return self._day

    def set(self, day: date) -> None:
        self._day = day

    def advance(self, days: int = 1) -> None:
        self._day = self._day + timedelta(days=days)

    def __repr__(self) -> str:
        return f"FixedClock({self._day.isoformat()})"
