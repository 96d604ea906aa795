"""
The todo.txt Task.

A Task is built from one line of text. The line is kept verbatim as
``original``; the structured fields are parsed from it once and can then
change only through the task's own methods (or, for contexts and
projects, through their collections).

Example:

    task = Task("(A) 2012-12-08 My task @test +test2", clock=FixedClock(date(2013, 12, 8)))
    task.priority     # "A"
    task.text         # "My task"
    task.complete()
    str(task)         # "x 2013-12-08 My task @test +test2"
    task.original     # "(A) 2012-12-08 My task @test +test2"
"""

from __future__ import annotations

import logging
from datetime import date
from functools import cmp_to_key
from typing import TYPE_CHECKING, Iterable, List, Optional

from todotxt import parsing
from todotxt.annotations import CONTEXT_MARKER, PROJECT_MARKER, Annotations
from todotxt.clock import Clock
from todotxt.config import default_clock
from todotxt.formatting import render_task

if TYPE_CHECKING:
    from todotxt.schema import TaskRecord

log = logging.getLogger(__name__)


class Task:
    """A single todo.txt task line."""

    def __init__(self, line: str, *, clock: Optional[Clock] = None):
        self._original = line
        self._clock = clock or default_clock()
        self._text: Optional[str] = None

        self.priority: Optional[str] = parsing.parse_priority(line)
        self.date: Optional[date] = parsing.parse_date(line)
        self.done: bool = parsing.parse_done(line)
        self._contexts = Annotations(CONTEXT_MARKER, parsing.parse_contexts(line))
        self._projects = Annotations(PROJECT_MARKER, parsing.parse_projects(line))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def original(self) -> str:
        """The line this task was built from, unchanged."""
        return self._original

    orig = original

    @property
    def contexts(self) -> Annotations:
        """``@context`` tokens. Editable; edits only affect rendering."""
        return self._contexts

    @property
    def projects(self) -> Annotations:
        """``+project`` tokens. Editable; edits only affect rendering."""
        return self._projects

    @property
    def text(self) -> str:
        """
        Free text of the original line, without any annotations.

        Computed on first access from ``original`` and cached; completion
        and collection edits do not change it.
        """
        if self._text is None:
            self._text = parsing.strip_annotations(self._original)
        return self._text

    @property
    def is_done(self) -> bool:
        return self.done

    def is_overdue(self) -> Optional[bool]:
        """
        True if the task date is before today, False if not, None if the
        task has no date.
        """
        if self.date is None:
            return None
        return self.date < self._clock()

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    def complete(self) -> None:
        """Mark done today. Drops the priority; every call refreshes the date."""
        self.date = self._clock()
        self.priority = None
        self.done = True
        log.debug("Completed %r on %s", self._original, self.date)

    def uncomplete(self) -> None:
        """Mark pending and restore the priority and date parsed from the original line."""
        self.date = parsing.parse_date(self._original)
        self.priority = parsing.parse_priority(self._original)
        self.done = False
        log.debug("Reopened %r", self._original)

    def toggle(self) -> None:
        if self.done:
            self.uncomplete()
        else:
            self.complete()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """The task as a todo.txt line, from its current state."""
        return render_task(
            done=self.done,
            priority=self.priority,
            day=self.date,
            text=self.text,
            contexts=self._contexts,
            projects=self._projects,
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Task({self.render()!r})"

    def to_record(self) -> TaskRecord:
        from todotxt.schema import TaskRecord

        return TaskRecord.from_task(self)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def compare_priority(self, other: Task) -> int:
        """
        Three-way priority comparison.

        Returns 1 if this task ranks above ``other``, -1 if below, 0 if
        equal. Earlier letters rank higher; any priority ranks above none.

        Only ``<``, ``<=``, ``>`` and ``>=`` are derived from this. ``==``
        stays identity so tasks remain hashable; unlike the Ruby todo-txt
        gem, two tasks of equal rank are not ``==``. Test for equal rank
        with ``a.compare_priority(b) == 0``.
        """
        if self.priority is None and other.priority is None:
            return 0
        if other.priority is None:
            return 1
        if self.priority is None:
            return -1
        return (other.priority > self.priority) - (other.priority < self.priority)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.compare_priority(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.compare_priority(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.compare_priority(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.compare_priority(other) >= 0


def sort_by_priority(tasks: Iterable[Task]) -> List[Task]:
    """Return tasks highest priority first; ties keep their input order."""
    return sorted(tasks, key=cmp_to_key(Task.compare_priority), reverse=True)
