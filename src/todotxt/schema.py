"""
Pydantic snapshots of tasks for external collaborators.

A TaskRecord is a plain, JSON-serializable view of a task at one moment:
list managers and APIs can hand it around without holding the Task.
"""

from __future__ import annotations

from datetime import date as Date
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, field_validator

from todotxt.annotations import CONTEXT_MARKER, PROJECT_MARKER
from todotxt.parsing import CONTEXT_PATTERN, PROJECT_PATTERN

if TYPE_CHECKING:
    from todotxt.clock import Clock
    from todotxt.task import Task


class TaskRecord(BaseModel):
    original: str
    text: str
    done: bool = False
    priority: Optional[str] = None
    date: Optional[Date] = None
    contexts: List[str] = []
    projects: List[str] = []
    overdue: Optional[bool] = None
    rendered: str

    @field_validator("priority")
    @classmethod
    def _one_letter(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and (len(v) != 1 or not v.isascii() or not v.isalpha()):
            raise ValueError(f"priority must be a single letter, got {v!r}")
        return v

    @field_validator("contexts")
    @classmethod
    def _context_tokens(cls, v: List[str]) -> List[str]:
        return _check_tokens(v, CONTEXT_MARKER, CONTEXT_PATTERN)

    @field_validator("projects")
    @classmethod
    def _project_tokens(cls, v: List[str]) -> List[str]:
        return _check_tokens(v, PROJECT_MARKER, PROJECT_PATTERN)

    @classmethod
    def from_task(cls, task: Task) -> TaskRecord:
        return cls(
            original=task.original,
            text=task.text,
            done=task.done,
            priority=task.priority,
            date=task.date,
            contexts=list(task.contexts),
            projects=list(task.projects),
            overdue=task.is_overdue(),
            rendered=task.render(),
        )

    def to_task(self, *, clock: Optional[Clock] = None) -> Task:
        """Rebuild a task from the rendered line."""
        from todotxt.task import Task

        return Task(self.rendered, clock=clock)


def _check_tokens(tokens: List[str], marker: str, pattern) -> List[str]:
    for token in tokens:
        m = pattern.fullmatch(token)
        if not m or not token.startswith(marker):
            raise ValueError(f"expected '{marker}' followed by word characters, got {token!r}")
    return tokens
