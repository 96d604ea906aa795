"""
Canonical single-line rendering of a task.

Field order is fixed: done marker, priority, date, text, contexts,
projects. A line parsed from text already in that order renders back to
itself.
"""

from datetime import date
from typing import Iterable, Optional


def render_priority(priority: Optional[str]) -> str:
    """Render ``"A"`` as ``"(A) "``; no priority renders as ``""``."""
    return f"({priority}) " if priority else ""


def render_date(day: Optional[date]) -> str:
    return f"{day.isoformat()} " if day else ""


def render_annotations(tokens: Iterable[str]) -> str:
    """Space-join tokens with a leading space, or ``""`` when empty."""
    joined = " ".join(tokens)
    return f" {joined}" if joined else ""


def render_task(
    *,
    done: bool,
    priority: Optional[str],
    day: Optional[date],
    text: str,
    contexts: Iterable[str] = (),
    projects: Iterable[str] = (),
) -> str:
    """
    Build a todo.txt line from field values.

    Args:
        done: Completion flag (renders ``"x "``)
        priority: Priority letter or None
        day: Task date or None
        text: Free text
        contexts: ``@context`` tokens
        projects: ``+project`` tokens

    Returns:
        The rendered line
    """
    done_str = "x " if done else ""
    return (
        f"{done_str}{render_priority(priority)}{render_date(day)}{text}"
        f"{render_annotations(contexts)}{render_annotations(projects)}"
    )
