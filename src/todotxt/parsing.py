"""
Extraction of todo.txt fields from a single task line.

Every function here is total: a missing or malformed field comes back as
None (or an empty list), never as an exception. Each field is extracted
from the whole line independently; nothing is consumed between steps.
"""

import logging
import re
from datetime import date, datetime
from typing import List, Optional

log = logging.getLogger(__name__)

DONE_PATTERN = re.compile(r"^x\s+")
PRIORITY_PATTERN = re.compile(r"^\(([A-Za-z])\)\s+")
DATE_PATTERN = re.compile(r"(?:\s+|^)([0-9]{4}-[0-9]{2}-[0-9]{2})")
CONTEXT_PATTERN = re.compile(r"(?:\s+|^)@\w+")
PROJECT_PATTERN = re.compile(r"(?:\s+|^)\+\w+")

DATE_FORMAT = "%Y-%m-%d"


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------

def parse_done(line: str) -> bool:
    """True if the line starts with a lowercase ``x`` and whitespace."""
    return DONE_PATTERN.match(line) is not None


def parse_priority(line: str) -> Optional[str]:
    """
    Return the priority letter from a leading ``(X) `` marker.

    A marker anywhere else in the line is ordinary text.
    """
    m = PRIORITY_PATTERN.match(line)
    return m.group(1) if m else None


def parse_date(line: str) -> Optional[date]:
    """
    Return the first ``YYYY-MM-DD`` token as a date.

    Only the first token is considered. If it is not a real calendar date
    (``2012-56-99``) the result is None.
    """
    m = DATE_PATTERN.search(line)
    if not m:
        return None
    try:
        return datetime.strptime(m.group(1), DATE_FORMAT).date()
    except ValueError:
        log.debug("Ignoring malformed date %r in %r", m.group(1), line)
        return None


def _scan(pattern: re.Pattern, line: str) -> List[str]:
    return [m.group().strip() for m in pattern.finditer(line)]


def parse_contexts(line: str) -> List[str]:
    """All ``@context`` tokens in order of appearance, duplicates kept."""
    return _scan(CONTEXT_PATTERN, line)


def parse_projects(line: str) -> List[str]:
    """All ``+project`` tokens in order of appearance, duplicates kept."""
    return _scan(PROJECT_PATTERN, line)


# ---------------------------------------------------------------------------
# Free text
# ---------------------------------------------------------------------------

def strip_annotations(line: str) -> str:
    """
    Return the free text of a task line.

    Removes, in order: done marker, date tokens, priority marker, contexts,
    projects. Then trims the ends. Internal whitespace is left alone.
    """
    text = DONE_PATTERN.sub("", line)
    text = DATE_PATTERN.sub("", text)
    text = PRIORITY_PATTERN.sub("", text)
    text = CONTEXT_PATTERN.sub("", text)
    text = PROJECT_PATTERN.sub("", text)
    return text.strip()
