"""
Mutable ordered collections of ``@context`` / ``+project`` tokens.

Each task owns one collection per marker. Edits change what the task
renders, never its original line or its free text.
"""

import re
from collections.abc import MutableSequence
from typing import Iterable, Iterator, List, Union, overload

from todotxt.errors import InvalidAnnotationError

CONTEXT_MARKER = "@"
PROJECT_MARKER = "+"

_WORD = re.compile(r"\w+")


class Annotations(MutableSequence):
    """
    A list of annotation tokens that all carry the same marker.

    Behaves like a ``list`` of strings (indexing, slicing, ``append``,
    ``remove``, ``clear``...) and compares equal to a plain list with the
    same items. Every stored entry is validated as ``marker + word``.
    """

    def __init__(self, marker: str, tokens: Iterable[str] = ()):
        self.marker = marker
        self._items: List[str] = [self._validate(t) for t in tokens]

    def _validate(self, value: object) -> str:
        if (
            not isinstance(value, str)
            or not value.startswith(self.marker)
            or not _WORD.fullmatch(value[len(self.marker):])
        ):
            raise InvalidAnnotationError(value, self.marker)
        return value

    def _qualify(self, name: str) -> str:
        """Add the marker to a bare name."""
        if isinstance(name, str) and not name.startswith(self.marker):
            name = self.marker + name
        return self._validate(name)

    # -- MutableSequence protocol --

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> List[str]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[str, List[str]]:
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._items[index] = [self._validate(v) for v in value]
        else:
            self._items[index] = self._validate(value)

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def insert(self, index: int, value: str) -> None:
        self._items.insert(index, self._validate(value))

    # -- Convenience --

    def add(self, name: str) -> None:
        """Append ``name``, adding the marker if it is missing."""
        self._items.append(self._qualify(name))

    def discard(self, name: str) -> None:
        """Remove every occurrence of ``name`` (marker optional)."""
        try:
            token = self._qualify(name)
        except InvalidAnnotationError:
            # never stored, so nothing to remove
            return
        self._items = [t for t in self._items if t != token]

    def names(self) -> List[str]:
        """Tokens without their marker."""
        return [t[len(self.marker):] for t in self._items]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Annotations):
            return self.marker == other.marker and self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Annotations({self.marker!r}, {self._items!r})"
