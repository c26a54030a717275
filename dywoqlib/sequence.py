"""A growable list wrapper with checked indexing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from dywoqlib import sliceutil
from dywoqlib.iterator import Combined

T = TypeVar("T")


class Dynamic(Generic[T]):
    """A list of elements with index-checked access.

    Out-of-range indexes raise ``sliceutil.WrongIndexError``.
    """

    def __init__(self, *args: T) -> None:
        self._items: list[T] = list(args)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return sliceutil.format_slice(self._items)

    def __repr__(self) -> str:
        return f"Dynamic({', '.join(repr(item) for item in self._items)})"

    def iterating(self) -> Combined[T]:
        """Return an iterator factory over the live elements."""
        return Combined(self._items)

    def append(self, *args: T) -> list[T]:
        """Add elements to the end; return the elements added."""
        self._items.extend(args)
        return list(args)

    def at(self, i: int) -> T:
        """Return the element at index ``i``."""
        return sliceutil.at(i, self._items)

    def find(self, req: T) -> T | None:
        """Return the first element equal to ``req``, or ``None`` if there is none."""
        try:
            return sliceutil.find(req, self.iterating().forward())
        except sliceutil.ElementNotFoundError:
            return None

    def set(self, elem: T, i: int) -> T:
        """Store ``elem`` at index ``i``; return the value it replaced."""
        return sliceutil.set_at(elem, i, self._items)

    def delete(self, i: int) -> T:
        """Remove and return the element at index ``i``."""
        return sliceutil.delete(i, self._items)

    def insert(self, i: int, elem: T) -> T:
        """Insert ``elem`` before the existing element at index ``i``; return it."""
        return sliceutil.insert(i, self._items, elem)

    def front(self) -> T:
        """Return the first element."""
        return self.at(0)

    def back(self) -> T:
        """Return the last element."""
        return self.at(len(self._items) - 1)

    def pop(self) -> T | None:
        """Remove and return the last element; ``None`` when empty."""
        if not self._items:
            return None
        return self._items.pop()