"""Queue and stack containers built on ``Dynamic``."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from dywoqlib.sequence import Dynamic

T = TypeVar("T")


class Fifo(Generic[T]):
    """A queue whose elements are appended at the back.

    ``front`` and ``back`` read either end; ``pop`` removes the most
    recently appended element.
    """

    def __init__(self) -> None:
        self._items: Dynamic[T] = Dynamic()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return str(self._items)

    def empty(self) -> bool:
        """Report whether the queue holds no elements."""
        return len(self._items) == 0

    def front(self) -> T:
        """Return the first element; raise ``sliceutil.WrongIndexError`` when empty."""
        return self._items.front()

    def back(self) -> T:
        """Return the last element; raise ``sliceutil.WrongIndexError`` when empty."""
        return self._items.back()

    def append(self, elem: T) -> T:
        """Add ``elem`` at the back and return it."""
        return self._items.append(elem)[0]

    def pop(self) -> T | None:
        """Remove and return the last element; ``None`` when empty."""
        return self._items.pop()


class Lifo(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: Dynamic[T] = Dynamic()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return str(self._items)

    def empty(self) -> bool:
        """Report whether the stack holds no elements."""
        return len(self._items) == 0

    def top(self) -> T:
        """Return the top element; raise ``sliceutil.WrongIndexError`` when empty."""
        return self._items.back()

    def append(self, elem: T) -> T:
        """Push ``elem`` on top and return it."""
        return self._items.append(elem)[0]

    def pop(self) -> T | None:
        """Remove and return the top element; ``None`` when empty."""
        return self._items.pop()