"""A list wrapper with a fixed maximum length, and helpers for merging lists."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from dywoqlib.iterator import Combined
from dywoqlib.sequence import Dynamic

T = TypeVar("T")


class NegativeFixedLengthError(ValueError):
    """Raised when a fixed length is negative."""

    def __init__(self, message: str = "slice: negative fixed length") -> None:
        super().__init__(message)


class FixedLengthOutOfBoundsError(ValueError):
    """Raised when the initial elements do not fit in the fixed length."""

    def __init__(self, message: str = "slice: fixed length is out of bounds") -> None:
        super().__init__(message)


class OutOfBoundsError(IndexError):
    """Raised when an operation would grow the list past its fixed length."""

    def __init__(self, message: str = "slice: out of bounds") -> None:
        super().__init__(message)


class Fixed(Generic[T]):
    """A list that never holds more than ``fixed_len`` elements.

    Out-of-range indexes raise ``sliceutil.WrongIndexError``; growing past
    the fixed length raises ``OutOfBoundsError`` and leaves the list as it was.
    """

    def __init__(self, fixed_len: int, *args: T) -> None:
        if fixed_len < 0:
            raise NegativeFixedLengthError(
                f"slice: negative fixed length {fixed_len}"
            )
        if fixed_len < len(args):
            raise FixedLengthOutOfBoundsError(
                f"slice: {len(args)} elements do not fit in fixed length {fixed_len}"
            )
        self._fixed_len = fixed_len
        self._items: Dynamic[T] = Dynamic(*args)

    @property
    def fixed_len(self) -> int:
        """The maximum number of elements."""
        return self._fixed_len

    def _ensure_room(self, extra: int) -> None:
        if len(self._items) + extra > self._fixed_len:
            raise OutOfBoundsError(
                f"slice: {len(self._items) + extra} elements exceed fixed length "
                f"{self._fixed_len}"
            )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return str(self._items)

    def __repr__(self) -> str:
        inner = ", ".join(repr(item) for item in self._items)
        return f"Fixed({self._fixed_len}{', ' if inner else ''}{inner})"

    def iterating(self) -> Combined[T]:
        """Return an iterator factory over the live elements."""
        return self._items.iterating()

    def append(self, *args: T) -> list[T]:
        """Add elements to the end if they fit; return the elements added."""
        self._ensure_room(len(args))
        return self._items.append(*args)

    def at(self, i: int) -> T:
        """Return the element at index ``i``."""
        return self._items.at(i)

    def find(self, req: T) -> T | None:
        """Return the first element equal to ``req``, or ``None`` if there is none."""
        return self._items.find(req)

    def set(self, elem: T, i: int) -> T:
        """Store ``elem`` at index ``i``; return the value it replaced."""
        return self._items.set(elem, i)

    def delete(self, i: int) -> T:
        """Remove and return the element at index ``i``."""
        return self._items.delete(i)

    def insert(self, i: int, elem: T) -> T:
        """Insert ``elem`` before the element at index ``i`` if it fits; return it."""
        self._ensure_room(1)
        return self._items.insert(i, elem)

    def front(self) -> T:
        """Return the first element."""
        return self._items.front()

    def back(self) -> T:
        """Return the last element."""
        return self._items.back()

    def pop(self) -> T | None:
        """Remove and return the last element; ``None`` when empty."""
        return self._items.pop()


def merge_dynamic(first: Dynamic[T], second: Dynamic[T]) -> Dynamic[T]:
    """Return a new ``Dynamic`` holding the elements of ``first`` then ``second``."""
    return Dynamic(*first.iterating().forward(), *second.iterating().forward())


def merge_fixed(first: Fixed[T], second: Fixed[T]) -> Fixed[T]:
    """Return a new ``Fixed`` sized exactly for the elements of both, in order."""
    merged: Fixed[T] = Fixed(len(first) + len(second))
    merged.append(*first.iterating().forward())
    merged.append(*second.iterating().forward())
    return merged


def merge(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Return a new list of the elements of ``first`` followed by ``second``."""
    return [*first, *second]