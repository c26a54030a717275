"""Helpers for formatting, searching and editing lists."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")


class ElementNotFoundError(LookupError):
    """Raised when a searched element is not present."""

    def __init__(self, message: str = "sliceutil: element wasn't found") -> None:
        super().__init__(message)


class WrongIndexError(IndexError):
    """Raised when an index is outside the list."""

    def __init__(self, message: str = "sliceutil: wrong index") -> None:
        super().__init__(message)


def format_slice(items: Iterable[object]) -> str:
    """Return the items as ``[a, b, c]``; an empty list gives ``[]``."""
    return "[" + ", ".join(str(item) for item in items) + "]"


def find(req: T, it: Iterable[T]) -> T:
    """Consume the forward iterator ``it`` until an element equal to ``req`` is met.

    Errors raised by the iterator propagate; ``ElementNotFoundError`` is
    raised when the iterator is exhausted without a match.
    """
    for value in it:
        if value == req:
            return value
    raise ElementNotFoundError()


def _check_index(i: int, items: Sequence[object]) -> None:
    if not 0 <= i < len(items):
        raise WrongIndexError(f"sliceutil: wrong index {i} for length {len(items)}")


def at(i: int, items: Sequence[T]) -> T:
    """Return the element at index ``i``."""
    _check_index(i, items)
    return items[i]


def set_at(elem: T, i: int, items: MutableSequence[T]) -> T:
    """Store ``elem`` at index ``i`` and return the value it replaced."""
    _check_index(i, items)
    old = items[i]
    items[i] = elem
    return old


def delete(i: int, items: MutableSequence[T]) -> T:
    """Remove the element at index ``i`` and return it."""
    _check_index(i, items)
    return items.pop(i)


def insert(i: int, items: MutableSequence[T], elem: T) -> T:
    """Insert ``elem`` before the existing element at index ``i`` and return it."""
    _check_index(i, items)
    items.insert(i, elem)
    return elem