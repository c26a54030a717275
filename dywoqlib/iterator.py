"""Cursor-style iterators over sequences, forward and reverse, shared or copied."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class OutOfBoundsError(IndexError):
    """Raised when an iterator is read at a position outside its data."""

    def __init__(self, position: int | None = None, length: int | None = None) -> None:
        if position is None:
            message = "iterator: out of bounds"
        else:
            message = f"iterator: out of bounds (position {position}, length {length})"
        super().__init__(message)
        self.position = position
        self.length = length


def _read(data: Sequence[T], pos: int) -> T:
    if not 0 <= pos < len(data):
        raise OutOfBoundsError(pos, len(data))
    return data[pos]


class _Cursor(Generic[T]):
    """A position over a sequence and a sticky error.

    Once a read goes out of bounds the iterator is spent: every later read
    raises the same error, ``reset`` does nothing and its length is 0.
    """

    def __init__(self, data: Sequence[T], pos: int) -> None:
        self._data = data
        self._pos = pos
        self._error: OutOfBoundsError | None = None

    @property
    def position(self) -> int:
        """The current position within the data."""
        return self._pos

    @property
    def error(self) -> OutOfBoundsError | None:
        """The error met during iteration, or ``None``."""
        return self._error

    def _checked_value(self) -> T:
        if self._error is not None:
            raise self._error
        try:
            return _read(self._data, self._pos)
        except OutOfBoundsError as exc:
            self._error = exc
            raise


class Forward(_Cursor[T]):
    """Forward iterator over a sequence it shares with the caller.

    ``reset`` places the cursor on the first element itself, so ``value``
    can be read straight away and the next ``next`` moves to the second.
    """

    def __init__(self, data: Sequence[T]) -> None:
        super().__init__(data, -1)

    def value(self) -> T:
        """Return the element at the current position, or raise ``OutOfBoundsError``."""
        return self._checked_value()

    def next(self) -> bool:
        """Move to the next element; return whether it exists."""
        self._pos += 1
        return self._pos < len(self._data)

    def reset(self) -> None:
        """Move onto the first element, unless an error has occurred."""
        if self._error is None:
            self._pos = 0

    def __len__(self) -> int:
        return 0 if self._error is not None else len(self._data)

    def __iter__(self) -> Iterator[T]:
        """Yield the remaining elements, advancing this iterator as it goes."""
        while self.next():
            yield self.value()


class Reverse(_Cursor[T]):
    """Reverse iterator over a sequence it shares with the caller."""

    def __init__(self, data: Sequence[T]) -> None:
        super().__init__(data, len(data))

    def value(self) -> T:
        """Return the element at the current position, or raise ``OutOfBoundsError``."""
        return self._checked_value()

    def next(self) -> bool:
        """Move to the previous element; return whether it exists."""
        self._pos -= 1
        return self._pos >= 0

    def reset(self) -> None:
        """Return to the starting position, unless an error has occurred."""
        if self._error is None:
            self._pos = len(self._data)

    def __len__(self) -> int:
        return 0 if self._error is not None else len(self._data)

    def __iter__(self) -> Iterator[T]:
        """Yield the remaining elements, advancing this iterator as it goes."""
        while self.next():
            yield self.value()


class ReadonlyForward(_Cursor[T]):
    """Forward iterator over a private copy of the sequence."""

    def __init__(self, data: Sequence[T]) -> None:
        super().__init__(tuple(data), -1)

    def value(self) -> T:
        """Return the element at the current position, or raise ``OutOfBoundsError``."""
        return self._checked_value()

    def next(self) -> bool:
        """Move to the next element; return whether it exists."""
        self._pos += 1
        return self._pos < len(self._data)

    def reset(self) -> None:
        """Return to the starting position, unless an error has occurred."""
        if self._error is None:
            self._pos = -1

    def __len__(self) -> int:
        return 0 if self._error is not None else len(self._data)

    def __iter__(self) -> Iterator[T]:
        """Yield the remaining elements, advancing this iterator as it goes."""
        while self.next():
            yield self.value()


class ReadonlyReverse(_Cursor[T]):
    """Reverse iterator over a private copy of the sequence."""

    def __init__(self, data: Sequence[T]) -> None:
        copy = tuple(data)
        super().__init__(copy, len(copy))

    def value(self) -> T:
        """Return the element at the current position, or raise ``OutOfBoundsError``."""
        return self._checked_value()

    def next(self) -> bool:
        """Move to the previous element; return whether it exists."""
        self._pos -= 1
        return self._pos >= 0

    def reset(self) -> None:
        """Return to the starting position, unless an error has occurred."""
        if self._error is None:
            self._pos = len(self._data)

    def __len__(self) -> int:
        return 0 if self._error is not None else len(self._data)

    def __iter__(self) -> Iterator[T]:
        """Yield the remaining elements, advancing this iterator as it goes."""
        while self.next():
            yield self.value()


class Combined(Generic[T]):
    """A factory for the four iterator kinds over one sequence."""

    def __init__(self, data: Sequence[T]) -> None:
        self._data = data

    def forward(self) -> Forward[T]:
        """Return a new forward iterator."""
        return Forward(self._data)

    def reverse(self) -> Reverse[T]:
        """Return a new reverse iterator."""
        return Reverse(self._data)

    def readonly_forward(self) -> ReadonlyForward[T]:
        """Return a new forward iterator over a copy of the data."""
        return ReadonlyForward(self._data)

    def readonly_reverse(self) -> ReadonlyReverse[T]:
        """Return a new reverse iterator over a copy of the data."""
        return ReadonlyReverse(self._data)