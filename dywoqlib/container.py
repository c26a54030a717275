"""List types that add iteration helpers and bracketed formatting."""

from __future__ import annotations

from typing import TypeVar

from dywoqlib.iterator import Combined
from dywoqlib.sliceutil import format_slice

T = TypeVar("T")


class IterableSlice(list[T]):
    """A list that hands out cursor-style iterators over itself."""

    def iterating(self) -> Combined[T]:
        """Return an iterator factory over this list."""
        return Combined(self)


class FormattableSlice(list[T]):
    """A list whose ``str`` is ``[a, b, c]``."""

    def __str__(self) -> str:
        return format_slice(self)