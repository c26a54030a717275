"""A mutable UTF-8 string with character-level editing and byte-level reading."""

from __future__ import annotations

from dywoqlib.iterator import Combined
from dywoqlib.sliceutil import set_at


class IndexOutOfBoundsError(IndexError):
    """Raised when a character index is outside the string."""

    def __init__(self, message: str = "stringn: index out of bounds") -> None:
        super().__init__(message)


class RuneNotFoundError(LookupError):
    """Raised when a character cannot be located while decoding the string."""

    def __init__(self, message: str = "stringn: rune not found") -> None:
        super().__init__(message)


class InvalidIndexForRemovalError(IndexError):
    """Raised when a removal range is not valid for the string."""

    def __init__(self, message: str = "stringn: invalid index for removal") -> None:
        super().__init__(message)


class StringN:
    """A mutable string held as UTF-8 bytes.

    Text operations work on characters; ``write`` and ``read`` work on the
    underlying bytes, and ``read`` consumes what it returns.
    """

    def __init__(self, text: str = "") -> None:
        self._buf = bytearray(text.encode("utf-8"))

    @property
    def _text(self) -> str:
        return self._buf.decode("utf-8", errors="replace")

    def _replace_text(self, text: str) -> None:
        self._buf = bytearray(text.encode("utf-8"))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"StringN({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringN):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, str):
            raise TypeError(f"expected str, got {type(item).__name__}")
        if self.empty():
            return False
        return item in self._text

    def iterating(self) -> Combined[str]:
        """Return an iterator factory over the characters of a snapshot of the text."""
        return Combined(list(self._text))

    def append(self, *args: str) -> list[str]:
        """Append each string in turn and return the strings appended."""
        for text in args:
            self._buf += text.encode("utf-8")
        return list(args)

    def at(self, i: int) -> str:
        """Return the character at index ``i``."""
        text = self._text
        if not 0 <= i < len(text):
            raise IndexOutOfBoundsError(
                f"stringn: index {i} out of bounds for length {len(text)}"
            )
        return text[i]

    def front(self) -> str:
        """Return the first character."""
        return self.at(0)

    def back(self) -> str:
        """Return the last character."""
        return self.at(len(self) - 1)

    def empty(self) -> bool:
        """Report whether the string holds no bytes."""
        return len(self._buf) == 0

    def has_prefix(self, prefix: str) -> bool:
        """Report whether a non-empty string starts with ``prefix``."""
        if self.empty():
            return False
        return self._text.startswith(prefix)

    def has_suffix(self, suffix: str) -> bool:
        """Report whether a non-empty string ends with ``suffix``."""
        if self.empty():
            return False
        return self._text.endswith(suffix)

    def insert(self, i: int, char: str) -> str:
        """Insert ``char`` before index ``i`` (``i`` may equal the length) and return it."""
        chars = list(self._text)
        if not 0 <= i <= len(chars):
            raise IndexOutOfBoundsError(
                f"stringn: index {i} out of bounds for length {len(chars)}"
            )
        chars.insert(i, char)
        self._replace_text("".join(chars))
        return char

    def set(self, char: str, i: int) -> str:
        """Replace the character at index ``i`` with ``char``; return the old one."""
        chars = list(self._text)
        old = set_at(char, i, chars)
        self._replace_text("".join(chars))
        return old

    def write(self, data: bytes | bytearray | str) -> int:
        """Append raw bytes (a ``str`` is encoded as UTF-8); return the byte count."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buf += data
        return len(data)

    def read(self, size: int = -1) -> bytes:
        """Remove and return up to ``size`` bytes from the front; all if ``size`` < 0.

        Returns ``b""`` once the string is exhausted.
        """
        if size < 0:
            size = len(self._buf)
        chunk = bytes(self._buf[:size])
        del self._buf[:size]
        return chunk

    def clear(self) -> None:
        """Remove all content."""
        self._buf.clear()

    def prepend(self, *args: str) -> str:
        """Put the given strings, in order, before the content; return the new text."""
        self._replace_text("".join(args) + self._text)
        return self._text

    def remove(self, start: int, end: int) -> str:
        """Delete characters ``start`` to ``end`` (exclusive); return the first removed."""
        chars = list(self._text)
        if start < 0 or end > len(chars) or start > end or start >= len(chars):
            raise InvalidIndexForRemovalError(
                f"stringn: invalid removal range {start}:{end} for length {len(chars)}"
            )
        removed = chars[start]
        del chars[start:end]
        self._replace_text("".join(chars))
        return removed

    def replace(self, old: str, new: str) -> None:
        """Replace every occurrence of ``old`` with ``new`` in place."""
        self._replace_text(self._text.replace(old, new))

    def reverse(self) -> None:
        """Reverse the characters in place."""
        self._replace_text(self._text[::-1])

    def lower(self) -> str:
        """Return the text in lower case."""
        return self._text.lower()

    def upper(self) -> str:
        """Return the text in upper case."""
        return self._text.upper()

    def compare(self, other: str) -> int:
        """Return -1, 0 or 1 as the text sorts before, equal to or after ``other``."""
        text = self._text
        return (text > other) - (text < other)

    def split(self, sep: str) -> list[str]:
        """Split around ``sep``; an empty separator splits into single characters."""
        text = self._text
        if sep == "":
            return list(text)
        return text.split(sep)

    def substring(self, start: int, end: int) -> str:
        """Return characters ``start`` to ``end``, clamped to the string; "" if reversed."""
        chars = self._text
        start = max(start, 0)
        end = min(end, len(chars))
        if start > end:
            return ""
        return chars[start:end]