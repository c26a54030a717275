"""Dictionary wrappers with checked insertion, update and lookup."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class KeyAlreadyExistError(KeyError):
    """Raised when adding a key that is already present."""

    def __init__(self, message: str = "mapn: key already exists") -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class KeyNotFoundError(KeyError):
    """Raised when a key that must exist is missing."""

    def __init__(self, message: str = "mapn: key not found") -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class NegativeFixedLengthError(ValueError):
    """Raised when a fixed length is negative."""

    def __init__(self, message: str = "mapn: negative fixed length") -> None:
        super().__init__(message)


class FixedLengthOutOfBoundsError(ValueError):
    """Raised when the initial entries do not fit in the fixed length."""

    def __init__(self, message: str = "mapn: fixed length out of bounds") -> None:
        super().__init__(message)


class OutOfBoundsError(IndexError):
    """Raised when an addition would grow the map past its fixed length."""

    def __init__(self, message: str = "mapn: out of bounds") -> None:
        super().__init__(message)


class DynamicMap(Generic[K, V]):
    """A dictionary where adding requires a new key and updating an existing one.

    The dictionary given to the constructor is wrapped, not copied.
    """

    def __init__(self, mapping: dict[K, V] | None = None) -> None:
        self._map: dict[K, V] = {} if mapping is None else mapping

    @property
    def native(self) -> dict[K, V]:
        """The wrapped dictionary."""
        return self._map

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __str__(self) -> str:
        if not self._map:
            return ""
        lines = "".join(f"  {key}: {value}\n" for key, value in self._map.items())
        return "{\n" + lines + "}"

    def __repr__(self) -> str:
        return f"DynamicMap({self._map!r})"

    def add(self, key: K, value: V) -> tuple[K, V]:
        """Insert a new entry and return it; raise ``KeyAlreadyExistError`` if present."""
        if key in self._map:
            raise KeyAlreadyExistError(f"mapn: key already exists: {key!r}")
        self._map[key] = value
        return key, value

    def set(self, key: K, value: V) -> tuple[K, V]:
        """Update an existing entry and return it; raise ``KeyNotFoundError`` if absent."""
        if key not in self._map:
            raise KeyNotFoundError(f"mapn: key not found: {key!r}")
        self._map[key] = value
        return key, value

    def keys(self) -> list[K]:
        """Return the keys as a new list."""
        return list(self._map)

    def values(self) -> list[V]:
        """Return the values as a new list."""
        return list(self._map.values())

    def delete(self, key: K) -> K:
        """Remove the entry for ``key`` and return the key."""
        if key not in self._map:
            raise KeyNotFoundError(f"mapn: key not found: {key!r}")
        del self._map[key]
        return key

    def get(self, key: K) -> V:
        """Return the value for ``key``; raise ``KeyNotFoundError`` if absent."""
        try:
            return self._map[key]
        except KeyError:
            raise KeyNotFoundError(f"mapn: key not found: {key!r}") from None


class FixedMap(Generic[K, V]):
    """A ``DynamicMap`` that never holds more than ``fixed_len`` entries.

    The initial entries are copied. An addition that would exceed the fixed
    length raises ``OutOfBoundsError`` and leaves the map unchanged.
    """

    def __init__(self, fixed_len: int, mapping: Mapping[K, V] | None = None) -> None:
        entries = dict(mapping) if mapping is not None else {}
        if fixed_len < 0:
            raise NegativeFixedLengthError(f"mapn: negative fixed length {fixed_len}")
        if fixed_len < len(entries):
            raise FixedLengthOutOfBoundsError(
                f"mapn: {len(entries)} entries do not fit in fixed length {fixed_len}"
            )
        self._fixed_len = fixed_len
        self._map: DynamicMap[K, V] = DynamicMap(entries)

    @property
    def fixed_len(self) -> int:
        """The maximum number of entries."""
        return self._fixed_len

    @property
    def native(self) -> dict[K, V]:
        """The underlying dictionary."""
        return self._map.native

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __str__(self) -> str:
        return str(self._map)

    def __repr__(self) -> str:
        return f"FixedMap({self._fixed_len}, {self._map.native!r})"

    def add(self, key: K, value: V) -> tuple[K, V]:
        """Insert a new entry if it fits and return it."""
        if key in self._map:
            raise KeyAlreadyExistError(f"mapn: key already exists: {key!r}")
        if len(self._map) + 1 > self._fixed_len:
            raise OutOfBoundsError(
                f"mapn: adding {key!r} exceeds fixed length {self._fixed_len}"
            )
        return self._map.add(key, value)

    def set(self, key: K, value: V) -> tuple[K, V]:
        """Update an existing entry and return it."""
        return self._map.set(key, value)

    def keys(self) -> list[K]:
        """Return the keys as a new list."""
        return self._map.keys()

    def values(self) -> list[V]:
        """Return the values as a new list."""
        return self._map.values()

    def delete(self, key: K) -> K:
        """Remove the entry for ``key`` and return the key."""
        return self._map.delete(key)

    def get(self, key: K) -> V:
        """Return the value for ``key``."""
        return self._map.get(key)