"""An optional value that may or may not be present."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from dywoqlib.errcontext import ErrorContext

T = TypeVar("T")
U = TypeVar("U")

_SCALAR_TYPES = (bool, int, float, complex, str, bytes)


class NotPresentError(LookupError):
    """Raised when an absent optional value is unwrapped."""

    def __init__(self, message: str = "optional: not present") -> None:
        super().__init__(message)


def _zero_like(value: Any) -> Any:
    if isinstance(value, _SCALAR_TYPES):
        return type(value)()
    return None


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """A value that is either present or absent.

    An absent value still carries a zero value, returned by ``get`` and
    shown by ``str``, and an error context explaining the absence.
    """

    value: T
    present: bool
    error: ErrorContext = field(default_factory=ErrorContext)

    def get(self) -> tuple[T, bool]:
        """Return ``(value, present)``; the value is the zero value when absent."""
        return self.value, self.present

    def __str__(self) -> str:
        return str(self.value)

    def or_else(self, other: T) -> T:
        """Return the value if present, otherwise ``other``."""
        return self.value if self.present else other

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep this value only if it is present and satisfies ``predicate``."""
        if self.present and predicate(self.value):
            return self
        zero = _zero_like(self.value) if self.present else self.value
        return none(zero)

    def unwrap(self) -> T:
        """Return the value, raising ``NotPresentError`` when it is absent."""
        if not self.present:
            raise NotPresentError()
        return self.value

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value if present, otherwise the result of ``supplier()``."""
        return self.value if self.present else supplier()


def some(value: T) -> Maybe[T]:
    """Return a present ``Maybe`` holding ``value``."""
    return Maybe(value, True)


def none(zero: Any = None) -> Maybe[Any]:
    """Return an absent ``Maybe`` whose zero value is ``zero``."""
    return Maybe(zero, False)


def none_with_context(error: ErrorContext, zero: Any = None) -> Maybe[Any]:
    """Return an absent ``Maybe`` carrying the given error context."""
    return Maybe(zero, False, error)


def map_maybe(maybe: Maybe[T], func: Callable[[T], U]) -> Maybe[U]:
    """Apply ``func`` to a present value; an absent value stays absent."""
    if maybe.present:
        return some(func(maybe.value))
    return none()


def _conversion(zero: Any, args: tuple[Any, ...]) -> Maybe[Any]:
    if not args:
        return none(zero)
    return some(args[0])


def maybe_int(*args: int) -> Maybe[int]:
    """Return the first argument as a present value, or an absent one with zero 0."""
    return _conversion(0, args)


def maybe_float(*args: float) -> Maybe[float]:
    """Return the first argument as a present value, or an absent one with zero 0.0."""
    return _conversion(0.0, args)


def maybe_complex(*args: complex) -> Maybe[complex]:
    """Return the first argument as a present value, or an absent one with zero 0j."""
    return _conversion(0j, args)


def maybe_str(*args: str) -> Maybe[str]:
    """Return the first argument as a present value, or an absent one with zero ''."""
    return _conversion("", args)


def maybe_bool(*args: bool) -> Maybe[bool]:
    """Return the first argument as a present value, or an absent one with zero False."""
    return _conversion(False, args)


def maybe_bytes(*args: bytes) -> Maybe[bytes]:
    """Return the first argument as a present value, or an absent one with zero b''."""
    return _conversion(b"", args)


def maybe_error(*args: BaseException) -> Maybe[BaseException | None]:
    """Return the first argument as a present value, or an absent one with zero None."""
    return _conversion(None, args)