"""An error paired with a line of extra context."""

from __future__ import annotations

import json
from dataclasses import dataclass

_JSON_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


@dataclass(frozen=True)
class ErrorContext:
    """An error (or ``None``) together with additional context text."""

    error: BaseException | None = None
    more: str = ""

    def is_nil(self) -> bool:
        """Report whether no error is held."""
        return self.error is None

    def _require_error(self) -> BaseException:
        if self.error is None:
            raise ValueError("error context holds no error")
        return self.error

    def __str__(self) -> str:
        return f"{self._require_error()}: {self.more}"

    def marshal(self) -> bytes:
        """Return the compact JSON form ``{"error": ..., "more": ...}`` as bytes."""
        payload = {"error": str(self._require_error()), "more": self.more}
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        for char, escaped in _JSON_ESCAPES:
            text = text.replace(char, escaped)
        return text.encode("utf-8")