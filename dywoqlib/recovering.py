"""A context manager that catches and logs exceptions."""

from __future__ import annotations

import logging
from types import TracebackType

_log = logging.getLogger(__name__)


class Recover:
    """Suppress any ``Exception`` raised in the block, log it and keep it in ``caught``."""

    def __init__(self) -> None:
        self.caught: Exception | None = None

    def __enter__(self) -> Recover:
        self.caught = None
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        self.caught = exc
        _log.error("recovering.Recover(): caught the panic: %s", exc)
        return True