"""Markers for deprecated and unfinished functions."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from types import FrameType

_UNKNOWN = "unknown"


def _frame_name(frame: FrameType | None) -> str:
    if frame is None:
        return _UNKNOWN
    module = inspect.getmodulename(frame.f_code.co_filename) or _UNKNOWN
    return f"{module}.{frame.f_code.co_name}"


def _target_and_source(marker_frame: FrameType | None) -> tuple[str, str]:
    """Name the function that called the marker, and the function that called it."""
    target = marker_frame.f_back if marker_frame is not None else None
    source = target.f_back if target is not None else None
    return _frame_name(target), _frame_name(source)


def _deprecated_format(target: str, source: str) -> str:
    return f"attribute.Deprecated: {target} is deprecated; source: {source}"


def _todo_format(target: str, source: str) -> str:
    return f"attribute.Todo: todo in {target}; source: {source}"


def deprecated(event: Callable[[], object] | None = None) -> None:
    """Report that the calling function is deprecated.

    Prints a warning naming the caller and its caller, or runs ``event``
    instead when one is given.
    """
    frame = inspect.currentframe()
    try:
        target, source = _target_and_source(frame)
    finally:
        del frame
    message = _deprecated_format(target, source)
    if event is not None:
        event()
        return
    print(message)


def todo(event: Callable[[], object] | None = None) -> None:
    """Report that the calling function is not implemented yet.

    Prints a warning naming the caller and its caller, or runs ``event``
    instead when one is given.
    """
    frame = inspect.currentframe()
    try:
        target, source = _target_and_source(frame)
    finally:
        del frame
    message = _todo_format(target, source)
    if event is not None:
        event()
        return
    print(message)