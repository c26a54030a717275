"""ANSI colour escape sequences and coloured messages."""

from __future__ import annotations

import enum

_RESET_CODE = "\x1b[0m"


class Color(enum.IntEnum):
    """ANSI colour codes."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    RESET = 9
    NONE = 10


def fg_from(color: Color) -> str:
    """Return the foreground escape sequence for ``color``."""
    return f"\x1b[3{int(color)}m"


def bg_from(color: Color) -> str:
    """Return the background escape sequence for ``color``."""
    return f"\x1b[4{int(color)}m"


def apply_fg(value: str, color: Color) -> str:
    """Wrap ``value`` in a foreground colour and a reset code."""
    return f"{fg_from(color)}{value}{_RESET_CODE}"


def apply_bg(value: str, color: Color) -> str:
    """Wrap ``value`` in a background colour and a reset code."""
    return f"{bg_from(color)}{value}{_RESET_CODE}"


def apply_both(value: str, text_color: Color, bg_color: Color) -> str:
    """Wrap ``value`` in foreground and background colours and a reset code."""
    return f"{fg_from(text_color)}{bg_from(bg_color)}{value}{_RESET_CODE}"


class Message:
    """A text whose colours are applied as they are set; setters chain."""

    def __init__(self, value: str) -> None:
        self._value = value
        self._fg = Color.NONE
        self._bg = Color.NONE

    @property
    def fg_color(self) -> Color:
        return self._fg

    @property
    def bg_color(self) -> Color:
        return self._bg

    def __str__(self) -> str:
        return self._value

    def set_fg_color(self, color: Color) -> Message:
        """Set the foreground colour and rewrap the text."""
        self._fg = color
        self._value = apply_both(self._value, color, self._bg)
        return self

    def set_bg_color(self, color: Color) -> Message:
        """Set the background colour and rewrap the text."""
        self._bg = color
        self._value = apply_both(self._value, self._fg, color)
        return self