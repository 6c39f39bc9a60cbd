"""ANSI escape sequences for colours, clearing and cursor movement."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class ClearType(Enum):
    """Which part of the screen to clear."""

    BEFORE_CURSOR = auto()
    AFTER_CURSOR = auto()
    ENTIRE_SCREEN = auto()


class ColorType(IntEnum):
    """Whether a colour applies to the foreground or the background."""

    FOREGROUND = 38
    BACKGROUND = 48


class ColorError(ValueError):
    """Raised when a hex colour string cannot be parsed."""


class PositionError(ValueError):
    """Raised for a cursor position outside the 1-based screen grid."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Invalid position: ({x}, {y})")
        self.x = x
        self.y = y


_HEX_COMPONENT = re.compile(r"\+?[0-9a-fA-F]+")


def _parse_component(text: str) -> int:
    if not _HEX_COMPONENT.fullmatch(text):
        raise ColorError(f"Invalid hex string: {text!r}")
    return int(text, 16)


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} component out of range: {value}")

    @classmethod
    def from_hex_str(cls, text: str) -> Color:
        """Parse a colour such as '#1a2b3c' or '1a2b3c'."""
        digits = text.lstrip("#")
        return cls(
            _parse_component(digits[0:2]),
            _parse_component(digits[2:4]),
            _parse_component(digits[4:6]),
        )

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Build a colour from an integer laid out as 0xRRGGBB."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


@dataclass(frozen=True)
class Position:
    """A 1-based terminal cursor position."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 1 or self.y < 1:
            raise PositionError(self.x, self.y)


_CLEAR_SEQUENCES = {
    ClearType.BEFORE_CURSOR: "\x1b[1J]",
    ClearType.AFTER_CURSOR: "\x1b[0J]",
    ClearType.ENTIRE_SCREEN: "\x1b[2J]",
}


def rgb_ansi(color_type: ColorType, color: Color) -> str:
    """Escape sequence selecting a 24-bit foreground or background colour."""
    return f"\x1b[{int(color_type)};2;{color.red};{color.green};{color.blue}m"


def reset_rgb_ansi() -> str:
    """Escape sequence restoring default foreground and background colours."""
    return "\x1b[39m\x1b[49m"


def clear(clear_type: ClearType) -> str:
    """Escape sequence clearing part of the screen."""
    return _CLEAR_SEQUENCES[clear_type]


def move_cursor(position: Position) -> str:
    """Escape sequence moving the cursor to a position."""
    return f"\x1b[{position.x};{position.y}H"