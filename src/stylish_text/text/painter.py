"""Style capabilities that decorate raw text for display.

A style is any value with a pure ``paint(text) -> str`` method. Styles are
compared by value when container operations need to treat them as data, so
concrete implementations here are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Union, runtime_checkable

from ..errors import StyleError

ColorSpec = Union[str, int]

_ANSI_RESET = "\x1b[0m"
# The eight base SGR colours; foreground codes are 30 + n, background 40 + n.
# Anything else goes through the 256-colour palette (38;5;n / 48;5;n).
_ANSI_COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "purple": 5,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}


@runtime_checkable
class Painter(Protocol):
    """Protocol for decorating raw text."""

    def paint(self, text: str) -> str:
        """Return ``text`` wrapped in this style's decoration."""


@dataclass(frozen=True)
class Tag:
    """Surrounds text in a fixed opening and closing string."""

    opening: str = ""
    closing: str = ""

    def paint(self, text: str) -> str:
        return f"{self.opening}{text}{self.closing}"


def _color_code(color: Optional[ColorSpec], *, base: int, field_name: str) -> str:
    if color is None:
        return ""
    if isinstance(color, bool):
        raise StyleError(f"{field_name} must be a color name or palette index")
    if isinstance(color, int):
        if not 0 <= color <= 255:
            raise StyleError(f"{field_name} palette index must be in 0..255")
        return f"{base + 8};5;{color}"
    name = color.strip().lower()
    if name not in _ANSI_COLORS:
        raise StyleError(f"unknown {field_name} color: {color!r}")
    return str(base + _ANSI_COLORS[name])


@dataclass(frozen=True)
class AnsiStyle:
    """Terminal style rendered as SGR escape sequences."""

    foreground: Optional[ColorSpec] = None
    background: Optional[ColorSpec] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def __post_init__(self) -> None:
        # Validate eagerly so paint() stays total.
        self._codes()

    def _codes(self) -> list[str]:
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.underline:
            codes.append("4")
        fg = _color_code(self.foreground, base=30, field_name="foreground")
        if fg:
            codes.append(fg)
        bg = _color_code(self.background, base=40, field_name="background")
        if bg:
            codes.append(bg)
        return codes

    @property
    def is_plain(self) -> bool:
        return not self._codes()

    def paint(self, text: str) -> str:
        codes = self._codes()
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_ANSI_RESET}"


# Paints text unchanged; styles replacements inserted where no run exists.
PLAIN = Tag()
