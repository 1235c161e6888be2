"""Console colors, font styles and the formatting triple applied to text.

Color and style codes follow the classic SGR table: foreground colors are
30-37 (39 for the terminal default), backgrounds are the same plus 10.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from consolekit.ansi import RESET, sgr


class ConsoleColor(Enum):
    """Underlying colors for console text and backgrounds."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39

    @property
    def terminal_foreground(self) -> int:
        return self.value

    @property
    def terminal_background(self) -> int:
        return self.value + 10


class ConsoleFormat(IntEnum):
    """Font formatting styles."""

    RESET = 0
    BOLD = 1
    # Faint / dim weight
    LIGHT = 2
    ITALIC = 3
    UNDERLINE = 4

    @property
    def ansi(self) -> str:
        """Return ``ESC[<code>m``."""
        return sgr(int(self))


@dataclass(frozen=True)
class SegmentFormatting:
    """Background, foreground and font style of a run of text.

    Any of the three may be ``None``, meaning "not specified".
    """

    background: ConsoleColor | None = None
    foreground: ConsoleColor | None = None
    format: ConsoleFormat | None = None

    @property
    def ansi(self) -> str:
        """Return ``ESC[<background>;<foreground>;<format>m``.

        Unset components are left out. When nothing is set the result is
        ``ESC[m``, which resets every color and style.
        """
        codes: list[int] = []
        if self.background is not None:
            codes.append(self.background.terminal_background)
        if self.foreground is not None:
            codes.append(self.foreground.terminal_foreground)
        if self.format is not None:
            codes.append(int(self.format))
        return sgr(*codes)

    @property
    def is_empty(self) -> bool:
        return (
            self.background is None
            and self.foreground is None
            and self.format is None
        )


def terminal_format(text: str, style: ConsoleFormat) -> str:
    """Wrap *text* in *style*, resetting all attributes afterwards."""
    return style.ansi + text + RESET


def terminal_colorize(text: str, color: ConsoleColor) -> str:
    """Wrap *text* in the foreground *color*, resetting all attributes afterwards."""
    return sgr(color.terminal_foreground) + text + RESET
