"""Terminal commands for moving the cursor and erasing the screen or lines.

Each command is a value that maps to exactly one ANSI escape sequence via its
``ansi`` property. Issuing it is up to the console, which drops commands when
its output stream has no ANSI support.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from consolekit.ansi import ansi


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Position:
    """Cursor position for :class:`Move`. Rows and columns are 1-based.

    Use the ``home``/``at_row``/``at_column``/``at`` constructors.
    """

    row: int | None = None
    column: int | None = None

    @classmethod
    def home(cls) -> Position:
        return cls()

    @classmethod
    def at_row(cls, row: int) -> Position:
        return cls(row=row)

    @classmethod
    def at_column(cls, column: int) -> Position:
        return cls(column=column)

    @classmethod
    def at(cls, row: int, column: int) -> Position:
        return cls(row=row, column=column)

    @property
    def ansi_values(self) -> str:
        if self.row is None and self.column is None:
            return ""
        if self.column is None:
            return f"{self.row};"
        if self.row is None:
            return f";{self.column}"
        return f"{self.row};{self.column}"


class EraseInDisplay(Enum):
    """Arguments for erase in display (``ESC[<n>J``)."""

    TO_END = "0"
    TO_BEGINNING = "1"
    ALL = "2"
    ALL_AND_SCROLLBACK = "3"

    @property
    def ansi_values(self) -> str:
        return self.value


class EraseInLine(Enum):
    """Arguments for erase in line (``ESC[<n>K``)."""

    ALL = "2"
    TO_BEGINNING = "1"
    TO_END = "0"

    @property
    def ansi_values(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Move:
    """Cursor position command (``ESC[<row>;<column>H``)."""

    position: Position

    @property
    def ansi(self) -> str:
        return ansi(f"{self.position.ansi_values}H")


@dataclass(frozen=True)
class EraseInScreen:
    """Erase in display command (``ESC[<n>J``)."""

    mode: EraseInDisplay

    @property
    def ansi(self) -> str:
        return ansi(f"{self.mode.ansi_values}J")


@dataclass(frozen=True)
class EraseLine:
    """Erase in line command (``ESC[<n>K``)."""

    mode: EraseInLine

    @property
    def ansi(self) -> str:
        return ansi(f"{self.mode.ansi_values}K")


@dataclass(frozen=True)
class CursorUp:
    count: int = 1

    @property
    def ansi(self) -> str:
        return ansi(f"{self.count}A")


@dataclass(frozen=True)
class CursorDown:
    count: int = 1

    @property
    def ansi(self) -> str:
        return ansi(f"{self.count}B")


@dataclass(frozen=True)
class CursorForward:
    count: int = 1

    @property
    def ansi(self) -> str:
        return ansi(f"{self.count}C")


@dataclass(frozen=True)
class CursorBack:
    count: int = 1

    @property
    def ansi(self) -> str:
        return ansi(f"{self.count}D")


TerminalCommand = Union[
    Move,
    EraseInScreen,
    EraseLine,
    CursorUp,
    CursorDown,
    CursorForward,
    CursorBack,
]

MOVE_HOME = Move(Position.home())
ERASE_SCREEN = EraseInScreen(EraseInDisplay.ALL)
ERASE_SCREEN_AND_SCROLLBACK = EraseInScreen(EraseInDisplay.ALL_AND_SCROLLBACK)
ERASE_LINE = EraseLine(EraseInLine.ALL)
