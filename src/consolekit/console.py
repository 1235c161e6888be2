"""Console: line-oriented terminal interaction over an output stream.

Wraps an output stream (for printing, formatted text and terminal commands)
and an input stream (for prompting), and hands out :class:`Pages` pagers that
drive interactive browsing of large lists.
"""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from consolekit.ansi import ansi, measure_string
from consolekit.commands import (
    ERASE_SCREEN,
    ERASE_SCREEN_AND_SCROLLBACK,
    MOVE_HOME,
    TerminalCommand,
)
from consolekit.config import ConsoleSettings
from consolekit.console_string import ConsoleString
from consolekit.line_input import LineInput
from consolekit.output import ConsoleOutputStream, OutputCapability, StandardOutputStream
from consolekit.pages import PageDisplayConfiguration, Pages
from consolekit.table import format_table

_ALTERNATIVE_BUFFER_ENABLE = ansi("?1049h")
_ALTERNATIVE_BUFFER_DISABLE = ansi("?1049l")


class Console(LineInput):
    """Helper for console interaction.

    Parameters
    ----------
    output:
        Stream to print to. Defaults to standard output, with ANSI support
        when it is a terminal.
    input:
        Text stream lines are read from. Defaults to ``sys.stdin``.
    no_color:
        Suppress color/style sequences even if the output supports them.
        Cursor and erase commands are unaffected.
    erase_scrollback:
        Whether :meth:`clear_screen` also erases the scrollback buffer.
    """

    def __init__(
        self,
        output: ConsoleOutputStream | None = None,
        input: TextIO | None = None,
        *,
        no_color: bool = False,
        erase_scrollback: bool = True,
    ) -> None:
        self.output: ConsoleOutputStream = (
            output if output is not None else StandardOutputStream()
        )
        self._input = input
        self.no_color = no_color
        self.erase_scrollback = erase_scrollback
        self.exit_code: int | None = None
        self._in_alternative_buffer = False

    @classmethod
    def from_environment(cls, settings: ConsoleSettings | None = None) -> Console:
        """Console on stdin/stdout configured from environment variables."""
        if settings is None:
            settings = ConsoleSettings.from_env()
        return cls(
            no_color=settings.no_color,
            erase_scrollback=settings.erase_scrollback,
        )

    # -- capabilities -------------------------------------------------------

    @property
    def supports_control_sequences(self) -> bool:
        return (
            OutputCapability.ANSI_CONTROL_SEQUENCES in self.output.capability_flags
        )

    @property
    def supports_ansi(self) -> bool:
        """Whether color/style sequences are written."""
        return self.supports_control_sequences and not self.no_color

    @staticmethod
    def measure_string(text: str) -> int:
        """Number of visible characters in *text*."""
        return measure_string(text)

    # -- output -------------------------------------------------------------

    def print_line(self, line: str = "", terminator: str = "\n") -> None:
        self.output.write(line + terminator)

    def print_formatted(self, text: ConsoleString | str, terminator: str = "\n") -> None:
        """Print *text*, with its formatting when the output allows it."""
        if isinstance(text, str):
            text = ConsoleString(text)
        if self.supports_ansi:
            rendered = text.terminal_formatted()
        else:
            rendered = text.unformatted()
        self.print_line(rendered, terminator=terminator)

    def command(self, command: TerminalCommand) -> None:
        """Issue a terminal command; ignored without ANSI support."""
        if not self.supports_control_sequences:
            return
        self.print_line(command.ansi, terminator="")

    def clear_screen(self) -> None:
        self.command(ERASE_SCREEN)
        self.command(MOVE_HOME)
        if self.erase_scrollback:
            self.command(ERASE_SCREEN_AND_SCROLLBACK)

    def start_alternative_screen_buffer(self) -> None:
        """Switch output to the alternative screen. No-op if already there."""
        if self._in_alternative_buffer:
            return
        if self.supports_control_sequences:
            self.output.write(_ALTERNATIVE_BUFFER_ENABLE)
        self._in_alternative_buffer = True

    def stop_alternative_screen_buffer(self) -> None:
        """Return from the alternative screen. No-op if not in it."""
        if not self._in_alternative_buffer:
            return
        if self.supports_control_sequences:
            self.output.write(_ALTERNATIVE_BUFFER_DISABLE)
        self._in_alternative_buffer = False

    @property
    def in_alternative_screen_buffer(self) -> bool:
        return self._in_alternative_buffer

    def record_exit_code(self, code: int) -> None:
        """Record the exit code the console's program should finish with."""
        self.exit_code = code

    def display_table(self, values: Sequence[Sequence[str]], separator: str = " ") -> None:
        """Print *values* as rows with their columns aligned."""
        for line in format_table(values, separator, measure=self.measure_string):
            self.print_line(line)

    # -- input --------------------------------------------------------------

    def read_line(self, prompt: str) -> str | None:
        """Print *prompt* and read one line; ``None`` at end of stream."""
        self.print_line(prompt, terminator=" ")
        stream = self._input if self._input is not None else sys.stdin
        line = stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    # -- pages --------------------------------------------------------------

    def make_pages(self, configuration: PageDisplayConfiguration | None = None) -> Pages:
        if configuration is None:
            configuration = PageDisplayConfiguration()
        return Pages(self, configuration)
