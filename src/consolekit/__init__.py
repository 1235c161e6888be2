"""consolekit: formatted console output, validated line input and paged lists."""

# ANSI helpers
from consolekit.ansi import ANSI_COMMAND_RE, measure_string, strip_terminal_formatting

# Terminal commands
from consolekit.commands import (
    ERASE_LINE,
    ERASE_SCREEN,
    ERASE_SCREEN_AND_SCROLLBACK,
    MOVE_HOME,
    CursorBack,
    CursorDown,
    CursorForward,
    CursorUp,
    EraseInDisplay,
    EraseInLine,
    EraseInScreen,
    EraseLine,
    Move,
    Position,
    TerminalCommand,
)

# Settings
from consolekit.config import ConsoleSettings

# Console
from consolekit.console import Console

# Formatted strings
from consolekit.console_string import (
    ConsoleString,
    Formatted,
    FormatSet,
    Literal,
    Nested,
    Segment,
    format_set,
    nested,
    styled,
)

# Data providers
from consolekit.data_provider import (
    ArrayDataProvider,
    CallableDataProvider,
    ConsoleDataProvider,
)

# Environment probes
from consolekit.environment import (
    is_no_color_specified,
    is_terminal,
    is_terminal_standard_error,
    is_terminal_standard_input,
    is_terminal_standard_output,
)

# Colors and styles
from consolekit.formatting import (
    ConsoleColor,
    ConsoleFormat,
    SegmentFormatting,
    terminal_colorize,
    terminal_format,
)

# Line input
from consolekit.line_input import LineHost, LineInput, ParseAbort, ParseError, ParseSuccess

# Output streams
from consolekit.output import (
    ConsoleOutputStream,
    OutputCapability,
    StandardOutputStream,
    StringOutputStream,
    detect_output_capabilities,
)

# Paged lists
from consolekit.pages import (
    CallbackCommandHandler,
    Loop,
    ModifyList,
    PageDisplayConfiguration,
    PageNavigationState,
    Pages,
    PagesCommandError,
    PagesCommandHandler,
    PagesCommandResult,
    Quit,
    ShowMessageThenLoop,
    classify_page_input,
    page_count_for,
)

# Tables
from consolekit.table import column_widths, format_table

__all__ = [
    # ANSI
    "ANSI_COMMAND_RE",
    "measure_string",
    "strip_terminal_formatting",
    # Commands
    "ERASE_LINE",
    "ERASE_SCREEN",
    "ERASE_SCREEN_AND_SCROLLBACK",
    "MOVE_HOME",
    "CursorBack",
    "CursorDown",
    "CursorForward",
    "CursorUp",
    "EraseInDisplay",
    "EraseInLine",
    "EraseInScreen",
    "EraseLine",
    "Move",
    "Position",
    "TerminalCommand",
    # Settings
    "ConsoleSettings",
    # Console
    "Console",
    # Console strings
    "ConsoleString",
    "Formatted",
    "FormatSet",
    "Literal",
    "Nested",
    "Segment",
    "format_set",
    "nested",
    "styled",
    # Data providers
    "ArrayDataProvider",
    "CallableDataProvider",
    "ConsoleDataProvider",
    # Environment
    "is_no_color_specified",
    "is_terminal",
    "is_terminal_standard_error",
    "is_terminal_standard_input",
    "is_terminal_standard_output",
    # Formatting
    "ConsoleColor",
    "ConsoleFormat",
    "SegmentFormatting",
    "terminal_colorize",
    "terminal_format",
    # Line input
    "LineHost",
    "LineInput",
    "ParseAbort",
    "ParseError",
    "ParseSuccess",
    # Output
    "ConsoleOutputStream",
    "OutputCapability",
    "StandardOutputStream",
    "StringOutputStream",
    "detect_output_capabilities",
    # Pages
    "CallbackCommandHandler",
    "Loop",
    "ModifyList",
    "PageDisplayConfiguration",
    "PageNavigationState",
    "Pages",
    "PagesCommandError",
    "PagesCommandHandler",
    "PagesCommandResult",
    "Quit",
    "ShowMessageThenLoop",
    "classify_page_input",
    "page_count_for",
    # Tables
    "column_widths",
    "format_table",
]
