"""Paged list display with a small navigation command grammar.

The pager draws one page of rows at a time and then reads a line:

* ``0`` quits; an empty line quits too unless the command handler takes it.
* ``+N`` / ``-N`` move N pages forward/back, clamped to the first/last page.
* ``=N`` jumps to page N (1-based); ``=0`` quits.
* Anything else goes to the configured command handler (with a leading ``=``
  removed), or is rejected when there is none.

The same classifier decides what a line means when validating it and when
acting on it, so the two passes always agree.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable, Protocol, Sequence, Union

from consolekit.data_provider import ArrayDataProvider, ConsoleDataProvider
from consolekit.line_input import parse_int

if TYPE_CHECKING:
    from consolekit.console import Console

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE_COUNT = 30

PAGE_PROMPT = "Input page (0 or empty to close):"
CONTINUE_PROMPT = "Press [Enter] to continue"


# ---------------------------------------------------------------------------
# Command handling
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Loop:
    """Stay on the current page, showing *message* above the next prompt."""

    message: str | None = None


@dataclass(frozen=True)
class ShowMessageThenLoop:
    """Print *message* and wait for Enter before drawing the page again."""

    message: str | None = None


@dataclass(frozen=True)
class Quit:
    """Close the pager, printing *message* first if given."""

    message: str | None = None


@dataclass(frozen=True)
class ModifyList:
    """Replace the data being displayed.

    *factory* receives the :class:`Pages` instance and returns the new
    provider. With *reset_page* the pager goes back to the first page;
    otherwise the current page is kept, clamped to the new page count.
    """

    factory: Callable[[Pages], ConsoleDataProvider]
    reset_page: bool = True


PagesCommandResult = Union[Loop, ShowMessageThenLoop, Quit, ModifyList]


class PagesCommandError(Exception):
    """Raised by command handlers when a command cannot be carried out.

    The pager prints the error and stays on the current page.
    """


class PagesCommandHandler(Protocol):
    """Handler for non-navigation input typed into a pager."""

    @property
    def accepts_commands(self) -> bool: ...

    @property
    def command_prompt(self) -> str | None: ...

    @property
    def can_handle_empty_input(self) -> bool: ...

    def execute_command(self, input: str) -> PagesCommandResult: ...


class CallbackCommandHandler:
    """Command handler delegating to a plain callable.

    Without a callable it accepts no commands, which is also how a pager
    without custom commands is configured.
    """

    def __init__(
        self,
        command: Callable[[str], PagesCommandResult] | None = None,
        command_prompt: str | None = None,
        can_handle_empty_input: bool = False,
    ) -> None:
        self._command = command
        self.command_prompt = command_prompt
        self.can_handle_empty_input = can_handle_empty_input

    @property
    def accepts_commands(self) -> bool:
        return self._command is not None

    def execute_command(self, input: str) -> PagesCommandResult:
        if self._command is None:
            return Quit()
        return self._command(input)


@dataclass
class PageDisplayConfiguration:
    """Customization of paged displays."""

    command_handler: PagesCommandHandler = field(default_factory=CallbackCommandHandler)
    clear_on_display: bool = True

    @classmethod
    def with_command(
        cls,
        command: Callable[[str], PagesCommandResult],
        command_prompt: str | None = None,
        can_handle_empty_input: bool = False,
        clear_on_display: bool = True,
    ) -> PageDisplayConfiguration:
        handler = CallbackCommandHandler(
            command,
            command_prompt=command_prompt,
            can_handle_empty_input=can_handle_empty_input,
        )
        return cls(command_handler=handler, clear_on_display=clear_on_display)


# ---------------------------------------------------------------------------
# Input grammar
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class QuitPages:
    pass


@dataclass(frozen=True)
class RelativeMove:
    delta: int


@dataclass(frozen=True)
class AbsoluteMove:
    """Jump to *page*, zero-based."""

    page: int


@dataclass(frozen=True)
class RunCommand:
    command: str


@dataclass(frozen=True)
class InvalidInput:
    message: str


PageInput = Union[QuitPages, RelativeMove, AbsoluteMove, RunCommand, InvalidInput]


def classify_page_input(
    text: str,
    page_count: int,
    handler: PagesCommandHandler,
) -> PageInput:
    """Decide what a line typed at the page prompt means."""
    if text == "0":
        return QuitPages()

    if not text:
        if handler.can_handle_empty_input and handler.accepts_commands:
            return RunCommand(text)
        return QuitPages()

    if text.startswith(("+", "-")):
        skip = parse_int(text[1:])
        if skip is None:
            return InvalidInput(
                f"Invalid page index {text}. Must be between 1 and {page_count}"
            )
        return RelativeMove(skip if text[0] == "+" else -skip)

    index = parse_int(text[1:]) if text.startswith("=") else None
    if index is None:
        if handler.accepts_commands:
            command = text[1:] if text.startswith("=") else text
            return RunCommand(command)
        return InvalidInput(
            f"Invalid page number '{text}'. Must be a number between 1 and {page_count}"
        )

    if index == 0:
        return QuitPages()
    if index < 1 or index > page_count:
        return InvalidInput(
            f"Invalid page index {text}. Must be between 1 and {page_count}"
        )
    return AbsoluteMove(index - 1)


# ---------------------------------------------------------------------------
# Navigation state
# ---------------------------------------------------------------------------


def page_count_for(count: int, per_page_count: int) -> int:
    """Number of pages needed for *count* rows; never less than one."""
    if per_page_count <= 0:
        raise ValueError(f"per_page_count must be positive, got {per_page_count}")
    return max(1, math.ceil(count / per_page_count))


@dataclass
class PageNavigationState:
    """Current page of a provider's rows. ``0 <= page < page_count``."""

    provider: ConsoleDataProvider
    per_page_count: int
    page: int = 0
    page_count: int = 1

    def __post_init__(self) -> None:
        self.page_count = page_count_for(self.provider.count, self.per_page_count)
        self.page = min(max(self.page, 0), self.page_count - 1)

    def item_range(self) -> range:
        """Indices of the rows on the current page."""
        count = self.provider.count
        min_item = min(self.page * self.per_page_count, count)
        max_item = min(min_item + self.per_page_count, count)
        return range(min_item, max_item)

    def move_by(self, delta: int) -> None:
        self.page = min(self.page_count - 1, max(0, self.page + delta))

    def move_to(self, page: int) -> None:
        self.page = page

    def replace_provider(self, provider: ConsoleDataProvider, reset_page: bool) -> None:
        self.provider = provider
        self.page_count = page_count_for(provider.count, self.per_page_count)
        if reset_page:
            self.page = 0
        else:
            self.page = min(self.page, self.page_count - 1)


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


class _Step(Enum):
    LOOP = "loop"
    QUIT = "quit"


class Pages:
    """Lets the user browse pages of items and run commands on them."""

    def __init__(
        self,
        console: Console,
        configuration: PageDisplayConfiguration | None = None,
    ) -> None:
        self.console = console
        self.configuration = configuration or PageDisplayConfiguration()
        self._message: str | None = None

    @property
    def _handler(self) -> PagesCommandHandler:
        return self.configuration.command_handler

    # -- entry points -------------------------------------------------------

    def display_values(
        self,
        values: Sequence[object],
        header: str = "",
        per_page_count: int = DEFAULT_PER_PAGE_COUNT,
    ) -> None:
        """Page through *values*, one per row."""
        self.display_pages(ArrayDataProvider.from_items(header, values), per_page_count)

    def display_rows(
        self,
        rows: Iterable[Sequence[object]],
        header: str = "",
        per_page_count: int = DEFAULT_PER_PAGE_COUNT,
    ) -> None:
        """Page through *rows*, aligning their columns."""
        self.display_pages(ArrayDataProvider(header, rows), per_page_count)

    def display_pages(
        self,
        provider: ConsoleDataProvider,
        per_page_count: int = DEFAULT_PER_PAGE_COUNT,
    ) -> None:
        """Run the interactive pager over *provider* until the user quits."""
        state = PageNavigationState(provider, per_page_count)
        self._message = None
        logger.debug(
            "Displaying %d rows over %d page(s)", provider.count, state.page_count
        )

        while True:
            if self.configuration.clear_on_display:
                self.console.clear_screen()

            self._render_page(state)

            if self._message is not None:
                self.console.print_line(self._message)
                self._message = None

            if self._step(state) is _Step.QUIT:
                return

    # -- one iteration ------------------------------------------------------

    def _render_page(self, state: PageNavigationState) -> None:
        provider = state.provider
        items = state.item_range()

        if provider.header:
            self.console.print_line(provider.header)

        self.console.print_line("----")

        table: list[list[str]] = []
        for index in items:
            row = [f"{index + 1}:"]
            row.extend(str(value) for value in provider.display_titles(index))
            table.append(row)
        self.console.display_table(table, separator=" ")

        first = min(items.start + 1, items.stop)
        self.console.print_line(f"---- {first} to {items.stop}")
        self.console.print_line(f"= Page {state.page + 1} of {state.page_count}")

    def _prompt(self) -> str:
        prompt = PAGE_PROMPT
        if self._handler.command_prompt:
            prompt += f"\n{self._handler.command_prompt}"
        return prompt + "\n>"

    def _read_page_input(self, state: PageNavigationState) -> PageInput:
        """Prompt until a line in the page grammar is entered."""
        prompt = self._prompt()
        while True:
            line = self.console.read_line(prompt)
            if line is None:
                logger.debug("Input stream ended; closing pager")
                return QuitPages()

            action = classify_page_input(line, state.page_count, self._handler)
            if isinstance(action, InvalidInput):
                self.console.print_line(action.message)
                continue
            return action

    def _step(self, state: PageNavigationState) -> _Step:
        action = self._read_page_input(state)

        if isinstance(action, QuitPages):
            return _Step.QUIT

        if isinstance(action, RelativeMove):
            state.move_by(action.delta)
            logger.debug("Moved %+d page(s) to page %d", action.delta, state.page + 1)
            return _Step.LOOP

        if isinstance(action, AbsoluteMove):
            state.move_to(action.page)
            logger.debug("Jumped to page %d", state.page + 1)
            return _Step.LOOP

        return self._run_command(action.command, state)

    def _run_command(self, command: str, state: PageNavigationState) -> _Step:
        logger.debug("Running page command %r", command)
        try:
            result = self._handler.execute_command(command)
            return self._apply_result(result, state)
        except Exception as e:
            logger.warning("Page command %r failed", command, exc_info=True)
            self.console.print_line(str(e))
            self.console.read_line(CONTINUE_PROMPT)
            return _Step.LOOP

    def _apply_result(self, result: PagesCommandResult, state: PageNavigationState) -> _Step:
        match result:
            case Loop(message):
                if message is not None:
                    self._message = message
                return _Step.LOOP

            case ShowMessageThenLoop(message):
                if message is not None:
                    self.console.print_line(message)
                    self.console.read_line(CONTINUE_PROMPT)
                return _Step.LOOP

            case Quit(message):
                if message is not None:
                    self.console.print_line(message)
                return _Step.QUIT

            case ModifyList(factory, reset_page):
                state.replace_provider(factory(self), reset_page)
                logger.debug(
                    "Replaced list: %d rows over %d page(s), now on page %d",
                    state.provider.count,
                    state.page_count,
                    state.page + 1,
                )
                return _Step.LOOP

        raise TypeError(f"Unknown page command result: {result!r}")
