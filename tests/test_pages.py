"""Tests for consolekit.pages -- the paged list display and its input grammar."""

from __future__ import annotations

import logging

import pytest

from consolekit.commands import ERASE_SCREEN, ERASE_SCREEN_AND_SCROLLBACK, MOVE_HOME
from consolekit.data_provider import ArrayDataProvider, CallableDataProvider
from consolekit.pages import (
    CONTINUE_PROMPT,
    AbsoluteMove,
    CallbackCommandHandler,
    InvalidInput,
    Loop,
    ModifyList,
    PageDisplayConfiguration,
    PageNavigationState,
    PagesCommandError,
    Quit,
    QuitPages,
    RelativeMove,
    RunCommand,
    ShowMessageThenLoop,
    classify_page_input,
    page_count_for,
)

from .mock_console import MockConsole

ITEMS = [f"Item {i}" for i in range(1, 11)]


def _display(
    inputs: list[str | None],
    values: list[str] = ITEMS,
    per_page_count: int = 3,
    configuration: PageDisplayConfiguration | None = None,
) -> MockConsole:
    console = MockConsole(inputs)
    pages = console.make_pages(configuration)
    pages.display_values(values, header="Items", per_page_count=per_page_count)
    assert console.pending_inputs == 0
    return console


def _with_command(command, **kwargs) -> PageDisplayConfiguration:
    return PageDisplayConfiguration.with_command(command, clear_on_display=False, **kwargs)


# ---------------------------------------------------------------------------
# page_count_for / navigation state
# ---------------------------------------------------------------------------


class TestPageCount:
    @pytest.mark.parametrize(
        "count, per_page, expected",
        [(0, 30, 1), (1, 30, 1), (30, 30, 1), (31, 30, 2), (10, 3, 4), (5, 1, 5)],
    )
    def test_examples(self, count: int, per_page: int, expected: int) -> None:
        assert page_count_for(count, per_page) == expected

    def test_rejects_non_positive_page_size(self) -> None:
        with pytest.raises(ValueError):
            page_count_for(10, 0)


class TestPageNavigationState:
    """Page index bookkeeping, independent of any console."""

    def _state(self, count: int = 10, per_page: int = 3) -> PageNavigationState:
        return PageNavigationState(
            ArrayDataProvider.from_items("", range(count)), per_page
        )

    def test_starts_on_first_page(self) -> None:
        state = self._state()
        assert state.page == 0
        assert state.page_count == 4
        assert state.item_range() == range(0, 3)

    def test_last_page_is_partial(self) -> None:
        state = self._state()
        state.move_to(3)
        assert state.item_range() == range(9, 10)

    def test_empty_provider(self) -> None:
        state = self._state(count=0)
        assert state.page_count == 1
        assert state.item_range() == range(0, 0)

    def test_move_by_clamps(self) -> None:
        state = self._state()
        state.move_by(5)
        assert state.page == 3
        state.move_by(-1)
        assert state.page == 2
        state.move_by(-5)
        assert state.page == 0

    def test_replace_provider_resets_page(self) -> None:
        state = self._state()
        state.move_to(2)
        state.replace_provider(ArrayDataProvider.from_items("", range(20)), reset_page=True)
        assert state.page == 0
        assert state.page_count == 7

    def test_replace_provider_keeps_page(self) -> None:
        state = self._state()
        state.move_to(2)
        state.replace_provider(ArrayDataProvider.from_items("", range(20)), reset_page=False)
        assert state.page == 2

    def test_replace_provider_clamps_kept_page(self) -> None:
        state = self._state()
        state.move_to(3)
        state.replace_provider(ArrayDataProvider.from_items("", range(4)), reset_page=False)
        assert state.page == 1
        assert state.page_count == 2


# ---------------------------------------------------------------------------
# classify_page_input
# ---------------------------------------------------------------------------


class TestClassifyPageInput:
    """The page prompt grammar, with and without a command handler."""

    no_commands = CallbackCommandHandler()
    commands = CallbackCommandHandler(lambda _: Loop())
    empty_commands = CallbackCommandHandler(lambda _: Loop(), can_handle_empty_input=True)

    def test_zero_quits(self) -> None:
        assert classify_page_input("0", 4, self.commands) == QuitPages()

    def test_empty_quits(self) -> None:
        assert classify_page_input("", 4, self.no_commands) == QuitPages()
        assert classify_page_input("", 4, self.commands) == QuitPages()

    def test_empty_goes_to_handler_that_takes_it(self) -> None:
        assert classify_page_input("", 4, self.empty_commands) == RunCommand("")

    def test_empty_needs_accepts_commands_too(self) -> None:
        handler = CallbackCommandHandler(can_handle_empty_input=True)
        assert classify_page_input("", 4, handler) == QuitPages()

    def test_relative_moves(self) -> None:
        assert classify_page_input("+2", 4, self.no_commands) == RelativeMove(2)
        assert classify_page_input("-1", 4, self.no_commands) == RelativeMove(-1)
        assert classify_page_input("+50", 4, self.no_commands) == RelativeMove(50)

    def test_bad_relative_move(self) -> None:
        assert classify_page_input("+x", 4, self.commands) == InvalidInput(
            "Invalid page index +x. Must be between 1 and 4"
        )
        assert classify_page_input("-", 4, self.no_commands) == InvalidInput(
            "Invalid page index -. Must be between 1 and 4"
        )

    def test_absolute_move_is_zero_based(self) -> None:
        assert classify_page_input("=1", 4, self.no_commands) == AbsoluteMove(0)
        assert classify_page_input("=4", 4, self.no_commands) == AbsoluteMove(3)

    def test_equals_zero_quits(self) -> None:
        assert classify_page_input("=0", 4, self.no_commands) == QuitPages()

    @pytest.mark.parametrize("text", ["=5", "=-1"])
    def test_absolute_out_of_range(self, text: str) -> None:
        expected = InvalidInput(f"Invalid page index {text}. Must be between 1 and 4")
        assert classify_page_input(text, 4, self.no_commands) == expected
        assert classify_page_input(text, 4, self.commands) == expected

    def test_text_without_commands(self) -> None:
        assert classify_page_input("abc", 4, self.no_commands) == InvalidInput(
            "Invalid page number 'abc'. Must be a number between 1 and 4"
        )
        assert classify_page_input("=abc", 4, self.no_commands) == InvalidInput(
            "Invalid page number '=abc'. Must be a number between 1 and 4"
        )

    def test_bare_number_is_not_a_page(self) -> None:
        assert isinstance(classify_page_input("2", 4, self.no_commands), InvalidInput)
        assert classify_page_input("2", 4, self.commands) == RunCommand("2")

    def test_text_with_commands(self) -> None:
        assert classify_page_input("abc", 4, self.commands) == RunCommand("abc")
        assert classify_page_input("=abc", 4, self.commands) == RunCommand("abc")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRendering:
    """Page layout: header, rule, numbered rows, footer."""

    def test_basic_page(self) -> None:
        console = _display(["0"], values=ITEMS[:4], per_page_count=30)
        assert console.buffer == (
            "Items\n"
            "----\n"
            "1: Item 1\n"
            "2: Item 2\n"
            "3: Item 3\n"
            "4: Item 4\n"
            "---- 1 to 4\n"
            "= Page 1 of 1\n"
            "[INPUT] '0'\n"
        )

    def test_columns_are_aligned(self) -> None:
        console = MockConsole(["0"])
        pages = console.make_pages(PageDisplayConfiguration(clear_on_display=False))
        pages.display_rows(
            [
                ("Item 1", "Column 2-1"),
                ("Item 2", "Column 2-2"),
                ("Item 3 with long name", "Column 2-3"),
            ],
            header="A list of things",
        )
        (
            console.assert_output()
            .check_next("A list of things\n----\n")
            .check_next("1: Item 1" + " " * 16 + "Column 2-1\n")
            .check_next("2: Item 2" + " " * 16 + "Column 2-2\n")
            .check_next("3: Item 3 with long name Column 2-3\n")
            .check_next("---- 1 to 3\n= Page 1 of 1\n")
        )

    def test_index_column_widens_for_two_digits(self) -> None:
        console = _display(["0"], per_page_count=10)
        (
            console.assert_output()
            .check_next("1:  Item 1\n")
            .check_next("9:  Item 9\n")
            .check_next("10: Item 10\n")
        )

    def test_empty_list(self) -> None:
        console = MockConsole(["0"])
        console.make_pages().display_values([], header="A list of things")
        assert console.buffer == (
            "A list of things\n----\n---- 0 to 0\n= Page 1 of 1\n[INPUT] '0'\n"
        )

    def test_no_header_line_when_header_empty(self) -> None:
        console = MockConsole(["0"])
        console.make_pages().display_values(["only"])
        assert console.buffer.startswith("----\n1: only\n")

    def test_values_are_shown_through_str(self) -> None:
        console = MockConsole(["0"])
        provider = CallableDataProvider(2, "Numbers", lambda row: [row * 10, None])
        console.make_pages().display_pages(provider)
        console.assert_output().check_next("1: 0  None\n2: 10 None\n")

    def test_only_current_page_rows_are_requested(self) -> None:
        requested: list[int] = []

        def generator(row: int) -> list[str]:
            requested.append(row)
            return [f"row {row}"]

        console = MockConsole(["=3", "0"])
        console.make_pages().display_pages(
            CallableDataProvider(1000, "Big", generator), per_page_count=5
        )
        assert requested == [0, 1, 2, 3, 4, 10, 11, 12, 13, 14]

    def test_prompt(self) -> None:
        console = _display(["0"])
        assert console.prompts == ["Input page (0 or empty to close):\n>"]

    def test_prompt_with_command_prompt(self) -> None:
        configuration = _with_command(lambda _: Quit(), command_prompt="Type a name")
        console = _display(["0"], configuration=configuration)
        assert console.prompts == [
            "Input page (0 or empty to close):\nType a name\n>"
        ]


class TestClearOnDisplay:
    def test_clears_before_each_page(self) -> None:
        console = _display(["+1", "0"])
        page_clear = [ERASE_SCREEN, MOVE_HOME, ERASE_SCREEN_AND_SCROLLBACK]
        assert console.commands == page_clear * 2

    def test_disabled(self) -> None:
        console = _display(
            ["+1", "0"], configuration=PageDisplayConfiguration(clear_on_display=False)
        )
        assert console.commands == []


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


class TestNavigation:
    """Moving between pages from the prompt."""

    def test_absolute_page(self) -> None:
        console = _display(["=2", "=4", "0"])
        (
            console.assert_output()
            .check_next("---- 1 to 3\n= Page 1 of 4\n")
            .check_input_entered("=2")
            .check_next("4: Item 4\n5: Item 5\n6: Item 6\n---- 4 to 6\n= Page 2 of 4\n")
            .check_input_entered("=4")
            .check_next("10: Item 10\n---- 10 to 10\n= Page 4 of 4\n")
        )

    def test_relative_moves_clamp(self) -> None:
        console = _display(["+5", "-1", "-5", "0"])
        (
            console.assert_output()
            .check_input_entered("+5")
            .check_next("= Page 4 of 4")
            .check_input_entered("-1")
            .check_next("= Page 3 of 4")
            .check_input_entered("-5")
            .check_next("= Page 1 of 4")
        )

    def test_quit_with_empty_line(self) -> None:
        console = _display([""])
        assert console.buffer.endswith("= Page 1 of 4\n[INPUT] ''\n")

    def test_quit_with_equals_zero(self) -> None:
        console = _display(["=0"])
        assert console.buffer.count("= Page") == 1

    def test_end_of_input_quits(self) -> None:
        console = _display([None])
        assert console.buffer.endswith("[INPUT] '<eof>'\n")

    def test_invalid_input_reprompts_without_redraw(self) -> None:
        console = _display(["=9", "abc", "+x", "0"])
        (
            console.assert_output()
            .check_input_entered("=9")
            .check_next("Invalid page index =9. Must be between 1 and 4\n")
            .check_input_entered("abc")
            .check_next("Invalid page number 'abc'. Must be a number between 1 and 4\n")
            .check_input_entered("+x")
            .check_next("Invalid page index +x. Must be between 1 and 4\n")
            .check_input_entered("0")
        )
        assert console.buffer.count("= Page 1 of 4") == 1
        assert len(console.prompts) == 4


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class TestCommands:
    """Results returned by command handlers."""

    def test_loop_message_shown_once_below_page(self) -> None:
        configuration = _with_command(lambda s: Loop(f"got {s}"))
        console = _display(["hello", "+1", "0"], configuration=configuration)
        (
            console.assert_output()
            .check_input_entered("hello")
            .check_next("= Page 1 of 4\ngot hello\n[INPUT] '+1'")
        )
        assert console.buffer.count("got hello") == 1

    def test_loop_without_message(self) -> None:
        configuration = _with_command(lambda _: Loop())
        console = _display(["x", "0"], configuration=configuration)
        assert console.buffer.count("= Page 1 of 4") == 2

    def test_leading_equals_is_removed(self) -> None:
        received: list[str] = []

        def command(text: str):
            received.append(text)
            return Loop()

        _display(["=abc", "abc", "0"], configuration=_with_command(command))
        assert received == ["abc", "abc"]

    def test_out_of_range_page_is_not_a_command(self) -> None:
        received: list[str] = []

        def command(text: str):
            received.append(text)
            return Loop()

        console = _display(["=7", "0"], configuration=_with_command(command))
        assert received == []
        console.assert_output().check_next("Invalid page index =7. Must be between 1 and 4")

    def test_quit_with_message(self) -> None:
        configuration = _with_command(lambda _: Quit("bye"))
        console = _display(["done"], configuration=configuration)
        assert console.buffer.endswith("[INPUT] 'done'\nbye\n")

    def test_empty_input_to_handler(self) -> None:
        received: list[str] = []

        def command(text: str):
            received.append(text)
            return Quit()

        configuration = _with_command(command, can_handle_empty_input=True)
        _display([""], configuration=configuration)
        assert received == [""]

    def test_show_message_then_loop_waits_for_enter(self) -> None:
        configuration = _with_command(lambda _: ShowMessageThenLoop("Some help"))
        console = _display(["help", "", "0"], configuration=configuration)
        (
            console.assert_output()
            .check_input_entered("help")
            .check_next("Some help\n[INPUT] ''\n")
            .check_next("= Page 1 of 4")
            .check_input_entered("0")
        )
        assert console.prompts[1] == CONTINUE_PROMPT

    def test_modify_list_resets_page(self) -> None:
        def command(_: str):
            return ModifyList(lambda pages: ArrayDataProvider.from_items("Filtered", "wxyz"))

        console = _display(["=3", "filter", "0"], configuration=_with_command(command))
        (
            console.assert_output()
            .check_input_entered("filter")
            .check_next("Filtered\n----\n1: w\n2: x\n3: y\n---- 1 to 3\n= Page 1 of 2\n")
        )

    def test_modify_list_keeps_page(self) -> None:
        def command(_: str):
            return ModifyList(
                lambda pages: ArrayDataProvider.from_items("Longer", range(1, 21)),
                reset_page=False,
            )

        console = _display(["=3", "grow", "0"], configuration=_with_command(command))
        (
            console.assert_output()
            .check_input_entered("grow")
            .check_next("Longer\n----\n7: 7\n8: 8\n9: 9\n---- 7 to 9\n= Page 3 of 7\n")
        )

    def test_modify_list_keeps_page_clamped(self) -> None:
        def command(_: str):
            return ModifyList(
                lambda pages: ArrayDataProvider.from_items("Filtered", "wxyz"),
                reset_page=False,
            )

        console = _display(["=4", "filter", "0"], configuration=_with_command(command))
        (
            console.assert_output()
            .check_input_entered("filter")
            .check_next("Filtered\n----\n4: z\n---- 4 to 4\n= Page 2 of 2\n")
        )

    def test_modify_list_factory_receives_pager(self) -> None:
        seen = []

        def factory(pages):
            seen.append(pages)
            return ArrayDataProvider.from_items("Same", ITEMS)

        console = MockConsole(["m", "0"])
        pages = console.make_pages(_with_command(lambda _: ModifyList(factory)))
        pages.display_values(ITEMS, per_page_count=3)
        assert seen == [pages]

    def test_handler_error_is_reported_and_pager_continues(self, caplog) -> None:
        def command(text: str):
            raise PagesCommandError(f"cannot {text}")

        configuration = _with_command(command)
        with caplog.at_level(logging.WARNING, logger="consolekit.pages"):
            console = _display(["+1", "explode", "", "0"], configuration=configuration)

        (
            console.assert_output()
            .check_input_entered("explode")
            .check_next("cannot explode\n[INPUT] ''\n")
            .check_next("= Page 2 of 4")
            .check_input_entered("0")
        )
        assert console.prompts[2] == CONTINUE_PROMPT
        assert "Page command 'explode' failed" in caplog.text

    def test_unexpected_exception_is_handled_the_same_way(self) -> None:
        def command(_: str):
            raise ValueError("bad value")

        console = _display(["x", "", "0"], configuration=_with_command(command))
        console.assert_output().check_next("bad value\n[INPUT] ''\n")

    def test_error_inside_factory_is_reported(self) -> None:
        def factory(_):
            raise PagesCommandError("no data")

        console = _display(
            ["x", "", "0"], configuration=_with_command(lambda _: ModifyList(factory))
        )
        console.assert_output().check_next("no data\n").check_next("= Page 1 of 4")

    def test_handler_without_callable_quits(self) -> None:
        assert CallbackCommandHandler().execute_command("x") == Quit()
