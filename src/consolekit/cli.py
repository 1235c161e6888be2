"""CLI entry point for consolekit. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Sequence

import click

from consolekit.config import LOG_LEVELS, ConsoleSettings
from consolekit.console import Console
from consolekit.console_string import ConsoleString, format_set, styled
from consolekit.data_provider import ArrayDataProvider
from consolekit.formatting import ConsoleColor, ConsoleFormat
from consolekit.pages import (
    Loop,
    ModifyList,
    PageDisplayConfiguration,
    PagesCommandError,
    PagesCommandResult,
    Quit,
    ShowMessageThenLoop,
)

logger = logging.getLogger(__name__)

PAGER_HELP = """\
Navigation:
  +N / -N   move N pages forward / back
  =N        go to page N
  0, Enter  close
Commands:
  /TEXT     show only rows containing TEXT
  *         show all rows again
  ?         this help
  q         close"""


class RowFilterCommands:
    """Pager commands for filtering the rows of a file."""

    accepts_commands = True
    can_handle_empty_input = False
    command_prompt = "/TEXT to filter, * to clear, ? for help"

    def __init__(self, header: str, rows: Sequence[Sequence[str]]) -> None:
        self._header = header
        self._rows = list(rows)

    def execute_command(self, input: str) -> PagesCommandResult:
        if input == "q":
            return Quit()
        if input == "?":
            return ShowMessageThenLoop(PAGER_HELP)
        if input == "*":
            return ModifyList(lambda _: ArrayDataProvider(self._header, self._rows))
        if input.startswith("/"):
            return self._filter(input[1:])
        return Loop(f"Unknown command '{input}'. Type ? for help")

    def _filter(self, needle: str) -> PagesCommandResult:
        if not needle:
            raise PagesCommandError("Nothing to filter by: type /TEXT")

        lowered = needle.lower()
        matches = [
            row for row in self._rows
            if any(lowered in cell.lower() for cell in row)
        ]
        if not matches:
            return Loop(f"No rows contain '{needle}'")

        logger.debug("Filter %r matched %d of %d rows", needle, len(matches), len(self._rows))
        header = f"{self._header} (filter: {needle})"
        return ModifyList(lambda _: ArrayDataProvider(header, matches))


def _non_empty_delimiter(ctx, param, value):
    if value == "":
        raise click.BadParameter("delimiter must not be empty")
    return value


def _read_rows(path: Path, delimiter: str | None) -> list[list[str]]:
    text = path.read_text(encoding="utf-8", errors="replace")
    lines = text.splitlines()
    if delimiter is None:
        return [[line] for line in lines]
    return [[cell.strip() for cell in line.split(delimiter)] for line in lines]


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS),
    default=None,
    help="Logging level (default: CONSOLEKIT_LOG_LEVEL or warning)",
)
@click.pass_context
def main(ctx, log_level):
    """Console formatting and paged list tools."""
    settings = ConsoleSettings.from_env()
    level = log_level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--per-page", type=click.IntRange(min=1), default=None, help="Rows per page")
@click.option(
    "--delimiter",
    "-d",
    default=None,
    callback=_non_empty_delimiter,
    help="Split lines into columns on this string",
)
@click.option("--header/--no-header", default=False, help="Use the first line as the header")
@click.option("--clear/--no-clear", default=None, help="Clear the screen before each page")
@click.pass_obj
def page(settings, path, per_page, delimiter, header, clear):
    """Browse the lines of a text file page by page."""
    rows = _read_rows(path, delimiter)
    title = path.name
    if header and rows:
        title = " ".join(rows[0])
        rows = rows[1:]

    clear_on_display = settings.clear_on_display if clear is None else clear
    configuration = PageDisplayConfiguration(
        command_handler=RowFilterCommands(title, rows),
        clear_on_display=clear_on_display,
    )

    console = Console.from_environment(settings)
    pages = console.make_pages(configuration)
    pages.display_rows(rows, header=title, per_page_count=per_page or settings.per_page_count)


@main.command()
@click.pass_obj
def colors(settings):
    """Show the available colors and styles."""
    console = Console.from_environment(settings)

    for color in ConsoleColor:
        name = color.name.lower()
        console.print_formatted(
            ConsoleString.interpolate(
                styled(f"{name:<8}", color=color),
                " ",
                styled(f" {name:<8} ", background=color),
            )
        )

    line = ConsoleString()
    for style in ConsoleFormat:
        if style is ConsoleFormat.RESET:
            continue
        line += ConsoleString.interpolate(styled(style.name.lower(), format=style), " ")
    console.print_formatted(line)

    console.print_formatted(
        ConsoleString.interpolate(
            "default ",
            format_set(color=ConsoleColor.GREEN, format=ConsoleFormat.BOLD),
            "bold green until reset",
            format_set(),
            " back to default",
        )
    )


if __name__ == "__main__":
    main()
