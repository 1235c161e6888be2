"""Line input engine: prompting for, validating and parsing single lines.

:class:`LineInput` is a mixin; the host class supplies ``read_line`` (one
physical line, ``None`` at end of stream) and ``print_line``. Everything else
is built on those two primitives, so test doubles only need to replace
``read_line`` to script a whole interaction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Generic, Protocol, TypeVar, Union

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")

INVALID_INPUT_MESSAGE = "Invalid input"
INVALID_NUMBER_MESSAGE = "Please insert a valid digits-only number"


def parse_int(text: str) -> int | None:
    """Parse an optionally signed run of ASCII digits, else ``None``.

    Stricter than ``int()``: no surrounding whitespace, no underscores.
    """
    if _INT_RE.fullmatch(text) is None:
        return None
    return int(text)


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParseSuccess(Generic[T]):
    value: T


@dataclass(frozen=True)
class ParseError:
    """Input rejected; *message* is printed before prompting again."""

    message: str | None = None


@dataclass(frozen=True)
class ParseAbort:
    """Stop prompting and return no value."""


ParseResult = Union[ParseSuccess[T], ParseError, ParseAbort]


# ---------------------------------------------------------------------------
# Mixin
# ---------------------------------------------------------------------------


class LineHost(Protocol):
    """What a class mixing in :class:`LineInput` must provide."""

    def read_line(self, prompt: str) -> str | None:
        """Print *prompt* and read one line; ``None`` at end of stream."""
        ...

    def print_line(self, line: str = "", terminator: str = "\n") -> None: ...

    def read_sure_line(self, prompt: str) -> str: ...


class LineInput:
    """Prompting helpers layered over the host's ``read_line`` and ``print_line``."""

    def read_sure_line(self: LineHost, prompt: str) -> str:
        """Read a line, re-prompting for as long as the stream has ended.

        There is no retry limit.
        """
        while True:
            line = self.read_line(prompt)
            if line is None:
                self.print_line(INVALID_INPUT_MESSAGE)
                continue
            return line

    def read_validated_line(
        self: LineHost,
        prompt: str,
        allow_empty: bool = True,
        validate: Callable[[str], bool] = lambda _: True,
    ) -> str | None:
        """Read a line that passes *validate*.

        An empty line returns ``""`` when *allow_empty* is set and ``None``
        otherwise. Rejected lines are re-prompted silently: *validate* is
        expected to print its own diagnostic.
        """
        while True:
            line = self.read_sure_line(prompt)
            if not line:
                return "" if allow_empty else None
            if not validate(line):
                continue
            return line

    def read_parsed_line(
        self: LineHost,
        prompt: str,
        allow_empty: bool,
        parse: Callable[[str], ParseResult[T]],
    ) -> T | None:
        """Read lines until *parse* succeeds or aborts.

        With *allow_empty*, an empty line returns ``None`` without calling
        *parse*.
        """
        while True:
            line = self.read_sure_line(prompt)
            if allow_empty and not line:
                return None

            result = parse(line)
            if isinstance(result, ParseSuccess):
                return result.value
            if isinstance(result, ParseAbort):
                return None
            if result.message is not None:
                self.print_line(result.message)

    def read_int(
        self: LineHost,
        prompt: str,
        validate: Callable[[int], bool] = lambda _: True,
    ) -> int | None:
        """Read an integer. Empty input returns ``None``."""
        while True:
            line = self.read_sure_line(prompt)
            if not line:
                return None

            value = parse_int(line)
            if value is None:
                self.print_line(INVALID_NUMBER_MESSAGE)
                continue
            if not validate(value):
                continue
            return value
