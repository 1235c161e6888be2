"""ConsoleString: text with embedded color and style directives.

A console string is an ordered tuple of segments:

* ``Literal`` -- plain text.
* ``Formatted`` -- text drawn with its own formatting; the formatting that was
  active before it is restored right after.
* ``FormatSet`` -- a zero-width directive replacing the active formatting for
  everything that follows.
* ``Nested`` -- another console string, drawn under the active formatting.

Values are built once (from a plain string, from segments or with
:meth:`ConsoleString.interpolate`) and never mutated; ``+`` returns a new value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from consolekit.ansi import measure_string, strip_terminal_formatting
from consolekit.formatting import ConsoleColor, ConsoleFormat, SegmentFormatting
from consolekit.output import OutputCapability


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Literal:
    """An unformatted run of text."""

    text: str


@dataclass(frozen=True)
class Formatted:
    """Text with explicit formatting, overriding preceding ``FormatSet``s."""

    text: str
    formatting: SegmentFormatting


@dataclass(frozen=True)
class FormatSet:
    """Changes the formatting for the remainder of the string."""

    formatting: SegmentFormatting


@dataclass(frozen=True)
class Nested:
    """A console string embedded in another one."""

    value: ConsoleString


Segment = Union[Literal, Formatted, FormatSet, Nested]


# ---------------------------------------------------------------------------
# Interpolation parts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Styled:
    value: object
    formatting: SegmentFormatting


@dataclass(frozen=True)
class _FormatDirective:
    formatting: SegmentFormatting


def styled(
    value: object,
    color: ConsoleColor | None = None,
    background: ConsoleColor | None = None,
    format: ConsoleFormat | None = None,
) -> _Styled:
    """Interpolation part drawing *value* with the given colors and style."""
    return _Styled(value, SegmentFormatting(background, color, format))


def format_set(
    color: ConsoleColor | None = None,
    background: ConsoleColor | None = None,
    format: ConsoleFormat | None = None,
) -> _FormatDirective:
    """Interpolation part switching the formatting from this point on."""
    return _FormatDirective(SegmentFormatting(background, color, format))


def nested(value: ConsoleString) -> Nested:
    """Interpolation part embedding *value* as a nested console string."""
    return Nested(value)


# ---------------------------------------------------------------------------
# ConsoleString
# ---------------------------------------------------------------------------


class ConsoleString:
    """A string made of formatted segments, renderable with or without ANSI."""

    __slots__ = ("_segments",)

    def __init__(self, text: str = "") -> None:
        self._segments: tuple[Segment, ...] = (Literal(text),)

    # -- construction -------------------------------------------------------

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> ConsoleString:
        result = cls.__new__(cls)
        result._segments = tuple(segments)
        return result

    @classmethod
    def stripping(cls, text: str) -> ConsoleString:
        """Build a console string from *text* with its ANSI sequences removed."""
        return cls(strip_terminal_formatting(text))

    @classmethod
    def interpolate(cls, *parts: object) -> ConsoleString:
        """Accumulate *parts* left to right into a console string.

        ``styled(...)`` parts become ``Formatted`` segments, ``format_set(...)``
        parts become ``FormatSet`` segments, console strings (bare or wrapped
        with ``nested``) become ``Nested`` segments, and anything else is
        appended as a ``Literal`` of its ``str()``.
        """
        segments: list[Segment] = []
        for part in parts:
            if isinstance(part, _Styled):
                segments.append(Formatted(str(part.value), part.formatting))
            elif isinstance(part, _FormatDirective):
                segments.append(FormatSet(part.formatting))
            elif isinstance(part, Nested):
                segments.append(part)
            elif isinstance(part, ConsoleString):
                segments.append(Nested(part))
            else:
                segments.append(Literal(str(part)))
        return cls.from_segments(segments)

    # -- properties ---------------------------------------------------------

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    # -- rendering ----------------------------------------------------------

    def terminal_formatted(
        self,
        background: ConsoleColor | None = None,
        foreground: ConsoleColor | None = None,
        format: ConsoleFormat | None = None,
    ) -> str:
        """Render with ANSI escape sequences.

        The arguments describe the formatting the text starts under; it is
        what ``Formatted`` segments restore after themselves until a
        ``FormatSet`` replaces it.
        """
        return _render(self, SegmentFormatting(background, foreground, format))

    def unformatted(self) -> str:
        """Return the text payload with no formatting sequences added.

        Escape sequences that are part of literal text are returned as-is.
        """
        parts: list[str] = []
        for segment in self._segments:
            match segment:
                case Literal(text) | Formatted(text, _):
                    parts.append(text)
                case Nested(value):
                    parts.append(value.unformatted())
                case FormatSet():
                    pass
        return "".join(parts)

    def render(self, capabilities: OutputCapability) -> str:
        """Render for a sink with the given capability flags."""
        if OutputCapability.ANSI_CONTROL_SEQUENCES in capabilities:
            return self.terminal_formatted()
        return self.unformatted()

    def measure(self) -> int:
        """Visible width of this string, in characters."""
        return measure_string(self.unformatted())

    # -- operators ----------------------------------------------------------

    def __add__(self, other: object) -> ConsoleString:
        if isinstance(other, ConsoleString):
            return ConsoleString.from_segments(self._segments + other._segments)
        if isinstance(other, str):
            return ConsoleString.from_segments(self._segments + (Literal(other),))
        return NotImplemented

    def __radd__(self, other: object) -> ConsoleString:
        if isinstance(other, str):
            return ConsoleString.from_segments((Literal(other),) + self._segments)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConsoleString):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __str__(self) -> str:
        return self.unformatted()

    def __repr__(self) -> str:
        return f"ConsoleString({list(self._segments)!r})"


def _render(value: ConsoleString, ambient: SegmentFormatting) -> str:
    """Left fold over the segments, threading the ambient formatting."""
    result: list[str] = []
    for segment in value.segments:
        match segment:
            case Literal(text):
                result.append(text)
            case Formatted(text, formatting):
                result.append(formatting.ansi)
                result.append(text)
                result.append(ambient.ansi)
            case FormatSet(formatting):
                ambient = formatting
                result.append(ambient.ansi)
            case Nested(inner):
                result.append(_render(inner, ambient))
                # The nested string may have left a different format active
                result.append(ambient.ansi)
    return "".join(result)
