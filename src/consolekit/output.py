"""Output streams the console writes to.

An output stream is a write target that also states its capabilities; the
console only emits ANSI control sequences into streams that advertise them.
"""

from __future__ import annotations

import io
import sys
from enum import Flag, auto
from typing import Protocol, TextIO

from consolekit.environment import is_terminal


class OutputCapability(Flag):
    """Capabilities of an output stream."""

    NONE = 0
    # Supports ANSI sequences for formatting text and moving the cursor/screen
    ANSI_CONTROL_SEQUENCES = auto()


class ConsoleOutputStream(Protocol):
    """Interface for console output targets."""

    @property
    def capability_flags(self) -> OutputCapability: ...

    def write(self, text: str) -> None: ...


class StandardOutputStream:
    """Output stream backed by a text stream, ``sys.stdout`` by default.

    When *capability_flags* is not given, ANSI support is assumed only if the
    underlying stream is a terminal.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        capability_flags: OutputCapability | None = None,
    ) -> None:
        self._stream = stream
        if capability_flags is None:
            capability_flags = detect_output_capabilities(self.stream)
        self._capability_flags = capability_flags

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected sys.stdout (pytest capture) is honoured
        return self._stream if self._stream is not None else sys.stdout

    @property
    def capability_flags(self) -> OutputCapability:
        return self._capability_flags

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


class StringOutputStream:
    """In-memory output stream. Has no capabilities unless told otherwise."""

    def __init__(
        self, capability_flags: OutputCapability = OutputCapability.NONE
    ) -> None:
        self._buffer = io.StringIO()
        self._capability_flags = capability_flags

    @property
    def capability_flags(self) -> OutputCapability:
        return self._capability_flags

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def clear(self) -> None:
        self._buffer = io.StringIO()


def detect_output_capabilities(stream: TextIO | None) -> OutputCapability:
    """Capabilities of *stream*: ANSI support when it is attached to a terminal."""
    if is_terminal(stream):
        return OutputCapability.ANSI_CONTROL_SEQUENCES
    return OutputCapability.NONE
