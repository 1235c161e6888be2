"""ANSI escape helpers: building CSI commands, stripping them, measuring text.

Width measurement counts user-perceived characters (grapheme clusters) of the
text left once every recognised control sequence has been removed, so escape
codes are always zero-width no matter which arguments they carry.
"""

from __future__ import annotations

import re

import grapheme


ESC = "\x1b"
CSI = ESC + "["

# CSI sequences the console emits: cursor moves, erases, SGR, save/restore.
# Arguments are optional on both sides of every ';' so ESC[m and ESC[;5H match.
ANSI_COMMAND_RE = re.compile(r"\x1b\[(?:\d*;)*\d*[ABCDHJKfmsu]")

RESET = CSI + "0m"


def ansi(command: str) -> str:
    """Prefix *command* with the control sequence introducer (``ESC[``)."""
    return CSI + command


def sgr(*codes: int) -> str:
    """Return a Select Graphic Rendition sequence for *codes*.

    ``sgr()`` is ``ESC[m``, which terminals treat as a full reset.
    """
    return ansi(";".join(str(code) for code in codes) + "m")


def strip_terminal_formatting(text: str) -> str:
    """Remove every ANSI control sequence matched by ``ANSI_COMMAND_RE``."""
    if ESC not in text:
        return text
    return ANSI_COMMAND_RE.sub("", text)


def measure_string(text: str) -> int:
    """Return the number of visible characters in *text*.

    Escape sequences contribute nothing. Combined characters (a base letter
    plus combining marks, flag pairs, ZWJ emoji sequences) count once.
    """
    if not text:
        return 0

    stripped = strip_terminal_formatting(text)

    # Fast ASCII path: one code point per character
    if stripped.isascii():
        return len(stripped)

    return grapheme.length(stripped)
