"""Process environment probes: TTY detection and the NO_COLOR convention.

These are only consulted when building output streams and consoles; rendering
code receives the result as capability flags.
"""

from __future__ import annotations

import os
import sys
from typing import Mapping, TextIO


def is_no_color_specified(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` if ``NO_COLOR`` is set to a non-empty value.

    See https://no-color.org/. Only formatting (color/style) sequences are
    suppressed by this convention; cursor and erase commands are still issued.
    """
    env = os.environ if environ is None else environ
    return bool(env.get("NO_COLOR"))


def is_terminal(stream: TextIO | None) -> bool:
    """Whether *stream* is attached to a terminal. Closed streams are not."""
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError, OSError):
        return False


def is_terminal_standard_input() -> bool:
    return is_terminal(sys.stdin)


def is_terminal_standard_output() -> bool:
    return is_terminal(sys.stdout)


def is_terminal_standard_error() -> bool:
    return is_terminal(sys.stderr)
