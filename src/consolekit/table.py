"""Column-aligned table layout for plain rows of strings."""

from __future__ import annotations

from typing import Callable, Sequence

from consolekit.ansi import measure_string


def column_widths(
    rows: Sequence[Sequence[str]],
    measure: Callable[[str], int] = measure_string,
) -> list[int]:
    """Return the widest visible cell of each column across *rows*.

    Rows may be ragged; a column is as wide as the widest row that has it.
    """
    widths: list[int] = []
    for row in rows:
        for i, cell in enumerate(row):
            if i >= len(widths):
                widths.append(0)
            widths[i] = max(widths[i], measure(cell))
    return widths


def format_table(
    rows: Sequence[Sequence[str]],
    separator: str = " ",
    measure: Callable[[str], int] = measure_string,
) -> list[str]:
    """Lay out *rows* so columns line up, returning one string per row.

    Every cell except the last of its row is followed by *separator* and then
    padded with spaces to the width of its column. The last cell is written
    as-is.
    """
    widths = column_widths(rows, measure)
    lines: list[str] = []
    for row in rows:
        parts: list[str] = []
        last = len(row) - 1
        for i, cell in enumerate(row):
            if i < last:
                padding = " " * (widths[i] - measure(cell))
                parts.append(f"{cell}{separator}{padding}")
            else:
                parts.append(cell)
        lines.append("".join(parts))
    return lines
