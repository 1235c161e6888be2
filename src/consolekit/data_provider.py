"""Data providers feeding rows to paged list displays.

Providers are lazy: the pager asks only for the rows of the page it is
drawing, so converting values to text happens on demand even for very large
data sets.
"""

from __future__ import annotations

from typing import Callable, Iterable, Protocol, Sequence


class ConsoleDataProvider(Protocol):
    """Source of rows for a paged display."""

    @property
    def count(self) -> int:
        """Number of rows available."""
        ...

    @property
    def header(self) -> str:
        """Text shown above each page; empty for none."""
        ...

    def display_titles(self, row: int) -> Sequence[object]:
        """Column values of *row*, displayed through ``str()``."""
        ...


class CallableDataProvider:
    """Provider over a known row count and a row generator."""

    def __init__(
        self,
        count: int,
        header: str,
        generator: Callable[[int], Sequence[object]],
    ) -> None:
        self._count = count
        self._header = header
        self._generator = generator

    @property
    def count(self) -> int:
        return self._count

    @property
    def header(self) -> str:
        return self._header

    def display_titles(self, row: int) -> Sequence[object]:
        return self._generator(row)


class ArrayDataProvider:
    """Provider over rows held in memory."""

    def __init__(self, header: str, rows: Iterable[Sequence[object]]) -> None:
        self._header = header
        self._rows = [list(row) for row in rows]

    @classmethod
    def from_items(cls, header: str, items: Iterable[object]) -> ArrayDataProvider:
        """Single-column provider, one row per item."""
        return cls(header, ([item] for item in items))

    @property
    def count(self) -> int:
        return len(self._rows)

    @property
    def header(self) -> str:
        return self._header

    def display_titles(self, row: int) -> Sequence[object]:
        return self._rows[row]
