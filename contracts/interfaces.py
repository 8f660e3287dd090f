"""
Protocol definitions for the upstream row source boundary.

The frame builder never depends on a concrete data-access layer. Anything that
can report per-attribute value counts and return values by position can feed
it, which keeps the builder easy to drive from tests and from any iterator
implementation.

Usage:
    from contracts.interfaces import SourceRowProtocol

    def feed(builder, rows: Iterable[SourceRowProtocol]) -> None:
        for row in rows:
            builder.add_row(row)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SourceRowProtocol(Protocol):
    """One logical record produced by an upstream iterator."""

    def count_values(self) -> Mapping[str, int]:
        """Return attribute name -> number of values on this row."""
        ...

    def get_value(self, name: str, pos: int) -> tuple[Any, bool]:
        """Return ``(value, found)`` for the value at ``pos`` of attribute ``name``."""
        ...


@runtime_checkable
class RowIteratorProtocol(Protocol):
    """Producer of source rows. Paging and cursors are the iterator's concern."""

    def __iter__(self) -> Iterator[SourceRowProtocol]:
        ...
