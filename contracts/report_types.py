"""Report frame data model.

A *frame definition* describes one report section: its identity, the ordered
columns rows are projected into, and opaque sort/filter/paging metadata that
is carried along for downstream consumers.

A *frame* is one materialized segment of that section. Frames are produced
repeatedly from the same definition (one per page, or one per link group) and
always share the definition-derived metadata. Rows are tuples of display
strings positionally aligned to ``columns``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

DEFAULT_MULTIVALUE_DELIMITER = "\n"

ReportFrameRow = tuple[str, ...]


@dataclass(frozen=True)
class ReportFrameColumn:
    """One column of a frame definition."""

    name: str
    label: str = ""
    kind: str = ""  # display hint only, never interpreted here
    multivalue: bool = False
    multivalue_delimiter: str = ""

    def effective_delimiter(self) -> str:
        return self.multivalue_delimiter or DEFAULT_MULTIVALUE_DELIMITER

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "kind": self.kind,
            "multivalue": self.multivalue,
            "multivalue_delimiter": self.multivalue_delimiter,
        }


@dataclass
class Paging:
    """Opaque paging descriptor (limit + cursor) carried on every frame."""

    limit: int = 0
    page_cursor: str | None = None

    def copy(self) -> Paging:
        return Paging(limit=self.limit, page_cursor=self.page_cursor)

    def to_dict(self) -> dict[str, Any]:
        return {"limit": self.limit, "page_cursor": self.page_cursor}


def _as_columns(columns: Iterable[ReportFrameColumn | str]) -> tuple[ReportFrameColumn, ...]:
    out: list[ReportFrameColumn] = []
    for col in columns:
        # Bare names are accepted for single-valued columns
        out.append(col if isinstance(col, ReportFrameColumn) else ReportFrameColumn(name=str(col)))
    return tuple(out)


@dataclass(frozen=True)
class ReportFrameDefinition:
    """
    Schema shared by all frames produced from one report section.

    The definition is never mutated by the builder. ``columns`` is normalized
    to a tuple so callers cannot change it through the list they passed in.
    """

    name: str = ""
    source: str = ""
    ref: str = ""
    columns: tuple[ReportFrameColumn, ...] = ()
    sort: Any = None
    filter: Any = None
    paging: Paging | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", _as_columns(self.columns))
        if self.paging is not None and self.paging.limit < 0:
            raise ValueError(f"paging.limit must be >= 0, got {self.paging.limit}")

    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]


@dataclass
class ReportFrame:
    """
    One materialized frame segment.

    Mutable only while it is a builder's current frame. Once handed off by
    ``ReportFrameBuilder.done()`` it belongs to the caller and the builder
    never touches it again.
    """

    name: str = ""
    source: str = ""
    ref: str = ""
    columns: tuple[ReportFrameColumn, ...] = ()
    sort: Any = None
    filter: Any = None
    paging: Paging | None = None

    rows: list[ReportFrameRow] = field(default_factory=list)

    # Link metadata: the correlation column and the value seen on the last row
    rel_column: str = ""
    ref_value: str = ""

    @classmethod
    def from_definition(cls, definition: ReportFrameDefinition) -> ReportFrame:
        """Start an empty frame from definition metadata."""
        return cls(
            name=definition.name,
            source=definition.source,
            ref=definition.ref,
            columns=definition.columns,
            sort=definition.sort,
            filter=definition.filter,
            paging=definition.paging.copy() if definition.paging is not None else None,
        )

    @classmethod
    def reset_from(cls, frame: ReportFrame) -> ReportFrame:
        """
        Start the next frame from a sealed one.

        Keeps every metadata field (link state included), drops the rows and
        gives ``paging`` its own storage.
        """
        return cls(
            name=frame.name,
            source=frame.source,
            ref=frame.ref,
            columns=frame.columns,
            sort=frame.sort,
            filter=frame.filter,
            paging=frame.paging.copy() if frame.paging is not None else None,
            rel_column=frame.rel_column,
            ref_value=frame.ref_value,
        )

    def size(self) -> int:
        return len(self.rows)

    def column_index(self, name: str) -> int | None:
        # Last occurrence wins, same as the builder's attribute index
        found: int | None = None
        for i, col in enumerate(self.columns):
            if col.name == name:
                found = i
        return found

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "source": self.source,
            "ref": self.ref,
            "columns": [c.to_dict() for c in self.columns],
            "sort": self.sort,
            "filter": self.filter,
            "paging": self.paging.to_dict() if self.paging is not None else None,
            "rows": [list(r) for r in self.rows],
            "rel_column": self.rel_column,
            "ref_value": self.ref_value,
        }
