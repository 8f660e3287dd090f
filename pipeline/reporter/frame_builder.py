"""Report frame builder.

Maps row attributes to frame columns and encodes their values as display
strings. The builder accumulates one *current* frame; ``done()`` hands it off
and starts the next one with the same metadata, so a caller can page through a
result set (or split it by link value) while keeping frame metadata stable.

Column lookup policy:
  - duplicate column names: the last occurrence wins, earlier positions stay ""
  - attributes that are not columns are ignored
  - columns missing from a row stay ""

Not thread-safe: drive one builder from one consumer loop.
"""

from __future__ import annotations

import logging

from contracts.interfaces import SourceRowProtocol
from contracts.normalization import stringify_value
from contracts.report_types import (
    DEFAULT_MULTIVALUE_DELIMITER,
    ReportFrame,
    ReportFrameDefinition,
    ReportFrameRow,
)
from infra.logging_config import StructuredLogger

LOG = StructuredLogger(__name__)


class ReportFrameBuilder:
    """
    Builds report frames from source rows.

    Usage:
        builder = ReportFrameBuilder(definition)
        builder.linked("account_id")   # optional
        for row in rows:
            builder.add_row(row)
        frame = builder.done()
    """

    def __init__(self, definition: ReportFrameDefinition) -> None:
        if definition is None:
            raise TypeError("ReportFrameBuilder requires a frame definition")

        self._def = definition

        # Index columns for attribute lookups
        self._attr_index: dict[str, int] = {}
        self._mv_delimiters: dict[str, str] = {}
        for i, col in enumerate(definition.columns):
            self._attr_index[col.name] = i
            if col.multivalue:
                self._mv_delimiters[col.name] = col.effective_delimiter()
            else:
                self._mv_delimiters.pop(col.name, None)

        self._width = len(definition.columns)
        self._frame = ReportFrame.from_definition(definition)

    @property
    def definition(self) -> ReportFrameDefinition:
        return self._def

    @property
    def frame(self) -> ReportFrame:
        """The current, not yet sealed, frame."""
        return self._frame

    def linked(self, column: str) -> None:
        """Mark ``column`` as the correlation key of the current frame segment."""
        self._frame.rel_column = column

    def add_row(self, row: SourceRowProtocol) -> None:
        cells = [""] * self._width

        for name, count in row.count_values().items():
            ix = self._attr_index.get(name)
            if ix is None:
                continue
            cells[ix] = self._encode(row, name, count)

        out: ReportFrameRow = tuple(cells)
        self._frame.rows.append(out)

        rel = self._frame.rel_column
        if rel:
            # Link columns are scalar: only the first value counts
            value, _ = row.get_value(rel, 0)
            self._frame.ref_value = stringify_value(value)

    def done(self) -> ReportFrame:
        """Return the current frame and start a fresh one with the same metadata."""
        out = self._frame
        self._frame = ReportFrame.reset_from(out)

        if LOG.is_enabled_for(logging.DEBUG):
            LOG.debug(
                "frame_done",
                frame=out.name,
                source=out.source,
                rows=len(out.rows),
                rel_column=out.rel_column,
                ref_value=out.ref_value,
            )
        return out

    def _encode(self, row: SourceRowProtocol, name: str, count: int) -> str:
        if count <= 0:
            return ""

        delimiter = self._mv_delimiters.get(name)
        if count == 1 and delimiter is None:
            value, _ = row.get_value(name, 0)
            return stringify_value(value)

        values = []
        for i in range(count):
            value, _ = row.get_value(name, i)
            values.append(stringify_value(value))
        return (delimiter or DEFAULT_MULTIVALUE_DELIMITER).join(values)
