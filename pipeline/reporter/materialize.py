"""Driver loops around ReportFrameBuilder.

Two ways of cutting a row stream into frames:

- by page: ``done()`` every ``page_size`` rows (progressive materialization)
- by link value: ``done()`` whenever the link column value changes, producing
  one frame segment per parent record for master/detail composition

Both consume any iterable of ``SourceRowProtocol`` rows. Paging cursors stay
the iterator's business; frames only carry the definition's ``Paging`` copy.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from contracts.interfaces import SourceRowProtocol
from contracts.normalization import stringify_value
from contracts.report_types import ReportFrame, ReportFrameDefinition
from infra.config import get_settings
from infra.logging_config import StructuredLogger
from pipeline.reporter.frame_builder import ReportFrameBuilder

LOG = StructuredLogger(__name__)


def _resolve_page_size(page_size: int | None) -> int:
    if page_size is None:
        return get_settings().reporter.page_size
    if page_size < 0:
        raise ValueError(f"page_size must be >= 0, got {page_size}")
    return page_size


def iter_frames(
    definition: ReportFrameDefinition,
    rows: Iterable[SourceRowProtocol],
    *,
    page_size: int | None = None,
    link_column: str | None = None,
) -> Iterator[ReportFrame]:
    """
    Yield frames of at most ``page_size`` rows (0 means a single frame).

    An empty input still yields one empty frame so consumers always see the
    frame metadata.
    """
    size = _resolve_page_size(page_size)
    log_frames = get_settings().reporter.log_frames

    builder = ReportFrameBuilder(definition)
    if link_column:
        builder.linked(link_column)

    emitted = 0
    for row in rows:
        builder.add_row(row)
        if size and builder.frame.size() >= size:
            frame = builder.done()
            emitted += 1
            if log_frames:
                LOG.info("frame_page", frame=frame.name, page=emitted, rows=frame.size())
            yield frame

    if builder.frame.size() or emitted == 0:
        frame = builder.done()
        emitted += 1
        if log_frames:
            LOG.info("frame_page", frame=frame.name, page=emitted, rows=frame.size())
        yield frame


def materialize_frames(
    definition: ReportFrameDefinition,
    rows: Iterable[SourceRowProtocol],
    *,
    page_size: int | None = None,
    link_column: str | None = None,
) -> list[ReportFrame]:
    """List form of :func:`iter_frames`."""
    return list(iter_frames(definition, rows, page_size=page_size, link_column=link_column))


def materialize_linked(
    definition: ReportFrameDefinition,
    rows: Iterable[SourceRowProtocol],
    link_column: str,
) -> dict[str, list[ReportFrame]]:
    """
    Split rows into one frame segment per run of equal ``link_column`` values.

    Returns ``ref_value -> frames``. A key that shows up again after another
    key started gets a second segment under the same entry.
    """
    if not link_column:
        raise ValueError("link_column is required")

    log_frames = get_settings().reporter.log_frames
    builder = ReportFrameBuilder(definition)
    builder.linked(link_column)

    out: dict[str, list[ReportFrame]] = {}

    def _emit() -> None:
        frame = builder.done()
        out.setdefault(frame.ref_value, []).append(frame)
        if log_frames:
            LOG.info("frame_linked", frame=frame.name, ref_value=frame.ref_value, rows=frame.size())

    current: str | None = None
    for row in rows:
        value, _ = row.get_value(link_column, 0)
        key = stringify_value(value)
        if current is not None and key != current:
            _emit()
        builder.add_row(row)
        current = key

    if builder.frame.size():
        _emit()
    return out
