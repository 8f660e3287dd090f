"""Report frame materialization.

Main exports:
- Row: in-memory multi-valued attribute row
- ReportFrameBuilder: projects rows into frames, one frame segment at a time
- materialize_frames / iter_frames / materialize_linked: driver loops
- frame_to_arrow: frame -> pyarrow.Table
"""

from pipeline.reporter.arrow_frames import frame_to_arrow
from pipeline.reporter.frame_builder import ReportFrameBuilder
from pipeline.reporter.materialize import iter_frames, materialize_frames, materialize_linked
from pipeline.reporter.row import Row

__all__ = [
    "ReportFrameBuilder",
    "Row",
    "frame_to_arrow",
    "iter_frames",
    "materialize_frames",
    "materialize_linked",
]
