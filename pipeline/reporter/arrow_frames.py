"""Arrow hand-off for materialized frames.

Downstream aggregation works on columnar data; this turns a sealed frame into
a ``pyarrow.Table`` with one string column per frame column. Frame identity and
link metadata travel as schema metadata.
"""

from __future__ import annotations

import pyarrow as pa

from contracts.report_types import ReportFrame
from version import ENGINE_NAME, ENGINE_VERSION


def frame_schema(frame: ReportFrame) -> pa.Schema:
    """
    Build the Arrow schema for a frame.

    Duplicate column names are kept positionally.
    """
    fields = [pa.field(col.name, pa.string(), nullable=False) for col in frame.columns]
    metadata = {
        "frame_name": frame.name,
        "frame_source": frame.source,
        "frame_ref": frame.ref,
        "rel_column": frame.rel_column,
        "ref_value": frame.ref_value,
        "engine_name": ENGINE_NAME,
        "engine_version": ENGINE_VERSION,
    }
    return pa.schema(fields, metadata=metadata)


def frame_to_arrow(frame: ReportFrame) -> pa.Table:
    schema = frame_schema(frame)
    width = len(frame.columns)

    # Rows are positional tuples; transpose into column vectors
    columns: list[list[str]] = [[] for _ in range(width)]
    for row in frame.rows:
        for i in range(width):
            columns[i].append(row[i] if i < len(row) else "")

    arrays = [pa.array(values, type=pa.string()) for values in columns]
    return pa.Table.from_arrays(arrays, schema=schema)
