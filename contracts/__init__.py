"""Contracts for report frame materialization.

The contracts package defines:
- the report frame data model (definitions, columns, paging, frames, rows)
- Protocol definitions for the upstream row source boundary
- display stringification used when projecting row values into frames

Main exports:
- ReportFrameColumn, ReportFrameDefinition, ReportFrame, ReportFrameRow, Paging
- SourceRowProtocol, RowIteratorProtocol
- stringify_value, DEFAULT_MULTIVALUE_DELIMITER
"""

from contracts import interfaces
from contracts import normalization
from contracts import report_types

# Explicit re-exports to satisfy ruff F401
__all__ = [
    "DEFAULT_MULTIVALUE_DELIMITER",
    "Paging",
    "ReportFrame",
    "ReportFrameColumn",
    "ReportFrameDefinition",
    "ReportFrameRow",
    "RowIteratorProtocol",
    "SourceRowProtocol",
    "stringify_value",
]

# Re-export for convenience
DEFAULT_MULTIVALUE_DELIMITER = report_types.DEFAULT_MULTIVALUE_DELIMITER
Paging = report_types.Paging
ReportFrame = report_types.ReportFrame
ReportFrameColumn = report_types.ReportFrameColumn
ReportFrameDefinition = report_types.ReportFrameDefinition
ReportFrameRow = report_types.ReportFrameRow

RowIteratorProtocol = interfaces.RowIteratorProtocol
SourceRowProtocol = interfaces.SourceRowProtocol

stringify_value = normalization.stringify_value
