"""Pipeline components.

This package contains the report frame builder, the in-memory row type it is
usually fed with, paged/linked materialization drivers, and the Arrow hand-off
used by downstream aggregation.
"""
