"""In-memory source row.

Each attribute holds an ordered list of values, so a row can carry both plain
and repeated ("multivalue") attributes. Implements ``SourceRowProtocol``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class Row:
    def __init__(self) -> None:
        self._values: dict[str, list[Any]] = {}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Row:
        """
        Build a row from a plain mapping.

        list/tuple values become multi-valued attributes, anything else
        (None included) is a single value.
        """
        row = cls()
        for name, value in data.items():
            if isinstance(value, (list, tuple)):
                row._values[name] = list(value)
            else:
                row.set_value(name, 0, value)
        return row

    def set_value(self, name: str, pos: int, value: Any) -> None:
        if pos < 0:
            raise ValueError(f"value position must be >= 0, got {pos}")
        vals = self._values.setdefault(name, [])
        if pos >= len(vals):
            vals.extend([None] * (pos + 1 - len(vals)))
        vals[pos] = value

    def add_value(self, name: str, value: Any) -> None:
        self._values.setdefault(name, []).append(value)

    def count_values(self) -> dict[str, int]:
        return {name: len(vals) for name, vals in self._values.items()}

    def get_value(self, name: str, pos: int) -> tuple[Any, bool]:
        vals = self._values.get(name)
        if vals is None or pos < 0 or pos >= len(vals):
            return None, False
        return vals[pos], True

    def __repr__(self) -> str:
        return f"Row({self._values!r})"
