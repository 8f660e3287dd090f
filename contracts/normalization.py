"""Display stringification of row values.

Frames hold display strings, not typed values. The conversion is lossy and
permissive: it never raises and always produces text.

- None -> ""
- bool -> "true" / "false"
- int / float / Decimal -> default decimal form
- datetime / date / time -> ISO-8601
- bytes -> UTF-8 text (invalid sequences replaced)
- list / tuple -> items stringified and joined with ", "
- anything else -> str(value)
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any


def _decimal_str(value: Decimal) -> str:
    # Avoid scientific notation for ordinary amounts (Decimal("1E+2") -> "100")
    if value.is_finite():
        return format(value, "f")
    return str(value)


def stringify_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool is a subclass of int: check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Decimal):
        return _decimal_str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple)):
        return ", ".join(stringify_value(v) for v in value)
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)
