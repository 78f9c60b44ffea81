"""Typed value coercion.

Every value entering the row store goes through ``coerce`` so that stored
cells always match their column's datatype. Coercion never fails: numbers
that cannot be parsed become NaN and flow through sort and render.
"""

from __future__ import annotations

import math
import re

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from .models import Column


NAN = float("nan")

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INFINITY_RE = re.compile(r"^\s*([+-]?)Infinity")


def is_nan(value: Any) -> bool:
    """True if value is a float NaN."""
    return isinstance(value, float) and math.isnan(value)


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


def to_boolean(value: Any) -> bool:
    """True unless the value is empty, numerically zero or the literal ``"false"``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not is_nan(value)
    text = _to_text(value).strip()
    if text in ("", "false"):
        return False
    try:
        return float(text) != 0
    except ValueError:
        return True


def to_integer(value: Any) -> int | float:
    """Parse the leading integer of a value, NaN when there is none."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if not math.isfinite(value) else int(value)
    match = _LEADING_INT_RE.match(_to_text(value))
    return int(match.group(1)) if match else NAN


def to_double(value: Any) -> float:
    """Parse the leading decimal number of a value, NaN when there is none."""
    if isinstance(value, (int, float)):
        return float(value)
    text = _to_text(value)
    match = _LEADING_FLOAT_RE.match(text)
    if match:
        return float(match.group(1))
    match = _INFINITY_RE.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    return NAN


def coerce(column: Column, raw: Any) -> Any:
    """Convert a raw cell value into the column's semantic type.

    Parameters
    ----------
    column : Column
        The column whose datatype decides the conversion.
    raw : Any
        The raw value, usually a string from a loader or an editor.

    Returns
    -------
    Any
        ``bool`` for boolean columns, ``int`` (or NaN) for integer columns,
        ``float`` for double columns and ``str`` for everything else.
    """
    datatype = column.datatype
    if datatype == "boolean":
        return to_boolean(raw)
    if datatype == "integer":
        return to_integer(raw)
    if datatype == "double":
        return to_double(raw)
    return _to_text(raw)


def stringify(value: Any) -> str:
    """Canonical text of a typed value, as used by filtering and lexical sort."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)
