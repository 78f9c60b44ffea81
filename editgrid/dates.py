"""Date decoding and formatting for date columns.

Dates are kept as text in the row store; they are only decoded to compare,
validate and render them.
"""

from __future__ import annotations

import re

from collections.abc import Sequence
from datetime import date, datetime
from typing import Any, Literal


DateFormat = Literal["EU", "US"]

_NUMERIC_RE = re.compile(r"^\s*(\d{1,4})[/\-.](\d{1,2})[/\-.](\d{1,4})\s*$")
_NAMED_MONTH_RE = re.compile(r"^\s*(\d{1,2})[\s\-/]+([^\W\d_]+)\.?[\s\-/,]+(\d{2,4})\s*$")


def _expand_year(year: int, digits: int) -> int:
    if digits > 2:
        return year
    # Two-digit years: 00-49 -> 2000s, 50-99 -> 1900s
    return 2000 + year if year < 50 else 1900 + year


def _make_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(
    value: Any,
    date_format: DateFormat = "EU",
    short_month_names: Sequence[str] | None = None,
) -> date | None:
    """Decode a date cell value.

    Accepts ``date``/``datetime`` objects, ISO ``yyyy-mm-dd``, ``dd/mm/yyyy``
    (EU) or ``mm/dd/yyyy`` (US) with ``/``, ``-`` or ``.`` separators, and
    ``d Mon yyyy`` with the given short month names.

    Returns
    -------
    date or None
        The decoded date, None when the value cannot be decoded.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        return None

    text = str(value)

    match = _NUMERIC_RE.match(text)
    if match:
        first, second, third = match.groups()
        if len(first) == 4:
            return _make_date(int(first), int(second), int(third))
        if date_format == "US":
            month, day = int(first), int(second)
        else:
            day, month = int(first), int(second)
        return _make_date(_expand_year(int(third), len(third)), month, day)

    match = _NAMED_MONTH_RE.match(text)
    if match:
        day_text, month_text, year_text = match.groups()
        names = [name.lower() for name in (short_month_names or [])]
        month_key = month_text.lower()[:3]
        for index, name in enumerate(names):
            if name[:3] == month_key:
                return _make_date(
                    _expand_year(int(year_text), len(year_text)), index + 1, int(day_text)
                )
    return None


def format_date(
    value: date,
    date_format: DateFormat = "EU",
    short_month_names: Sequence[str] | None = None,
) -> str:
    """Format a decoded date the way it is displayed in the grid.

    With month names the result is ``d Mon yyyy``, otherwise the numeric
    form of the given date format.
    """
    if short_month_names:
        return f"{value.day} {short_month_names[value.month - 1]} {value.year}"
    if date_format == "US":
        return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"
