"""Cell validators.

A column holds an ordered list of validators; a raw edit value is accepted
only if every validator accepts it. Empty input is accepted by the typed
validators and coerced to the column's empty value.
"""

from __future__ import annotations

import re

from collections.abc import Callable
from typing import Any

from ..dates import parse_date
from ..models import DataType
from .base import Capability


_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$")
_DOUBLE_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")
_EMAIL_RE = re.compile(r"^[\w.+-]+@[\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,}$")
_WEBSITE_RE = re.compile(r"^(?:[a-zA-Z][\w+.-]*://)?[\w-]+(?:\.[\w-]+)+(?::\d+)?(?:[/?#]\S*)?$")


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


class CellValidator(Capability):
    """Base validator accepting everything."""

    def is_valid(self, value: Any) -> bool:
        """True if ``value`` is acceptable for the column."""
        return True


class NumberCellValidator(CellValidator):
    """Accepts integer or decimal literals depending on the column type."""

    def __init__(self, datatype: DataType | str = DataType.DOUBLE) -> None:
        self.datatype = DataType(datatype)

    def is_valid(self, value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        if isinstance(value, float):
            return self.datatype is DataType.DOUBLE or value.is_integer()
        text = _text(value)
        if not text:
            return True
        pattern = _INTEGER_RE if self.datatype is DataType.INTEGER else _DOUBLE_RE
        return pattern.match(text) is not None


class EmailCellValidator(CellValidator):
    """Accepts well-formed email addresses."""

    def is_valid(self, value: Any) -> bool:
        text = _text(value)
        return not text or _EMAIL_RE.match(text) is not None


class WebsiteCellValidator(CellValidator):
    """Accepts host names and URLs, with or without a scheme."""

    def is_valid(self, value: Any) -> bool:
        text = _text(value)
        return not text or _WEBSITE_RE.match(text) is not None


class DateCellValidator(CellValidator):
    """Accepts dates decodable with the grid's date format and month names."""

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, str) and value is not None:
            return parse_date(value) is not None
        text = _text(value)
        if not text:
            return True
        date_format = self._grid_option("date_format", "EU")
        month_names = self._grid_option("short_month_names", None)
        return parse_date(text, date_format, month_names) is not None


class FunctionValidator(CellValidator):
    """Wraps a plain predicate as a validator.

    Example:
        grid.add_cell_validator("age", FunctionValidator(lambda v: int(v) >= 0))
    """

    def __init__(self, predicate: Callable[[Any], bool], name: str | None = None) -> None:
        self.predicate = predicate
        self.name = name or getattr(predicate, "__name__", "predicate")

    def is_valid(self, value: Any) -> bool:
        try:
            return bool(self.predicate(value))
        except (TypeError, ValueError):
            return False

    def __repr__(self) -> str:
        return f"FunctionValidator({self.name!r})"
