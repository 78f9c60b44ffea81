"""Column type descriptor parsing.

A datatype string may carry formatting parameters between parentheses::

    double                      -> bare keyword
    double(2)                   -> precision
    double(kg)                  -> unit
    double(kg,2)                -> unit, precision
    double(kg,2,N/A)            -> unit, precision, nan symbol
    double(kg,2,dot,comma,1)    -> ... decimal point, thousands separator, unit first
    double(kg,2,.,',1,N/A)      -> ... nan symbol

Parsing produces a TypeDescriptor without touching the column; the
descriptor is then applied in one step so a column never ends up with
fields from two different parameter layouts.
"""

from __future__ import annotations

import re

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict


if TYPE_CHECKING:
    from .models import Column


_DESCRIPTOR_RE = re.compile(r"^(?P<keyword>.*?)\((?P<params>.*)\)$", re.DOTALL)
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_DIGITS_RE = re.compile(r"^[0-9]*$")

# Positional layouts by parameter count, most specific first
_LAYOUTS: dict[int, tuple[str, ...]] = {
    6: ("unit", "precision", "decimal_point", "thousands_separator", "unit_before_number", "nan_symbol"),
    5: ("unit", "precision", "decimal_point", "thousands_separator", "unit_before_number"),
    3: ("unit", "precision", "nan_symbol"),
    2: ("unit", "precision"),
}

_SEPARATOR_TOKENS = {"comma": ",", "dot": "."}


class TypeDescriptor(BaseModel):
    """Parsed form of a datatype string.

    Fields left as None were not given and keep the column's defaults.
    ``precision_given`` tells apart "no precision parameter" from a
    precision parameter that was not numeric (which clears the precision).
    """

    model_config = ConfigDict(frozen=True)

    datatype: str
    unit: str | None = None
    precision: int | None = None
    precision_given: bool = False
    decimal_point: str | None = None
    thousands_separator: str | None = None
    unit_before_number: bool | None = None
    nan_symbol: str | None = None

    def updates(self) -> dict[str, Any]:
        """Column field updates carried by this descriptor."""
        result: dict[str, Any] = {"datatype": self.datatype}
        if self.precision_given:
            result["precision"] = self.precision
        for name in ("unit", "decimal_point", "thousands_separator", "unit_before_number", "nan_symbol"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        return result


def _parse_int(text: str) -> int | None:
    """Parse a leading integer, None when there is none."""
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else None


def parse_type_descriptor(text: str) -> TypeDescriptor:
    """Parse a datatype string such as ``double(kg,2)``.

    Parameters
    ----------
    text : str
        The declarative datatype string.

    Returns
    -------
    TypeDescriptor
        The bare keyword and whichever formatting parameters matched.
    """
    match = _DESCRIPTOR_RE.match(text.strip())
    if not match:
        return TypeDescriptor(datatype=text.strip())

    keyword = match.group("keyword").strip()
    params = [p.strip() for p in match.group("params").split(",")]

    if len(params) == 1:
        unit_or_precision = params[0]
        if _DIGITS_RE.match(unit_or_precision):
            precision = _parse_int(unit_or_precision)
            return TypeDescriptor(datatype=keyword, precision=precision, precision_given=True)
        return TypeDescriptor(datatype=keyword, unit=unit_or_precision or None)

    # Surplus leading parameters belong to the unit, which may contain commas
    if len(params) == 4:
        params = [",".join(params[:2]), *params[2:]]
    elif len(params) > 6:
        params = [",".join(params[: len(params) - 5]), *params[len(params) - 5 :]]

    layout = _LAYOUTS[len(params)]

    values: dict[str, Any] = dict(zip(layout, params, strict=True))
    if "precision" in values:
        values["precision"] = _parse_int(values["precision"])
        values["precision_given"] = True
    if "unit_before_number" in values:
        values["unit_before_number"] = values["unit_before_number"] == "1"
    for name in ("decimal_point", "thousands_separator"):
        if name in values:
            values[name] = _SEPARATOR_TOKENS.get(values[name], values[name])
    for name in ("unit", "nan_symbol"):
        if name in values and values[name] == "":
            values[name] = None

    return TypeDescriptor(datatype=keyword, **values)


def parse_column_type(column: Column) -> Column:
    """Reduce ``column.datatype`` to its bare keyword and apply its parameters.

    Separator tokens already stored on the column (``comma``/``dot``) are
    normalized as well.
    """
    descriptor = parse_type_descriptor(column.datatype)
    for name, value in descriptor.updates().items():
        setattr(column, name, value)
    column.decimal_point = _SEPARATOR_TOKENS.get(column.decimal_point, column.decimal_point)
    column.thousands_separator = _SEPARATOR_TOKENS.get(
        column.thousands_separator, column.thousands_separator
    )
    if column.unit == "":
        column.unit = None
    if column.nan_symbol == "":
        column.nan_symbol = None
    return column
