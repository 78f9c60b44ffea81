"""Cell and header renderers.

A renderer turns a typed value into its display text and writes it into the
target surface when one is given. Row references follow the grid convention:
``Header`` for the column header, ``DataRow(i)`` for row ``i`` of the active
view.
"""

from __future__ import annotations

import math

from typing import Any

from ..coercion import is_nan, stringify
from ..dates import format_date, parse_date
from ..models import Header, RowRef, row_ref
from .base import Capability, RenderSurface


class CellRenderer(Capability):
    """Default renderer: the value's canonical text."""

    def render(
        self,
        row: int | RowRef,
        column_index: int,
        surface: RenderSurface | None,
        value: Any,
    ) -> str:
        """Render a value, writing it into ``surface`` if given.

        Returns
        -------
        str
            The display text.
        """
        text = self.render_value(row_ref(row), value)
        if surface is not None:
            surface.set_content(text)
        return text

    def render_value(self, row: RowRef, value: Any) -> str:
        """Display text for ``value``; subclasses override this."""
        return stringify(value)


def format_number(
    value: Any,
    *,
    unit: str | None = None,
    precision: int | None = None,
    decimal_point: str = ",",
    thousands_separator: str = ".",
    unit_before_number: bool = False,
    nan_symbol: str | None = None,
) -> str:
    """Format a number with the column's number formatting options.

    NaN renders as the nan symbol (empty when unset), without unit.
    """
    if value is None or is_nan(value) or isinstance(value, bool):
        return nan_symbol or ""
    if isinstance(value, float) and math.isinf(value):
        text = "-Infinity" if value < 0 else "Infinity"
    else:
        number = float(value) if precision is not None else value
        if precision is not None:
            raw = f"{abs(number):.{max(precision, 0)}f}"
        else:
            raw = stringify(abs(value))
        integer_part, _, fraction = raw.partition(".")
        if thousands_separator and len(integer_part) > 3:
            groups = []
            while len(integer_part) > 3:
                groups.insert(0, integer_part[-3:])
                integer_part = integer_part[:-3]
            groups.insert(0, integer_part)
            integer_part = thousands_separator.join(groups)
        text = integer_part + (decimal_point + fraction if fraction else "")
        if value < 0:
            text = "-" + text

    if unit:
        return f"{unit} {text}" if unit_before_number else f"{text} {unit}"
    return text


class NumberCellRenderer(CellRenderer):
    """Renders integer and double values with unit, precision and separators."""

    def render_value(self, row: RowRef, value: Any) -> str:
        column = self.column
        if column is None:
            return stringify(value)
        return format_number(
            value,
            unit=column.unit,
            precision=column.precision,
            decimal_point=column.decimal_point,
            thousands_separator=column.thousands_separator,
            unit_before_number=column.unit_before_number,
            nan_symbol=column.nan_symbol,
        )


class CheckboxCellRenderer(CellRenderer):
    """Renders booleans as a checkbox."""

    checked = "[x]"
    unchecked = "[ ]"

    def render_value(self, row: RowRef, value: Any) -> str:
        return self.checked if value else self.unchecked


class EmailCellRenderer(CellRenderer):
    """Renders an email address; ``link_for`` gives the mailto target."""

    def link_for(self, value: Any) -> str | None:
        """Link target for the rendered value, None for an empty cell."""
        text = stringify(value)
        return f"mailto:{text}" if text else None


class WebsiteCellRenderer(CellRenderer):
    """Renders a website address; ``link_for`` adds a scheme when missing."""

    def link_for(self, value: Any) -> str | None:
        """Link target for the rendered value, None for an empty cell."""
        text = stringify(value)
        if not text:
            return None
        return text if "://" in text else f"http://{text}"


class DateCellRenderer(CellRenderer):
    """Renders dates in the grid's date format; undecodable text is shown as is."""

    def render_value(self, row: RowRef, value: Any) -> str:
        date_format = self._grid_option("date_format", "EU")
        month_names = self._grid_option("short_month_names", None)
        decoded = parse_date(value, date_format, month_names)
        if decoded is None:
            return stringify(value)
        return format_date(decoded, date_format, month_names)


class EnumCellRenderer(CellRenderer):
    """Renders the label of an option value, looking inside option groups."""

    def render_value(self, row: RowRef, value: Any) -> str:
        key = stringify(value)
        if self.column is None:
            return key
        options = self.column.option_values_for_render(row.index) or {}
        if key in options and not isinstance(options[key], dict):
            return stringify(options[key])
        for group in options.values():
            if isinstance(group, dict) and key in group:
                return stringify(group[key])
        return key


class SortHeaderRenderer(CellRenderer):
    """Header renderer showing the sort direction of the sorted column.

    Wraps another renderer for the label itself.
    """

    ascending_marker = " ↑"
    descending_marker = " ↓"

    def __init__(self, cell_renderer: CellRenderer | None = None) -> None:
        self.cell_renderer = cell_renderer or CellRenderer()

    def bind(self, grid: Any, column: Any) -> SortHeaderRenderer:
        super().bind(grid, column)
        self.cell_renderer.bind(grid, column)
        return self

    def render_value(self, row: RowRef, value: Any) -> str:
        text = self.cell_renderer.render_value(row, value)
        if not isinstance(row, Header) or self.grid is None or self.column is None:
            return text
        if self.grid.sorted_column_name != self.column.name:
            return text
        return text + (self.descending_marker if self.grid.sort_descending else self.ascending_marker)
