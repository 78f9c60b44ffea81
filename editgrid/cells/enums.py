"""Enum providers: dynamic option values for enum columns."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from ..grid import EditableGrid
    from ..models import Column


OptionValues = dict[str, Any]
OptionSource = Callable[["EditableGrid | None", "Column", int], "OptionValues | None"]


class EnumProvider:
    """Supplies the option values of an enum column.

    Returning None from either method falls back to the column's static
    ``option_values``. Option groups are nested dicts of ``value -> label``.
    """

    def option_values_for_render(
        self, grid: EditableGrid | None, column: Column, row_index: int
    ) -> OptionValues | None:
        """Options used to display the cell of ``row_index``."""
        return None

    def option_values_for_edit(
        self, grid: EditableGrid | None, column: Column, row_index: int
    ) -> OptionValues | None:
        """Options offered when editing the cell of ``row_index``."""
        return None


class CallableEnumProvider(EnumProvider):
    """Enum provider built from plain functions.

    ``for_edit`` defaults to ``for_render`` so one function can serve both.
    """

    def __init__(
        self,
        for_render: OptionSource | None = None,
        for_edit: OptionSource | None = None,
    ) -> None:
        self.for_render = for_render
        self.for_edit = for_edit or for_render

    def option_values_for_render(
        self, grid: EditableGrid | None, column: Column, row_index: int
    ) -> OptionValues | None:
        if self.for_render is None:
            return None
        return self.for_render(grid, column, row_index)

    def option_values_for_edit(
        self, grid: EditableGrid | None, column: Column, row_index: int
    ) -> OptionValues | None:
        if self.for_edit is None:
            return None
        return self.for_edit(grid, column, row_index)
