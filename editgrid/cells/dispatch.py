"""Default capability selection per column datatype.

Each table maps a DataType to the capability used when a column does not
bring its own. A column with an enum provider always gets the enum variants,
whatever its datatype.
"""

from __future__ import annotations

from collections.abc import Callable

from ..models import Column, DataType
from .editors import CellEditor, NumberCellEditor, SelectCellEditor, TextCellEditor
from .renderers import (
    CellRenderer,
    CheckboxCellRenderer,
    DateCellRenderer,
    EmailCellRenderer,
    EnumCellRenderer,
    NumberCellRenderer,
    SortHeaderRenderer,
    WebsiteCellRenderer,
)
from .validators import (
    CellValidator,
    DateCellValidator,
    EmailCellValidator,
    NumberCellValidator,
    WebsiteCellValidator,
)


CELL_RENDERERS: dict[DataType, Callable[[], CellRenderer]] = {
    DataType.INTEGER: NumberCellRenderer,
    DataType.DOUBLE: NumberCellRenderer,
    DataType.BOOLEAN: CheckboxCellRenderer,
    DataType.EMAIL: EmailCellRenderer,
    DataType.WEBSITE: WebsiteCellRenderer,
    DataType.URL: WebsiteCellRenderer,
    DataType.DATE: DateCellRenderer,
}

# None marks a datatype edited in place (checkbox toggle) rather than through an editor
CELL_EDITORS: dict[DataType, Callable[[], CellEditor] | None] = {
    DataType.INTEGER: lambda: NumberCellEditor(DataType.INTEGER),
    DataType.DOUBLE: lambda: NumberCellEditor(DataType.DOUBLE),
    DataType.BOOLEAN: None,
    DataType.DATE: lambda: TextCellEditor(max_length=10),
}

CELL_VALIDATORS: dict[DataType, Callable[[], CellValidator]] = {
    DataType.INTEGER: lambda: NumberCellValidator(DataType.INTEGER),
    DataType.DOUBLE: lambda: NumberCellValidator(DataType.DOUBLE),
    DataType.EMAIL: EmailCellValidator,
    DataType.WEBSITE: WebsiteCellValidator,
    DataType.URL: WebsiteCellValidator,
    DataType.DATE: DateCellValidator,
}


def create_cell_renderer(column: Column) -> CellRenderer:
    """Default cell renderer for a column."""
    if column.enum_provider is not None:
        return EnumCellRenderer()
    factory = CELL_RENDERERS.get(column.data_type) if column.data_type else None
    return factory() if factory else CellRenderer()


def create_cell_editor(column: Column) -> CellEditor | None:
    """Default cell editor for a column, None for boolean columns."""
    if column.enum_provider is not None:
        return SelectCellEditor()
    datatype = column.data_type
    if datatype in CELL_EDITORS:
        factory = CELL_EDITORS[datatype]
        return factory() if factory else None
    return TextCellEditor(field_size=column.precision)


def create_header_renderer(column: Column, enable_sort: bool) -> CellRenderer:
    """Header renderer; sortable grids decorate all but html columns."""
    if enable_sort and column.data_type is not DataType.HTML:
        return SortHeaderRenderer()
    return CellRenderer()


def create_header_editor(column: Column) -> CellEditor:
    """Header labels are always edited as text."""
    return TextCellEditor()


def default_validators(column: Column) -> list[CellValidator]:
    """Validators every column of this datatype starts with."""
    factory = CELL_VALIDATORS.get(column.data_type) if column.data_type else None
    return [factory()] if factory else []
