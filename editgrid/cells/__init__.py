"""Per-column cell capabilities: renderers, editors, validators and enum providers."""

from .base import Capability, RenderSurface
from .dispatch import (
    create_cell_editor,
    create_cell_renderer,
    create_header_editor,
    create_header_renderer,
    default_validators,
)
from .editors import (
    CellEditor,
    EditResult,
    EditSession,
    NumberCellEditor,
    SelectCellEditor,
    TextCellEditor,
)
from .enums import CallableEnumProvider, EnumProvider
from .renderers import (
    CellRenderer,
    CheckboxCellRenderer,
    DateCellRenderer,
    EmailCellRenderer,
    EnumCellRenderer,
    NumberCellRenderer,
    SortHeaderRenderer,
    WebsiteCellRenderer,
    format_number,
)
from .validators import (
    CellValidator,
    DateCellValidator,
    EmailCellValidator,
    FunctionValidator,
    NumberCellValidator,
    WebsiteCellValidator,
)


__all__ = [
    "CallableEnumProvider",
    "Capability",
    "CellEditor",
    "CellRenderer",
    "CellValidator",
    "CheckboxCellRenderer",
    "DateCellRenderer",
    "DateCellValidator",
    "EditResult",
    "EditSession",
    "EmailCellRenderer",
    "EmailCellValidator",
    "EnumCellRenderer",
    "EnumProvider",
    "FunctionValidator",
    "NumberCellEditor",
    "NumberCellRenderer",
    "NumberCellValidator",
    "RenderSurface",
    "SelectCellEditor",
    "SortHeaderRenderer",
    "TextCellEditor",
    "WebsiteCellRenderer",
    "WebsiteCellValidator",
    "create_cell_editor",
    "create_cell_renderer",
    "create_header_editor",
    "create_header_renderer",
    "default_validators",
    "format_number",
]
