"""editgrid - data and view engine for editable grids.

This package provides the model behind an editable, sortable, filterable and
paginated grid: a column type mini-language, typed value coercion, a dual
filtered/unfiltered row view, and per-datatype cell renderers, editors and
validators.
"""

from .callbacks import CallbackFunc, CallbackRegistry, GridEvent
from .cells import (
    CallableEnumProvider,
    CellEditor,
    CellRenderer,
    CellValidator,
    EditResult,
    EditSession,
    EnumProvider,
    FunctionValidator,
    RenderSurface,
)
from .coercion import coerce, stringify
from .config import (
    EditGridSettings,
    GridSettings,
    LogSettings,
    clear_settings,
    get_settings,
    reload_settings,
)
from .exceptions import (
    ColumnError,
    EditGridException,
    PaginationError,
    RowIndexError,
    UsageError,
    ValidationError,
)
from .grid import EditableGrid, RenderedPage, create_grid
from .loader import infer_column_definitions, normalize_rows, read_csv
from .models import (
    HEADER,
    Column,
    ColumnDefinition,
    DataRow,
    DataType,
    Header,
    Row,
    RowDefinition,
    RowRef,
    row_ref,
)
from .pagination import PageInterval
from .typeparse import TypeDescriptor, parse_column_type, parse_type_descriptor


__version__ = "1.0.0"

__all__ = [
    "HEADER",
    "CallableEnumProvider",
    "CallbackFunc",
    "CallbackRegistry",
    "CellEditor",
    "CellRenderer",
    "CellValidator",
    "Column",
    "ColumnDefinition",
    "ColumnError",
    "DataRow",
    "DataType",
    "EditGridException",
    "EditGridSettings",
    "EditResult",
    "EditSession",
    "EditableGrid",
    "EnumProvider",
    "FunctionValidator",
    "GridEvent",
    "GridSettings",
    "Header",
    "LogSettings",
    "PageInterval",
    "PaginationError",
    "RenderSurface",
    "RenderedPage",
    "Row",
    "RowDefinition",
    "RowIndexError",
    "RowRef",
    "TypeDescriptor",
    "UsageError",
    "ValidationError",
    "__version__",
    "clear_settings",
    "coerce",
    "create_grid",
    "get_settings",
    "infer_column_definitions",
    "normalize_rows",
    "parse_column_type",
    "parse_type_descriptor",
    "read_csv",
    "reload_settings",
    "row_ref",
    "stringify",
]
