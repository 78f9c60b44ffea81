"""Data model for editgrid: column descriptors, rows and row references.

Column uses snake_case in Python and serializes to camelCase via aliases,
matching the attribute names hosts already use for grid column metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


if TYPE_CHECKING:
    from .cells.validators import CellValidator
    from .grid import EditableGrid


class DataType(str, Enum):
    """Closed set of datatypes the capability dispatch tables are keyed by."""

    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    DATE = "date"
    EMAIL = "email"
    WEBSITE = "website"
    URL = "url"
    HTML = "html"

    @classmethod
    def from_value(cls, value: str | None) -> DataType | None:
        """Return the member for ``value``, or None for an unknown keyword."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


NUMERIC_TYPES = frozenset({DataType.INTEGER, DataType.DOUBLE})


# --- Row references ---


@dataclass(frozen=True)
class Header:
    """Reference to the column header row."""

    @property
    def index(self) -> int:
        """External row index of the header."""
        return -1


@dataclass(frozen=True)
class DataRow:
    """Reference to a data row of the active view."""

    index: int


RowRef = Header | DataRow

HEADER = Header()


def row_ref(row: int | RowRef) -> RowRef:
    """Convert the external row index convention (-1 is the header) to a RowRef."""
    if isinstance(row, (Header, DataRow)):
        return row
    return HEADER if row < 0 else DataRow(row)


# --- Column ---


class Column(BaseModel):
    """A column of the grid.

    Immutable after construction except for ``label`` and the capability
    slots, which the grid fills in when the column is attached.

    Example:
        Column(name="price", datatype="double(€,2)")
        # Serializes to: {"name": "price", "label": "price", "datatype": "double", ...}
    """

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    name: str
    label: str | None = None
    datatype: str = "string"
    editable: bool = True
    renderable: bool = True

    # Number formatting
    unit: str | None = None
    precision: int | None = None  # None displays all decimals
    decimal_point: str = Field(default=",", alias="decimalPoint")
    thousands_separator: str = Field(default=".", alias="thousandsSeparator")
    unit_before_number: bool = Field(default=False, alias="unitBeforeNumber")
    nan_symbol: str | None = Field(default=None, alias="nanSymbol")

    bar: bool = True
    column_index: int = Field(default=-1, alias="columnIndex")
    option_values: dict[str, Any] | None = Field(default=None, alias="optionValues")

    # Capability slots
    cell_renderer: Any = Field(default=None, alias="cellRenderer", exclude=True)
    cell_editor: Any = Field(default=None, alias="cellEditor", exclude=True)
    header_renderer: Any = Field(default=None, alias="headerRenderer", exclude=True)
    header_editor: Any = Field(default=None, alias="headerEditor", exclude=True)
    enum_provider: Any = Field(default=None, alias="enumProvider", exclude=True)
    cell_validators: list[Any] = Field(
        default_factory=list, alias="cellValidators", exclude=True
    )

    _grid: EditableGrid | None = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        """Label defaults to the column name."""
        if self.label is None:
            self.label = self.name

    @property
    def grid(self) -> EditableGrid | None:
        """The grid this column is attached to."""
        return self._grid

    def attach(self, grid: EditableGrid, column_index: int) -> None:
        """Attach the column to a grid at the given position."""
        self._grid = grid
        self.column_index = column_index

    @property
    def data_type(self) -> DataType | None:
        """The dispatch key for this column, None for unknown keywords."""
        return DataType.from_value(self.datatype)

    def is_numerical(self) -> bool:
        """True for integer and double columns."""
        return self.data_type in NUMERIC_TYPES

    def is_bar(self) -> bool:
        """True if the column is eligible for a numeric chart."""
        return self.bar and self.is_numerical()

    def first_invalid(self, value: Any) -> CellValidator | None:
        """Return the first validator rejecting ``value``, or None."""
        for validator in self.cell_validators:
            if not validator.is_valid(value):
                return validator
        return None

    def is_valid(self, value: Any) -> bool:
        """Run the validator chain (logical AND)."""
        return self.first_invalid(value) is None

    def option_values_for_render(self, row_index: int) -> dict[str, Any] | None:
        """Option values to display for a row, falling back to the static list."""
        if self.enum_provider is None:
            return self.option_values
        values = self.enum_provider.option_values_for_render(self._grid, self, row_index)
        return values if values is not None else self.option_values

    def option_values_for_edit(self, row_index: int) -> dict[str, Any] | None:
        """Option values to offer when editing a row, falling back to the static list."""
        if self.enum_provider is None:
            return self.option_values
        values = self.enum_provider.option_values_for_edit(self._grid, self, row_index)
        return values if values is not None else self.option_values

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict with camelCase keys, excluding None values and capabilities."""
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Rows ---


@dataclass
class Row:
    """One data record.

    Attributes
    ----------
    id : Any
        Externally meaningful identifier, opaque to the engine.
    original_index : int
        Position in insertion order, used as the sort tie-breaker.
    values : list[Any]
        Typed cell values aligned with the grid's column list.
    visible : bool
        Whether the row matches the current filter.
    attributes : dict[str, Any]
        Extra attributes passed through from the source.
    """

    id: Any
    original_index: int
    values: list[Any]
    visible: bool = True
    attributes: dict[str, Any] = field(default_factory=dict)


# --- Loader → engine definitions ---


class ColumnDefinition(BaseModel):
    """Column definition as delivered by a loader (raw strings only)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    datatype: str = "string"
    label: str | None = None
    editable: bool = True
    renderable: bool = True
    bar: bool = True
    option_values: dict[str, Any] | None = Field(default=None, alias="optionValues")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Column names are lookup keys and cannot be empty."""
        if not v:
            raise ValueError("Column name cannot be empty")
        return v


class RowDefinition(BaseModel):
    """Row as delivered by a loader."""

    id: Any = ""
    attributes: dict[str, Any] = Field(default_factory=dict)
    values: dict[str, Any] = Field(default_factory=dict)
