"""Cell and header editors.

An editor opens an EditSession for one cell. The session carries the text
a host should show in its input control; committing hands the raw input back
to the grid, which validates, coerces and stores it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..coercion import is_nan, stringify
from ..exceptions import EditGridException, ValidationError
from ..models import DataType, RowRef, row_ref
from .base import Capability, RenderSurface


@dataclass
class EditResult:
    """Outcome of an edit.

    Attributes
    ----------
    accepted : bool
        True when the value was stored.
    previous : Any
        The value before the edit.
    value : Any
        The stored (coerced) value, or the rejected raw input.
    validator : Any
        The validator that rejected the input, if any.
    cancelled : bool
        True when the session was cancelled.
    """

    accepted: bool
    previous: Any = None
    value: Any = None
    validator: Any = None
    cancelled: bool = False

    @property
    def error(self) -> ValidationError | None:
        """A ValidationError describing a rejected edit, None otherwise."""
        if self.validator is None:
            return None
        return ValidationError(
            f"Value {self.value!r} rejected by {type(self.validator).__name__}",
            value=self.value,
            validator=self.validator,
        )

    def raise_for_status(self) -> None:
        """Raise the ValidationError of a rejected edit."""
        err = self.error
        if err is not None:
            raise err


class EditSession:
    """An open edit of one cell."""

    def __init__(
        self,
        editor: CellEditor,
        row: RowRef,
        column_index: int,
        value: Any,
        surface: RenderSurface | None = None,
    ) -> None:
        self.editor = editor
        self.row = row
        self.column_index = column_index
        self.value = value
        self.surface = surface
        self.text = editor.format_for_edit(value)
        self.active = True

    def commit(self, raw: Any) -> EditResult:
        """Apply ``raw`` to the cell through the grid.

        A rejected value leaves the session open so the user can retry.
        """
        if not self.active:
            raise EditGridException("Edit session is closed", column=self.column_index)
        grid = self.editor.grid
        if grid is None:
            raise EditGridException("Editor is not bound to a grid", column=self.column_index)
        result = grid.commit_edit(self.row, self.column_index, raw)
        if result is not None and result.accepted:
            self.active = False
        return result

    def cancel(self) -> EditResult:
        """Close the session without touching the cell."""
        self.active = False
        return EditResult(accepted=False, previous=self.value, value=self.value, cancelled=True)


class CellEditor(Capability):
    """Base editor; ``input_kind`` tells a host which control to show."""

    input_kind = "text"

    def edit(
        self,
        row: int | RowRef,
        column_index: int,
        surface: RenderSurface | None,
        value: Any,
    ) -> EditSession:
        """Open an edit session for a cell."""
        return EditSession(self, row_ref(row), column_index, value, surface)

    def format_for_edit(self, value: Any) -> str:
        """Text to put into the input control."""
        return stringify(value)


class TextCellEditor(CellEditor):
    """Free-text input, optionally bounded in size."""

    def __init__(self, field_size: int | None = None, max_length: int | None = None) -> None:
        self.field_size = field_size
        self.max_length = max_length


class NumberCellEditor(CellEditor):
    """Number input for integer and double columns; NaN edits as an empty field."""

    input_kind = "number"

    def __init__(self, datatype: DataType | str = DataType.DOUBLE) -> None:
        self.datatype = DataType(datatype)

    def format_for_edit(self, value: Any) -> str:
        if value is None or is_nan(value):
            return ""
        return stringify(value)


class SelectCellEditor(CellEditor):
    """Choice among the column's option values for the edited row."""

    input_kind = "select"

    def options(self, row: int | RowRef) -> dict[str, Any]:
        """Option values offered for ``row``; groups are nested dicts."""
        if self.column is None:
            return {}
        return self.column.option_values_for_edit(row_ref(row).index) or {}
