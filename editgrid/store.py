"""Row store holding the complete row sequence and the active view.

The store keeps two explicit sequences:

- ``data_unfiltered``: every row in the current order, or None when no
  filter is active (``data`` is then the complete sequence).
- ``data``: the active view, i.e. the ``visible`` subsequence of
  ``data_unfiltered`` when a filter is active.

Every mutating method ends with ``rebuild_view()`` so callers never observe
a store where ``data`` and ``data_unfiltered`` disagree. The store raises
UsageError subclasses; the grid decides how to report them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .coercion import coerce
from .exceptions import ColumnError, RowIndexError
from .log import debug
from .models import Column, Header, Row, RowRef, row_ref


class RowStore:
    """Dual-view row storage with stable row identity and insertion order."""

    def __init__(self, columns: list[Column] | None = None) -> None:
        self.columns: list[Column] = columns if columns is not None else []
        self.data: list[Row] = []
        self.data_unfiltered: list[Row] | None = None

    # --- View management ---

    @property
    def filter_active(self) -> bool:
        """True when the active view is a filtered subset."""
        return self.data_unfiltered is not None

    def all_rows(self) -> list[Row]:
        """The complete row sequence, hidden rows included."""
        return self.data_unfiltered if self.data_unfiltered is not None else self.data

    def rebuild_view(self) -> None:
        """Recompute the active view from the complete sequence."""
        if self.data_unfiltered is not None:
            self.data = [row for row in self.data_unfiltered if row.visible]

    def set_order(self, rows: list[Row]) -> None:
        """Replace the complete sequence with a reordering of it."""
        if self.data_unfiltered is not None:
            self.data_unfiltered = rows
        else:
            self.data = rows
        self.rebuild_view()

    def set_filtered(self, active: bool) -> None:
        """Switch between the filtered and the unfiltered view.

        Turning the filter off makes every row visible again.
        """
        rows = self.all_rows()
        if active:
            self.data_unfiltered = rows
        else:
            for row in rows:
                row.visible = True
            self.data = rows
            self.data_unfiltered = None
        self.rebuild_view()

    def clear(self) -> None:
        """Drop all rows."""
        self.data = []
        self.data_unfiltered = None

    # --- Lookups ---

    @property
    def row_count(self) -> int:
        """Number of rows in the active view."""
        return len(self.data)

    def check_column(self, column_index: int) -> Column:
        """Return the column at ``column_index`` or raise ColumnError."""
        if not isinstance(column_index, int) or not 0 <= column_index < len(self.columns):
            raise ColumnError(f"Invalid column index {column_index}", column=column_index)
        return self.columns[column_index]

    def row_at(self, index: int) -> Row:
        """Return the row of the active view at ``index`` or raise RowIndexError."""
        if not 0 <= index < len(self.data):
            raise RowIndexError(f"Invalid row index {index}", row_index=index)
        return self.data[index]

    def index_of(self, row_id: Any) -> int:
        """Index of the row with ``row_id`` in the active view, -1 if absent."""
        for index, row in enumerate(self.data):
            if row.id == row_id:
                return index
        return -1

    # --- Mutations ---

    def build_row(
        self,
        row_id: Any,
        values_by_name: Mapping[str, Any],
        original_index: int,
        attributes: Mapping[str, Any] | None = None,
    ) -> Row:
        """Create a row, coercing one value per column (missing names become "")."""
        values = [coerce(column, values_by_name.get(column.name, "")) for column in self.columns]
        return Row(
            id=row_id,
            original_index=original_index,
            values=values,
            attributes=dict(attributes or {}),
        )

    def append(self, row: Row) -> None:
        """Append a fully built row to the complete sequence."""
        self.all_rows().append(row)
        self.rebuild_view()

    def insert_at(
        self,
        index: int,
        row_id: Any,
        values_by_name: Mapping[str, Any],
        attributes: Mapping[str, Any] | None = None,
    ) -> Row:
        """Insert a new row at ``index`` of the complete sequence.

        Rows whose original index is at or after ``index`` are renumbered so
        the new row takes its place in insertion order.
        """
        rows = self.all_rows()
        if not 0 <= index <= len(rows):
            raise RowIndexError(f"Invalid insertion index {index}", row_index=index)

        row = self.build_row(row_id, values_by_name, index, attributes)
        for existing in rows:
            if existing.original_index >= index:
                existing.original_index += 1
        rows.insert(index, row)
        self.rebuild_view()
        debug(f"Inserted row {row_id!r} at {index}")
        return row

    def remove_at(self, index: int) -> Row:
        """Remove the row at ``index`` of the complete sequence.

        Original indices are not renumbered; only their relative order matters.
        """
        rows = self.all_rows()
        if not 0 <= index < len(rows):
            raise RowIndexError(f"Invalid row index {index}", row_index=index)
        row = rows.pop(index)
        self.rebuild_view()
        debug(f"Removed row {row.id!r} from {index}")
        return row

    def get_value_at(self, row: int | RowRef, column_index: int) -> Any:
        """Value of a cell of the active view; the header row yields the label."""
        column = self.check_column(column_index)
        ref = row_ref(row)
        if isinstance(ref, Header):
            return column.label
        return self.row_at(ref.index).values[column_index]

    def set_value_at(self, row: int | RowRef, column_index: int, value: Any) -> Any:
        """Store a value and return the previous one.

        Data cells are coerced to the column type; the header row sets the label.
        """
        column = self.check_column(column_index)
        ref = row_ref(row)
        if isinstance(ref, Header):
            previous = column.label
            column.label = "" if value is None else str(value)
        else:
            target = self.row_at(ref.index)
            previous = target.values[column_index]
            target.values[column_index] = coerce(column, value)
        return previous
