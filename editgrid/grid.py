"""EditableGrid: the public engine façade.

The grid owns the column list, a RowStore with the complete sequence and the
active view, the sort/filter/pagination state and a CallbackRegistry. Cell
operations accept the external row convention (-1 is the header row) or a
RowRef.

Usage errors (bad column or row references, page operations without a page
size) are logged and answered with a sentinel (None, -1 or False), or raised
when the grid is strict.
"""

from __future__ import annotations

import math

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from . import pagination
from .callbacks import CallbackFunc, CallbackRegistry, GridEvent
from .cells import (
    CellEditor,
    CellRenderer,
    CellValidator,
    EditResult,
    EditSession,
    EnumProvider,
    RenderSurface,
    SortHeaderRenderer,
    create_cell_editor,
    create_cell_renderer,
    create_header_editor,
    create_header_renderer,
    default_validators,
)
from .coercion import stringify
from .config import GridSettings, get_settings
from .exceptions import ColumnError, PaginationError, RowIndexError, UsageError
from .filtering import apply_filter, tokenize
from .loader import infer_column_definitions, normalize_rows
from .log import debug, error, info
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
from .sorting import UNSORTED, sort_rows
from .store import RowStore
from .typeparse import parse_column_type


T = TypeVar("T")

ColumnRef = int | str

_LAST_SORT = object()


@dataclass
class RenderedPage:
    """Display text of the header and the rows of the current page."""

    caption: str | None
    header: list[str]
    rows: list[tuple[Any, list[str]]] = field(default_factory=list)
    page_index: int = 0
    page_count: int = 1


def _same_value(a: Any, b: Any) -> bool:
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    return type(a) is type(b) and a == b


def _to_column(definition: Column | ColumnDefinition | Mapping[str, Any]) -> Column:
    if isinstance(definition, Column):
        return definition
    if isinstance(definition, ColumnDefinition):
        return Column(**definition.model_dump(exclude_none=True))
    return Column.model_validate(dict(definition))


class EditableGrid:
    """Editable, sortable, filterable and paginated grid model.

    Parameters
    ----------
    name : str
        Grid name, used in log messages.
    settings : GridSettings or None
        Grid options; defaults to the ``grid`` section of ``get_settings()``.
    caption : str or None
        Optional caption shown above the grid.
    **options : Any
        Individual option overrides (``enable_sort``, ``ignore_last_row``,
        ``page_size``, ``date_format``, ``short_month_names``, ``strict``).

    Example:
        grid = EditableGrid("people", page_size=10)
        grid.load(
            [{"name": "name"}, {"name": "age", "datatype": "integer"}],
            [{"id": 1, "values": {"name": "Ada", "age": "36"}}],
        )
        grid.sort("age", descending=True)
    """

    def __init__(
        self,
        name: str = "grid",
        settings: GridSettings | None = None,
        caption: str | None = None,
        **options: Any,
    ) -> None:
        base = settings if settings is not None else get_settings().grid
        unknown = set(options) - set(GridSettings.model_fields)
        if unknown:
            raise TypeError(f"Unknown grid options: {', '.join(sorted(unknown))}")
        if options:
            base = GridSettings.model_validate({**base.model_dump(), **options})
        self.settings = base

        self.name = name
        self.caption = caption
        self.columns: list[Column] = []
        self.store = RowStore(self.columns)
        self.callbacks = CallbackRegistry(name)

        self.sorted_column_name: str | None = None
        self.sort_descending = False
        self.current_filter: str | None = None
        self.page_size = self.settings.page_size
        self.current_page_index = 0
        self.last_selected_row_index = -1

    def __repr__(self) -> str:
        return (
            f"EditableGrid(name={self.name!r}, columns={len(self.columns)}, "
            f"rows={self.get_row_count()})"
        )

    # --- Options ---

    @property
    def enable_sort(self) -> bool:
        """Whether sort requests reorder rows."""
        return self.settings.enable_sort

    @property
    def ignore_last_row(self) -> bool:
        """Whether the last row stays at the bottom when sorting."""
        return self.settings.ignore_last_row

    @property
    def date_format(self) -> str:
        """EU (dd/mm/yyyy) or US (mm/dd/yyyy)."""
        return self.settings.date_format

    @property
    def short_month_names(self) -> list[str]:
        """Month abbreviations used to decode and display dates."""
        return self.settings.short_month_names

    @property
    def strict(self) -> bool:
        """Whether usage errors are raised instead of logged."""
        return self.settings.strict

    @property
    def data(self) -> list[Row]:
        """The active view."""
        return self.store.data

    @property
    def data_unfiltered(self) -> list[Row] | None:
        """The complete sequence while a filter is active, else None."""
        return self.store.data_unfiltered

    def _usage_error(self, exc: UsageError, sentinel: T) -> T:
        if self.strict:
            raise exc
        error(f"[{self.name}] {exc}")
        return sentinel

    # --- Notifications ---

    def on(self, event: GridEvent | str, handler: CallbackFunc) -> bool:
        """Register a handler for a grid event ("*" for all events)."""
        return self.callbacks.register(event, handler)

    def off(self, event: GridEvent | str, handler: CallbackFunc | None = None) -> bool:
        """Remove one handler, or every handler of the event."""
        return self.callbacks.unregister(event, handler)

    def _emit(self, event: GridEvent, *args: Any) -> None:
        self.callbacks.emit(event, *args)

    # --- Loading ---

    def set_columns(self, columns: Iterable[Column | ColumnDefinition | Mapping[str, Any]]) -> None:
        """Replace the column list and drop every row.

        Column type descriptors are parsed, and columns without capabilities
        get the defaults for their datatype.
        """
        self.columns.clear()
        self.store.clear()
        for definition in columns:
            column = _to_column(definition)
            parse_column_type(column)
            column.attach(self, len(self.columns))
            self.columns.append(column)
            self._assign_capabilities(column)

        self.sorted_column_name = None
        self.current_filter = None
        self.current_page_index = 0
        self.last_selected_row_index = -1

    def _assign_capabilities(self, column: Column) -> None:
        if column.option_values and column.enum_provider is None:
            column.enum_provider = EnumProvider()
        if column.cell_renderer is None:
            column.cell_renderer = create_cell_renderer(column)
        if column.cell_editor is None:
            column.cell_editor = create_cell_editor(column)
        if column.header_renderer is None:
            column.header_renderer = create_header_renderer(column, self.enable_sort)
        if column.header_editor is None:
            column.header_editor = create_header_editor(column)
        if not column.cell_validators:
            column.cell_validators = default_validators(column)
        self._bind_capabilities(column)

    def _bind_capabilities(self, column: Column) -> None:
        for capability in (
            column.cell_renderer,
            column.cell_editor,
            column.header_renderer,
            column.header_editor,
            *column.cell_validators,
        ):
            if capability is not None and hasattr(capability, "bind"):
                capability.bind(self, column)

    def load(
        self,
        columns: Iterable[Column | ColumnDefinition | Mapping[str, Any]],
        rows: Iterable[RowDefinition | Mapping[str, Any]] = (),
    ) -> None:
        """Replace the model with new column and row definitions.

        Rows are appended in order; their position becomes their original
        index.
        """
        self.set_columns(columns)
        for index, definition in enumerate(rows):
            if not isinstance(definition, RowDefinition):
                definition = RowDefinition.model_validate(dict(definition))
            row_id = definition.id if definition.id != "" else index
            self.store.append(
                self.store.build_row(row_id, definition.values, index, definition.attributes)
            )
        info(f"[{self.name}] Loaded {len(self.columns)} columns, {self.get_row_count()} rows")
        self._emit(GridEvent.LOADED)

    def load_data(
        self,
        data: Any,
        column_types: Mapping[str, str] | None = None,
        id_field: str | None = None,
    ) -> None:
        """Load plain Python data (records, dict of lists or a DataFrame).

        Parameters
        ----------
        data : Any
            The rows to load.
        column_types : Mapping[str, str] or None
            Type descriptors by column name, e.g. ``{"price": "double(€,2)"}``.
            Other columns are inferred from their values.
        id_field : str or None
            Column whose values become row ids; defaults to the row position.
        """
        names, records = normalize_rows(data)
        definitions = infer_column_definitions(names, records, column_types)
        rows = [
            RowDefinition(
                id=record.get(id_field, index) if id_field else index,
                values=record,
            )
            for index, record in enumerate(records)
        ]
        self.load(definitions, rows)

    # --- Columns ---

    def get_column_count(self) -> int:
        """Number of columns."""
        return len(self.columns)

    def get_column_index(self, column: ColumnRef) -> int:
        """Index of a column given by index or name, -1 if there is none."""
        if isinstance(column, int) and not isinstance(column, bool):
            return column if 0 <= column < len(self.columns) else -1
        for index, candidate in enumerate(self.columns):
            if candidate.name == column:
                return index
        return -1

    def has_column(self, column: ColumnRef) -> bool:
        """True if the column exists."""
        return self.get_column_index(column) >= 0

    def get_column(self, column: ColumnRef) -> Column | None:
        """The column given by index or name."""
        index = self.get_column_index(column)
        if index < 0:
            return self._usage_error(ColumnError(f"Invalid column: {column!r}", column=column), None)
        return self.columns[index]

    def get_column_name(self, column: ColumnRef) -> str | None:
        """Name of a column."""
        found = self.get_column(column)
        return found.name if found else None

    def get_column_label(self, column: ColumnRef) -> str | None:
        """Label of a column."""
        found = self.get_column(column)
        return found.label if found else None

    def get_column_type(self, column: ColumnRef) -> str | None:
        """Datatype keyword of a column."""
        found = self.get_column(column)
        return found.datatype if found else None

    def get_column_unit(self, column: ColumnRef) -> str | None:
        """Unit of a numeric column."""
        found = self.get_column(column)
        return found.unit if found else None

    def get_column_precision(self, column: ColumnRef) -> int | None:
        """Display precision of a numeric column."""
        found = self.get_column(column)
        return found.precision if found else None

    def is_column_numerical(self, column: ColumnRef) -> bool:
        """True for integer and double columns."""
        found = self.get_column(column)
        return found.is_numerical() if found else False

    def is_column_bar(self, column: ColumnRef) -> bool:
        """True for numeric columns eligible for charts."""
        found = self.get_column(column)
        return found.is_bar() if found else False

    # --- Rows ---

    def get_row_count(self) -> int:
        """Number of rows in the active view."""
        return self.store.row_count

    def get_row(self, row_index: int) -> Row | None:
        """The row at ``row_index`` of the active view."""
        try:
            return self.store.row_at(row_index)
        except RowIndexError as exc:
            return self._usage_error(exc, None)

    def get_row_id(self, row_index: int) -> Any:
        """Id of the row at ``row_index``, None when out of range."""
        if 0 <= row_index < self.get_row_count():
            return self.data[row_index].id
        return None

    def get_row_index(self, row_id: Any) -> int:
        """Index in the active view of the row with ``row_id``, -1 if absent or hidden."""
        return self.store.index_of(row_id)

    def get_row_attribute(self, row_index: int, attribute: str) -> Any:
        """An extra attribute of a row."""
        row = self.get_row(row_index)
        return row.attributes.get(attribute) if row is not None else None

    def set_row_attribute(self, row_index: int, attribute: str, value: Any) -> bool:
        """Set an extra attribute of a row."""
        row = self.get_row(row_index)
        if row is None:
            return False
        row.attributes[attribute] = value
        return True

    def get_row_values(self, row_index: int) -> dict[str, Any] | None:
        """The typed values of a row by column name."""
        row = self.get_row(row_index)
        if row is None:
            return None
        return {column.name: row.values[i] for i, column in enumerate(self.columns)}

    def get_value_at(self, row: int | RowRef, column: ColumnRef) -> Any:
        """Typed value of a cell; the header row (-1) yields the column label."""
        try:
            return self.store.get_value_at(row, self._column_index(column))
        except UsageError as exc:
            return self._usage_error(exc, None)

    def set_value_at(self, row: int | RowRef, column: ColumnRef, value: Any) -> Any:
        """Coerce and store a value, returning the previous one.

        No notification is sent; edits through ``commit_edit`` notify.
        """
        try:
            return self.store.set_value_at(row, self._column_index(column), value)
        except UsageError as exc:
            return self._usage_error(exc, None)

    def _column_index(self, column: ColumnRef) -> int:
        index = self.get_column_index(column)
        if index < 0:
            raise ColumnError(f"Invalid column: {column!r}", column=column)
        return index

    def insert_row(
        self,
        index: int,
        row_id: Any,
        values: Mapping[str, Any],
        attributes: Mapping[str, Any] | None = None,
        dont_sort: bool = False,
    ) -> Row | None:
        """Insert a row at ``index`` of the complete sequence.

        The current sort is re-applied unless ``dont_sort`` is set, and the
        current filter is re-applied.
        """
        try:
            row = self.store.insert_at(index, row_id, values, attributes)
        except RowIndexError as exc:
            return self._usage_error(exc, None)
        if not dont_sort:
            self.sort()
        self.filter()
        return row

    def append_row(
        self,
        row_id: Any,
        values: Mapping[str, Any],
        attributes: Mapping[str, Any] | None = None,
        dont_sort: bool = False,
    ) -> Row | None:
        """Insert a row after every existing row."""
        return self.insert_row(len(self.store.all_rows()), row_id, values, attributes, dont_sort)

    def remove_at(self, index: int) -> Row | None:
        """Remove the row at ``index`` of the complete sequence."""
        try:
            return self.store.remove_at(index)
        except RowIndexError as exc:
            return self._usage_error(exc, None)

    def remove_row(self, row_id: Any) -> bool:
        """Remove the row with ``row_id``, hidden or not."""
        for index, row in enumerate(self.store.all_rows()):
            if row.id == row_id:
                self.store.remove_at(index)
                return True
        return self._usage_error(
            RowIndexError(f"No row with id {row_id!r}", row_index=row_id), False
        )

    def select_row(self, row_index: int) -> bool:
        """Mark a row as selected, notifying when the selection changes."""
        if row_index < 0 or row_index == self.last_selected_row_index:
            return False
        previous = self.last_selected_row_index
        self.last_selected_row_index = row_index
        self._emit(GridEvent.ROW_SELECTED, previous, row_index)
        return True

    # --- Sort & filter ---

    def sort(self, column: Any = _LAST_SORT, descending: bool | None = None) -> bool:
        """Sort the complete sequence by one column.

        Parameters
        ----------
        column : int, str or None
            Column index or name. -1 or None restores insertion order. When
            omitted, the last sort is re-applied.
        descending : bool or None
            Sort direction; defaults to the last direction used. Insertion
            order is never reversed.

        Returns
        -------
        bool
            False when the column does not exist.
        """
        if column is _LAST_SORT:
            if self.sorted_column_name is None:
                self._emit(GridEvent.SORTED, UNSORTED, self.sort_descending)
                return True
            column = self.sorted_column_name
        if descending is None:
            descending = self.sort_descending

        target: Column | None = None
        if column is not None and column != UNSORTED:
            index = self.get_column_index(column)
            if index < 0:
                return self._usage_error(
                    ColumnError(f"Cannot sort by unknown column: {column!r}", column=column),
                    False,
                )
            target = self.columns[index]
        column_index = target.column_index if target is not None else UNSORTED
        if target is None:
            descending = False

        if self.enable_sort:
            ordered = sort_rows(
                self.store.all_rows(),
                target,
                descending,
                self.ignore_last_row,
                self.date_format,
                self.short_month_names,
            )
            self.store.set_order(ordered)
            self.sorted_column_name = target.name if target is not None else None
            self.sort_descending = descending
            debug(f"[{self.name}] Sorted by {self.sorted_column_name!r} descending={descending}")

        self._emit(GridEvent.SORTED, column_index, descending)
        return True

    def filter(self, filter_text: str | None = None) -> None:
        """Show only rows containing every token of ``filter_text``.

        Without argument the current filter is re-applied; an empty or blank
        text clears the filter. The page index goes back to 0.
        """
        if filter_text is not None:
            self.current_filter = filter_text

        if not tokenize(self.current_filter or ""):
            if not self.store.filter_active:
                return
            self.store.set_filtered(False)
        else:
            visible = apply_filter(self.store.all_rows(), self.current_filter or "")
            self.store.set_filtered(True)
            debug(f"[{self.name}] Filter {self.current_filter!r} matches {visible} rows")

        self.current_page_index = 0
        self._emit(GridEvent.FILTERED)

    # --- Pagination ---

    def set_page_size(self, page_size: Any) -> None:
        """Set the number of rows per page; 0 or invalid input disables paging."""
        try:
            size = int(page_size)
        except (TypeError, ValueError):
            size = 0
        self.page_size = max(size, 0)
        self.current_page_index = 0
        self._emit(GridEvent.PAGINATED, 0)

    def get_page_count(self) -> int:
        """Number of pages of the active view, -1 without a page size."""
        if self.page_size <= 0:
            return self._usage_error(
                PaginationError("Page count requested without page size", page_size=self.page_size),
                -1,
            )
        return pagination.page_count(self.get_row_count(), self.page_size)

    def get_current_page_index(self) -> int:
        """Index of the current page, -1 without a page size."""
        if self.page_size <= 0:
            return self._usage_error(
                PaginationError("Page index requested without page size", page_size=self.page_size),
                -1,
            )
        return pagination.clamp_page_index(self.current_page_index, self.get_page_count())

    def set_page_index(self, page_index: int) -> None:
        """Show a page, clamped to the existing pages."""
        if self.page_size <= 0:
            self.current_page_index = 0
            return
        pages = pagination.page_count(self.get_row_count(), self.page_size)
        self.current_page_index = pagination.clamp_page_index(page_index, pages)
        self._emit(GridEvent.PAGINATED, self.current_page_index)

    def can_go_back(self) -> bool:
        """True if there is a page before the current one."""
        return self.get_current_page_index() > 0

    def can_go_forward(self) -> bool:
        """True if there is a page after the current one."""
        current = self.get_current_page_index()
        return current >= 0 and current < self.get_page_count() - 1

    def first_page(self) -> None:
        """Go to the first page."""
        if self.can_go_back():
            self.set_page_index(0)

    def prev_page(self) -> None:
        """Go to the previous page."""
        if self.can_go_back():
            self.set_page_index(self.get_current_page_index() - 1)

    def next_page(self) -> None:
        """Go to the next page."""
        if self.can_go_forward():
            self.set_page_index(self.get_current_page_index() + 1)

    def last_page(self) -> None:
        """Go to the last page."""
        if self.can_go_forward():
            self.set_page_index(self.get_page_count() - 1)

    def get_sliding_page_interval(self, window_size: int) -> pagination.PageInterval | None:
        """Window of page indices around the current page, None with one page or less."""
        pages = self.get_page_count()
        if pages < 0:
            return None
        return pagination.sliding_window(pages, self.get_current_page_index(), window_size)

    def get_pages_in_interval(
        self,
        interval: pagination.PageInterval,
        callback: Callable[[int, bool], Any] | None = None,
    ) -> list[Any]:
        """Page indices of an interval, mapped through ``callback(page, is_current)``."""
        return pagination.pages_in_interval(interval, self.current_page_index, callback)

    def page_bounds(self) -> tuple[int, int]:
        """Slice ``[start, end)`` of the active view shown on the current page."""
        page_index = self.current_page_index if self.page_size > 0 else 0
        if self.page_size > 0:
            pages = pagination.page_count(self.get_row_count(), self.page_size)
            page_index = pagination.clamp_page_index(page_index, pages)
        return pagination.page_bounds(self.get_row_count(), self.page_size, page_index)

    def page_rows(self) -> list[Row]:
        """Rows of the current page."""
        start, end = self.page_bounds()
        return self.data[start:end]

    # --- Cell dispatch ---

    def is_editable(self, row_index: int, column_index: int) -> bool:
        """Hook deciding whether a data cell may be edited; override in subclasses."""
        return True

    def is_header_editable(self, row_index: int, column_index: int) -> bool:
        """Hook deciding whether a header label may be edited; override in subclasses."""
        return False

    def render_cell(
        self,
        row: int | RowRef,
        column: ColumnRef,
        surface: RenderSurface | None = None,
    ) -> str | None:
        """Display text of a cell through its column's renderer."""
        try:
            column_index = self._column_index(column)
            value = self.store.get_value_at(row, column_index)
        except UsageError as exc:
            return self._usage_error(exc, None)

        target = self.columns[column_index]
        ref = row_ref(row)
        renderer = target.header_renderer if isinstance(ref, Header) else target.cell_renderer
        if renderer is None:
            text = stringify(value)
            if surface is not None:
                surface.set_content(text)
            return text
        return renderer.render(ref, column_index, surface, value)

    def render_header(self) -> list[str]:
        """Display text of the header of every renderable column."""
        return [
            self.render_cell(HEADER, column.column_index) or ""
            for column in self.columns
            if column.renderable
        ]

    def render_page(self) -> RenderedPage:
        """Render the header and the rows of the current page."""
        start, end = self.page_bounds()
        rows = []
        for index in range(start, end):
            cells = [
                self.render_cell(DataRow(index), column.column_index) or ""
                for column in self.columns
                if column.renderable
            ]
            rows.append((self.data[index].id, cells))
        page_count = pagination.page_count(self.get_row_count(), self.page_size)
        return RenderedPage(
            caption=self.caption,
            header=self.render_header(),
            rows=rows,
            page_index=pagination.clamp_page_index(self.current_page_index, page_count),
            page_count=page_count,
        )

    def readonly_warning(self, column: Column) -> None:
        """Report an attempt to edit a read-only column."""
        info(f"[{self.name}] Column '{column.name}' is read-only")
        self._emit(GridEvent.READONLY, column)

    def begin_edit(
        self,
        row: int | RowRef,
        column: ColumnRef,
        surface: RenderSurface | None = None,
    ) -> EditSession | None:
        """Open an edit session for a cell, None if the cell cannot be edited.

        Opening a data cell selects its row.
        """
        try:
            column_index = self._column_index(column)
            value = self.store.get_value_at(row, column_index)
        except UsageError as exc:
            return self._usage_error(exc, None)

        target = self.columns[column_index]
        ref = row_ref(row)
        if isinstance(ref, DataRow):
            self.select_row(ref.index)

        if not target.editable:
            self.readonly_warning(target)
            return None

        if isinstance(ref, Header):
            editor = target.header_editor
            allowed = self.is_header_editable(ref.index, column_index)
        else:
            editor = target.cell_editor
            allowed = self.is_editable(ref.index, column_index)
        if editor is None or not allowed:
            return None
        return editor.edit(ref, column_index, surface, value)

    def commit_edit(self, row: int | RowRef, column: ColumnRef, raw: Any) -> EditResult | None:
        """Validate and store an edited value.

        Read-only columns reject every value. Data cells go through the
        column's validator chain first; a rejected value leaves the store
        untouched. A changed value emits value-changed.
        """
        try:
            column_index = self._column_index(column)
            previous = self.store.get_value_at(row, column_index)
        except UsageError as exc:
            return self._usage_error(exc, None)

        target = self.columns[column_index]
        ref = row_ref(row)
        if not target.editable:
            self.readonly_warning(target)
            return EditResult(accepted=False, previous=previous, value=raw)

        if isinstance(ref, DataRow):
            validator = target.first_invalid(raw)
            if validator is not None:
                info(f"[{self.name}] Rejected {raw!r} for column '{target.name}'")
                return EditResult(accepted=False, previous=previous, value=raw, validator=validator)

        self.store.set_value_at(ref, column_index, raw)
        value = self.store.get_value_at(ref, column_index)
        if not _same_value(previous, value):
            data_row = self.data[ref.index] if isinstance(ref, DataRow) else None
            self._emit(GridEvent.VALUE_CHANGED, ref.index, column_index, previous, value, data_row)
        return EditResult(accepted=True, previous=previous, value=value)

    # --- Per-column capability overrides ---

    def _override(self, column: ColumnRef) -> Column | None:
        return self.get_column(column)

    def set_cell_renderer(self, column: ColumnRef, renderer: CellRenderer) -> bool:
        """Use a custom renderer for the cells of a column."""
        target = self._override(column)
        if target is None:
            return False
        target.cell_renderer = renderer.bind(self, target)
        return True

    def set_header_renderer(self, column: ColumnRef, renderer: CellRenderer) -> bool:
        """Use a custom header renderer, keeping the sort marker on sortable grids."""
        target = self._override(column)
        if target is None:
            return False
        if self.enable_sort and target.data_type is not DataType.HTML:
            renderer = SortHeaderRenderer(renderer)
        target.header_renderer = renderer.bind(self, target)
        return True

    def set_cell_editor(self, column: ColumnRef, editor: CellEditor | None) -> bool:
        """Use a custom editor for the cells of a column (None disables editing)."""
        target = self._override(column)
        if target is None:
            return False
        target.cell_editor = editor.bind(self, target) if editor is not None else None
        return True

    def set_header_editor(self, column: ColumnRef, editor: CellEditor | None) -> bool:
        """Use a custom editor for the header label of a column."""
        target = self._override(column)
        if target is None:
            return False
        target.header_editor = editor.bind(self, target) if editor is not None else None
        return True

    def set_enum_provider(self, column: ColumnRef, provider: EnumProvider) -> bool:
        """Turn a column into an enum column with dynamic option values."""
        target = self._override(column)
        if target is None:
            return False
        target.enum_provider = provider
        target.cell_renderer = create_cell_renderer(target).bind(self, target)
        editor = create_cell_editor(target)
        target.cell_editor = editor.bind(self, target) if editor is not None else None
        return True

    def clear_cell_validators(self, column: ColumnRef) -> bool:
        """Remove every validator of a column."""
        target = self._override(column)
        if target is None:
            return False
        target.cell_validators = []
        return True

    def add_default_cell_validators(self, column: ColumnRef) -> bool:
        """Append the default validators for the column's datatype."""
        target = self._override(column)
        if target is None:
            return False
        target.cell_validators.extend(v.bind(self, target) for v in default_validators(target))
        return True

    def add_cell_validator(self, column: ColumnRef, validator: CellValidator) -> bool:
        """Append a validator to a column's chain."""
        target = self._override(column)
        if target is None:
            return False
        target.cell_validators.append(validator.bind(self, target))
        return True

    def set_caption(self, caption: str | None) -> None:
        """Set the caption shown above the grid."""
        self.caption = caption


def create_grid(
    name: str,
    columns: Sequence[Column | ColumnDefinition | Mapping[str, Any]],
    rows: Iterable[RowDefinition | Mapping[str, Any]] = (),
    **options: Any,
) -> EditableGrid:
    """Build and load a grid in one call."""
    grid = EditableGrid(name, **options)
    grid.load(columns, rows)
    return grid
