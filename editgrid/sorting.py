"""Sort engine.

Sorting always runs over the complete row sequence, hidden rows included.
Every comparator ends with the row's original index so the result does not
depend on the stability of the underlying sort, and ``descending`` reverses
the whole stably-sorted sequence.
"""

from __future__ import annotations

import math

from collections.abc import Callable, Sequence
from datetime import date
from typing import Any

from .coercion import stringify
from .dates import DateFormat, parse_date
from .models import Column, DataType, Row


UNSORTED = -1

SortKey = Callable[[Any, Row], tuple[Any, ...]]


def _numeric_key(value: Any, row: Row) -> tuple[Any, ...]:
    # NaN sorts greatest: last ascending, first descending
    if isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value):
        return (0, value, row.original_index)
    return (1, 0, row.original_index)


def _boolean_key(value: Any, row: Row) -> tuple[Any, ...]:
    return (bool(value), row.original_index)


def _alpha_key(value: Any, row: Row) -> tuple[Any, ...]:
    return (stringify(value), row.original_index)


def _unsort_key(value: Any, row: Row) -> tuple[Any, ...]:
    return (row.original_index,)


def _date_key(date_format: DateFormat, short_month_names: Sequence[str] | None) -> SortKey:
    def key(value: Any, row: Row) -> tuple[Any, ...]:
        decoded = parse_date(value, date_format, short_month_names)
        if decoded is None:
            # Undecodable dates go after every valid date
            return (1, date.min, row.original_index)
        return (0, decoded, row.original_index)

    return key


def sort_key_for(
    column: Column | None,
    date_format: DateFormat = "EU",
    short_month_names: Sequence[str] | None = None,
) -> SortKey:
    """Pick the comparison key for a column, or the unsort key for None."""
    if column is None:
        return _unsort_key
    datatype = column.data_type
    if column.is_numerical():
        return _numeric_key
    if datatype is DataType.BOOLEAN:
        return _boolean_key
    if datatype is DataType.DATE:
        return _date_key(date_format, short_month_names)
    return _alpha_key


def sort_rows(
    rows: Sequence[Row],
    column: Column | None,
    descending: bool = False,
    ignore_last_row: bool = False,
    date_format: DateFormat = "EU",
    short_month_names: Sequence[str] | None = None,
) -> list[Row]:
    """Return ``rows`` in sorted order.

    Parameters
    ----------
    rows : Sequence[Row]
        The complete row sequence in its current order.
    column : Column or None
        The column to sort by; None restores original insertion order.
    descending : bool
        Reverse the sorted sequence.
    ignore_last_row : bool
        Keep the last row (e.g. a totals row) out of the comparison and at the end.

    Returns
    -------
    list[Row]
        A new list; the input is not modified.
    """
    head = list(rows)
    tail: list[Row] = []
    if ignore_last_row and head:
        tail = [head.pop()]

    key = sort_key_for(column, date_format, short_month_names)
    column_index = column.column_index if column is not None else None
    ordered = sorted(
        head,
        key=lambda row: key(row.values[column_index] if column_index is not None else None, row),
    )
    if descending:
        ordered.reverse()
    return ordered + tail
