"""Free-text row filtering.

A row is visible when every whitespace-separated token of the filter occurs
somewhere in the lowercase concatenation of its cell values.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .coercion import stringify
from .models import Row


def tokenize(filter_text: str) -> list[str]:
    """Split a filter string into lowercase tokens."""
    return filter_text.lower().split()


def haystack(row: Row) -> str:
    """Lowercase text searched by the filter for one row."""
    return " ".join(stringify(value) for value in row.values).lower()


def row_matches(row: Row, tokens: Sequence[str]) -> bool:
    """True if every token occurs in the row's text (logical AND)."""
    text = haystack(row)
    return all(token in text for token in tokens)


def apply_filter(rows: Iterable[Row], filter_text: str) -> int:
    """Set the ``visible`` flag of every row for ``filter_text``.

    Returns
    -------
    int
        The number of visible rows.
    """
    tokens = tokenize(filter_text)
    visible = 0
    for row in rows:
        row.visible = row_matches(row, tokens)
        visible += row.visible
    return visible
