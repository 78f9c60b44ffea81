"""Shared base for per-column capability objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:
    from ..grid import EditableGrid
    from ..models import Column


@runtime_checkable
class RenderSurface(Protocol):
    """Anything a renderer can write a display representation into."""

    def set_content(self, content: str) -> None:
        """Replace the surface content."""


class Capability:
    """Base class for renderers, editors and validators.

    The grid binds each capability to its column when the column is
    attached, giving it access to grid-wide options and state.
    """

    grid: EditableGrid | None = None
    column: Column | None = None

    def bind(self, grid: EditableGrid | None, column: Column) -> Capability:
        """Attach this capability to a grid column."""
        self.grid = grid
        self.column = column
        return self

    def _grid_option(self, name: str, default: Any) -> Any:
        if self.grid is None:
            return default
        return getattr(self.grid, name, default)

    def __repr__(self) -> str:
        column = self.column.name if self.column is not None else None
        return f"{type(self).__name__}(column={column!r})"
