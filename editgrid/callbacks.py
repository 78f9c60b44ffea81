"""Notification registry for grid events.

Each EditableGrid owns one CallbackRegistry. Handlers are plain callables
invoked synchronously, in registration order, with the event's positional
arguments. Wildcard handlers ("*") additionally receive the event name first.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .log import debug, log_callback_error, warn


CallbackFunc = Callable[..., None]


class GridEvent(str, Enum):
    """Events emitted by the grid engine.

    Handler arguments per event:

    - ROW_SELECTED: (old_row_index, new_row_index)
    - VALUE_CHANGED: (row_index, column_index, old_value, new_value, row)
    - SORTED: (column_index, descending)
    - FILTERED: ()
    - PAGINATED: (page_index,)
    - LOADED: ()
    - READONLY: (column,)
    """

    ROW_SELECTED = "row-selected"
    VALUE_CHANGED = "value-changed"
    SORTED = "sorted"
    FILTERED = "filtered"
    PAGINATED = "paginated"
    LOADED = "loaded"
    READONLY = "readonly"


WILDCARD = "*"


def _event_name(event: GridEvent | str) -> str | None:
    if isinstance(event, GridEvent):
        return event.value
    if event == WILDCARD:
        return event
    try:
        return GridEvent(event).value
    except ValueError:
        return None


class CallbackRegistry:
    """Registry for managing grid event handlers."""

    def __init__(self, grid_name: str = "") -> None:
        """Initialize the registry.

        Parameters
        ----------
        grid_name : str
            Name of the owning grid, used in log messages.
        """
        self.grid_name = grid_name
        self._callbacks: dict[str, list[CallbackFunc]] = {}

    def register(self, event: GridEvent | str, handler: CallbackFunc) -> bool:
        """Register an event handler.

        Parameters
        ----------
        event : GridEvent or str
            The event, or "*" for every event.
        handler : CallbackFunc
            The callback function.

        Returns
        -------
        bool
            True if registered successfully, False for an unknown event.
        """
        name = _event_name(event)
        if name is None:
            warn(
                f"Invalid event '{event}'. "
                f"Must be one of {', '.join(e.value for e in GridEvent)} or '*'."
            )
            return False

        self._callbacks.setdefault(name, []).append(handler)
        debug(f"Registered handler for '{name}' on grid '{self.grid_name}'")
        return True

    def unregister(self, event: GridEvent | str, handler: CallbackFunc | None = None) -> bool:
        """Unregister event handler(s).

        Parameters
        ----------
        event : GridEvent or str
            The event.
        handler : CallbackFunc or None, optional
            Specific handler to remove (None to remove all for the event).

        Returns
        -------
        bool
            True if any handlers were removed, False otherwise.
        """
        name = _event_name(event)
        if name is None or name not in self._callbacks:
            return False

        if handler is None:
            del self._callbacks[name]
            debug(f"Unregistered all handlers for '{name}' on grid '{self.grid_name}'")
            return True

        try:
            self._callbacks[name].remove(handler)
        except ValueError:
            return False
        return True

    def has_handlers(self, event: GridEvent | str) -> bool:
        """True if anything listens to ``event``."""
        name = _event_name(event)
        return bool(self._callbacks.get(name or "")) or bool(self._callbacks.get(WILDCARD))

    def emit(self, event: GridEvent, *args: Any) -> bool:
        """Call every handler registered for ``event``.

        A handler raising an exception is logged and does not prevent the
        remaining handlers from running.

        Returns
        -------
        bool
            True if any handler completed, False otherwise.
        """
        called = False
        for handler in list(self._callbacks.get(event.value, [])):
            called = self._invoke(handler, event, args) or called
        for handler in list(self._callbacks.get(WILDCARD, [])):
            called = self._invoke(handler, event, (event.value, *args)) or called
        return called

    def _invoke(self, handler: CallbackFunc, event: GridEvent, args: tuple[Any, ...]) -> bool:
        try:
            handler(*args)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            log_callback_error(event.value, self.grid_name, exc)
            return False
        return True

    def clear(self) -> None:
        """Remove every handler."""
        self._callbacks.clear()
