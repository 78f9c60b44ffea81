"""editgrid exception hierarchy.

All editgrid-specific exceptions inherit from EditGridException, enabling
catch-all handling while supporting specific error types.
"""

from __future__ import annotations

from typing import Any


class EditGridException(Exception):
    """Base exception for all editgrid errors."""

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize editgrid exception.

        Parameters
        ----------
        message : str
            Human-readable error message.
        **context : Any
            Additional context (grid, column, row_index, etc.).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Format exception with context."""
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class UsageError(EditGridException):
    """The caller referenced something that does not exist.

    Usage errors are logged and turned into a sentinel return value
    unless the grid runs in strict mode.
    """


class ColumnError(UsageError):
    """Invalid column index or name."""

    def __init__(self, message: str, column: Any = None, **context: Any) -> None:
        """Initialize column error.

        Parameters
        ----------
        message : str
            Human-readable error message.
        column : Any, optional
            The column index or name that could not be resolved.
        **context : Any
            Additional context.
        """
        super().__init__(message, column=column, **context)
        self.column = column


class RowIndexError(UsageError):
    """Invalid row index or row id."""

    def __init__(self, message: str, row_index: Any = None, **context: Any) -> None:
        """Initialize row error.

        Parameters
        ----------
        message : str
            Human-readable error message.
        row_index : Any, optional
            The offending row index or id.
        **context : Any
            Additional context.
        """
        super().__init__(message, row_index=row_index, **context)
        self.row_index = row_index


class PaginationError(UsageError):
    """A page operation was requested while no page size is defined."""

    def __init__(self, message: str, page_size: int | None = None, **context: Any) -> None:
        """Initialize pagination error.

        Parameters
        ----------
        message : str
            Human-readable error message.
        page_size : int, optional
            The page size in effect.
        **context : Any
            Additional context.
        """
        super().__init__(message, page_size=page_size, **context)
        self.page_size = page_size


class ValidationError(EditGridException):
    """An edited value was rejected by a cell validator.

    The row store is left unchanged when this happens.
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        validator: Any = None,
        **context: Any,
    ) -> None:
        """Initialize validation error.

        Parameters
        ----------
        message : str
            Human-readable error message.
        value : Any, optional
            The rejected raw value.
        validator : Any, optional
            The validator that rejected it.
        **context : Any
            Additional context.
        """
        super().__init__(message, value=value, validator=validator, **context)
        self.value = value
        self.validator = validator
