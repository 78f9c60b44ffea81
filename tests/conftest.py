"""Pytest configuration and fixtures."""

from __future__ import annotations

import os

from typing import TYPE_CHECKING, Any

import pytest

from editgrid.config import clear_settings
from editgrid.grid import EditableGrid


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path: Any, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Run every test from an empty directory without EDITGRID_* variables."""
    for key in list(os.environ):
        if key.startswith("EDITGRID_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    clear_settings()
    yield
    clear_settings()


class Surface:
    """Minimal render surface recording what was written into it."""

    def __init__(self) -> None:
        self.content: str | None = None

    def set_content(self, content: str) -> None:
        self.content = content


@pytest.fixture
def surface() -> Surface:
    """A fresh render surface."""
    return Surface()


PEOPLE_COLUMNS = [
    {"name": "name", "datatype": "string"},
    {"name": "age", "datatype": "integer"},
    {"name": "height", "datatype": "double(m,2)"},
    {"name": "member", "datatype": "boolean"},
    {"name": "joined", "datatype": "date"},
    {"name": "email", "datatype": "email"},
]

PEOPLE_ROWS = [
    {
        "id": "r1",
        "values": {
            "name": "Alice",
            "age": "34",
            "height": "1.68",
            "member": "true",
            "joined": "12/03/2019",
            "email": "alice@example.com",
        },
    },
    {
        "id": "r2",
        "values": {
            "name": "Bob",
            "age": "27",
            "height": "1.82",
            "member": "false",
            "joined": "01/11/2021",
            "email": "bob@example.com",
        },
    },
    {
        "id": "r3",
        "values": {
            "name": "Carol",
            "age": "41",
            "height": "1.75",
            "member": "1",
            "joined": "23/07/2015",
            "email": "carol@example.org",
        },
    },
    {
        "id": "r4",
        "values": {
            "name": "Dave",
            "age": "n/a",
            "height": "",
            "member": "0",
            "joined": "unknown",
            "email": "",
        },
    },
]


@pytest.fixture
def people() -> EditableGrid:
    """A grid loaded with four people."""
    grid = EditableGrid("people")
    grid.load(PEOPLE_COLUMNS, PEOPLE_ROWS)
    return grid


def ids(grid: EditableGrid) -> list[Any]:
    """Row ids of the active view, in order."""
    return [row.id for row in grid.data]
