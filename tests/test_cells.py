"""Tests for cell renderers, editors, validators and the datatype dispatch."""

from __future__ import annotations

import math

import pytest

from editgrid.cells import (
    CallableEnumProvider,
    CellRenderer,
    CheckboxCellRenderer,
    DateCellRenderer,
    DateCellValidator,
    EmailCellRenderer,
    EmailCellValidator,
    EnumCellRenderer,
    EnumProvider,
    FunctionValidator,
    NumberCellEditor,
    NumberCellRenderer,
    NumberCellValidator,
    SelectCellEditor,
    SortHeaderRenderer,
    TextCellEditor,
    WebsiteCellRenderer,
    WebsiteCellValidator,
    create_cell_editor,
    create_cell_renderer,
    create_header_renderer,
    default_validators,
    format_number,
)
from editgrid.grid import EditableGrid
from editgrid.models import HEADER, Column, DataRow, DataType
from tests.conftest import Surface


class TestFormatNumber:
    """Tests for format_number()."""

    def test_default_separators(self) -> None:
        """Defaults use a comma decimal point and dot thousands separator."""
        assert format_number(1234.5) == "1.234,5"
        assert format_number(-1234567) == "-1.234.567"

    def test_precision_and_custom_separators(self) -> None:
        """Precision rounds and pads the fraction."""
        result = format_number(
            1234567.891, precision=2, decimal_point=".", thousands_separator=","
        )
        assert result == "1,234,567.89"
        assert format_number(3, precision=2) == "3,00"
        assert format_number(2.5, precision=0) == "2"

    def test_unit_position(self) -> None:
        """The unit goes after the number unless asked otherwise."""
        assert format_number(12, unit="kg") == "12 kg"
        assert format_number(12, unit="€", precision=2, unit_before_number=True) == "€ 12,00"

    def test_nan_symbol(self) -> None:
        """NaN renders as the nan symbol without unit."""
        assert format_number(math.nan, unit="kg") == ""
        assert format_number(math.nan, unit="kg", nan_symbol="N/A") == "N/A"

    def test_no_thousands_separator(self) -> None:
        """An empty separator disables grouping."""
        assert format_number(1234567, thousands_separator="") == "1234567"


class TestRenderers:
    """Tests for the renderer variants."""

    def test_render_writes_surface(self) -> None:
        """render() returns the text and writes it into the surface."""
        surface = Surface()
        assert CellRenderer().render(0, 0, surface, 2.0) == "2"
        assert surface.content == "2"

    def test_render_without_surface(self) -> None:
        """A missing surface is allowed."""
        assert CellRenderer().render(DataRow(0), 0, None, "x") == "x"

    def test_number_renderer_uses_column(self) -> None:
        """The number renderer reads the column's formatting options."""
        column = Column(name="w", datatype="double", unit="kg", precision=1, nan_symbol="-")
        renderer = NumberCellRenderer().bind(None, column)
        assert renderer.render(0, 0, None, 1234.56) == "1.234,6 kg"
        assert renderer.render(0, 0, None, math.nan) == "-"

    def test_checkbox(self) -> None:
        """Booleans render as a checkbox."""
        renderer = CheckboxCellRenderer()
        assert renderer.render(0, 0, None, True) == "[x]"
        assert renderer.render(0, 0, None, False) == "[ ]"

    def test_links(self) -> None:
        """Email and website renderers expose link targets."""
        assert EmailCellRenderer().link_for("a@b.org") == "mailto:a@b.org"
        assert EmailCellRenderer().link_for("") is None
        assert WebsiteCellRenderer().link_for("example.com") == "http://example.com"
        assert WebsiteCellRenderer().link_for("https://example.com") == "https://example.com"

    def test_date_renderer(self) -> None:
        """Dates are displayed with month names; other text as is."""
        grid = EditableGrid("dates")
        renderer = DateCellRenderer().bind(grid, Column(name="d", datatype="date"))
        assert renderer.render(0, 0, None, "12/03/2019") == "12 Mar 2019"
        assert renderer.render(0, 0, None, "someday") == "someday"

    def test_enum_renderer_flat_and_grouped(self) -> None:
        """Option labels are found in flat and grouped option values."""
        column = Column(
            name="country",
            option_values={"fr": "France", "Europe": {"de": "Germany"}},
        )
        column.enum_provider = EnumProvider()
        renderer = EnumCellRenderer().bind(None, column)
        assert renderer.render(0, 0, None, "fr") == "France"
        assert renderer.render(0, 0, None, "de") == "Germany"
        assert renderer.render(0, 0, None, "xx") == "xx"

    def test_sort_header_marks_sorted_column(self, people: EditableGrid) -> None:
        """The sorted column's header shows the direction."""
        renderer = people.columns[1].header_renderer
        assert isinstance(renderer, SortHeaderRenderer)
        assert renderer.render(HEADER, 1, None, "age") == "age"
        people.sort("age")
        assert renderer.render(HEADER, 1, None, "age") == "age ↑"
        people.sort("age", descending=True)
        assert renderer.render(HEADER, 1, None, "age") == "age ↓"


class TestValidators:
    """Tests for the validator variants."""

    def test_integer(self) -> None:
        """Integer columns accept whole numbers only."""
        validator = NumberCellValidator(DataType.INTEGER)
        assert validator.is_valid("12")
        assert validator.is_valid("-3")
        assert validator.is_valid("")
        assert not validator.is_valid("1.5")
        assert not validator.is_valid("abc")

    def test_double(self) -> None:
        """Double columns accept decimal and exponent notation."""
        validator = NumberCellValidator(DataType.DOUBLE)
        assert validator.is_valid("1.5")
        assert validator.is_valid("1.5e3")
        assert validator.is_valid(2)
        assert not validator.is_valid("1,5")

    def test_email(self) -> None:
        """Email addresses need a local part, a domain and a suffix."""
        validator = EmailCellValidator()
        assert validator.is_valid("first.last+tag@example.co.uk")
        assert validator.is_valid("")
        assert not validator.is_valid("nope")
        assert not validator.is_valid("a@b")

    def test_website(self) -> None:
        """Websites may carry a scheme, port and path."""
        validator = WebsiteCellValidator()
        assert validator.is_valid("example.com")
        assert validator.is_valid("https://example.com:8080/path?q=1")
        assert not validator.is_valid("not a url")

    def test_date_uses_grid_format(self) -> None:
        """Date validation follows the grid's date format."""
        grid = EditableGrid("dates", date_format="US")
        validator = DateCellValidator().bind(grid, Column(name="d", datatype="date"))
        assert validator.is_valid("02/28/2020")
        assert not validator.is_valid("28/02/2020")
        assert validator.is_valid("")

    def test_function_validator(self) -> None:
        """Predicates are wrapped, and errors in them mean invalid."""
        validator = FunctionValidator(lambda v: int(v) < 100, name="below_100")
        assert validator.is_valid("99")
        assert not validator.is_valid("150")
        assert not validator.is_valid("abc")
        assert "below_100" in repr(validator)


class TestEditors:
    """Tests for editors and edit sessions."""

    def test_number_editor_blank_for_nan(self) -> None:
        """NaN is edited as an empty field."""
        editor = NumberCellEditor(DataType.DOUBLE)
        assert editor.format_for_edit(math.nan) == ""
        assert editor.format_for_edit(2.0) == "2"
        assert editor.input_kind == "number"

    def test_session_commit_and_cancel(self, people: EditableGrid) -> None:
        """Sessions commit through the grid and close when accepted."""
        session = people.begin_edit(0, "name")
        assert session is not None
        assert session.text == "Alice"
        result = session.commit("Alicia")
        assert result.accepted
        assert not session.active
        with pytest.raises(Exception):
            session.commit("again")

    def test_cancel_leaves_value(self, people: EditableGrid) -> None:
        """Cancelling does not touch the store."""
        session = people.begin_edit(0, "name")
        result = session.cancel()
        assert result.cancelled
        assert not result.accepted
        assert people.get_value_at(0, "name") == "Alice"

    def test_select_editor_options(self) -> None:
        """Select editors offer the provider's options for the row."""
        column = Column(name="c", option_values={"a": "A"})
        column.enum_provider = CallableEnumProvider(
            for_edit=lambda grid, col, row: {"b": f"B{row}"}
        )
        editor = SelectCellEditor().bind(None, column)
        assert editor.options(3) == {"b": "B3"}
        assert column.option_values_for_render(3) == {"a": "A"}


class TestDispatch:
    """Tests for default capability selection."""

    @pytest.mark.parametrize(
        ("datatype", "expected"),
        [
            ("integer", NumberCellRenderer),
            ("double", NumberCellRenderer),
            ("boolean", CheckboxCellRenderer),
            ("email", EmailCellRenderer),
            ("website", WebsiteCellRenderer),
            ("url", WebsiteCellRenderer),
            ("date", DateCellRenderer),
            ("string", CellRenderer),
            ("currency", CellRenderer),
        ],
    )
    def test_cell_renderer_by_datatype(self, datatype: str, expected: type) -> None:
        """Each datatype gets its renderer."""
        assert type(create_cell_renderer(Column(name="c", datatype=datatype))) is expected

    def test_enum_provider_wins(self) -> None:
        """An enum provider forces the enum renderer and select editor."""
        column = Column(name="c", datatype="integer")
        column.enum_provider = EnumProvider()
        assert type(create_cell_renderer(column)) is EnumCellRenderer
        assert type(create_cell_editor(column)) is SelectCellEditor

    def test_editors(self) -> None:
        """Booleans have no editor, numbers and dates have their own."""
        assert create_cell_editor(Column(name="c", datatype="boolean")) is None
        number_editor = create_cell_editor(Column(name="c", datatype="integer"))
        assert isinstance(number_editor, NumberCellEditor)
        assert number_editor.datatype is DataType.INTEGER
        date_editor = create_cell_editor(Column(name="c", datatype="date"))
        assert isinstance(date_editor, TextCellEditor)
        assert date_editor.max_length == 10

    def test_header_renderer(self) -> None:
        """Sortable grids get sort headers except for html columns."""
        assert isinstance(create_header_renderer(Column(name="c"), True), SortHeaderRenderer)
        html = Column(name="c", datatype="html")
        assert type(create_header_renderer(html, True)) is CellRenderer
        assert type(create_header_renderer(Column(name="c"), False)) is CellRenderer

    def test_default_validators(self) -> None:
        """Typed columns get a validator, text columns none."""
        assert [type(v) for v in default_validators(Column(name="c", datatype="url"))] == [
            WebsiteCellValidator
        ]
        assert default_validators(Column(name="c")) == []
