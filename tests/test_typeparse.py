"""Tests for the column type descriptor parser."""

from __future__ import annotations

import pytest

from editgrid.models import Column
from editgrid.typeparse import TypeDescriptor, parse_column_type, parse_type_descriptor


class TestParseTypeDescriptor:
    """Tests for parse_type_descriptor()."""

    def test_bare_keyword(self) -> None:
        """A keyword without parentheses carries no parameters."""
        descriptor = parse_type_descriptor("double")
        assert descriptor.datatype == "double"
        assert descriptor.updates() == {"datatype": "double"}

    def test_single_numeric_parameter_is_precision(self) -> None:
        """double(2) sets the precision."""
        descriptor = parse_type_descriptor("double(2)")
        assert descriptor.datatype == "double"
        assert descriptor.precision == 2
        assert descriptor.unit is None

    def test_single_text_parameter_is_unit(self) -> None:
        """double(kg) sets the unit."""
        descriptor = parse_type_descriptor("double(kg)")
        assert descriptor.unit == "kg"
        assert not descriptor.precision_given

    def test_unit_and_precision(self) -> None:
        """Two parameters are unit then precision."""
        descriptor = parse_type_descriptor("double(€, 2)")
        assert descriptor.unit == "€"
        assert descriptor.precision == 2

    def test_three_parameters_add_nan_symbol(self) -> None:
        """Three parameters are unit, precision and nan symbol."""
        descriptor = parse_type_descriptor("integer(pcs,0,-)")
        assert descriptor.datatype == "integer"
        assert descriptor.unit == "pcs"
        assert descriptor.precision == 0
        assert descriptor.nan_symbol == "-"

    def test_five_parameters_with_separator_tokens(self) -> None:
        """comma/dot tokens become the separator characters."""
        descriptor = parse_type_descriptor("double($,2,dot,comma,1)")
        assert descriptor.unit == "$"
        assert descriptor.precision == 2
        assert descriptor.decimal_point == "."
        assert descriptor.thousands_separator == ","
        assert descriptor.unit_before_number is True
        assert descriptor.nan_symbol is None

    def test_six_parameters(self) -> None:
        """All six parameters are applied in order."""
        descriptor = parse_type_descriptor("double(kg,2,.,',1,N/A)")
        assert descriptor.datatype == "double"
        assert descriptor.unit == "kg"
        assert descriptor.precision == 2
        assert descriptor.decimal_point == "."
        assert descriptor.thousands_separator == "'"
        assert descriptor.unit_before_number is True
        assert descriptor.nan_symbol == "N/A"

    def test_unit_before_number_flag_only_for_one(self) -> None:
        """Any flag other than "1" means unit after number."""
        descriptor = parse_type_descriptor("double(kg,2,comma,dot,0)")
        assert descriptor.unit_before_number is False

    def test_non_numeric_precision_is_unspecified(self) -> None:
        """A precision that is not a number clears the precision."""
        descriptor = parse_type_descriptor("double(kg,x)")
        assert descriptor.precision is None
        assert descriptor.precision_given
        assert descriptor.updates()["precision"] is None

    def test_empty_unit_is_unset(self) -> None:
        """An empty unit parameter leaves the unit unset."""
        descriptor = parse_type_descriptor("double(,2)")
        assert descriptor.unit is None
        assert descriptor.precision == 2

    def test_four_parameters_widen_the_unit(self) -> None:
        """With four parameters the first two form the unit."""
        descriptor = parse_type_descriptor("double(a,b,2,N/A)")
        assert descriptor.unit == "a,b"
        assert descriptor.precision == 2
        assert descriptor.nan_symbol == "N/A"

    def test_seven_parameters_widen_the_unit(self) -> None:
        """Beyond six parameters the surplus leading ones form the unit."""
        descriptor = parse_type_descriptor("double(k,g,2,.,comma,1,N/A)")
        assert descriptor.unit == "k,g"
        assert descriptor.precision == 2
        assert descriptor.decimal_point == "."
        assert descriptor.thousands_separator == ","
        assert descriptor.unit_before_number is True
        assert descriptor.nan_symbol == "N/A"

    def test_descriptor_is_frozen(self) -> None:
        """Parsed descriptors cannot be modified."""
        descriptor = parse_type_descriptor("double(2)")
        with pytest.raises(Exception):
            descriptor.precision = 3  # type: ignore[misc]


class TestParseColumnType:
    """Tests for parse_column_type()."""

    def test_applies_parameters_in_one_step(self) -> None:
        """The column keeps the bare keyword and gets every parameter."""
        column = parse_column_type(Column(name="w", datatype="double(kg,2,.,',1,N/A)"))
        assert column.datatype == "double"
        assert column.unit == "kg"
        assert column.precision == 2
        assert column.decimal_point == "."
        assert column.thousands_separator == "'"
        assert column.unit_before_number is True
        assert column.nan_symbol == "N/A"

    def test_defaults_kept_when_not_given(self) -> None:
        """Parameters that were not given keep the column defaults."""
        column = parse_column_type(Column(name="w", datatype="double(kg)"))
        assert column.decimal_point == ","
        assert column.thousands_separator == "."
        assert column.precision is None

    def test_non_numeric_precision_clears_existing(self) -> None:
        """A non-numeric precision parameter clears a precision set earlier."""
        column = parse_column_type(Column(name="w", datatype="double(kg,abc)", precision=3))
        assert column.precision is None

    def test_normalizes_stored_separator_tokens(self) -> None:
        """Separator tokens set directly on the column are normalized too."""
        column = parse_column_type(
            Column(name="w", datatype="double", decimal_point="dot", thousands_separator="comma")
        )
        assert column.decimal_point == "."
        assert column.thousands_separator == ","

    def test_unknown_keyword_kept(self) -> None:
        """Unknown keywords survive as plain text columns."""
        column = parse_column_type(Column(name="c", datatype="currency(€)"))
        assert column.datatype == "currency"
        assert column.unit == "€"
        assert column.data_type is None
