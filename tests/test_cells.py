"""Tests for cell conversion."""

import locale
from typing import Optional

import pytest

from sheetsdb.parsing import CellParser
from sheetsdb.parsing.cells import (
    parse_bool,
    parse_enum,
    parse_enum_list,
    parse_float,
    parse_int,
    parse_int_list,
)

from sample_schema import Color, Config


@pytest.fixture
def comma_decimal_locale():
    """Switch LC_NUMERIC to a locale that uses a decimal comma, if one is installed."""
    previous = locale.setlocale(locale.LC_NUMERIC)
    for name in ("de_DE.UTF-8", "de_DE.utf8", "fr_FR.UTF-8", "fr_FR.utf8", "German_Germany.1252"):
        try:
            locale.setlocale(locale.LC_NUMERIC, name)
        except locale.Error:
            continue
        yield name
        locale.setlocale(locale.LC_NUMERIC, previous)
        return
    pytest.skip("No comma-decimal locale installed")


class TestPrimitiveParsers:
    """Test the single-value parsers."""

    def test_parse_int(self):
        assert parse_int("42") == (42, False)
        assert parse_int("-7") == (-7, False)
        assert parse_int(" 5 ") == (5, False)

    @pytest.mark.parametrize("cell", ["", "4.2", "abc", "1_000", "12x"])
    def test_parse_int_errors(self, cell):
        """Test that malformed integers give 0 with an error."""
        assert parse_int(cell) == (0, True)

    def test_parse_float_decimal_comma(self):
        """Test that a decimal comma is accepted."""
        assert parse_float("3,14") == (3.14, False)
        assert parse_float("3.14") == (3.14, False)
        assert parse_float("-1e3") == (-1000.0, False)

    def test_parse_float_error(self):
        value, error = parse_float("pi")
        assert error is True
        assert value == 0.0

    @pytest.mark.parametrize("cell", ["2.5", "2,5"])
    def test_parse_float_ignores_locale(self, cell, comma_decimal_locale):
        """Test that a comma-decimal process locale has no effect."""
        assert locale.localeconv()["decimal_point"] == ","
        assert parse_float(cell) == (2.5, False)

    @pytest.mark.parametrize(
        "cell,expected",
        [
            ("YES", (True, False)),
            ("true", (True, False)),
            ("No", (False, False)),
            ("FALSE", (False, False)),
            ("maybe", (False, True)),
            ("", (False, True)),
        ],
    )
    def test_parse_bool(self, cell, expected):
        assert parse_bool(cell) == expected


class TestListParsers:
    """Test list parsers and their different error policies."""

    def test_int_list(self):
        assert parse_int_list("1,2,3") == ([1, 2, 3], False)

    def test_int_list_keeps_partial_results(self):
        """Test that one bad item flags an error but keeps the rest."""
        assert parse_int_list("1,2,x") == ([1, 2], True)
        assert parse_int_list("x,3") == ([3], True)

    def test_enum_list(self):
        """Test that names are trimmed and matched case-insensitively."""
        assert parse_enum_list("red, BLUE", Color) == ([Color.RED, Color.BLUE], False)

    def test_enum_list_aborts_on_first_invalid(self):
        """Test that an unknown name discards the whole list."""
        assert parse_enum_list("Red,Purple,Blue", Color) == (None, True)


class TestEnumParser:
    """Test scalar enum parsing."""

    def test_match_ignoring_case(self):
        assert parse_enum("Blue", Color) == (Color.BLUE, False)

    def test_unknown_falls_back_silently(self):
        """Test that unknown names give the first member without an error."""
        assert parse_enum("purple", Color) == (Color.RED, False)


class TestCellParser:
    """Test dispatch by target type."""

    @pytest.fixture
    def parser(self):
        return CellParser()

    def test_string_identity(self, parser):
        result = parser.parse(" text ", str)
        assert result.value == " text "
        assert result.error is False

    def test_dispatch(self, parser):
        assert parser.parse("12", int).value == 12
        assert parser.parse("1,5", float).value == 1.5
        assert parser.parse("yes", bool).value is True
        assert parser.parse("4,5", list[int]).value == [4, 5]
        assert parser.parse("red", list[Color]).value == [Color.RED]
        assert parser.parse("red", Color).value == Color.RED

    def test_error_flag_propagates(self, parser):
        result = parser.parse("oops", int)
        assert result.value == 0
        assert result.error is True
        assert result.handled is True

    @pytest.mark.parametrize("target_type", [Config, dict, Optional[int], list[str]])
    def test_unsupported_type(self, parser, target_type):
        """Test that unknown types are reported as unhandled, not as errors."""
        result = parser.parse("1", target_type)
        assert result.handled is False
        assert result.error is False
        assert result.value is None
