"""
Tests for building widget options from option text.
"""

import pytest

from datewidget.exceptions import InvalidFieldError, InvalidFormatError
from datewidget.expression import FieldAssignment, OffsetExpression
from datewidget.fields import CalendarUnit
from datewidget.options import DEFAULT_OPTIONS, OptionSet, build_options, parse_options


class TestParseOptions:
    """Tests for classifying option tokens."""

    def test_no_option_block(self):
        """Test a widget without options uses the shared defaults."""
        assert parse_options(None) is DEFAULT_OPTIONS

    def test_empty_option_block(self):
        """Test empty parentheses behave like no options."""
        assert parse_options("") == DEFAULT_OPTIONS
        assert parse_options("  ") == DEFAULT_OPTIONS

    def test_defaults(self):
        """Test the default options show the date only."""
        assert DEFAULT_OPTIONS == OptionSet(
            show_time=False, explicit_format=None, offset=None, override=None
        )

    def test_with_time(self):
        """Test '-t' enables the time."""
        assert parse_options("-t") == OptionSet(show_time=True)

    def test_explicit_format(self):
        """Test '-fyyyy' stores the format."""
        options = parse_options("-fyyyy")
        assert options.explicit_format == "yyyy"
        assert options.has_format

    def test_quoted_format(self):
        """Test the quotes around a format are removed."""
        options = parse_options('-f"yyyy/MM/dd hh:mm:ss:SS"')
        assert options.explicit_format == "yyyy/MM/dd hh:mm:ss:SS"

    def test_quoted_literal_text(self):
        """Test single quoted literal text is a valid format."""
        assert parse_options("-fyyyy'T'HH").explicit_format == "yyyy'T'HH"

    def test_empty_format(self):
        """Test '-f' alone gives an empty format."""
        assert parse_options("-f").explicit_format == ""

    def test_offset(self):
        """Test '+1d3h' is an offset."""
        assert parse_options("+1d3h").offset == OffsetExpression(1, (
            FieldAssignment(CalendarUnit.DAY, 1),
            FieldAssignment(CalendarUnit.HOUR, 3),
        ))

    def test_negative_offset(self):
        """Test '-5M4d' is a negative offset."""
        offset = parse_options("-5M4d").offset
        assert offset.sign == -1
        assert offset.assignments == (
            FieldAssignment(CalendarUnit.MONTH, 5),
            FieldAssignment(CalendarUnit.DAY, 4),
        )

    def test_override(self):
        """Test an unsigned expression is an override."""
        assert parse_options("2012y5M").override == (
            FieldAssignment(CalendarUnit.YEAR, 2012),
            FieldAssignment(CalendarUnit.MONTH, 5),
        )

    def test_combined_options(self):
        """Test all kinds of options can be combined."""
        options = parse_options('2012y +2d3h -t -f"ddMMyyyy hhmm"')
        assert options.show_time
        assert options.explicit_format == "ddMMyyyy hhmm"
        assert options.override == (FieldAssignment(CalendarUnit.YEAR, 2012),)
        assert str(options.offset) == "+2d3h"

    def test_order_is_not_relevant(self):
        """Test '-t 2012y' and '2012y -t' give the same options."""
        assert parse_options("-t 2012y") == parse_options("2012y -t")

    def test_last_offset_wins(self):
        """Test the last offset replaces the previous ones."""
        assert str(parse_options("+1d -2h").offset) == "-2h"

    def test_build_from_tokens(self):
        """Test options can be built from an iterable of tokens."""
        assert build_options(iter(["-t", "+1d"])) == parse_options("-t +1d")


class TestInvalidOptions:
    """Tests for options that cannot be parsed."""

    def test_invalid_override_field(self):
        """Test an unknown unit in an override raises InvalidFieldError."""
        with pytest.raises(InvalidFieldError):
            parse_options("2012Y")

    def test_invalid_offset_field(self):
        """Test '-tx' is read as an offset and fails on 't'."""
        with pytest.raises(InvalidFieldError) as excinfo:
            parse_options("-tx")
        assert excinfo.value.field == "t"

    @pytest.mark.parametrize("option", [
        "-fJJ",         # not a pattern letter
        "-fyyyy'T",     # unterminated quote
        "-fddd",        # unsupported field width
    ])
    def test_invalid_format(self, option):
        """Test invalid formats fail while the options are built."""
        with pytest.raises(InvalidFormatError):
            parse_options(option)

    def test_invalid_format_reports_letters(self):
        """Test the error names the illegal characters."""
        with pytest.raises(InvalidFormatError) as excinfo:
            parse_options("-fyyyy-nn")
        assert excinfo.value.pattern == "yyyy-nn"
        assert "'n'" in str(excinfo.value)
