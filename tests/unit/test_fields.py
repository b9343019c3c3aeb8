"""Unit tests for named-value lookup and primitive parsing.

Tests cover:
- Expected-position fast path and fallback scan
- Case-insensitive names and first-occurrence semantics
- Integer and flag conversions with defaults
- Point and padding parsing, including component order
"""

import pytest

from bmfontloader.core.fields import (
    get_named_bool,
    get_named_int,
    get_named_string,
    parse_padding,
    parse_point,
    to_bool,
    to_int,
)
from bmfontloader.domain import Padding, Point
from bmfontloader.exceptions import MalformedDataError


class TestGetNamedString:
    """Tests for get_named_string."""

    def test_value_at_expected_index(self):
        """A field at its expected position is returned."""
        parts = ["page", "id=0", 'file="a.png"']
        assert get_named_string(parts, "file", 2) == "a.png"

    def test_expected_index_not_rescanned(self):
        """A match at the expected index wins over earlier duplicates."""
        parts = ["char", "id=99", "x=1", "id=5"]
        assert get_named_string(parts, "id", 3) == "5"

    def test_fallback_scan_for_reordered_record(self):
        """A field away from its expected position is found by scanning."""
        parts = ["page", 'file="a.png"', "id=3"]
        assert get_named_string(parts, "id", 1) == "3"
        assert get_named_string(parts, "file", 2) == "a.png"

    def test_fallback_scan_first_occurrence_wins(self):
        """The scan returns the first matching field."""
        parts = ["char", "x=1", "id=7", "id=8"]
        assert get_named_string(parts, "id", 1) == "7"

    def test_case_insensitive_name(self):
        """Names match regardless of case."""
        parts = ["common", "LINEHEIGHT=32"]
        assert get_named_string(parts, "lineHeight", 1) == "32"
        assert get_named_string(parts, "lineheight", 5) == "32"

    def test_name_must_match_whole(self):
        """A field whose name only starts with the wanted name does not match."""
        parts = ["info", "sizex=3", "size=32"]
        assert get_named_string(parts, "size", 1) == "32"

    def test_absent_field(self):
        """Missing fields yield an empty string."""
        assert get_named_string(["page", "id=0"], "file", 2) == ""

    def test_expected_index_out_of_range(self):
        """An expected index past the end falls back to a scan."""
        assert get_named_string(["page", "id=4"], "id", 10) == "4"

    def test_value_containing_equals(self):
        """Only the first equals sign separates name and value."""
        assert get_named_string(["page", 'file="a=b.png"'], "file", 1) == "a=b.png"


class TestTypedAccessors:
    """Tests for integer and flag accessors."""

    def test_named_int(self):
        """Integer fields parse as base 10."""
        assert get_named_int(["char", "xoffset=-3"], "xoffset", 1) == -3

    def test_named_int_absent_is_zero(self):
        """Absent integer fields default to 0."""
        assert get_named_int(["char"], "xoffset", 1) == 0

    def test_named_int_invalid_is_zero(self):
        """Non-numeric integer fields default to 0."""
        assert get_named_int(["char", "id=abc"], "id", 1) == 0

    def test_named_int_quoted(self):
        """Quoted numbers are unwrapped before parsing."""
        assert get_named_int(["info", 'size="32"'], "size", 1) == 32

    def test_named_bool(self):
        """Flags are true only for values greater than zero."""
        assert get_named_bool(["info", "bold=1"], "bold", 1) is True
        assert get_named_bool(["info", "bold=2"], "bold", 1) is True
        assert get_named_bool(["info", "bold=0"], "bold", 1) is False
        assert get_named_bool(["info", "bold=-1"], "bold", 1) is False

    def test_named_bool_absent_is_false(self):
        """Absent flags are false."""
        assert get_named_bool(["info"], "bold", 1) is False

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("42", 42), ("-7", -7), ("+3", 3), (" 5 ", 5), ("", 0), (None, 0), ("1.5", 0), ("0x10", 0)],
    )
    def test_to_int(self, value, expected):
        """to_int accepts signed decimal integers only."""
        assert to_int(value) == expected

    def test_to_int_custom_default(self):
        """to_int returns the given default for invalid input."""
        assert to_int("x", default=-1) == -1

    def test_to_int_huge_value(self):
        """Integers too long to convert fall back to the default."""
        assert to_int("9" * 5000) == 0
        assert to_int("9" * 5000, default=-1) == -1

    def test_named_int_huge_value(self):
        """A huge named integer reads as 0."""
        assert get_named_int(["char", "id=" + "9" * 5000], "id", 1) == 0

    def test_to_bool(self):
        """to_bool mirrors the flag accessor."""
        assert to_bool("1") is True
        assert to_bool("true") is False
        assert to_bool(None) is False


class TestParsePoint:
    """Tests for parse_point."""

    def test_parse_point(self):
        """x,y parses into a point."""
        assert parse_point("5,7") == Point(x=5, y=7)

    def test_parse_negative_point(self):
        """Components may be negative."""
        assert parse_point("-1,-2") == Point(-1, -2)

    def test_missing_comma(self):
        """Input without a comma is rejected."""
        with pytest.raises(MalformedDataError):
            parse_point("57")

    def test_non_numeric_component(self):
        """Non-numeric components are rejected."""
        with pytest.raises(MalformedDataError):
            parse_point("5,y")

    def test_extra_component(self):
        """Only the first comma splits, so a third component is invalid."""
        with pytest.raises(MalformedDataError):
            parse_point("1,2,3")

    def test_huge_component(self):
        """Components too long to convert are malformed."""
        with pytest.raises(MalformedDataError, match="too many digits"):
            parse_point("9" * 5000 + ",1")


class TestParsePadding:
    """Tests for parse_padding."""

    def test_wire_order_is_top_right_bottom_left(self):
        """top,right,bottom,left is rearranged to left,top,right,bottom."""
        assert parse_padding("1,2,3,4") == Padding(left=4, top=1, right=2, bottom=3)

    def test_zero_padding(self):
        """All-zero padding parses."""
        assert parse_padding("0,0,0,0") == Padding()

    def test_too_few_commas(self):
        """Fewer than four components are rejected."""
        with pytest.raises(MalformedDataError):
            parse_padding("1,2,3")

    def test_non_numeric_component(self):
        """Non-numeric components are rejected."""
        with pytest.raises(MalformedDataError):
            parse_padding("1,2,x,4")

    def test_extra_component(self):
        """A fifth component makes the left value invalid."""
        with pytest.raises(MalformedDataError):
            parse_padding("1,2,3,4,5")

    def test_huge_component(self):
        """Components too long to convert are malformed."""
        with pytest.raises(MalformedDataError, match="too many digits"):
            parse_padding("1,2," + "9" * 5000 + ",4")
