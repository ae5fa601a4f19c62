"""Tests for range notation parsing and membership."""

from __future__ import annotations

import pytest

from numtol.exceptions import FormatError, RangeFormatError
from numtol.ranges import Range, is_in_range, parse_range

TOL = 1e-9
PROBES = [-100.0, -1.0, 0.0, 1e-10, 0.5, 5.0, 9.999999, 10.0, 10.5, 20.0, 30.0, 35.0, 1e9]


class TestParseRange:
    """Tests for parse_range."""

    def test_inclusive_lower_exclusive_upper(self) -> None:
        """'[0, 10)' parses both bounds with their inclusivity."""
        assert parse_range("[0, 10)") == Range(lower=0.0, lower_inclusive=True, upper=10.0, upper_inclusive=False)

    def test_exclusive_lower_inclusive_upper(self) -> None:
        """'(1.5,2.5]' parses both bounds."""
        assert parse_range("(1.5,2.5]") == Range(lower=1.5, lower_inclusive=False, upper=2.5, upper_inclusive=True)

    def test_missing_upper_bound(self) -> None:
        """An empty upper field is unbounded."""
        parsed = parse_range("(30,)")
        assert parsed.lower == 30.0
        assert parsed.upper is None
        assert parsed.is_unbounded is False

    def test_missing_lower_bound(self) -> None:
        """An empty lower field is unbounded."""
        parsed = parse_range("(,10]")
        assert parsed.lower is None
        assert parsed.upper == 10.0

    def test_both_bounds_missing(self) -> None:
        """Two empty fields give an unbounded range."""
        assert parse_range("[,]").is_unbounded is True
        assert parse_range("( , )").is_unbounded is True

    def test_whitespace_is_ignored(self) -> None:
        """Whitespace around brackets and comma is ignored."""
        assert parse_range("  [ -1.5 ,  2e3 ]  ") == Range(lower=-1.5, lower_inclusive=True, upper=2000.0, upper_inclusive=True)

    def test_missing_brackets_are_exclusive(self) -> None:
        """Text without brackets parses with exclusive bounds."""
        assert parse_range("0,10") == Range(lower=0.0, lower_inclusive=False, upper=10.0, upper_inclusive=False)

    @pytest.mark.parametrize(
        ("text", "reason"),
        [
            ("[0 10]", "Expected 2 comma-separated fields, found 1"),
            ("[0,5,10]", "Expected 2 comma-separated fields, found 3"),
            ("[a,10]", "Non-numeric bound"),
            ("[0,ten)", "Non-numeric bound"),
            ("{0,10}", "Non-numeric bound"),
            ("[\u0660,\uff11\u0660)", "Non-numeric bound"),
            ("[0;10]", "Expected 2 comma-separated fields"),
            ("   ", "Empty range"),
        ],
    )
    def test_malformed_text_raises(self, text: str, reason: str) -> None:
        """Malformed text raises RangeFormatError."""
        with pytest.raises(RangeFormatError, match=reason):
            parse_range(text)

    def test_non_numeric_bound_chains_cause(self) -> None:
        """Bound parse failures keep the float parse error as cause."""
        with pytest.raises(RangeFormatError) as exc_info:
            parse_range("[x,1]")
        assert isinstance(exc_info.value.__cause__, FormatError)
        assert exc_info.value.text == "[x,1]"

    def test_range_format_error_is_value_error(self) -> None:
        """Callers catching ValueError also catch range errors."""
        with pytest.raises(ValueError):
            parse_range("[0]")


class TestIsInRange:
    """Tests for is_in_range."""

    def test_inside_half_open(self) -> None:
        """5 lies in [0, 10)."""
        assert is_in_range(5.0, TOL, "[0,10)") is True

    def test_excluded_upper_bound(self) -> None:
        """10 is outside [0, 10)."""
        assert is_in_range(10.0, TOL, "[0,10)") is False

    def test_tolerance_band_around_exclusive_bound_is_excluded(self) -> None:
        """Values within tolerance of an excluded upper bound are out of range."""
        assert is_in_range(10.0, 0.5, "[0,10)") is False
        assert is_in_range(9.6, 0.5, "[0,10)") is False
        assert is_in_range(9.4, 0.5, "[0,10)") is True

    def test_tolerance_band_around_inclusive_bound_is_included(self) -> None:
        """Values within tolerance beyond an included upper bound are in range."""
        assert is_in_range(10.0, 0.5, "[0,10]") is True
        assert is_in_range(10.4, 0.5, "[0,10]") is True
        assert is_in_range(10.6, 0.5, "[0,10]") is False

    def test_lower_only(self) -> None:
        """35 lies in (30,)."""
        assert is_in_range(35.0, TOL, "(30,)") is True
        assert is_in_range(30.0, TOL, "(30,)") is False

    def test_upper_only(self) -> None:
        """5 lies in (,10]."""
        assert is_in_range(5.0, TOL, "(,10]") is True
        assert is_in_range(10.0, TOL, "(,10]") is True
        assert is_in_range(10.5, TOL, "(,10]") is False

    def test_inclusive_lower_bound(self) -> None:
        """The inclusive lower bound and values within tolerance below it are in range."""
        assert is_in_range(0.0, TOL, "[0,10)") is True
        assert is_in_range(-1e-10, TOL, "[0,10)") is True
        assert is_in_range(-1e-3, TOL, "[0,10)") is False

    def test_exclusive_lower_bound_within_tolerance(self) -> None:
        """Values within tolerance of an exclusive bound are excluded."""
        assert is_in_range(1e-10, TOL, "(0,10)") is False

    def test_unbounded_accepts_everything(self) -> None:
        """'(,)' accepts any number."""
        assert is_in_range(-1e300, TOL, "(,)") is True
        assert is_in_range(1e300, TOL, "[,]") is True

    def test_malformed_range_propagates(self) -> None:
        """Malformed text raises instead of returning a default."""
        with pytest.raises(RangeFormatError):
            is_in_range(5.0, TOL, "[0 10]")


@pytest.mark.parametrize("text", ["[0, 10)", "(30,)", "(,10]", "[,]", "[-2.5e-3, 1e6]", "(0.1, 0.3)"])
def test_serialized_range_reparses_to_same_membership(text):
    parsed = parse_range(text)
    reparsed = parse_range(str(parsed))

    assert reparsed == parsed
    for probe in PROBES:
        assert reparsed.contains(probe, TOL) is is_in_range(probe, TOL, text)


def test_range_str_uses_grammar():
    assert str(parse_range("[0, 10)")) == "[0.0,10.0)"
    assert str(parse_range("(30,)")) == "(30.0,)"
