"""Unit tests for path-data serialization.

Tests cover:
- Number formatting (integers, fixed decimals, rounding)
- Value packing (space only before non-negative values)
- Full path data for every command type
- SVG <path> fragment style attributes
"""

import pytest

from glyphpath.core.serializer import (
    format_number,
    format_width,
    pack_values,
    to_path_data,
    to_svg_fragment,
)
from glyphpath.domain import (
    Close,
    CubicCurve,
    Line,
    Move,
    PathCommandSequence,
    PathStyle,
    QuadCurve,
)


class TestFormatNumber:
    """Tests for coordinate formatting."""

    def test_integers_have_no_decimal_point(self):
        """Whole numbers print without decimals, whatever their type."""
        assert format_number(10) == "10"
        assert format_number(10.0) == "10"
        assert format_number(-3.0) == "-3"
        assert format_number(0.0) == "0"

    def test_negative_zero_prints_as_zero(self):
        """-0.0 is a whole number."""
        assert format_number(-0.0) == "0"

    def test_fractions_fixed_to_decimal_places(self):
        """Fractional values always get exactly decimal_places digits."""
        assert format_number(1.5) == "1.50"
        assert format_number(-21.6) == "-21.60"
        assert format_number(1.5, 3) == "1.500"
        assert format_number(0.333333, 4) == "0.3333"

    def test_zero_decimal_places(self):
        """With no decimals, fractions round to whole numbers."""
        assert format_number(2.5, 0) == "3"
        assert format_number(2.4, 0) == "2"

    def test_rounds_half_away_from_zero(self):
        """Exact binary halves round away from zero."""
        assert format_number(0.125) == "0.13"
        assert format_number(-0.125) == "-0.13"

    def test_rounding_uses_exact_binary_value(self):
        """1.005 is stored slightly below 1.005 and rounds down."""
        assert format_number(1.005) == "1.00"

    def test_small_negative_keeps_sign(self):
        """A negative value rounding to zero keeps its sign."""
        assert format_number(-0.001) == "-0.00"

    def test_tiny_values_stay_fixed_notation(self):
        """Values far below the last digit print as zeros, not exponents."""
        assert format_number(1e-9, 8) == "0.00000000"
        assert format_number(-1e-12, 10) == "-0.0000000000"

    def test_many_decimal_places(self):
        """Large values with many decimals exceed the default precision."""
        assert format_number(1234567.5, 25) == "1234567.5" + "0" * 24
        assert format_number(0.1, 30) == "0.100000000000000005551115123126"

    def test_non_finite_rejected(self):
        """NaN and infinity cannot be written as path data."""
        with pytest.raises(ValueError):
            format_number(float("nan"))
        with pytest.raises(ValueError):
            format_number(float("inf"))


class TestPackValues:
    """Tests for joining the values of one command."""

    def test_space_between_positive_values(self):
        """Non-negative values after the first are space separated."""
        assert pack_values([1, 2, 3]) == "1 2 3"

    def test_no_space_before_negative(self):
        """The minus sign separates negative values."""
        assert pack_values([1, -2, -3, 4]) == "1-2-3 4"

    def test_first_value_never_prefixed(self):
        """No leading space, even for a positive first value."""
        assert pack_values([5]) == "5"
        assert pack_values([-5, 5]) == "-5 5"

    def test_empty(self):
        """No values pack to an empty string."""
        assert pack_values([]) == ""


class TestToPathData:
    """Tests for path-data strings."""

    def test_square(self):
        """Closed square serializes compactly."""
        commands = [Move(0, 0), Line(10, 0), Line(10, 10), Line(0, 10), Close()]
        assert to_path_data(commands) == "M0 0L10 0L10 10L0 10Z"

    def test_all_command_types(self):
        """Each command uses its letter and value order."""
        commands = [
            Move(0, -10),
            QuadCurve(5, -15, 10, -10),
            CubicCurve(12.5, -8, 14, 0, 20, 0),
            Close(),
        ]
        assert to_path_data(commands) == "M0-10Q5-15 10-10C12.50-8 14 0 20 0Z"

    def test_decimal_places(self):
        """decimal_places applies to every fractional value."""
        commands = [Move(0.5, 1), Line(1.25, -0.75)]
        assert to_path_data(commands, 1) == "M0.5 1L1.3-0.8"

    def test_empty(self):
        """An empty path has empty path data."""
        assert to_path_data([]) == ""

    def test_sequence_method(self):
        """PathCommandSequence.to_path_data delegates here."""
        path = PathCommandSequence()
        path.move_to(1.5, 2)
        path.line_to(3, -4)
        assert path.to_path_data() == "M1.50 2L3-4"


class TestToSvgFragment:
    """Tests for the styled <path> element."""

    COMMANDS = [Move(0, 0), Line(10, 0), Close()]

    def test_default_black_fill_omitted(self):
        """The default fill is not written."""
        assert to_svg_fragment(self.COMMANDS, PathStyle()) == '<path d="M0 0L10 0Z"/>'

    def test_no_fill_written_as_none(self):
        """An absent fill is written as fill="none"."""
        svg = to_svg_fragment(self.COMMANDS, PathStyle(fill=None))
        assert svg == '<path d="M0 0L10 0Z" fill="none"/>'

    def test_custom_fill(self):
        """Any other fill color is written."""
        svg = to_svg_fragment(self.COMMANDS, PathStyle(fill="#ff0000"))
        assert svg == '<path d="M0 0L10 0Z" fill="#ff0000"/>'

    def test_stroke_attributes(self):
        """Stroke and stroke-width are written together."""
        style = PathStyle(fill=None, stroke="blue", stroke_width=2)
        svg = to_svg_fragment(self.COMMANDS, style)
        assert svg == '<path d="M0 0L10 0Z" fill="none" stroke="blue" stroke-width="2"/>'

    def test_stroke_width_without_stroke_ignored(self):
        """stroke-width alone is not written."""
        svg = to_svg_fragment(self.COMMANDS, PathStyle(stroke_width=4))
        assert "stroke" not in svg

    def test_fractional_stroke_width(self):
        """stroke-width is written as given, not fixed to decimal places."""
        svg = to_svg_fragment(self.COMMANDS, PathStyle(stroke="red", stroke_width=0.5))
        assert 'stroke-width="0.5"' in svg

    def test_stroke_width_ignores_decimal_places(self):
        """decimal_places only applies to the path data."""
        style = PathStyle(stroke="red", stroke_width=1.25)
        svg = to_svg_fragment([Move(0, 0), Line(1.5, 0)], style, decimal_places=1)
        assert svg.startswith('<path d="M0 0L1.5 0"')
        assert 'stroke-width="1.25"' in svg

    def test_attribute_escaping(self):
        """Quotes in colors cannot break the attribute."""
        svg = to_svg_fragment(self.COMMANDS, PathStyle(fill='url("#g")'))
        assert 'fill="url(&quot;#g&quot;)"' in svg

    def test_sequence_method(self):
        """PathCommandSequence.to_svg uses the path's own style."""
        path = PathCommandSequence()
        path.move_to(0, 0)
        path.line_to(1, 1)
        path.fill = None
        path.stroke = "black"
        assert path.to_svg() == '<path d="M0 0L1 1" fill="none" stroke="black" stroke-width="1"/>'
