"""
Tests for ChartConfig, Symbols and value formatting.
"""

import dataclasses

import pytest
from termplot.config import ASCII_SYMBOLS, UNICODE_SYMBOLS, ChartConfig, Symbols
from termplot.errors import ChartErrorKind, EmptyDataError, InvalidDimensionsError, InvalidRangeError
from termplot.format import decimals_for, format_value


class TestChartConfigDefaults:
    def test_defaults(self):
        config = ChartConfig()
        assert config.height == 10
        assert config.width == 80
        assert config.min is None
        assert config.max is None
        assert config.show_labels is True
        assert config.label_ticks == 5
        assert config.label_format == "{:.2}"
        assert config.symbols == UNICODE_SYMBOLS


class TestChartConfigBuilder:
    def test_builder_chain(self):
        config = (
            ChartConfig()
            .with_height(20)
            .with_width(70)
            .with_min(0.0)
            .with_max(35.0)
            .with_labels(True)
            .with_label_ticks(7)
            .with_label_format("{:.1}")
        )
        assert (config.height, config.width, config.min, config.max) == (20, 70, 0.0, 35.0)
        assert config.label_ticks == 7
        assert config.label_format == "{:.1}"

    def test_with_returns_copy(self):
        base = ChartConfig()
        taller = base.with_height(30)
        assert base.height == 10
        assert taller.height == 30

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ChartConfig().height = 3  # type: ignore[misc]

    def test_with_range(self):
        config = ChartConfig().with_range(-1.0, 1.0)
        assert (config.min, config.max) == (-1.0, 1.0)

    def test_with_precision(self):
        assert ChartConfig().with_precision(0).label_format == "{:.0}"

    def test_symbol_setters(self):
        assert ChartConfig().with_ascii_symbols().symbols is ASCII_SYMBOLS
        custom = Symbols(horizontal="=")
        assert ChartConfig().with_symbols(custom).symbols.horizontal == "="


class TestValidate:
    def test_valid(self):
        ChartConfig().with_height(10).with_width(80).validate()

    @pytest.mark.parametrize("height,width", [(0, 80), (10, 0), (-5, 10)])
    def test_invalid_dimensions(self, height: int, width: int):
        with pytest.raises(InvalidDimensionsError):
            ChartConfig(height=height, width=width).validate()

    @pytest.mark.parametrize("lo,hi", [(10.0, 5.0), (10.0, 10.0)])
    def test_invalid_range(self, lo: float, hi: float):
        with pytest.raises(InvalidRangeError):
            ChartConfig().with_min(lo).with_max(hi).validate()

    def test_single_bound_not_checked(self):
        ChartConfig().with_min(100.0).validate()
        ChartConfig().with_max(-100.0).validate()


class TestSymbols:
    def test_presets(self):
        assert Symbols.unicode() is UNICODE_SYMBOLS
        assert Symbols.ascii() is ASCII_SYMBOLS

    def test_unicode_glyphs(self):
        s = UNICODE_SYMBOLS
        assert (s.horizontal, s.vertical) == ("─", "│")
        assert (s.top_right, s.bottom_right, s.bottom_left, s.top_left) == ("╮", "╯", "╰", "╭")
        assert (s.axis_vertical, s.axis_corner, s.axis_bottom) == ("│", "┤", "┴")

    def test_ascii_glyphs_are_ascii(self):
        glyphs = [getattr(ASCII_SYMBOLS, f.name) for f in dataclasses.fields(Symbols)]
        assert all(g.isascii() for g in glyphs)
        assert set(glyphs) == {"-", "|", "+"}


class TestFormatValue:
    @pytest.mark.parametrize(
        "fmt,expected",
        [("{:.2}", "3.14"), ("{:.1}", "3.1"), ("{:.0}", "3"), ("{:.3}", "3.14"), ("garbage", "3.14"), ("", "3.14")],
    )
    def test_precision(self, fmt: str, expected: str):
        assert format_value(3.14159, fmt) == expected

    def test_decimals_for(self):
        assert decimals_for("{:.1}") == 1
        assert decimals_for("{:>8}") == 2

    def test_negative(self):
        assert format_value(-5.0, "{:.2}") == "-5.00"

    def test_non_finite(self):
        assert format_value(float("nan"), "{:.2}") == "NaN"
        assert format_value(float("inf"), "{:.2}") == "inf"
        assert format_value(float("-inf"), "{:.2}") == "-inf"


class TestErrors:
    def test_messages(self):
        assert str(EmptyDataError()) == "Cannot plot empty data"
        assert str(InvalidRangeError()) == "Invalid min/max range"
        assert str(InvalidDimensionsError()) == "Invalid chart dimensions"

    def test_kinds(self):
        assert EmptyDataError().kind == ChartErrorKind.EMPTY_DATA
        assert InvalidRangeError().kind == "invalid_range"
        assert str(InvalidDimensionsError().kind) == "invalid_dimensions"

    def test_equality_by_kind(self):
        assert EmptyDataError() == EmptyDataError()
        assert EmptyDataError() != InvalidRangeError()
