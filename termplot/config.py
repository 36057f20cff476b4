# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Termplot Contributors
#
# This file is part of Termplot.
#
# Termplot is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Termplot is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from dataclasses import dataclass, replace

from termplot.errors import InvalidDimensionsError, InvalidRangeError

DEFAULT_LABEL_FORMAT = "{:.2}"


@dataclass(frozen=True, slots=True)
class Symbols:
    """
    Glyphs used to draw the line and the label axis.

    Corner names describe where the stroke enters the cell:
      top_right    ╮  line arrives from the left and turns down
      bottom_right ╯  line arrives from the left and turns up
      bottom_left  ╰  line leaves to the right after coming down
      top_left     ╭  line leaves to the right after going up

    axis_corner and axis_bottom belong to the set for completeness;
    the renderer only draws with axis_vertical.
    """

    horizontal: str = "─"
    vertical: str = "│"
    top_right: str = "╮"
    bottom_right: str = "╯"
    bottom_left: str = "╰"
    top_left: str = "╭"
    axis_vertical: str = "│"
    axis_corner: str = "┤"
    axis_bottom: str = "┴"

    @staticmethod
    def unicode() -> "Symbols":
        """Box-drawing glyphs (the default)."""
        return UNICODE_SYMBOLS

    @staticmethod
    def ascii() -> "Symbols":
        """Plain ASCII glyphs for terminals without box-drawing support."""
        return ASCII_SYMBOLS


UNICODE_SYMBOLS = Symbols()

ASCII_SYMBOLS = Symbols(
    horizontal="-",
    vertical="|",
    top_right="+",
    bottom_right="+",
    bottom_left="+",
    top_left="+",
    axis_vertical="|",
    axis_corner="|",
    axis_bottom="+",
)


@dataclass(frozen=True, slots=True)
class ChartConfig:
    """
    Rendering options for a single chart.

    Immutable: every ``with_*`` method returns a modified copy, so a config
    handed to `render()` cannot change underneath it.

    width counts every character column, including the reserved column 0,
    so at most ``width - 1`` samples are drawn.
    """

    height: int = 10
    width: int = 80
    min: float | None = None
    max: float | None = None
    show_labels: bool = True
    label_ticks: int = 5
    label_format: str = DEFAULT_LABEL_FORMAT
    symbols: Symbols = UNICODE_SYMBOLS

    def with_height(self, height: int) -> "ChartConfig":
        return replace(self, height=height)

    def with_width(self, width: int) -> "ChartConfig":
        return replace(self, width=width)

    def with_min(self, min: float) -> "ChartConfig":
        return replace(self, min=min)

    def with_max(self, max: float) -> "ChartConfig":
        return replace(self, max=max)

    def with_range(self, min: float, max: float) -> "ChartConfig":
        return replace(self, min=min, max=max)

    def with_labels(self, show: bool) -> "ChartConfig":
        return replace(self, show_labels=show)

    def with_label_ticks(self, ticks: int) -> "ChartConfig":
        return replace(self, label_ticks=ticks)

    def with_label_format(self, label_format: str) -> "ChartConfig":
        return replace(self, label_format=label_format)

    def with_precision(self, decimals: int) -> "ChartConfig":
        """Shortcut for ``with_label_format("{:.N}")``."""
        return replace(self, label_format=f"{{:.{decimals}}}")

    def with_symbols(self, symbols: Symbols) -> "ChartConfig":
        return replace(self, symbols=symbols)

    def with_ascii_symbols(self) -> "ChartConfig":
        return replace(self, symbols=ASCII_SYMBOLS)

    def validate(self) -> None:
        """
        Check dimensions and explicit bounds.

        Raises:
            InvalidDimensionsError: height or width is not positive.
            InvalidRangeError: both bounds are set and min >= max.
        """
        if self.height <= 0 or self.width <= 0:
            raise InvalidDimensionsError()
        if self.min is not None and self.max is not None and self.min >= self.max:
            raise InvalidRangeError()
