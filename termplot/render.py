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

import logging
import math
import sys
from collections.abc import Sequence
from itertools import islice

from termplot.config import ChartConfig
from termplot.errors import EmptyDataError, InvalidRangeError
from termplot.format import format_value

logger = logging.getLogger(__name__)

Grid = list[list[str]]


def render(series: Sequence[float], config: ChartConfig | None = None) -> str:
    """
    Render ``series`` as a line chart.

    Pure function of its inputs: the series is only read, the config is
    immutable. Rows are joined with newlines, without a trailing newline.

    A one-element series, or one whose finite values span less than
    machine epsilon, renders as the formatted value alone (no grid).

    Args:
        series: Samples to plot; index is the column. NaN and infinities
            are skipped and leave their column blank.
        config: Rendering options (defaults to ``ChartConfig()``).

    Returns:
        Chart text with ``config.height + 1`` rows.

    Raises:
        InvalidDimensionsError: height or width is not positive.
        InvalidRangeError: bad explicit bounds, or no usable finite values.
        EmptyDataError: the series is empty.
    """
    if config is None:
        config = ChartConfig()
    config.validate()

    if len(series) == 0:
        raise EmptyDataError()

    if len(series) == 1:
        return format_value(float(series[0]), config.label_format)

    lo, hi = resolve_range(series, config)

    if abs(hi - lo) < sys.float_info.epsilon:
        logger.debug("degenerate range at %r, rendering single value", lo)
        return format_value(lo, config.label_format)

    grid = build_grid(series, config, lo=lo, hi=hi)

    if not config.show_labels:
        return "\n".join("".join(row) for row in grid)

    labels = label_column(config, lo=lo, hi=hi)
    axis = config.symbols.axis_vertical
    # column 0 is reserved and gets replaced by the axis glyph
    return "\n".join(f"{label}{axis}{''.join(row[1:])}" for label, row in zip(labels, grid))


def resolve_range(series: Sequence[float], config: ChartConfig) -> tuple[float, float]:
    """
    Resolve the (min, max) Y range.

    Explicit bounds win; missing ones come from the finite samples.

    Raises:
        InvalidRangeError: no finite samples, or a resolved bound is not finite.
    """
    finite = [float(v) for v in series if math.isfinite(v)]
    if not finite:
        raise InvalidRangeError()

    lo = config.min if config.min is not None else min(finite)
    hi = config.max if config.max is not None else max(finite)

    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise InvalidRangeError()

    logger.debug("resolved range min=%r max=%r from %d finite samples", lo, hi, len(finite))
    return float(lo), float(hi)


def quantize(value: float, *, hi: float, ratio: float, height: int) -> int:
    """
    Map a finite value to a row: 0 is ``hi``, ``height`` is the bottom.

    Rounds half away from zero and clamps into ``[0, height]``.
    """
    scaled = (hi - value) * ratio
    if math.isnan(scaled) or scaled <= 0:
        return 0
    if scaled >= height:
        return height
    return min(int(math.floor(scaled + 0.5)), height)


def build_grid(series: Sequence[float], config: ChartConfig, *, lo: float, hi: float) -> Grid:
    """
    Draw the line into a ``(height + 1) x width`` character grid.

    Sample ``x`` lands in column ``x + 1``; column 0 stays blank. Samples
    past the drawable window are dropped. A non-finite sample leaves its
    column empty and the next finite sample connects to the last drawn row.
    """
    height = config.height
    symbols = config.symbols
    ratio = height / (hi - lo)

    grid: Grid = [[" "] * config.width for _ in range(height + 1)]
    prev: int | None = None

    for x, value in enumerate(islice(series, config.width - 1)):
        if not math.isfinite(value):
            continue

        y = quantize(value, hi=hi, ratio=ratio, height=height)
        col = x + 1

        if prev is None:
            grid[y][col] = symbols.vertical
        elif y == prev:
            grid[y][col] = symbols.horizontal
        else:
            falling = prev < y
            for row in range(min(prev, y), max(prev, y) + 1):
                if row == prev:
                    grid[row][col] = symbols.top_right if falling else symbols.bottom_right
                elif row == y:
                    grid[row][col] = symbols.bottom_left if falling else symbols.top_left
                else:
                    grid[row][col] = symbols.vertical

        prev = y

    return grid


def label_column(config: ChartConfig, *, lo: float, hi: float) -> list[str]:
    """
    Right-aligned Y labels, one per grid row.

    Top and bottom rows always carry max and min. Interior rows are
    labelled every ``height // label_ticks`` rows (integer step); the rest
    are blank padding of the same width.
    """
    height = config.height
    fmt = config.label_format
    top = format_value(hi, fmt)
    bottom = format_value(lo, fmt)
    width = max(len(top), len(bottom))

    step = 0
    if config.label_ticks > 0 and height >= config.label_ticks:
        step = height // config.label_ticks

    labels: list[str] = []
    for idx in range(height + 1):
        if idx == 0:
            text = top
        elif idx == height:
            text = bottom
        elif step > 0 and idx % step == 0:
            text = format_value(hi - idx * (hi - lo) / height, fmt)
        else:
            text = ""
        labels.append(text.rjust(width))
    return labels
