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

"""
Convenience entry points that always return text.

Each helper renders with a preset config and, on a `ChartError`, returns
the error message in place of the chart.
"""

import math
from collections.abc import Sequence

from termplot.config import ChartConfig
from termplot.errors import ChartError
from termplot.render import render

NO_DATA = "No data"
INVALID_DATA = "Invalid data"


def _render_or_message(series: Sequence[float], config: ChartConfig) -> str:
    try:
        return render(series, config)
    except ChartError as e:
        return str(e)


def plot(series: Sequence[float]) -> str:
    """Render with the default config."""
    return _render_or_message(series, ChartConfig())


def plot_sized(series: Sequence[float], height: int, width: int) -> str:
    """Render with a custom height and width."""
    return _render_or_message(series, ChartConfig().with_height(height).with_width(width))


def plot_no_labels(series: Sequence[float]) -> str:
    """Render without the label gutter and axis."""
    return _render_or_message(series, ChartConfig().with_labels(False))


def plot_range(series: Sequence[float], min: float, max: float) -> str:
    """Render against explicit Y bounds."""
    return _render_or_message(series, ChartConfig().with_range(min, max))


def plot_ascii(series: Sequence[float]) -> str:
    """Render with the plain ASCII symbol set."""
    return _render_or_message(series, ChartConfig().with_ascii_symbols())


def plot_multiple(series: Sequence[Sequence[float]]) -> str:
    """
    Render the first series against the min/max of all series.

    Only the first series is drawn; the others contribute to the scale.
    Returns ``"No data"`` for an empty list and ``"Invalid data"`` when no
    series holds a finite value.
    """
    if len(series) == 0:
        return NO_DATA

    finite = [v for s in series for v in s if math.isfinite(v)]
    if not finite:
        return INVALID_DATA

    return _render_or_message(series[0], ChartConfig().with_range(min(finite), max(finite)))
