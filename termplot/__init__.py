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

from termplot._version import __version__
from termplot.config import ASCII_SYMBOLS, UNICODE_SYMBOLS, ChartConfig, Symbols
from termplot.errors import (
    ChartError,
    ChartErrorKind,
    EmptyDataError,
    InvalidDimensionsError,
    InvalidRangeError,
)
from termplot.format import format_value
from termplot.generators import generate_cosine, generate_random_walk, generate_sine
from termplot.helpers import plot, plot_ascii, plot_multiple, plot_no_labels, plot_range, plot_sized
from termplot.loader import ChartConfigLoader, ConfigLoadError
from termplot.render import render

__all__ = [
    "__version__",
    "ChartConfig",
    "Symbols",
    "UNICODE_SYMBOLS",
    "ASCII_SYMBOLS",
    "ChartError",
    "ChartErrorKind",
    "EmptyDataError",
    "InvalidRangeError",
    "InvalidDimensionsError",
    "ChartConfigLoader",
    "ConfigLoadError",
    "render",
    "format_value",
    "plot",
    "plot_sized",
    "plot_no_labels",
    "plot_range",
    "plot_ascii",
    "plot_multiple",
    "generate_sine",
    "generate_cosine",
    "generate_random_walk",
]
