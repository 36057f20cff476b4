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

from termplot.cli._io import read_series
from termplot.cli.exitcodes import EXIT_OK
from termplot.config import ChartConfig
from termplot.loader import ChartConfigLoader
from termplot.render import render


def build_config(
    *,
    config_path: str | None = None,
    height: int | None = None,
    width: int | None = None,
    min: float | None = None,
    max: float | None = None,
    no_labels: bool = False,
    ascii: bool = False,
    ticks: int | None = None,
    precision: int | None = None,
) -> ChartConfig:
    """
    Build a ChartConfig from an optional config file plus CLI overrides.

    Options given on the command line win over values from the file.
    """
    config = ChartConfigLoader().load(config_path) if config_path else ChartConfig()

    if height is not None:
        config = config.with_height(height)
    if width is not None:
        config = config.with_width(width)
    if min is not None:
        config = config.with_min(min)
    if max is not None:
        config = config.with_max(max)
    if no_labels:
        config = config.with_labels(False)
    if ascii:
        config = config.with_ascii_symbols()
    if ticks is not None:
        config = config.with_label_ticks(ticks)
    if precision is not None:
        config = config.with_precision(precision)

    return config


def run(*, path: str | None, **options) -> int:
    """
    Read a series from ``path`` (or stdin) and print the chart.

    Args:
        path: Input file with numbers, ``-`` or None for stdin
        options: Forwarded to build_config()
    """
    config = build_config(**options)
    series = read_series(path)
    print(render(series, config))
    return EXIT_OK
