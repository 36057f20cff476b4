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

from termplot.cli.exitcodes import EXIT_OK
from termplot.config import ChartConfig
from termplot.generators import generate_cosine, generate_random_walk, generate_sine
from termplot.render import render

KINDS = ("sine", "cosine", "walk")


def generate(
    kind: str,
    *,
    points: int,
    frequency: float = 1.0,
    phase: float = 0.0,
    start: float = 100.0,
    volatility: float = 1.0,
    seed: int | None = None,
) -> list[float]:
    if kind == "sine":
        return generate_sine(points, frequency, phase)
    if kind == "cosine":
        return generate_cosine(points, frequency, phase)
    if kind == "walk":
        return generate_random_walk(points, start, volatility, seed=seed)
    raise ValueError(f"Unknown demo series: {kind}")


def run(
    *,
    kind: str,
    points: int = 60,
    frequency: float = 1.0,
    phase: float = 0.0,
    start: float = 100.0,
    volatility: float = 1.0,
    seed: int | None = None,
    height: int = 10,
    width: int = 80,
) -> int:
    """Render a generated series."""
    series = generate(
        kind,
        points=points,
        frequency=frequency,
        phase=phase,
        start=start,
        volatility=volatility,
        seed=seed,
    )
    config = ChartConfig().with_height(height).with_width(width)
    print(render(series, config))
    return EXIT_OK
