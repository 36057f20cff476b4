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
Sample series for demos and tests. Not part of the rendering contract.
"""

import math
import random


def generate_sine(points: int, frequency: float = 1.0, phase: float = 0.0) -> list[float]:
    """One period of ``sin`` sampled at ``points`` evenly spaced positions."""
    return [math.sin(frequency * (i * 2.0 * math.pi / points) + phase) for i in range(points)]


def generate_cosine(points: int, frequency: float = 1.0, phase: float = 0.0) -> list[float]:
    return [math.cos(frequency * (i * 2.0 * math.pi / points) + phase) for i in range(points)]


def generate_random_walk(
    points: int,
    start: float,
    volatility: float,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> list[float]:
    """
    Random walk starting at ``start``.

    Each step adds ``(u - 0.5) * volatility`` with ``u`` uniform in [0, 1).
    Randomness comes from ``rng`` if given, otherwise from a fresh
    ``random.Random(seed)``; module-level random state is never touched.
    """
    if points <= 0:
        return []

    if rng is None:
        rng = random.Random(seed)

    result = [start]
    current = start
    for _ in range(1, points):
        current += (rng.random() - 0.5) * volatility
        result.append(current)
    return result
