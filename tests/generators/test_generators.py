"""
Tests for the demo series generators.
"""

import random

from termplot.generators import generate_cosine, generate_random_walk, generate_sine


class TestWaves:
    def test_sine(self):
        data = generate_sine(100, 1.0, 0.0)
        assert len(data) == 100
        assert abs(data[0]) < 0.1
        assert all(-1.1 <= v <= 1.1 for v in data)

    def test_cosine(self):
        data = generate_cosine(100, 1.0, 0.0)
        assert len(data) == 100
        assert abs(data[0] - 1.0) < 0.1

    def test_phase_shift(self):
        sine = generate_sine(40, 1.0, 0.0)
        shifted = generate_cosine(40, 1.0, -1.5707963267948966)
        assert all(abs(a - b) < 1e-9 for a, b in zip(sine, shifted))

    def test_zero_points(self):
        assert generate_sine(0) == []
        assert generate_cosine(0) == []


class TestRandomWalk:
    def test_starts_at_start(self):
        data = generate_random_walk(50, 100.0, 1.0, seed=7)
        assert len(data) == 50
        assert data[0] == 100.0

    def test_seeded_is_reproducible(self):
        assert generate_random_walk(30, 0.0, 2.0, seed=42) == generate_random_walk(30, 0.0, 2.0, seed=42)

    def test_steps_bounded_by_volatility(self):
        data = generate_random_walk(200, 0.0, 2.0, seed=1)
        assert all(abs(b - a) <= 1.0 for a, b in zip(data, data[1:]))

    def test_explicit_rng(self):
        a = generate_random_walk(10, 5.0, 1.0, rng=random.Random(3))
        b = generate_random_walk(10, 5.0, 1.0, rng=random.Random(3))
        assert a == b

    def test_zero_points(self):
        assert generate_random_walk(0, 1.0, 1.0) == []
