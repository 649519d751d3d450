"""
Tests for the seeded noise sampler.
"""

import math

import numpy as np
import pytest

from py_terrain.core.noise_sampler import NoiseSampler


class TestNoiseSampler:
    """Test single-point and grid noise evaluation."""

    @pytest.fixture
    def sampler(self):
        return NoiseSampler(259)

    def test_seed_is_kept(self, sampler):
        assert sampler.seed == 259
        assert "259" in repr(sampler)

    def test_deterministic_for_same_seed(self, sampler):
        other = NoiseSampler(259)
        for x, y in [(0.5, 0.25), (3.7, -1.2), (100.1, 42.9)]:
            assert sampler.evaluate(x, y) == sampler.evaluate(x, y)
            assert sampler.evaluate(x, y) == other.evaluate(x, y)

    def test_different_seeds_give_different_fields(self, sampler):
        other = NoiseSampler(260)
        points = [(i * 0.37 + 0.1, i * 0.21 + 0.3) for i in range(20)]
        assert any(sampler.evaluate(x, y) != other.evaluate(x, y) for x, y in points)

    def test_values_stay_in_unit_range(self, sampler):
        for i in range(200):
            value = sampler.evaluate(i * 0.173, i * 0.311)
            assert -1.0 <= value <= 1.0

    def test_noise_is_continuous(self, sampler):
        """Small steps in the input give small steps in the output."""
        for i in range(50):
            x, y = i * 0.41, i * 0.13
            delta = abs(sampler.evaluate(x + 1e-5, y) - sampler.evaluate(x, y))
            assert delta < 1e-3

    def test_non_finite_coordinates_give_nan(self, sampler):
        assert math.isnan(sampler.evaluate(math.inf, 1.0))
        assert math.isnan(sampler.evaluate(1.0, math.nan))

    def test_grid_matches_point_evaluation(self, sampler):
        xs = np.array([0.0, 0.5, 1.25, 7.0])
        ys = np.array([-2.0, 0.3, 4.4])

        grid = sampler.evaluate_grid(xs, ys)

        assert grid.shape == (3, 4)
        for j, y in enumerate(ys):
            for i, x in enumerate(xs):
                assert grid[j, i] == pytest.approx(sampler.evaluate(x, y), abs=1e-12)

    def test_grid_with_empty_axis(self, sampler):
        grid = sampler.evaluate_grid(np.array([]), np.array([1.0, 2.0]))
        assert grid.shape == (2, 0)

    def test_grid_marks_non_finite_coordinates(self, sampler):
        grid = sampler.evaluate_grid(np.array([1.0, np.inf]), np.array([0.5]))
        assert not math.isnan(grid[0, 0])
        assert math.isnan(grid[0, 1])
