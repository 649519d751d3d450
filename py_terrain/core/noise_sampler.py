"""
Seeded 2-D coherent noise.

Thin wrapper over OpenSimplex. The sampler is seeded once and never
mutated afterwards, so one instance can be shared by every cell of a grid.
Non-finite coordinates (from overflowing frequencies) evaluate to NaN.
"""

import math

import numpy as np
from opensimplex import OpenSimplex


class NoiseSampler:
    """Deterministic OpenSimplex evaluator for a fixed seed."""

    __slots__ = ("_seed", "_simplex")

    def __init__(self, seed: int = 0):
        self._seed = int(seed)
        self._simplex = OpenSimplex(seed=self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def evaluate(self, x: float, y: float) -> float:
        """Noise value at (x, y), roughly in [-1, 1]."""
        x = float(x)
        y = float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            return math.nan
        return float(self._simplex.noise2(x, y))

    def evaluate_grid(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """
        Evaluate the noise at every (x, y) pair of two coordinate axes.

        Args:
            xs: 1-D array of x coordinates
            ys: 1-D array of y coordinates

        Returns:
            Float64 array of shape (len(ys), len(xs)) where entry [j, i]
            is the noise at (xs[i], ys[j])
        """
        xs = np.asarray(xs, dtype=np.float64).ravel()
        ys = np.asarray(ys, dtype=np.float64).ravel()
        out = np.full((ys.size, xs.size), np.nan, dtype=np.float64)

        x_ok = np.isfinite(xs)
        y_ok = np.isfinite(ys)
        if not x_ok.any() or not y_ok.any():
            return out

        values = self._simplex.noise2array(xs[x_ok], ys[y_ok])
        out[np.ix_(y_ok, x_ok)] = values
        return out

    def __repr__(self) -> str:
        return f"NoiseSampler(seed={self._seed})"
