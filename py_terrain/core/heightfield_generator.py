"""
Fractal height field generation.

Heights are built by summing octaves of OpenSimplex noise. Each octave
samples the noise at a frequency multiplied by ``lacunarity`` and weights it
by an amplitude multiplied by ``persistence``. The sum is floored at zero,
raised to ``exponent`` and scaled by ``max_height``.

Nothing here validates its inputs. Zero or negative sizes give empty grids,
zero octaves give ``0 ** exponent``, and overflow or NaN propagate through
the result as ordinary floating-point values.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union

import numpy as np
import structlog

from .height_grid import HeightGrid
from .noise_sampler import NoiseSampler

logger = structlog.get_logger()


@dataclass(frozen=True)
class NoiseParameters:
    """Parameters of one height field generation run."""

    seed: int = 259
    scale: float = 1.0  # Frequency of the first octave
    octaves: int = 8
    persistence: float = 0.75  # Amplitude multiplier per octave
    lacunarity: float = 1.75  # Frequency multiplier per octave
    exponent: float = 4.0
    max_height: float = 1.0

    @classmethod
    def from_settings(cls, settings) -> "NoiseParameters":
        """Build parameters from the ``noise_*`` fields of a Settings object."""
        return cls(
            seed=settings.noise_seed,
            scale=settings.noise_scale,
            octaves=settings.noise_octaves,
            persistence=settings.noise_persistence,
            lacunarity=settings.noise_lacunarity,
            exponent=settings.noise_exponent,
            max_height=settings.noise_max_height,
        )

    def replace(self, **changes) -> "NoiseParameters":
        return replace(self, **changes)


def _shape(total, exponent: float, max_height: float):
    # 0 ** 0 == 1 and 0 ** -n == inf, following IEEE pow
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        clamped = np.maximum(total, 0.0)
        return np.power(clamped, exponent) * max_height


class HeightFieldGenerator:
    """
    Generates height values from a fixed set of noise parameters.

    One NoiseSampler is created per generator and reused, read-only, for
    every sample and grid it produces.
    """

    def __init__(self, params: NoiseParameters, sampler: Optional[NoiseSampler] = None):
        """
        Initialize the generator.

        Args:
            params: Noise parameters
            sampler: Optional pre-built sampler; must be seeded with params.seed
        """
        self.params = params
        self.sampler = sampler if sampler is not None else NoiseSampler(params.seed)

    def sample_height(self, x: float, y: float) -> float:
        """Shaped fractal height at world coordinates (x, y)."""
        params = self.params
        amplitude = 1.0
        frequency = params.scale
        total = 0.0

        for _ in range(params.octaves):
            sample = self.sampler.evaluate(x * frequency, y * frequency)
            total += sample * amplitude
            amplitude *= params.persistence
            frequency *= params.lacunarity

        return float(_shape(np.float64(total), params.exponent, params.max_height))

    def build_height_grid(
        self, width: int, height: int, offset_x: int = 0, offset_y: int = 0
    ) -> HeightGrid:
        """
        Build the height grid for a rectangular window.

        Every octave is evaluated over the whole window at once. Each cell
        keeps its own accumulator and octaves are added in order, so cell
        (x, y) equals ``sample_height(x, y)``.

        Args:
            width: Number of columns
            height: Number of rows
            offset_x: World x of the first column
            offset_y: World y of the first row

        Returns:
            Row-major HeightGrid of width * height values
        """
        params = self.params
        if width <= 0 or height <= 0:
            logger.debug("Empty height grid requested", width=width, height=height)
            return HeightGrid(width=width, height=height, offset_x=offset_x, offset_y=offset_y)

        logger.debug(
            "Building height grid",
            width=width,
            height=height,
            offset_x=offset_x,
            offset_y=offset_y,
            seed=params.seed,
            octaves=params.octaves,
        )

        xs = np.arange(offset_x, offset_x + width, dtype=np.float64)
        ys = np.arange(offset_y, offset_y + height, dtype=np.float64)

        amplitude = 1.0
        frequency = params.scale
        total = np.zeros((height, width), dtype=np.float64)

        with np.errstate(over="ignore", invalid="ignore"):
            for _ in range(params.octaves):
                total += self.sampler.evaluate_grid(xs * frequency, ys * frequency) * amplitude
                amplitude *= params.persistence
                frequency *= params.lacunarity

        heights = _shape(total, params.exponent, params.max_height)

        logger.debug(
            "Height grid built",
            cells=int(heights.size),
            min_height=float(np.min(heights)),
            max_height=float(np.max(heights)),
        )
        return HeightGrid(
            width=width, height=height, offset_x=offset_x, offset_y=offset_y, values=heights
        )


def sample_height(params: NoiseParameters, x: float, y: float) -> float:
    """Shaped fractal height at (x, y) for the given parameters."""
    return HeightFieldGenerator(params).sample_height(x, y)


def build_height_grid(
    params: NoiseParameters, width: int, height: int, offset_x: int = 0, offset_y: int = 0
) -> HeightGrid:
    """Row-major height grid for the window starting at (offset_x, offset_y)."""
    return HeightFieldGenerator(params).build_height_grid(width, height, offset_x, offset_y)


def height_to_intensity(
    height: Union[float, np.ndarray], max_height: float
) -> Union[float, np.ndarray]:
    """
    Map a height to a display intensity.

    ``(height + max_height / 2) / max_height``. Not clamped: heights near
    ``max_height`` map above 1.0 and the display layer must saturate.
    Accepts scalars or arrays.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        result = (np.asarray(height, dtype=np.float64) + max_height / 2.0) / np.float64(max_height)
    if np.ndim(result) == 0:
        return float(result)
    return result
