"""
Greyscale colours for displaying heights.

Intensities come from ``height_to_intensity`` and are not bounded, so
everything here saturates them to [0, 1] before building a colour.
"""

import colorsys
import math
from typing import Tuple

from .heightfield_generator import height_to_intensity

RGB = Tuple[float, float, float]


def saturate(value: float) -> float:
    """Clamp to [0, 1]; NaN maps to 0."""
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


def intensity_to_color(intensity: float) -> RGB:
    """HSL colour with hue 0, saturation 0 and the intensity as lightness."""
    return colorsys.hls_to_rgb(0.0, saturate(float(intensity)), 0.0)


def height_to_color(height: float, max_height: float) -> RGB:
    """Greyscale colour for a height generated with ``max_height``."""
    return intensity_to_color(height_to_intensity(height, max_height))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB values (0-1 range) to hex color."""
    r = max(0, min(255, int(round(r * 255))))
    g = max(0, min(255, int(round(g * 255))))
    b = max(0, min(255, int(round(b * 255))))

    return f"#{r:02x}{g:02x}{b:02x}"
