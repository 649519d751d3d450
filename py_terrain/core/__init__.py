"""
Core height field generation functionality.
"""

from .noise_sampler import NoiseSampler
from .height_grid import HeightGrid
from .heightfield_generator import (
    HeightFieldGenerator,
    NoiseParameters,
    build_height_grid,
    height_to_intensity,
    sample_height,
)
from .display import height_to_color, intensity_to_color, rgb_to_hex
from .world import World, WorldTile, generate_world, world_height_grid, world_tiles

__all__ = ['NoiseSampler', 'HeightGrid', 'HeightFieldGenerator', 'NoiseParameters',
           'build_height_grid', 'height_to_intensity', 'sample_height',
           'height_to_color', 'intensity_to_color', 'rgb_to_hex',
           'World', 'WorldTile', 'generate_world', 'world_height_grid', 'world_tiles']
