"""
World description and per-tile display data.

A World is the generated terrain as an external renderer sees it: a grid
size, the noise parameters, and one tile per cell carrying its position,
height and greyscale colour.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import structlog

from ..config import Settings, settings as default_settings
from .display import RGB, height_to_color
from .height_grid import HeightGrid
from .heightfield_generator import HeightFieldGenerator, NoiseParameters, height_to_intensity

logger = structlog.get_logger()


@dataclass(frozen=True)
class World:
    """Size of the generated world and the noise that shapes it."""

    width: int
    height: int
    noise: NoiseParameters


@dataclass(frozen=True)
class WorldTile:
    """Display record for one grid cell."""

    x: int
    y: int
    translation: Tuple[float, float, float]
    height: float
    intensity: float
    color: RGB


def generate_world(settings: Optional[Settings] = None) -> World:
    """Create the world described by the settings."""
    settings = settings or default_settings
    world = World(
        width=settings.world_width,
        height=settings.world_height,
        noise=NoiseParameters.from_settings(settings),
    )
    logger.info("Generating world", width=world.width, height=world.height, seed=world.noise.seed)
    return world


def world_height_grid(world: World) -> HeightGrid:
    """Height grid covering the whole world, starting at (0, 0)."""
    return HeightFieldGenerator(world.noise).build_height_grid(world.width, world.height)


def world_tiles(
    world: World, tile_size: Optional[float] = None, grid: Optional[HeightGrid] = None
) -> List[WorldTile]:
    """
    Lay out one tile per world cell in row-major order.

    Args:
        world: World to lay out
        tile_size: Edge length of a tile; defaults to settings.tile_size
        grid: Previously built grid for this world, to avoid regenerating it

    Returns:
        List of width * height tiles
    """
    if tile_size is None:
        tile_size = default_settings.tile_size
    if grid is None:
        grid = world_height_grid(world)

    max_height = world.noise.max_height
    tiles = []
    for y in range(world.height):
        for x in range(world.width):
            height = grid[y * world.width + x]
            tiles.append(
                WorldTile(
                    x=x,
                    y=y,
                    translation=(x * tile_size, y * tile_size, 0.0),
                    height=height,
                    intensity=height_to_intensity(height, max_height),
                    color=height_to_color(height, max_height),
                )
            )

    logger.debug("World tiles laid out", tiles=len(tiles), tile_size=tile_size)
    return tiles
