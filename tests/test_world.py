"""
Tests for world description and tile layout.
"""

import pytest

from py_terrain.config import Settings
from py_terrain.core.display import height_to_color
from py_terrain.core.heightfield_generator import NoiseParameters, height_to_intensity
from py_terrain.core.world import World, generate_world, world_height_grid, world_tiles


class TestWorld:
    """Test world creation from settings and per-tile display data."""

    @pytest.fixture
    def settings(self):
        return Settings(world_width=4, world_height=3, noise_seed=7, noise_scale=0.2, tile_size=3.0)

    @pytest.fixture
    def world(self, settings):
        return generate_world(settings)

    def test_generate_world_uses_settings(self, world, settings):
        assert world.width == 4
        assert world.height == 3
        assert world.noise == NoiseParameters.from_settings(settings)
        assert world.noise.seed == 7
        assert world.noise.scale == 0.2

    def test_default_world_size(self):
        world = generate_world(Settings())
        assert (world.width, world.height) == (100, 100)
        assert world.noise == NoiseParameters()

    def test_world_grid(self, world):
        grid = world_height_grid(world)
        assert len(grid) == 12
        assert (grid.offset_x, grid.offset_y) == (0, 0)

    def test_tiles_cover_world_in_row_major_order(self, world):
        tiles = world_tiles(world, tile_size=3.0)

        assert len(tiles) == 12
        assert [(t.x, t.y) for t in tiles[:5]] == [(0, 0), (1, 0), (2, 0), (3, 0), (0, 1)]
        assert tiles[6].translation == (6.0, 3.0, 0.0)

    def test_tile_display_values(self, world):
        grid = world_height_grid(world)
        tiles = world_tiles(world, tile_size=2.0, grid=grid)
        max_height = world.noise.max_height

        for tile in tiles:
            height = grid.at(tile.x, tile.y)
            assert tile.height == height
            assert tile.intensity == height_to_intensity(height, max_height)
            assert tile.color == height_to_color(height, max_height)
            assert tile.translation == (tile.x * 2.0, tile.y * 2.0, 0.0)

    def test_empty_world(self):
        world = World(width=0, height=0, noise=NoiseParameters())
        assert world_tiles(world) == []
