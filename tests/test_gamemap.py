import pytest

from tilequest.gamemap import Map
from tilequest.terrain import Terrain, TerrainType

GROUND = Terrain(TerrainType.GROUND, "ground", True, True)


@pytest.fixture
def game_map():
    return Map(GROUND)


def test_map_holds_every_tile(game_map):
    assert len(game_map.tiles) == Map.WIDTH * Map.HEIGHT


def test_tiles_use_default_terrain_and_are_empty(game_map):
    assert all(tile.terrain == GROUND for tile in game_map.tiles)
    assert all(tile.occupant is None for tile in game_map.tiles)


@pytest.mark.parametrize(
    "x, y",
    [(0, 0), (Map.WIDTH - 1, 0), (0, Map.HEIGHT - 1), (Map.WIDTH - 1, Map.HEIGHT - 1), (5, 7)],
)
def test_tile_at_returns_matching_location(game_map, x, y):
    assert game_map.tile_at(x, y).location == (x, y)


def test_tiles_are_row_major(game_map):
    assert game_map.tiles[1].location == (1, 0)
    assert game_map.tiles[Map.WIDTH].location == (0, 1)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (Map.WIDTH, 0), (0, Map.HEIGHT)])
def test_tile_at_rejects_outside_locations(game_map, x, y):
    with pytest.raises(IndexError):
        game_map.tile_at(x, y)


def test_tiles_are_independent(game_map):
    game_map.tile_at(3, 3).occupant = "orc"
    assert game_map.tile_at(3, 4).occupant is None