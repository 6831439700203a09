from tilequest.terrain import Terrain, TerrainType
from tilequest.tile import Tile

GROUND = Terrain(TerrainType.GROUND, "ground", True, True)


def test_new_tile_is_empty():
    tile = Tile((2, 3), GROUND)
    assert tile.location == (2, 3)
    assert tile.terrain == GROUND
    assert tile.occupant is None


def test_occupant_can_be_set():
    tile = Tile((0, 0), GROUND)
    creature = object()
    tile.occupant = creature
    assert tile.occupant is creature


def test_tile_is_square():
    tile = Tile((0, 0), GROUND)
    assert tile.WIDTH_IN_PIXELS == tile.HEIGHT_IN_PIXELS == 72


def test_tile_equality():
    assert Tile((1, 1), GROUND) == Tile((1, 1), GROUND)
    assert Tile((1, 1), GROUND) != Tile((1, 2), GROUND)