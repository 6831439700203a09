"""The grid of tiles a level is played on."""

from __future__ import annotations

from typing import ClassVar, List

from .terrain import Terrain
from .tile import Tile


class Map:
    """A fixed-size grid of tiles stored in row-major order."""

    WIDTH: ClassVar[int] = 64
    HEIGHT: ClassVar[int] = 64

    def __init__(self, default_terrain: Terrain) -> None:
        self.tiles: List[Tile] = [
            Tile((x, y), default_terrain)
            for y in range(self.HEIGHT)
            for x in range(self.WIDTH)
        ]

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at column ``x`` and row ``y``."""
        if not (0 <= x < self.WIDTH and 0 <= y < self.HEIGHT):
            raise IndexError(f"location ({x}, {y}) is outside the map")
        return self.tiles[y * self.WIDTH + x]