"""A level: its map, terrains, creatures and the window's view onto it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .components import CreatureComponent, EntityID
from .gamemap import Map
from .resources import Texture
from .terrain import Terrain, TerrainType
from .tile import Tile


@dataclass
class View:
    """The rectangle of tiles currently shown on screen."""

    width_in_pixels: int = 0
    height_in_pixels: int = 0
    size_in_tiles: Tuple[int, int] = (0, 0)
    top_left: Tuple[int, int] = (0, 0)
    position: Tuple[float, float] = (0.0, 0.0)
    center_location: Tuple[int, int] = (0, 0)
    visible_tiles: List[Tile] = field(default_factory=list, repr=False)

    def configure(self, position: Tuple[float, float], window_size: Tuple[int, int]) -> None:
        """Size the view for a window, using five sixths of its width for the map."""
        window_width, window_height = window_size
        columns = 5 * (window_width // Tile.WIDTH_IN_PIXELS) // 6
        rows = window_height // Tile.HEIGHT_IN_PIXELS
        self.size_in_tiles = (columns, rows)
        self.width_in_pixels = columns * Tile.WIDTH_IN_PIXELS
        self.height_in_pixels = rows * Tile.HEIGHT_IN_PIXELS
        self.position = position
        self.center_location = (0, 0)


@dataclass
class Player:
    """The player, controlling one character entity."""

    character: EntityID = 0


class Level:
    """One level of the game."""

    def __init__(self, index: int) -> None:
        self.index = index
        self.map = Map(Terrain(TerrainType.GROUND, "ground", True, True))
        self.creature_list: List[EntityID] = []
        self.terrains: List[Terrain] = [Terrain(terrain_type) for terrain_type in TerrainType]
        self.terrain_textures: Dict[TerrainType, Optional[Texture]] = {
            terrain_type: None for terrain_type in TerrainType
        }
        self.map_view = View()

    def update_view(self, center: Tuple[int, int]) -> None:
        """Centre the view on ``center`` and collect the tiles it shows."""
        view = self.map_view
        columns, rows = view.size_in_tiles
        left = center[0] - columns // 2
        top = center[1] - rows // 2
        if not 0 <= left < Map.WIDTH:
            left = 0
        if not 0 <= top < Map.HEIGHT:
            top = 0
        view.center_location = center
        view.top_left = (left, top)
        view.visible_tiles = [
            self.map.tile_at(x, y)
            for y in range(top, min(top + rows, Map.HEIGHT))
            for x in range(left, min(left + columns, Map.WIDTH))
        ]

    def place_creature(self, creature: CreatureComponent) -> None:
        """Put ``creature`` on the tile at its location and record it."""
        x, y = creature.location
        self.map.tile_at(x, y).occupant = creature
        self.creature_list.append(creature.owner_id)