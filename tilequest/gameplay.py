"""The gameplay screen: the current level seen around the player's character."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Protocol, Tuple

import pygame

from .actions import ActionID
from .components import EntityID
from .level import Level, Player
from .state import GameState, StateID
from .terrain import TerrainType
from .tile import Tile


class _Canvas(Protocol):
    def blit(self, surface: pygame.Surface, position: Tuple[float, float]) -> None: ...


class GameplayState(GameState):
    """The state in which the player explores a level."""

    STATE_ID: ClassVar[StateID] = StateID.GAMEPLAY

    TILE_SCALE: ClassVar[int] = 3

    WALL_TEXTURE_ID: ClassVar[str] = "wallTexture"
    WALL_TEXTURE_PATH: ClassVar[str] = (
        "resource/16-Bit Fantasy Sprite Set/Sliced/world_24x24/oryx_16bit_fantasy_world_59.png"
    )
    FLOOR_TEXTURE_ID: ClassVar[str] = "floorTexture"
    FLOOR_TEXTURE_PATH: ClassVar[str] = (
        "resource/16-Bit Fantasy Sprite Set/Sliced/world_24x24/oryx_16bit_fantasy_world_62.png"
    )
    PLAYER_TEXTURE_ID: ClassVar[str] = "playerTexture"
    PLAYER_TEXTURE_PATH: ClassVar[str] = (
        "resource/16-Bit Fantasy Sprite Set/Sliced/creatures_24x24/"
        "oryx_16bit_fantasy_creatures_01.png"
    )

    def __init__(self) -> None:
        super().__init__()
        self.player = Player()
        self.current_level = Level(0)

    def do_action(self, action: ActionID, owner_id: Optional[EntityID] = None) -> None:
        """Gameplay reacts to no user-interface actions."""

    def _scaled_texture(
        self,
        level: Level,
        terrain_type: TerrainType,
        cache: Dict[TerrainType, Optional[pygame.Surface]],
    ) -> Optional[pygame.Surface]:
        if terrain_type not in cache:
            texture = level.terrain_textures.get(terrain_type)
            if texture is None or texture.surface is None:
                cache[terrain_type] = None
            else:
                width, height = texture.surface.get_size()
                cache[terrain_type] = pygame.transform.scale(
                    texture.surface, (width * self.TILE_SCALE, height * self.TILE_SCALE)
                )
        return cache[terrain_type]

    def render_level(self, level: Level, player: Player, window: _Canvas) -> None:
        """Draw the tiles of ``level`` visible around the player's character."""
        character = self.creatures[player.character]
        level.update_view(character.location)
        left, top = level.map_view.top_left
        cache: Dict[TerrainType, Optional[pygame.Surface]] = {}
        for tile in level.map_view.visible_tiles:
            surface = self._scaled_texture(level, tile.terrain.type, cache)
            if surface is None:
                continue
            x, y = tile.location
            window.blit(
                surface,
                ((x - left) * Tile.WIDTH_IN_PIXELS, (y - top) * Tile.HEIGHT_IN_PIXELS),
            )