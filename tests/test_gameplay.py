import pygame
import pytest

from tilequest.actions import ActionID
from tilequest.gameplay import GameplayState
from tilequest.level import Player
from tilequest.resources import Texture
from tilequest.state import StateID, TransitionID
from tilequest.terrain import Terrain, TerrainType
from tilequest.tile import Tile

GREEN = (0, 255, 0, 255)
RED = (255, 0, 0, 255)


class RecordingWindow:
    def __init__(self):
        self.blits = []

    def blit(self, surface, position):
        self.blits.append((surface, position))


def _texture(color):
    surface = pygame.Surface((24, 24))
    surface.fill(color)
    return Texture(surface=surface)


@pytest.fixture
def state():
    game_state = GameplayState()
    level = game_state.current_level
    level.terrain_textures[TerrainType.GROUND] = _texture(GREEN)
    level.terrain_textures[TerrainType.WALL] = _texture(RED)
    level.map_view.configure((0.0, 0.0), (1920, 1080))
    character = game_state.new_entity()
    game_state.creatures[character].initialize(character)
    game_state.creatures[character].setup("PLAYER", (32, 32), None)
    game_state.player = Player(character)
    return game_state


def _render(game_state):
    window = RecordingWindow()
    game_state.render_level(game_state.current_level, game_state.player, window)
    return window


def test_identity_and_texture_ids():
    game_state = GameplayState()
    assert game_state.id is StateID.GAMEPLAY
    assert game_state.current_level.index == 0
    assert GameplayState.WALL_TEXTURE_ID == "wallTexture"


def test_do_action_changes_nothing(state):
    for action in ActionID:
        state.do_action(action, 0)
    assert state.transition_flag is TransitionID.NULL


def test_one_blit_per_visible_tile(state):
    window = _render(state)
    assert len(window.blits) == len(state.current_level.map_view.visible_tiles)
    assert state.current_level.map_view.center_location == (32, 32)


def test_tiles_are_scaled_to_tile_size(state):
    window = _render(state)
    sizes = {surface.get_size() for surface, _ in window.blits}
    assert sizes == {(Tile.WIDTH_IN_PIXELS, Tile.HEIGHT_IN_PIXELS)}


def test_positions_are_relative_to_view(state):
    window = _render(state)
    positions = [position for _, position in window.blits]
    assert positions[0] == (0, 0)
    assert len(set(positions)) == len(positions)
    assert all(x % Tile.WIDTH_IN_PIXELS == 0 and y % Tile.HEIGHT_IN_PIXELS == 0 for x, y in positions)


def test_terrain_selects_texture(state):
    level = state.current_level
    level.map.tile_at(32, 32).terrain = Terrain(TerrainType.WALL, "wall", False, False)
    window = _render(state)
    left, top = level.map_view.top_left
    expected = ((32 - left) * Tile.WIDTH_IN_PIXELS, (32 - top) * Tile.HEIGHT_IN_PIXELS)
    colors = {position: surface.get_at((0, 0)) for surface, position in window.blits}
    assert colors[expected] == RED
    assert colors[(0, 0)] == GREEN


def test_view_clamps_at_map_corner(state):
    state.creatures[state.player.character].location = (0, 0)
    window = _render(state)
    assert state.current_level.map_view.top_left == (0, 0)
    assert all(x >= 0 and y >= 0 for _, (x, y) in window.blits)


def test_tiles_without_texture_are_skipped(state):
    level = state.current_level
    level.map.tile_at(32, 32).terrain = Terrain(TerrainType.WATER, "water", False, True)
    window = _render(state)
    assert len(window.blits) == len(level.map_view.visible_tiles) - 1