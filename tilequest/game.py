"""The game: owns the window, the resources and the stack of game states."""

from __future__ import annotations

import argparse
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .components import BoundingBoxComponent, EntityID, TransformComponent
from .gamemap import Map
from .gameplay import GameplayState
from .input_system import InputSystem
from .main_menu import MainMenuState
from .render_system import RenderSystem
from .resources import ResourceError, ResourceManager, ResourceType
from .state import GameOverState, GameState, StateID, TransitionID
from .actions import ActionID
from .widget import WidgetNodeType


def center(bounding_box: BoundingBoxComponent, transform: TransformComponent) -> None:
    """Move the transform's origin to the middle of the bounding box."""
    transform.transformable.origin = (
        bounding_box.rect.width / 2.0,
        bounding_box.rect.height / 2.0,
    )


class Game:
    """Runs one frame at a time and switches between game states on request."""

    def __init__(self, window, resources: Optional[ResourceManager] = None) -> None:
        self.window = window
        self.window_size: Tuple[int, int] = tuple(window.size)
        self.resources = resources if resources is not None else ResourceManager()
        self._current: Optional[GameState] = None
        self._inactive: List[GameState] = []
        self.input_system = InputSystem(window)
        self.render_system = RenderSystem(window)
        self.create_game_state(StateID.MAIN_MENU)

    def update(self) -> None:
        """Handle input, draw a frame and carry out any requested transition."""
        state = self._current
        if self.window.is_open() and state is not None:
            self.input_system.update(state)
        if self.window.is_open():
            self.window.clear()
            if state is not None:
                if isinstance(state, GameplayState):
                    state.render_level(state.current_level, state.player, self.window)
                self.render_system.update(state)
            self.window.display()
        elif state is not None:
            state.transition_flag = TransitionID.SHUTDOWN

        if state is None:
            return
        flag = state.transition_flag
        if flag is TransitionID.RETURN_TO_MAIN_MENU:
            self.create_game_state(StateID.MAIN_MENU)
        elif flag is TransitionID.INIT_GAMEPLAY:
            self.create_game_state(StateID.GAMEPLAY)
        elif flag is TransitionID.SHUTDOWN:
            self._current = None
            self._inactive.clear()
        if self._current is not None:
            self._current.transition_flag = TransitionID.NULL

    def current_state(self) -> Optional[GameState]:
        """The state being played, or None once the game has shut down."""
        return self._current

    def find_inactive_state(self, state_id: StateID) -> Optional[GameState]:
        """The first suspended state with ``state_id``, or None."""
        return next((state for state in self._inactive if state.id is state_id), None)

    def create_game_state(self, state_id: StateID) -> None:
        """Suspend the current state and make a new one of kind ``state_id``."""
        builders: Dict[StateID, Callable[[], None]] = {
            StateID.MAIN_MENU: self._create_main_menu_state,
            StateID.GAMEPLAY: self._create_gameplay_state,
            StateID.GAME_OVER: self._create_game_over_state,
        }
        builder = builders.get(state_id)
        if builder is None:
            raise ValueError(f"no game state can be created for {state_id}")
        if self._current is not None:
            self._inactive.append(self._current)
            self._current = None
        builder()

    def destroy_current_game_state(self) -> None:
        """Drop the current state and resume the most recently suspended one."""
        self._current = self._inactive.pop() if self._inactive else None

    def _try_load(self, resource_id: str, resource_type: ResourceType, path: str) -> bool:
        try:
            self.resources.load(resource_id, resource_type, path)
        except ResourceError:
            return False
        return True

    def _ensure_loaded(self, resource_id: str, resource_type: ResourceType, path: str) -> bool:
        if self.resources.exists(resource_id, resource_type):
            return True
        return self._try_load(resource_id, resource_type, path)

    def _create_main_menu_state(self) -> None:
        # The main menu is the base state: nothing else may remain beneath it.
        while self._current is not None:
            self.destroy_current_game_state()

        state = MainMenuState()
        self._current = state
        self._try_load(state.FONT_ID, ResourceType.FONT, state.FONT_PATH)

        state.main_menu = self._create_main_menu(state)
        state.new_game_option = self._create_menu_option(
            state, state.NEW_GAME_CONTENTS, state.NEW_GAME_REL_POSITION
        )
        state.load_game_option = self._create_menu_option(
            state, state.LOAD_GAME_CONTENTS, state.LOAD_GAME_REL_POSITION
        )
        state.settings_option = self._create_menu_option(
            state, state.SETTINGS_CONTENTS, state.SETTINGS_REL_POSITION
        )
        state.quit_game_option = self._create_menu_option(
            state, state.QUIT_GAME_CONTENTS, state.QUIT_GAME_REL_POSITION
        )

    def _create_main_menu(self, state: MainMenuState) -> EntityID:
        background_loaded = self._ensure_loaded(
            state.BACKGROUND_ID, ResourceType.TEXTURE, state.BACKGROUND_PATH
        )
        font_loaded = self._ensure_loaded(state.FONT_ID, ResourceType.FONT, state.FONT_PATH)
        menu_id = state.new_entity()
        if background_loaded and font_loaded:
            widget = state.widgets[menu_id]
            widget.initialize(menu_id)
            widget.node.type = WidgetNodeType.MENU
            widget.node.parent = None

            sprite = state.sprites[menu_id]
            sprite.initialize(menu_id)
            sprite.texture = self.resources.acquire_texture(state.BACKGROUND_ID)

            transform = state.transforms[menu_id]
            transform.initialize(menu_id)
            width, height = sprite.texture.size
            window_width, window_height = self.window_size
            transform.transformable.scale = (window_width / width, window_height / height)
            transform.transformable.position = (0.0, 0.0)
        return menu_id

    def _create_menu_option(
        self, state: MainMenuState, contents: str, relative_position: Tuple[int, int]
    ) -> EntityID:
        option_id = state.new_entity()
        menu_id = state.main_menu

        widget = state.widgets[option_id]
        widget.initialize(option_id)
        widget.node.type = WidgetNodeType.MENU_OPTION
        state.widgets[menu_id].node.add_child(widget.node)

        font = self.resources.acquire_font(state.FONT_ID)
        if font is None:
            raise ResourceError(state.FONT_ID, state.FONT_PATH, "font is not loaded")
        text = state.texts[option_id]
        text.initialize(option_id)
        text.setup(
            font,
            state.FONT_SIZE,
            state.FONT_OUTLINE_THICKNESS_NORMAL,
            state.FONT_OUTLINE_COLOR_NORMAL,
            state.FONT_FILL_COLOR,
            contents,
        )

        transform = state.transforms[option_id]
        transform.initialize(option_id)
        window_width, window_height = self.window_size
        transform.transformable.position = (
            window_width * (relative_position[0] / 100.0),
            window_height * (relative_position[1] / 100.0),
        )

        bounding_box = state.bounding_boxes[option_id]
        bounding_box.initialize(option_id)
        bounding_box.update_from_text(transform, text)

        mouse_over = state.mouse_overs[option_id]
        mouse_over.initialize(option_id)
        mouse_over.triggered_action = ActionID.SET_MENU_SELECTION

        left_click = state.left_clicks[option_id]
        left_click.initialize(option_id)
        left_click.triggered_action = ActionID.PRESS_MENU_SELECTION

        center(bounding_box, transform)
        bounding_box.update_from_text(transform, text)
        return option_id

    def _create_gameplay_state(self) -> None:
        state = GameplayState()
        self._current = state

        self._try_load(state.WALL_TEXTURE_ID, ResourceType.TEXTURE, state.WALL_TEXTURE_PATH)
        self._try_load(state.FLOOR_TEXTURE_ID, ResourceType.TEXTURE, state.FLOOR_TEXTURE_PATH)
        self._try_load(state.PLAYER_TEXTURE_ID, ResourceType.TEXTURE, state.PLAYER_TEXTURE_PATH)

        level = state.current_level
        level.terrain_textures[_ground()] = self.resources.acquire_texture(state.FLOOR_TEXTURE_ID)
        level.terrain_textures[_wall()] = self.resources.acquire_texture(state.WALL_TEXTURE_ID)

        player_location = (Map.WIDTH // 2, Map.HEIGHT // 2)
        player_id = state.new_entity()
        creature = state.creatures[player_id]
        creature.initialize(player_id)
        creature.setup(
            "PLAYER", player_location, self.resources.acquire_texture(state.PLAYER_TEXTURE_ID)
        )
        state.player.character = player_id
        level.place_creature(creature)
        level.map_view.configure((0.0, 0.0), self.window_size)

    def _create_game_over_state(self) -> None:
        self._current = GameOverState()


def _ground():
    from .terrain import TerrainType

    return TerrainType.GROUND


def _wall():
    from .terrain import TerrainType

    return TerrainType.WALL


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run frames until the game shuts down."""
    parser = argparse.ArgumentParser(prog="tilequest", description="Play the game.")
    parser.parse_args(argv)

    from .window import Window

    with Window() as window:
        game = Game(window)
        while True:
            game.update()
            state = game.current_state()
            if state is None or state.transition_flag is TransitionID.SHUTDOWN:
                break
    return 0