"""The main menu screen: a background with four selectable options."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Tuple

from .actions import ActionID
from .components import Color, EntityID
from .state import GameState, StateID, TransitionID

_WHITE: Color = (255, 255, 255, 255)
_RED: Color = (255, 0, 0, 255)
_BLACK: Color = (0, 0, 0, 255)


class MainMenuState(GameState):
    """The first screen of the game, offering new game, load, settings and quit."""

    STATE_ID: ClassVar[StateID] = StateID.MAIN_MENU

    NEW_GAME_CONTENTS: ClassVar[str] = "New Game"
    LOAD_GAME_CONTENTS: ClassVar[str] = "Load Game"
    SETTINGS_CONTENTS: ClassVar[str] = "Settings"
    QUIT_GAME_CONTENTS: ClassVar[str] = "Quit Game"

    # Positions in percent of the window size.
    NEW_GAME_REL_POSITION: ClassVar[Tuple[int, int]] = (50, 40)
    LOAD_GAME_REL_POSITION: ClassVar[Tuple[int, int]] = (50, 50)
    SETTINGS_REL_POSITION: ClassVar[Tuple[int, int]] = (50, 60)
    QUIT_GAME_REL_POSITION: ClassVar[Tuple[int, int]] = (50, 70)

    BACKGROUND_ID: ClassVar[str] = "mainMenuBackground"
    BACKGROUND_PATH: ClassVar[str] = "resource/brown_age_by_darkwood67.jpg"

    FONT_SIZE: ClassVar[int] = 48
    FONT_ID: ClassVar[str] = "mainMenuFont"
    FONT_PATH: ClassVar[str] = "resource/TruenoBlack-mBYV.otf"
    FONT_OUTLINE_THICKNESS_NORMAL: ClassVar[float] = 1.0
    FONT_OUTLINE_THICKNESS_HIGHLIGHT: ClassVar[float] = 4.0
    FONT_OUTLINE_COLOR_NORMAL: ClassVar[Color] = _WHITE
    FONT_OUTLINE_COLOR_HIGHLIGHT: ClassVar[Color] = _RED
    FONT_FILL_COLOR: ClassVar[Color] = _BLACK

    def __init__(self) -> None:
        super().__init__()
        self.main_menu: Optional[EntityID] = None
        self.new_game_option: Optional[EntityID] = None
        self.load_game_option: Optional[EntityID] = None
        self.settings_option: Optional[EntityID] = None
        self.quit_game_option: Optional[EntityID] = None
        self.selected_index: Optional[int] = None
        self.pressed_index: Optional[int] = None

    def _option_transitions(self) -> Dict[EntityID, TransitionID]:
        transitions: Dict[EntityID, TransitionID] = {}
        for option, transition in (
            (self.new_game_option, TransitionID.INIT_GAMEPLAY),
            (self.load_game_option, TransitionID.DISPLAY_LOAD_GAME),
            (self.settings_option, TransitionID.DISPLAY_SETTINGS),
            (self.quit_game_option, TransitionID.SHUTDOWN),
        ):
            if option is not None:
                transitions.setdefault(option, transition)
        return transitions

    def _option_index(self, owner_id: EntityID) -> Optional[int]:
        return self.widgets[owner_id].node.index()

    def do_action(self, action: ActionID, owner_id: Optional[EntityID] = None) -> None:
        """Select, deselect or press a menu option, and request the matching transition."""
        if action is ActionID.SET_MENU_SELECTION:
            if owner_id is not None:
                index = self._option_index(owner_id)
                if index is not None:
                    self.selected_index = index
                    self.highlight_selected_option(owner_id)
        elif action is ActionID.RESET_MENU_SELECTION:
            self.selected_index = None
            self.reset_highlight()
        elif action is ActionID.PRESS_MENU_SELECTION:
            if owner_id is not None:
                index = self._option_index(owner_id)
                if index is not None:
                    self.pressed_index = index

        if self.pressed_index is not None and owner_id is not None:
            transition = self._option_transitions().get(owner_id)
            if transition is not None:
                self.transition_flag = transition

    def highlight_selected_option(self, menu_option_id: EntityID) -> None:
        """Give the option's text the highlight outline."""
        text = self.texts[menu_option_id]
        if text.enabled:
            text.outline_thickness = self.FONT_OUTLINE_THICKNESS_HIGHLIGHT
            text.outline_color = self.FONT_OUTLINE_COLOR_HIGHLIGHT

    def reset_highlight(self) -> None:
        """Give every entity's text the normal outline."""
        for text in self.texts[: self.num_entities]:
            if text.enabled:
                text.outline_thickness = self.FONT_OUTLINE_THICKNESS_NORMAL
                text.outline_color = self.FONT_OUTLINE_COLOR_NORMAL