"""Actions that user-interface components can trigger on a game state."""

from enum import Enum, auto


class ActionID(Enum):
    """Identifies an action a game state knows how to perform."""

    NULL = auto()
    TRANSITION_MAIN_MENU = auto()
    TRANSITION_LOAD_GAME = auto()
    TRANSITION_GAMEPLAY = auto()
    TRANSITION_SETTINGS = auto()
    TRANSITION_GAME_OVER = auto()
    SHUTDOWN = auto()
    SET_MENU_SELECTION = auto()
    RESET_MENU_SELECTION = auto()
    PRESS_MENU_SELECTION = auto()