"""Game states: screens of the game, each owning its entities' components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, List, Optional

from .actions import ActionID
from .components import (
    MAX_NUM_ENTITIES,
    BoundingBoxComponent,
    CreatureComponent,
    EntityID,
    LeftClickComponent,
    MouseOverComponent,
    SpriteComponent,
    TextComponent,
    TransformComponent,
    WidgetComponent,
)


class StateID(Enum):
    """Identifies a kind of game state."""

    MAIN_MENU = 0
    GAMEPLAY = 1
    LOAD_GAME = 2
    SETTINGS = 3
    GAME_OVER = 4


class TransitionID(Enum):
    """A change of state requested by the current state."""

    NULL = -1
    RETURN_TO_MAIN_MENU = 0
    INIT_GAMEPLAY = 1
    DISPLAY_LOAD_GAME = 2
    DISPLAY_SETTINGS = 3
    DISPLAY_GAME_OVER = 4
    SHUTDOWN = 5


class GameState(ABC):
    """A screen of the game with one slot per entity in each component table."""

    STATE_ID: ClassVar[StateID]

    def __init__(self) -> None:
        self.id: StateID = self.STATE_ID
        self.transition_flag: TransitionID = TransitionID.NULL
        self.num_entities: int = 0
        self.sprites: List[SpriteComponent] = [SpriteComponent() for _ in range(MAX_NUM_ENTITIES)]
        self.texts: List[TextComponent] = [TextComponent() for _ in range(MAX_NUM_ENTITIES)]
        self.transforms: List[TransformComponent] = [
            TransformComponent() for _ in range(MAX_NUM_ENTITIES)
        ]
        self.bounding_boxes: List[BoundingBoxComponent] = [
            BoundingBoxComponent() for _ in range(MAX_NUM_ENTITIES)
        ]
        self.widgets: List[WidgetComponent] = [WidgetComponent() for _ in range(MAX_NUM_ENTITIES)]
        self.mouse_overs: List[MouseOverComponent] = [
            MouseOverComponent() for _ in range(MAX_NUM_ENTITIES)
        ]
        self.left_clicks: List[LeftClickComponent] = [
            LeftClickComponent() for _ in range(MAX_NUM_ENTITIES)
        ]
        self.creatures: List[CreatureComponent] = [
            CreatureComponent() for _ in range(MAX_NUM_ENTITIES)
        ]

    def new_entity(self) -> EntityID:
        """Reserve the next entity id; raise OverflowError when all are taken."""
        if self.num_entities >= MAX_NUM_ENTITIES:
            raise OverflowError(f"a game state holds at most {MAX_NUM_ENTITIES} entities")
        entity_id = self.num_entities
        self.num_entities += 1
        return entity_id

    @abstractmethod
    def do_action(self, action: ActionID, owner_id: Optional[EntityID] = None) -> None:
        """Perform ``action``, triggered by entity ``owner_id`` if given."""


class GameOverState(GameState):
    """The screen shown once the game is lost."""

    STATE_ID: ClassVar[StateID] = StateID.GAME_OVER

    def do_action(self, action: ActionID, owner_id: Optional[EntityID] = None) -> None:
        """The game over screen reacts to no actions."""