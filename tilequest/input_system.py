"""Dispatches window input events to the components of a game state."""

from __future__ import annotations

from typing import Iterator, Protocol, Sequence

from .actions import ActionID
from .components import Component, BoundingBoxComponent
from .events import Closed, Event, MouseButton, MouseButtonPressed, MouseMoved
from .state import GameState


class _EventSource(Protocol):
    def poll_events(self) -> Iterator[Event]: ...

    def close(self) -> None: ...


def _first_hit(
    game_state: GameState, handlers: Sequence[Component], position: tuple
) -> Component | None:
    boxes: Sequence[BoundingBoxComponent] = game_state.bounding_boxes
    for box, handler in zip(boxes[: game_state.num_entities], handlers):
        if box.enabled and handler.enabled and box.rect.contains(position):
            return handler
    return None


class InputSystem:
    """Turns window events into actions on the current game state."""

    def __init__(self, window: _EventSource) -> None:
        self.window = window

    def update(self, game_state: GameState) -> None:
        """Handle every pending event of the window."""
        for event in self.window.poll_events():
            if isinstance(event, Closed):
                self.window.close()
            elif isinstance(event, MouseMoved):
                game_state.do_action(ActionID.RESET_MENU_SELECTION)
                handler = _first_hit(game_state, game_state.mouse_overs, event.position)
                if handler is not None:
                    handler.notify(game_state, event)
            elif isinstance(event, MouseButtonPressed) and event.button is MouseButton.LEFT:
                handler = _first_hit(game_state, game_state.left_clicks, event.position)
                if handler is not None:
                    handler.notify(game_state, event)