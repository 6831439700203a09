"""The game window: a display surface and the input events it receives."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import pygame

from .events import Closed, Event, MouseButton, MouseButtonPressed, MouseMoved

_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


def _translate(raw: pygame.event.Event) -> Optional[Event]:
    if raw.type == pygame.QUIT:
        return Closed()
    if raw.type == pygame.MOUSEMOTION:
        return MouseMoved(tuple(raw.pos))
    if raw.type == pygame.MOUSEBUTTONDOWN:
        button = _BUTTONS.get(raw.button)
        if button is not None:
            return MouseButtonPressed(button, tuple(raw.pos))
    return None


class Window:
    """A display window; usable as a context manager that closes it on exit."""

    def __init__(
        self,
        size: Tuple[int, int] = (1920, 1080),
        title: str = "Test Project",
        fullscreen: bool = True,
        framerate_limit: int = 144,
    ) -> None:
        pygame.display.init()
        self.size = size
        self.title = title
        self.framerate_limit = framerate_limit
        self._screen = pygame.display.set_mode(size, pygame.FULLSCREEN if fullscreen else 0)
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()
        self._open = True

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _require_open(self) -> pygame.Surface:
        if not self._open:
            raise RuntimeError("the window is closed")
        return self._screen

    def is_open(self) -> bool:
        """Whether the window has not been closed."""
        return self._open

    def poll_events(self) -> Iterator[Event]:
        """Yield the pending events the game understands; others are dropped."""
        if not self._open:
            return
        for raw in pygame.event.get():
            event = _translate(raw)
            if event is not None:
                yield event

    def close(self) -> None:
        """Close the window; closing twice is harmless."""
        if self._open:
            self._open = False
            pygame.display.quit()

    def clear(self) -> None:
        """Fill the window with black."""
        self._require_open().fill((0, 0, 0))

    def display(self) -> None:
        """Show what was drawn and wait to keep to the frame-rate limit."""
        self._require_open()
        pygame.display.flip()
        self._clock.tick(self.framerate_limit)

    def blit(self, surface: pygame.Surface, position: Tuple[float, float]) -> None:
        """Draw ``surface`` with its top-left corner at ``position``."""
        self._require_open().blit(surface, position)