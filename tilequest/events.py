"""Input events delivered by a window to the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple, Union


class MouseButton(Enum):
    """Mouse buttons the game distinguishes."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


@dataclass(frozen=True)
class Closed:
    """The window was asked to close."""


@dataclass(frozen=True)
class MouseMoved:
    """The mouse pointer moved to ``position`` in window coordinates."""

    position: Tuple[int, int]


@dataclass(frozen=True)
class MouseButtonPressed:
    """A mouse button was pressed at ``position`` in window coordinates."""

    button: MouseButton
    position: Tuple[int, int]


Event = Union[Closed, MouseMoved, MouseButtonPressed]