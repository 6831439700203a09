"""A single map cell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Tuple

from .terrain import Terrain


@dataclass
class Tile:
    """A map cell: its location, terrain and the creature standing on it."""

    WIDTH_IN_PIXELS: ClassVar[int] = 72
    HEIGHT_IN_PIXELS: ClassVar[int] = 72

    location: Tuple[int, int]
    terrain: Terrain
    occupant: Optional[Any] = None