"""Terrain kinds that make up a map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TerrainType(Enum):
    """Kinds of terrain a tile can hold."""

    GROUND = auto()
    WALL = auto()
    WATER = auto()


@dataclass(frozen=True)
class Terrain:
    """A terrain kind with its movement and visibility properties."""

    type: TerrainType
    name: str = ""
    is_walkable: bool = False
    is_transparent: bool = False