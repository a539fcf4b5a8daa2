"""Tiles, tile types, shared dimensions and grid coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol, Sequence, Tuple

TILE_SIZE = 100.0
PLAYER_WIDTH = 60.0
PLAYER_HEIGHT = 80.0
GRAVITY = 0.4

Color = Tuple[int, int, int, int]

BLANK: Color = (0, 0, 0, 0)
BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)
DARKGRAY: Color = (80, 80, 80, 255)
LIGHTGRAY: Color = (200, 200, 200, 255)
YELLOW: Color = (253, 249, 0, 255)
BLUE: Color = (0, 121, 241, 255)
GREEN: Color = (0, 228, 48, 255)
RED: Color = (230, 41, 55, 255)


class _Sized(Protocol):
    width: int
    height: int


class TileType(Enum):
    """The kind of content a tile holds."""

    NONE = auto()
    FLOOR = auto()
    PLATFORM = auto()
    DECORATION = auto()


@dataclass(frozen=True)
class Tile:
    """A single map cell and how it behaves under collision."""

    tile_type: TileType
    color: Color
    is_walkable: bool
    is_solid: bool

    @classmethod
    def none(cls) -> Tile:
        return cls(TileType.NONE, BLANK, is_walkable=False, is_solid=False)

    @classmethod
    def platform(cls) -> Tile:
        return cls(TileType.PLATFORM, DARKGRAY, is_walkable=True, is_solid=False)

    @classmethod
    def floor(cls) -> Tile:
        return cls(TileType.FLOOR, BLACK, is_walkable=True, is_solid=True)

    @classmethod
    def decoration(cls) -> Tile:
        return cls(TileType.DECORATION, YELLOW, is_walkable=False, is_solid=False)


@dataclass(frozen=True)
class GridPos:
    """Integer tile coordinates."""

    x: int
    y: int

    def is_in_bounds(self, width: int, height: int) -> bool:
        """Whether this position lies inside a map of the given size."""
        return 0 <= self.x < width and 0 <= self.y < height

    @classmethod
    def from_world(cls, world_pos: Sequence[float]) -> GridPos:
        """Tile containing a world point, truncating toward zero."""
        return cls(int(world_pos[0] / TILE_SIZE), int(world_pos[1] / TILE_SIZE))

    def as_indices(self) -> Optional[Tuple[int, int]]:
        """The position as (x, y) indices, or None if either is negative."""
        if self.x >= 0 and self.y >= 0:
            return (self.x, self.y)
        return None

    @classmethod
    def from_world_edge(cls, world_pos: Sequence[float], map: _Sized) -> GridPos:
        """Tile containing a world point, snapped to one cell outside the map."""
        x = math.floor(world_pos[0] / TILE_SIZE)
        y = math.floor(world_pos[1] / TILE_SIZE)
        x = -1 if x < 0 else min(x, map.width)
        y = -1 if y < 0 else min(y, map.height)
        return cls(x, y)