"""Rooms of a world, their layout variants and the exits between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from pygame.math import Vector2

from tilequest.tilemap import TileMap

_LINK_EPSILON = 0.01


class ExitDirection(Enum):
    """The side of a room an exit leads out of."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


_OPPOSITE: Dict[ExitDirection, ExitDirection] = {
    ExitDirection.UP: ExitDirection.DOWN,
    ExitDirection.DOWN: ExitDirection.UP,
    ExitDirection.LEFT: ExitDirection.RIGHT,
    ExitDirection.RIGHT: ExitDirection.LEFT,
}

# World offset from the partner exit to this exit for a link to hold.
_LINK_STEP: Dict[ExitDirection, Tuple[float, float]] = {
    ExitDirection.UP: (0.0, 1.0),
    ExitDirection.DOWN: (0.0, -1.0),
    ExitDirection.LEFT: (-1.0, 0.0),
    ExitDirection.RIGHT: (1.0, 0.0),
}


@dataclass
class Exit:
    """An exit cell in room-local coordinates (y counts up from the bottom)."""

    position: Vector2
    direction: ExitDirection
    target_room_id: Optional[int] = None


@dataclass
class RoomVariant:
    """One tile layout a room can take."""

    id: str = ""
    tilemap: TileMap = field(default_factory=lambda: TileMap(10, 10))


def _links(
    direction: ExitDirection, here: Vector2, other_direction: ExitDirection, there: Vector2
) -> bool:
    if other_direction is not _OPPOSITE[direction]:
        return False
    step_x, step_y = _LINK_STEP[direction]
    return (
        abs(here.x - there.x - step_x) < _LINK_EPSILON
        and abs(here.y - there.y - step_y) < _LINK_EPSILON
    )


@dataclass
class Room:
    """A named room placed in world tile coordinates (y counts down)."""

    name: str
    position: Vector2
    variants: List[RoomVariant] = field(default_factory=list)
    exits: List[Exit] = field(default_factory=list)
    adjacent_rooms: List[int] = field(default_factory=list)

    def size(self) -> Vector2:
        """Width and height of the first variant, or zero without variants."""
        if not self.variants:
            return Vector2(0.0, 0.0)
        tilemap = self.variants[0].tilemap
        return Vector2(tilemap.width, tilemap.height)

    def bounds(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height); raises IndexError if the room has no variant."""
        tilemap = self.variants[0].tilemap
        return (self.position.x, self.position.y, float(tilemap.width), float(tilemap.height))

    def _exit_world_position(self, exit: Exit, size: Vector2) -> Vector2:
        return self.position + Vector2(exit.position.x, size.y - exit.position.y - 1.0)

    def link_exits(self, other_rooms: Sequence[Room]) -> None:
        """Point each exit at the index in ``other_rooms`` of the room it joins."""
        my_size = self.size()
        for exit in self.exits:
            here = self._exit_world_position(exit, my_size)
            exit.target_room_id = next(
                (
                    idx
                    for idx, other in enumerate(other_rooms)
                    if any(
                        _links(exit.direction, here, direction, there)
                        for there, direction in other.world_exit_positions()
                    )
                ),
                None,
            )

    def world_exit_positions(self) -> List[Tuple[Vector2, ExitDirection]]:
        """Every exit as a world position and direction."""
        size = self.size()
        return [(self._exit_world_position(exit, size), exit.direction) for exit in self.exits]