"""A world of rooms with adjacency and exit linking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from pygame.math import Vector2

from tilequest.room import Room, RoomVariant
from tilequest.tilemap import TileMap


def _are_rooms_adjacent(a: Room, b: Room) -> bool:
    ax, ay = a.position
    aw, ah = a.size()
    bx, by = b.position
    bw, bh = b.size()
    horizontal_touch = ax < bx + bw and ax + aw > bx and (ay + ah == by or by + bh == ay)
    vertical_touch = ay < by + bh and ay + ah > by and (ax + aw == bx or bx + bw == ax)
    return horizontal_touch or vertical_touch


@dataclass
class World:
    """All rooms of a world, kept with their adjacency lists up to date."""

    rooms: List[Room] = field(default_factory=list)

    def create_room(self, name: str, position: Sequence[float], size: Sequence[float]) -> int:
        """Add an empty room and return its index."""
        width = max(0, int(size[0]))
        height = max(0, int(size[1]))
        room = Room(
            name=name,
            position=Vector2(position[0], position[1]),
            variants=[RoomVariant("default", TileMap(width, height))],
        )
        self.rooms.append(room)
        idx = len(self.rooms) - 1
        for i, other in enumerate(self.rooms[:idx]):
            if _are_rooms_adjacent(other, room):
                other.adjacent_rooms.append(idx)
                room.adjacent_rooms.append(i)
        return idx

    def delete_room(self, index: int) -> None:
        """Remove a room and recompute every adjacency list."""
        del self.rooms[index]
        for i, room in enumerate(self.rooms):
            room.adjacent_rooms = [
                j
                for j, other in enumerate(self.rooms)
                if i != j and _are_rooms_adjacent(room, other)
            ]

    def link_all_exits(self) -> None:
        """Link every room's exits against all the other rooms."""
        for i, room in enumerate(self.rooms):
            room.link_exits(self.rooms[:i] + self.rooms[i + 1 :])