import pytest
from pygame.math import Vector2

from tilequest.room import Exit, ExitDirection
from tilequest.world import World


def test_create_room_returns_indices_and_default_variant():
    world = World()
    assert world.create_room("a", (0, 0), (5, 4)) == 0
    assert world.create_room("b", (20, 20), (3, 3)) == 1
    room = world.rooms[0]
    assert room.name == "a"
    assert room.variants[0].id == "default"
    assert (room.variants[0].tilemap.width, room.variants[0].tilemap.height) == (5, 4)
    assert room.exits == []


def test_create_room_truncates_size():
    world = World()
    world.create_room("a", (0, 0), (3.7, 2.2))
    assert world.rooms[0].size() == Vector2(3, 2)


def test_side_by_side_rooms_are_adjacent():
    world = World()
    world.create_room("a", (0, 0), (5, 5))
    world.create_room("b", (5, 0), (5, 5))
    assert world.rooms[0].adjacent_rooms == [1]
    assert world.rooms[1].adjacent_rooms == [0]


def test_stacked_rooms_are_adjacent():
    world = World()
    world.create_room("a", (0, 0), (5, 5))
    world.create_room("b", (2, 5), (5, 5))
    assert world.rooms[1].adjacent_rooms == [0]


def test_corner_touch_is_not_adjacent():
    world = World()
    world.create_room("a", (0, 0), (5, 5))
    world.create_room("b", (5, 5), (5, 5))
    assert world.rooms[0].adjacent_rooms == []
    assert world.rooms[1].adjacent_rooms == []


def test_gap_is_not_adjacent():
    world = World()
    world.create_room("a", (0, 0), (5, 5))
    world.create_room("b", (6, 0), (5, 5))
    assert world.rooms[0].adjacent_rooms == []


def test_delete_middle_room_breaks_adjacency():
    world = World()
    world.create_room("a", (0, 0), (5, 5))
    world.create_room("b", (5, 0), (5, 5))
    world.create_room("c", (10, 0), (5, 5))
    world.delete_room(1)
    assert [r.name for r in world.rooms] == ["a", "c"]
    assert all(r.adjacent_rooms == [] for r in world.rooms)


def test_delete_first_room_reindexes_adjacency():
    world = World()
    world.create_room("a", (0, 0), (5, 5))
    world.create_room("b", (5, 0), (5, 5))
    world.create_room("c", (10, 0), (5, 5))
    world.delete_room(0)
    assert world.rooms[0].adjacent_rooms == [1]
    assert world.rooms[1].adjacent_rooms == [0]


def test_delete_out_of_range_raises():
    world = World()
    with pytest.raises(IndexError):
        world.delete_room(0)


def test_link_all_exits_links_neighbours():
    world = World()
    world.create_room("a", (0, 0), (10, 10))
    world.create_room("b", (10, 0), (10, 10))
    world.create_room("c", (40, 40), (2, 2))
    world.rooms[0].exits.append(Exit(Vector2(10, 5), ExitDirection.RIGHT))
    world.rooms[1].exits.append(Exit(Vector2(-1, 5), ExitDirection.LEFT))
    world.rooms[2].exits.append(Exit(Vector2(0, 0), ExitDirection.UP))
    world.link_all_exits()
    assert world.rooms[0].exits[0].target_room_id == 0
    assert world.rooms[1].exits[0].target_room_id == 0
    assert world.rooms[2].exits[0].target_room_id is None