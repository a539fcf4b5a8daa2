import pytest
from pygame.math import Vector2

from tilequest.entity import Entity
from tilequest.physics import update_physics
from tilequest.tile import GRAVITY, PLAYER_HEIGHT, PLAYER_WIDTH, TILE_SIZE, GridPos, Tile
from tilequest.tilemap import TileMap

_CHARS = {"#": Tile.floor, "-": Tile.platform, ".": Tile.none}


def make_map(*rows):
    """Build a map from rows given top to bottom."""
    tiles = [[_CHARS[c]() for c in row] for row in reversed(rows)]
    return TileMap(len(rows[0]), len(rows), tiles)


def make_entity(x, y, **kwargs):
    return Entity(GridPos(0, 0), Vector2(x, y), **kwargs)


def standing_y(tilemap):
    return tilemap.height * TILE_SIZE - TILE_SIZE - PLAYER_HEIGHT


def test_gravity_in_free_fall():
    tilemap = make_map("...", "...", "...")
    entity = make_entity(30, 50)
    update_physics(entity, tilemap)
    assert entity.velocity_y == pytest.approx(GRAVITY)
    assert entity.actual_position.y == pytest.approx(50 + GRAVITY)


def test_landing_snaps_to_floor():
    tilemap = make_map("...", "...", "###")
    entity = make_entity(30, standing_y(tilemap) - 1, velocity_y=5.0,
                         is_airborne=True, has_double_jump=False)
    update_physics(entity, tilemap)
    assert entity.velocity_y == 0.0
    assert not entity.is_airborne
    assert entity.has_double_jump
    assert entity.actual_position.y == pytest.approx(standing_y(tilemap))


def test_standing_on_floor_is_stable():
    tilemap = make_map("...", "...", "###")
    entity = make_entity(30, standing_y(tilemap))
    for _ in range(20):
        update_physics(entity, tilemap)
        assert entity.actual_position.y == pytest.approx(standing_y(tilemap))
        assert entity.velocity_y == 0.0


def test_falls_to_map_bottom_without_floor():
    tilemap = make_map("...", "...", "...")
    entity = make_entity(30, 0)
    for _ in range(200):
        update_physics(entity, tilemap)
    assert entity.actual_position.y == pytest.approx(tilemap.height * TILE_SIZE - PLAYER_HEIGHT)


def test_wall_on_the_right_blocks():
    tilemap = make_map("..#", "..#", "###")
    entity = make_entity(130, standing_y(tilemap), velocity_x=20.0)
    update_physics(entity, tilemap)
    assert entity.actual_position.x == pytest.approx(2 * TILE_SIZE - PLAYER_WIDTH)
    assert entity.velocity_x == 0.0


def test_wall_on_the_left_blocks():
    tilemap = make_map("#..", "#..", "###")
    entity = make_entity(110, standing_y(tilemap), velocity_x=-20.0)
    update_physics(entity, tilemap)
    assert entity.actual_position.x == pytest.approx(TILE_SIZE)
    assert entity.velocity_x == 0.0


def test_platform_does_not_block_sideways():
    tilemap = make_map("...", "..-", "###")
    start_x, speed = 130.0, 20.0
    entity = make_entity(start_x, standing_y(tilemap), velocity_x=speed)
    update_physics(entity, tilemap)
    assert entity.actual_position.x == pytest.approx(start_x + speed)
    assert entity.velocity_x == speed


def test_ceiling_stops_upward_motion():
    tilemap = make_map("###", "...", "...")
    entity = make_entity(30, 105, velocity_y=-10.0, is_airborne=True)
    update_physics(entity, tilemap)
    assert entity.velocity_y == 0.0
    assert entity.is_airborne
    assert entity.actual_position.y == pytest.approx(TILE_SIZE)


def test_position_clamped_to_map_width():
    tilemap = make_map("...", "...", "###")
    entity = make_entity(tilemap.width * TILE_SIZE * 4, standing_y(tilemap))
    update_physics(entity, tilemap)
    assert entity.actual_position.x == pytest.approx(tilemap.width * TILE_SIZE - PLAYER_WIDTH)
    entity.actual_position.x = -TILE_SIZE
    update_physics(entity, tilemap)
    assert entity.actual_position.x == 0.0