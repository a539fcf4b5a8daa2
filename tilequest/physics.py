"""Gravity and tile collision for a moving body."""

from __future__ import annotations

from typing import Any

from tilequest.tile import GRAVITY, PLAYER_HEIGHT, PLAYER_WIDTH, TILE_SIZE, Tile
from tilequest.tilemap import TileMap

_EPSILON = 0.01


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _span(start: int, end: int) -> range:
    return range(start, end + 1)


def _walkable(tile: Tile) -> bool:
    return tile.is_walkable


def _solid(tile: Tile) -> bool:
    return tile.is_solid


def _columns(x: float) -> range:
    return _span(TileMap.pixel_to_grid(x), TileMap.pixel_to_grid(x + PLAYER_WIDTH - 1.0))


def update_physics(entity: Any, map: TileMap) -> None:
    """Advance an entity by one frame of gravity, movement and collision."""
    entity.velocity_y += GRAVITY
    _resolve_horizontal_movement(entity, map)
    _resolve_vertical_movement(entity, map)
    _clamp_position(entity, map)


def _clamp_position(entity: Any, map: TileMap) -> None:
    max_x = map.width * TILE_SIZE - PLAYER_WIDTH
    entity.actual_position.x = _clamp(entity.actual_position.x, 0.0, max_x)


def _resolve_vertical_movement(entity: Any, map: TileMap) -> None:
    map_pixel_height = map.height * TILE_SIZE
    pos = entity.actual_position

    next_y = _clamp(pos.y + entity.velocity_y, 0.0, map_pixel_height - PLAYER_HEIGHT)
    # Collision works in bottom-up coordinates.
    bottom = map_pixel_height - next_y - PLAYER_HEIGHT

    if entity.velocity_y > 0.0:
        grid_y = TileMap.pixel_to_grid(bottom)
        if grid_y >= 0 and map.any_tiles_in_range(
            _columns(pos.x), _span(grid_y, grid_y), _walkable
        ):
            tile_top = (grid_y + 1.0) * TILE_SIZE
            previous_bottom = map_pixel_height - pos.y - PLAYER_HEIGHT
            if bottom < tile_top <= previous_bottom:
                bottom = tile_top
                entity.velocity_y = 0.0
                entity.is_airborne = False
                entity.has_double_jump = True

    if entity.velocity_y < 0.0:
        grid_top = TileMap.pixel_to_grid(map_pixel_height - next_y)
        if map.any_tiles_in_range(_columns(pos.x), _span(grid_top, grid_top), _solid):
            tile_bottom = map_pixel_height - grid_top * TILE_SIZE
            if next_y <= tile_bottom:
                bottom = map_pixel_height - tile_bottom - PLAYER_HEIGHT
                entity.velocity_y = 0.0
                entity.is_airborne = True

    pos.y = map_pixel_height - bottom - PLAYER_HEIGHT


def _resolve_horizontal_movement(entity: Any, map: TileMap) -> None:
    map_pixel_height = map.height * TILE_SIZE
    pos = entity.actual_position

    next_x = pos.x + entity.velocity_x
    top = map_pixel_height - pos.y
    bottom = map_pixel_height - (pos.y + PLAYER_HEIGHT)
    rows = _span(
        TileMap.pixel_to_grid(bottom + _EPSILON),
        TileMap.pixel_to_grid(top - _EPSILON),
    )

    if entity.velocity_x > 0.0:
        check_x = TileMap.pixel_to_grid(next_x + PLAYER_WIDTH - 1.0)
        if map.any_tiles_in_range(_span(check_x, check_x), rows, _solid):
            pos.x = check_x * TILE_SIZE - PLAYER_WIDTH
            entity.velocity_x = 0.0
        else:
            pos.x = next_x
    elif entity.velocity_x < 0.0:
        check_x = TileMap.pixel_to_grid(next_x)
        if map.any_tiles_in_range(_span(check_x, check_x), rows, _solid):
            pos.x = (check_x + 1.0) * TILE_SIZE
            entity.velocity_x = 0.0
        else:
            pos.x = next_x

    _clamp_position(entity, map)