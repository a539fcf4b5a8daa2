"""A moving body driven by jump and horizontal input."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pygame.math import Vector2

from tilequest import physics
from tilequest.tile import BLUE, TILE_SIZE, Color, GridPos
from tilequest.tilemap import TileMap

JUMP_VELOCITY = -10.0
GROUND_ACCELERATION = 1.0
AIR_ACCELERATION = 0.5
MAX_SPEED = 6.0
GROUND_FRICTION = 0.3
AIR_FRICTION = 0.05
STOP_THRESHOLD = 0.1


@dataclass
class Entity:
    """A player-like body with position, velocity and jump state."""

    grid_position: GridPos
    actual_position: Vector2
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    is_airborne: bool = False
    has_double_jump: bool = True
    color: Color = BLUE

    def update(self, map: TileMap, jump_pressed: bool, horizontal_input: float) -> None:
        """Run one frame: physics, then jump and steering, then grid tracking."""
        physics.update_physics(self, map)
        self.handle_jump(jump_pressed)
        self.handle_horizontal_input(horizontal_input)
        self.update_grid_position(map.height)

    def handle_jump(self, jump_pressed: bool) -> None:
        """Jump from the ground, or use the double jump while in the air."""
        if not jump_pressed:
            return
        if not self.is_airborne:
            self.velocity_y = JUMP_VELOCITY
            self.is_airborne = True
        elif self.has_double_jump:
            self.velocity_y = JUMP_VELOCITY
            self.has_double_jump = False

    def handle_horizontal_input(self, direction: float) -> None:
        """Accelerate toward ``direction`` and apply friction when it is zero."""
        acceleration = AIR_ACCELERATION if self.is_airborne else GROUND_ACCELERATION
        self.velocity_x += direction * acceleration
        self.velocity_x = max(-MAX_SPEED, min(self.velocity_x, MAX_SPEED))

        if direction == 0.0:
            friction = AIR_FRICTION if self.is_airborne else GROUND_FRICTION
            self.velocity_x *= 1.0 - friction
            if abs(self.velocity_x) < STOP_THRESHOLD:
                self.velocity_x = 0.0

    def update_grid_position(self, map_height: int) -> bool:
        """Recompute the bottom-up grid cell; return whether it changed."""
        new_x = math.floor(self.actual_position.x / TILE_SIZE)
        new_y = math.floor(map_height - 1.0 - self.actual_position.y / TILE_SIZE)
        new_pos = GridPos(new_x, new_y)
        if new_pos == self.grid_position:
            return False
        self.grid_position = new_pos
        return True