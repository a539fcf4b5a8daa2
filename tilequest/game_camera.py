"""The camera that follows the player or roams freely in the game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from pygame.math import Vector2

from tilequest.tile import TILE_SIZE
from tilequest.view import Camera2D

CAMERA_SPEED = 4.0
ZOOM_SCALE = 1.2


@dataclass
class FollowCamera:
    """A camera anchored at a world position."""

    position: Vector2

    def view(self, screen_size: Tuple[float, float]) -> Camera2D:
        """The camera to draw with, looking slightly above the anchor."""
        width, height = screen_size
        target = Vector2(
            self.position.x + TILE_SIZE / 2.0,
            self.position.y + TILE_SIZE / 2.0 - height / 2.0,
        )
        zoom = Vector2(ZOOM_SCALE / width, ZOOM_SCALE / height)
        return Camera2D(target=target, zoom=zoom, screen_size=(width, height))

    def move_camera(self, direction: Sequence[float]) -> None:
        """Move by one frame's worth of travel in ``direction``."""
        self.position += Vector2(direction[0], direction[1]) * CAMERA_SPEED