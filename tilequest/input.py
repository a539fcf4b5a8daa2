"""Direction input read from the set of held keys."""

from __future__ import annotations

from typing import Container

import pygame
from pygame.math import Vector2


def get_omni_input(keys: Container[int]) -> Vector2:
    """Unit direction from the arrow keys held in ``keys`` (down is +y)."""
    direction = Vector2(0.0, 0.0)
    if pygame.K_RIGHT in keys:
        direction.x += 1.0
    if pygame.K_LEFT in keys:
        direction.x -= 1.0
    if pygame.K_DOWN in keys:
        direction.y += 1.0
    if pygame.K_UP in keys:
        direction.y -= 1.0
    if direction.length_squared() > 0.0:
        return direction.normalize()
    return direction


def get_horizontal_input(keys: Container[int]) -> float:
    """-1, 0 or 1 from the left and right arrow keys held in ``keys``."""
    value = 0.0
    if pygame.K_RIGHT in keys:
        value += 1.0
    if pygame.K_LEFT in keys:
        value -= 1.0
    return value