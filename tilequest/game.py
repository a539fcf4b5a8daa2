"""The playable game: a player exploring a tile map, with a free camera mode."""

from __future__ import annotations

import argparse
from enum import Enum, auto
from typing import Container, Optional, Sequence

import pygame
from pygame.math import Vector2

from tilequest.entity import Entity
from tilequest.game_camera import FollowCamera
from tilequest.input import get_horizontal_input, get_omni_input
from tilequest.tile import BLACK, BLUE, PLAYER_HEIGHT, PLAYER_WIDTH, GridPos
from tilequest.tilemap import DEFAULT_MAP_DIR, TileMap, get_current_map, tile_to_world
from tilequest.view import FrameInput

START_POSITION = GridPos(0, 10)
WINDOW_SIZE = (800, 600)
FRAME_RATE = 60


class Mode(Enum):
    """Whether the player moves, or the camera roams."""

    EXPLORE = auto()
    COMBAT = auto()


class GameState:
    """The map, the player, the camera and the current mode."""

    def __init__(self, map: Optional[TileMap] = None) -> None:
        self.map = map if map is not None else get_current_map()
        self.player = Entity(
            grid_position=START_POSITION,
            actual_position=tile_to_world(START_POSITION, self.map.height),
            color=BLUE,
        )
        self.mode = Mode.EXPLORE
        self.camera = FollowCamera(Vector2(self.player.actual_position))

    def update(self, keys: Container[int], pressed: Container[int]) -> None:
        """Advance one frame given held keys and keys pressed this frame."""
        if self.mode is Mode.EXPLORE:
            self.player.update(self.map, pygame.K_SPACE in pressed, get_horizontal_input(keys))
            self.camera.position = Vector2(self.player.actual_position)
        else:
            self.camera.move_camera(get_omni_input(keys))

        if pygame.K_c in pressed:
            self.toggle_mode()

    def toggle_mode(self) -> None:
        self.mode = Mode.COMBAT if self.mode is Mode.EXPLORE else Mode.EXPLORE

    def draw(self, surface: "pygame.Surface") -> None:
        """Draw the map and the player through the camera."""
        surface.fill(BLACK)
        camera = self.camera.view(surface.get_size())
        self.map.draw(surface, camera)

        pos = self.player.actual_position
        x0, y0 = camera.world_to_screen((pos.x, pos.y))
        x1, y1 = camera.world_to_screen((pos.x + PLAYER_WIDTH, pos.y + PLAYER_HEIGHT))
        left, right = sorted((round(x0), round(x1)))
        top, bottom = sorted((round(y0), round(y1)))
        pygame.draw.rect(
            surface, self.player.color, pygame.Rect(left, top, right - left, bottom - top)
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a window and run the game until it is closed."""
    parser = argparse.ArgumentParser(description="Explore a tile map.")
    parser.add_argument(
        "--map-dir",
        default=str(DEFAULT_MAP_DIR),
        help="directory holding .txt or .map files",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Tilemap Demo")
        game = GameState(get_current_map(args.map_dir))
        clock = pygame.time.Clock()
        while True:
            dt = clock.tick(FRAME_RATE) / 1000.0
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                break
            frame = FrameInput.from_pygame(events, dt)
            game.update(frame.keys_down, frame.keys_pressed)
            game.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0