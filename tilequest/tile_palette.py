"""A grid of selectable tiles drawn in screen space."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import pygame
from pygame.math import Vector2

from tilequest.tile import RED, Tile
from tilequest.view import Camera2D, EditContext, UiElement

HIGHLIGHT_WIDTH = 3


def _default_tiles() -> List[Tile]:
    return [Tile.floor(), Tile.platform(), Tile.decoration()]


@dataclass
class TilePalette(UiElement):
    """Tiles laid out in rows from a top-left corner; one is selected."""

    position: Vector2
    tile_size: float
    columns: int
    rows: int
    selected_index: int = 0
    tiles: List[Tile] = field(default_factory=_default_tiles)

    def _cell(self, index: int) -> pygame.Rect:
        row, col = divmod(index, self.columns)
        return pygame.Rect(
            round(self.position.x + col * self.tile_size),
            round(self.position.y + row * self.tile_size),
            round(self.tile_size),
            round(self.tile_size),
        )

    def draw(self, surface: "pygame.Surface", camera: Camera2D) -> None:
        for index, tile in enumerate(self.tiles):
            cell = self._cell(index)
            pygame.draw.rect(surface, tile.color, cell)
            if index == self.selected_index:
                pygame.draw.rect(surface, RED, cell, HIGHLIGHT_WIDTH)

    def is_mouse_over(self, mouse_pos: Sequence[float], camera: Camera2D) -> bool:
        width = self.columns * self.tile_size
        height = self.rows * self.tile_size
        return (
            self.position.x <= mouse_pos[0] < self.position.x + width
            and self.position.y <= mouse_pos[1] < self.position.y + height
        )

    def on_click(self, context: EditContext, mouse_pos: Sequence[float], camera: Camera2D) -> None:
        """Select the tile under the mouse, if there is one."""
        if not self.is_mouse_over(mouse_pos, camera):
            return
        col = int((mouse_pos[0] - self.position.x) / self.tile_size)
        row = int((mouse_pos[1] - self.position.y) / self.tile_size)
        index = row * self.columns + col
        if index < len(self.tiles):
            self.selected_index = index
            context.selected_tile = self.tiles[index]